"""Core: dominio, configuración, contratos y servicios. Sin I/O directo."""
