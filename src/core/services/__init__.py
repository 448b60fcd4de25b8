"""Servicios del Core: enrutado de comandos y handlers."""
