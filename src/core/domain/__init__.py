"""Modelos y entidades del dominio.

- Estructuras de datos puras (Pydantic v2).
- El dominio no conoce la CLI ni los binarios de Android.
"""
