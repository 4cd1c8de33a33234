"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los descriptores de endpoints y las formas de respuesta.
- El dominio no conoce httpx, la CLI ni el event loop: solo conceptos del problema.
"""
