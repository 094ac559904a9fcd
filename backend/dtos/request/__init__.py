"""
Request DTOs

Validated shapes for incoming query parameters and request bodies.
"""
