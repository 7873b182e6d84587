"""
Café lookup service.

Serves ``GET /cafe`` over an immutable, in-memory catalog of cafés per city.
"""
