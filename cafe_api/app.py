"""
ASGI entrypoint: ``uvicorn cafe_api.app:app``.

Importing this module builds the catalog from the environment.
"""
from __future__ import annotations

from .api import create_app

app = create_app()
