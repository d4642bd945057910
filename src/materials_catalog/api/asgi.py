"""ASGI entrypoint for the materials catalog API."""

from materials_catalog.api.app import create_app
from materials_catalog.containers import build_container

app = create_app(build_container())
