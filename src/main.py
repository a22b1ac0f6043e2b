"""ASGI entry point, e.g. ``uvicorn src.main:app``."""

from src.application import create_app
from src.services.produce_registry import ProduceRegistry

registry = ProduceRegistry()
app = create_app(registry)

__all__ = ["app", "registry"]
