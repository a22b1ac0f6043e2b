"""System-level routes such as health checks."""

from __future__ import annotations

from fastapi import APIRouter

from src.config import settings
from src.services.produce_registry import RegistryDependency

router = APIRouter(tags=["system"])


@router.get("/health")
def health_check(registry: RegistryDependency) -> dict[str, str | int]:
    """Health check endpoint reporting the number of stored entries."""

    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "records": len(registry),
    }
