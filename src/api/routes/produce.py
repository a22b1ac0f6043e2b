"""Routes for adding, deleting and listing produce entries."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Response, status

from src.models.produce import Produce, ProducePayload
from src.services.produce_registry import (
    DuplicateProduceError,
    ProduceNotFoundError,
    RegistryDependency,
)
from src.services.validation import (
    BAD_CODE,
    InvalidFieldError,
    build_produce,
    validate_code,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/produce", tags=["produce"])

# Single purpose endpoints kept for clients of the first API revision.
legacy_router = APIRouter(tags=["produce"], include_in_schema=False)

CodeQuery = Annotated[str, Query(description="Code of the produce entry to delete")]


def add_produce(payload: ProducePayload, registry: RegistryDependency) -> Produce:
    """Validate the payload and store it as a new produce entry.

    Raises:
        HTTPException: 422 when a field is invalid, 409 when the code is
            already registered.
    """

    try:
        produce = build_produce(payload)
    except InvalidFieldError as error:
        logger.info(
            "Rejected produce payload",
            extra={"field": error.field, "code": payload.code},
        )
        raise HTTPException(
            status_code=422,
            detail=str(error),
        ) from error

    try:
        return registry.add(produce)
    except DuplicateProduceError as error:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(error),
        ) from error


def delete_produce(code: CodeQuery, registry: RegistryDependency) -> Response:
    """Remove the produce entry identified by ``code`` (case-insensitive)."""

    if not validate_code(code):
        raise HTTPException(
            status_code=422,
            detail=BAD_CODE,
        )

    try:
        registry.delete(code)
    except ProduceNotFoundError as error:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(error),
        ) from error

    return Response(status_code=status.HTTP_204_NO_CONTENT)


def list_produce(registry: RegistryDependency) -> list[Produce]:
    """Report every produce entry in the order it was added."""

    return registry.list_produce()


router.add_api_route(
    "",
    add_produce,
    methods=["POST"],
    response_model=Produce,
    status_code=status.HTTP_201_CREATED,
    summary="Add a produce entry",
)
router.add_api_route(
    "",
    delete_produce,
    methods=["DELETE"],
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a produce entry by code",
)
router.add_api_route(
    "",
    list_produce,
    methods=["GET"],
    response_model=list[Produce],
    summary="List all produce entries",
)

legacy_router.add_api_route(
    "/add",
    add_produce,
    methods=["POST"],
    response_model=Produce,
    status_code=status.HTTP_201_CREATED,
)
legacy_router.add_api_route(
    "/delete",
    delete_produce,
    methods=["DELETE"],
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
legacy_router.add_api_route(
    "/fetch",
    list_produce,
    methods=["GET"],
    response_model=list[Produce],
)
