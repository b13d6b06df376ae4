"""Response DTOs for API endpoints.

Successful payloads are wrapped in a ``data`` envelope, except for
``GET /pokemon/count`` which returns ``{"total": n}`` at the top level.
Errors that are not about a specific resource use ``{"message": ...}``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PokemonItem(BaseModel):
    """Single Pokemon as returned to clients."""

    name: str = Field(..., description="Pokemon name")
    type: str = Field(..., description="Pokemon type")


class PokemonPageData(BaseModel):
    """One page of the name-ordered Pokemon listing."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[PokemonItem] = Field(default_factory=list, description="Pokemon on this page")
    total: int = Field(..., description="Total number of Pokemon", ge=0)
    page: int = Field(..., description="Requested page (1-based)", ge=1)
    limit: int = Field(..., description="Requested page size", ge=1)
    total_pages: int = Field(..., alias="totalPages", description="ceil(total / limit)", ge=0)


class PokemonResponse(BaseModel):
    """Envelope for a single Pokemon, or null when not found."""

    data: PokemonItem | None = None


class PokemonPageResponse(BaseModel):
    """Envelope for a page of Pokemon."""

    data: PokemonPageData


class PokemonCountResponse(BaseModel):
    """Response DTO for the count operation."""

    total: int = Field(..., description="Total number of Pokemon", ge=0)


class DataMessageResponse(BaseModel):
    """Envelope carrying a human-readable string in ``data``."""

    data: str


class ErrorResponse(BaseModel):
    """Generic error body."""

    message: str = Field(..., description="Human-readable error")
    errors: list[dict[str, Any]] | None = Field(
        None,
        description="Field-level validation errors, when the request body was malformed",
    )


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store_healthy: bool = Field(..., description="Whether the store backend is reachable")
    backend: str = Field(..., description="Configured store backend")
