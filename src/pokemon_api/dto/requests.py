"""Request DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class CreatePokemonRequest(BaseModel):
    """Request DTO for creating a Pokemon.

    Both fields are required non-blank strings. Numbers, nulls and other
    non-string values are rejected rather than coerced.
    """

    model_config = ConfigDict(str_strip_whitespace=True, strict=True)

    name: str = Field(..., description="Pokemon name", min_length=1, examples=["Pikachu"])
    type: str = Field(..., description="Pokemon type", min_length=1, examples=["Electric"])
