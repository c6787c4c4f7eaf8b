"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Self-documenting fields (Field) without coupling the Core to I/O libraries.
- Callers can build movie payloads with types and still send plain dicts.

Note:
- The resource client never enforces these models on responses; they are
  an opt-in helper for callers (and the CLI) that want typed access.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict


class Movie(BaseModel):
    """A movie (`filme`) as the backend exposes it.

    Field aliases follow the backend's JSON keys; unknown keys are kept so a
    round trip through the model does not drop data.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = Field(
        default=None,
        description="Backend identifier (UUID string). Empty for new movies.",
    )
    titulo: str | None = Field(
        default=None,
        description="Movie title.",
    )
    nota: float | None = Field(
        default=None,
        description="User rating.",
    )
    created_at: datetime | None = Field(
        default=None,
        alias="createdAt",
    )
    updated_at: datetime | None = Field(
        default=None,
        alias="updatedAt",
    )
    completed_at: datetime | None = Field(
        default=None,
        alias="completedAt",
        description="When the movie was marked as watched.",
    )
    deleted_at: datetime | None = Field(
        default=None,
        alias="deletedAt",
    )

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready body with backend keys, omitting unset fields."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def parse_movies(payload: Any) -> list[Movie]:
    """Best-effort conversion of a decoded list response into `Movie` models.

    Items that are not objects or do not fit the model are skipped.
    """

    if not isinstance(payload, list):
        return []
    movies: list[Movie] = []
    for item in payload:
        if not isinstance(item, dict):
            continue
        try:
            movies.append(Movie.model_validate(item))
        except ValidationError:
            continue
    return movies
