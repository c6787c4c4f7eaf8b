"""Backend operation contracts.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- Keeps the CLI decoupled from the concrete httpx client.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from pydantic import BaseModel

MoviePayload = Mapping[str, Any] | BaseModel


@runtime_checkable
class AccountGateway(Protocol):
    """Account operations. None of them carries the session credential."""

    async def login(self, email: str, password: str) -> Any: ...

    async def register(self, name: str, email: str, cpf: str, password: str) -> Any: ...

    async def reset_password(self, token: str, new_password: str) -> Any: ...


@runtime_checkable
class MovieCatalog(Protocol):
    """CRUD over the movie resource. Every operation carries the session credential."""

    async def list_movies(self) -> Any: ...

    async def create_movie(self, movie: MoviePayload) -> Any: ...

    async def get_movie(self, movie_id: str) -> Any: ...

    async def update_movie(self, movie_id: str, movie: MoviePayload) -> Any: ...

    async def delete_movie(self, movie_id: str) -> None: ...
