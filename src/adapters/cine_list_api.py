"""Cine-List backend client.

Every operation maps one endpoint + verb to a single request/response
exchange and goes through `_request`, so the success/failure contract is
identical everywhere:

- 2xx: the JSON body is decoded and returned (delete returns `None`).
- Any other status: `OperationFailed` with the response's reason phrase.
  The body is not read.
- Transport failure or undecodable body: `OperationFailed` chained to the
  original exception.

A diagnostic line is logged before any failure is raised.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx
from pydantic import BaseModel

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import OperationFailed
from core.interfaces.backend import MoviePayload

logger = logging.getLogger(__name__)

_MOVIES_PATH = "/api/filmes"


def _to_body(payload: MoviePayload) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    return dict(payload)


class CineListClient:
    """Async client for the Cine-List backend.

    `session_cookies` is the ambient credential: credentialed operations
    (every movie operation) send it as a `Cookie` header, account
    operations never do. The client keeps no other state between calls;
    each call opens and closes its own `httpx.AsyncClient`.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        session_cookies: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._session_cookies = dict(session_cookies or {})
        self._transport = transport
        self._api_base_url = self._settings.api_base_url.rstrip("/")
        self._app_origin = self._settings.app_origin.rstrip("/")

    # ------------------------------------------------------------------
    # Shared request helper
    # ------------------------------------------------------------------
    def _cookie_header(self) -> dict[str, str]:
        if not self._session_cookies:
            return {}
        value = "; ".join(f"{name}={val}" for name, val in self._session_cookies.items())
        return {"Cookie": value}

    async def _request(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        json_body: Any | None = None,
        with_credentials: bool = False,
        expect_body: bool = True,
    ) -> Any:
        headers: dict[str, str] = {}
        if json_body is not None:
            headers["Content-Type"] = "application/json"
        if with_credentials:
            headers.update(self._cookie_header())

        try:
            # Query strings can carry secrets (reset token): log without them.
            logger.debug("Sending %s request to %s", method, url.split("?", 1)[0])
            async with build_async_client(self._settings, transport=self._transport) as client:
                request = client.build_request(method, url, json=json_body, headers=headers)
                response = await client.send(request, stream=True)

                if not response.is_success:
                    await response.aclose()
                    logger.error("%s: HTTP %s %s", operation, response.status_code, response.reason_phrase)
                    raise OperationFailed(
                        operation,
                        response.reason_phrase,
                        status_code=response.status_code,
                    )

                if not expect_body:
                    await response.aclose()
                    return None
                await response.aread()
                return response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("%s: %s", operation, exc)
            raise OperationFailed(operation, str(exc) or exc.__class__.__name__) from exc
        except ValueError as exc:
            # Success status but the body is not JSON.
            logger.error("%s: %s", operation, exc)
            raise OperationFailed(operation, str(exc)) from exc

    def _api_url(self, path: str) -> str:
        return f"{self._api_base_url}{path}"

    def _movie_url(self, movie_id: str) -> str:
        # The id is embedded as given; callers guarantee a valid path segment.
        return self._api_url(f"{_MOVIES_PATH}/{movie_id}")

    def reset_password_url(self, token: str) -> str:
        """Target for reset-password.

        The web app addressed this endpoint relative to its own origin while
        every other call used the fixed backend host. `reset_password_relative`
        keeps that behaviour until the product owner confirms which is intended.
        """

        base = self._app_origin if self._settings.reset_password_relative else self._api_base_url
        return f"{base}/auth/reset-password?token={token}"

    # ------------------------------------------------------------------
    # Account operations
    # ------------------------------------------------------------------
    async def login(self, email: str, password: str) -> Any:
        return await self._request(
            "POST",
            self._api_url("/auth/login"),
            operation="Error during login",
            json_body={"email": email, "senha": password},
        )

    async def register(self, name: str, email: str, cpf: str, password: str) -> Any:
        return await self._request(
            "POST",
            self._api_url("/auth/register"),
            operation="Error during register",
            json_body={"nome": name, "email": email, "cpf": cpf, "senha": password},
        )

    async def reset_password(self, token: str, new_password: str) -> Any:
        return await self._request(
            "POST",
            self.reset_password_url(token),
            operation="Error resetting password",
            json_body={"newPassword": new_password},
        )

    # ------------------------------------------------------------------
    # Movie operations
    # ------------------------------------------------------------------
    async def list_movies(self) -> Any:
        return await self._request(
            "GET",
            self._api_url(_MOVIES_PATH),
            operation="Error fetching all movies",
            with_credentials=True,
        )

    async def create_movie(self, movie: MoviePayload) -> Any:
        data = await self._request(
            "POST",
            self._api_url(_MOVIES_PATH),
            operation="Error creating movie",
            json_body=_to_body(movie),
            with_credentials=True,
        )
        logger.debug("Server response: %s", data)
        return data

    async def get_movie(self, movie_id: str) -> Any:
        return await self._request(
            "GET",
            self._movie_url(movie_id),
            operation="Error fetching movie",
            with_credentials=True,
        )

    async def update_movie(self, movie_id: str, movie: MoviePayload) -> Any:
        return await self._request(
            "PUT",
            self._movie_url(movie_id),
            operation="Error updating movie",
            json_body=_to_body(movie),
            with_credentials=True,
        )

    async def delete_movie(self, movie_id: str) -> None:
        await self._request(
            "DELETE",
            self._movie_url(movie_id),
            operation="Error deleting movie",
            with_credentials=True,
            expect_body=False,
        )
