"""
Trello REST client (read-only).

Used endpoints:
- GET /members/me/boards   -> [board, ...]   (open boards only)
- GET /boards/{id}         -> board
- GET /boards/{id}/lists   -> [list, ...]    (open lists only)
- GET /boards/{id}/cards   -> [card, ...]    (closed cards included)

Docs: https://developer.atlassian.com/cloud/trello/rest/
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from . import config

BOARD_FIELDS = "id,name,desc,url,closed"
LIST_FIELDS = "id,name,closed,pos"
CARD_FIELDS = "id,name,desc,due,dueComplete,closed,idList,labels,dateLastActivity,url"

logger = logging.getLogger(__name__)


class TrelloError(RuntimeError):
    """
    Base for every failure while talking to Trello. Routers handle this
    type once; nothing below them catches it.
    """


class ConfigurationError(TrelloError):
    pass


class ServiceError(TrelloError):
    def __init__(self, message: str, *, status: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.body = body


@dataclass(frozen=True)
class TrelloCredentials:
    api_key: str
    token: str


def resolve_credentials() -> TrelloCredentials:
    """
    Read TRELLO_API_KEY / TRELLO_TOKEN. Both are required; there is no
    anonymous fallback.
    """
    api_key = config.env_str("TRELLO_API_KEY")
    token = config.env_str("TRELLO_TOKEN")
    if not api_key or not token:
        raise ConfigurationError(
            "Trello missing credentials: TRELLO_API_KEY and TRELLO_TOKEN must be set."
        )
    return TrelloCredentials(api_key=api_key, token=token)


class TrelloClient:
    def __init__(
        self,
        credentials: TrelloCredentials,
        *,
        base_url: str = config.DEFAULT_TRELLO_BASE_URL,
        timeout_s: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._credentials = credentials
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._transport = transport

    @classmethod
    def from_env(cls) -> TrelloClient:
        return cls(
            resolve_credentials(),
            base_url=config.trello_base_url(),
            timeout_s=config.trello_timeout_s(),
        )

    async def _get(self, path: str, params: dict[str, str] | None = None) -> Any:
        query = {"key": self._credentials.api_key, "token": self._credentials.token}
        query.update(params or {})

        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout_s,
                transport=self._transport,
            ) as client:
                resp = await client.get(path, params=query)
        except httpx.HTTPError as exc:
            logger.warning("trello_request_failed path=%s error=%s", path, exc)
            raise ServiceError(f"Trello API request failed: {exc}") from exc

        logger.debug("trello_request path=%s status=%s", path, resp.status_code)
        if not resp.is_success:
            # Keep only a snippet of the body.
            body = resp.text[:500]
            logger.warning("trello_error path=%s status=%s", path, resp.status_code)
            raise ServiceError(
                f"Trello API error: {resp.status_code} - {body}",
                status=resp.status_code,
                body=body,
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise ServiceError(
                "Trello API returned a non-JSON body.",
                status=resp.status_code,
                body=resp.text[:500],
            ) from exc

    async def fetch_boards(self) -> list[dict[str, Any]]:
        return await self._get("/members/me/boards", {"filter": "open", "fields": BOARD_FIELDS})

    async def fetch_board(self, board_id: str) -> dict[str, Any]:
        return await self._get(f"/boards/{board_id}", {"fields": BOARD_FIELDS})

    async def fetch_lists(self, board_id: str) -> list[dict[str, Any]]:
        return await self._get(f"/boards/{board_id}/lists", {"filter": "open", "fields": LIST_FIELDS})

    async def fetch_cards(self, board_id: str) -> list[dict[str, Any]]:
        return await self._get(f"/boards/{board_id}/cards", {"fields": CARD_FIELDS})
