"""
Board API endpoints.

Every Trello failure (missing credentials, upstream error) surfaces as
500 {"error": "..."} through `trello_error_handler`, registered in main.py.
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, Header, Query, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from core import trello

from . import formatting, schemas, service

router = APIRouter()

logger = logging.getLogger(__name__)


def get_trello_client() -> trello.TrelloClient:
    # Raises ConfigurationError before any request goes out.
    return trello.TrelloClient.from_env()


async def trello_error_handler(_: Request, exc: trello.TrelloError) -> JSONResponse:
    logger.error("trello_failure type=%s error=%s", type(exc).__name__, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


@router.get("/boards")
async def list_boards(client: trello.TrelloClient = Depends(get_trello_client)) -> JSONResponse:
    """
    Open boards of the authenticated Trello member.
    """
    boards = await service.fetch_boards(client)
    return JSONResponse([board.model_dump(mode="json", by_alias=True) for board in boards])


@router.get("/boards/{board_id}")
async def get_board(
    board_id: str,
    client: trello.TrelloClient = Depends(get_trello_client),
) -> JSONResponse:
    board = await service.fetch_board_details(client, board_id)
    return JSONResponse(board.model_dump(mode="json", by_alias=True))


@router.get("/boards/{board_id}/summary", response_class=PlainTextResponse)
async def get_board_summary(
    board_id: str,
    client: trello.TrelloClient = Depends(get_trello_client),
) -> PlainTextResponse:
    """
    Board summary as plain text, ready to paste into an LLM prompt.
    """
    board = await service.fetch_board_details(client, board_id)
    return PlainTextResponse(formatting.format_board_summary(board))


@router.get("/boards/{board_id}/recent")
async def get_recent_cards(
    board_id: str,
    days: int = Query(service.DEFAULT_RECENT_DAYS, ge=0),
    accept: str | None = Header(default=None),
    client: trello.TrelloClient = Depends(get_trello_client),
) -> Response:
    """
    Cards active within the last `days` days (default 7).

    JSON when the client accepts application/json, plain text otherwise.
    """
    board, cards = await asyncio.gather(
        service.fetch_board(client, board_id),
        service.fetch_recent_cards(client, board_id, days),
    )

    if "application/json" in (accept or ""):
        payload = schemas.RecentCardsResponse(
            board_id=board_id,
            board_name=board.name,
            days=days,
            cards=cards,
        )
        return JSONResponse(payload.model_dump(mode="json", by_alias=True))

    return PlainTextResponse(formatting.format_recent_cards_summary(board.name, cards, days))
