"""
Board aggregation.

Flow:
1) Fetch board, open lists and all cards concurrently
2) Validate each payload into models
3) Merge into one BoardWithDetails (no partial result on any failure)

Recency filtering runs over the unfiltered card fetch, so closed cards
can show up as recent activity.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from core.trello import ServiceError, TrelloClient

from . import schemas

DEFAULT_RECENT_DAYS = 7
EARLIEST_CUTOFF = datetime.min.replace(tzinfo=timezone.utc)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _parse(adapter: TypeAdapter[T], payload: Any, what: str) -> T:
    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        raise ServiceError(f"Trello API returned an unexpected {what} payload.") from exc


_BOARD = TypeAdapter(schemas.Board)
_BOARDS = TypeAdapter(list[schemas.Board])
_LISTS = TypeAdapter(list[schemas.TrelloList])
_CARDS = TypeAdapter(list[schemas.Card])


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def fetch_boards(client: TrelloClient) -> list[schemas.Board]:
    return _parse(_BOARDS, await client.fetch_boards(), "boards")


async def fetch_board(client: TrelloClient, board_id: str) -> schemas.Board:
    return _parse(_BOARD, await client.fetch_board(board_id), "board")


async def fetch_cards(client: TrelloClient, board_id: str) -> list[schemas.Card]:
    return _parse(_CARDS, await client.fetch_cards(board_id), "cards")


async def fetch_board_details(client: TrelloClient, board_id: str) -> schemas.BoardWithDetails:
    """
    Fan out the three independent reads and join them.

    If any fetch fails its error propagates unchanged. In-flight siblings
    are left to finish and their results are discarded.
    """
    board_raw, lists_raw, cards_raw = await asyncio.gather(
        client.fetch_board(board_id),
        client.fetch_lists(board_id),
        client.fetch_cards(board_id),
    )

    board = _parse(_BOARD, board_raw, "board")
    lists = _parse(_LISTS, lists_raw, "lists")
    cards = _parse(_CARDS, cards_raw, "cards")
    logger.info(
        "board_details_fetched board_id=%s lists=%s cards=%s",
        board_id,
        len(lists),
        len(cards),
    )
    return schemas.BoardWithDetails(**board.model_dump(), lists=lists, cards=cards)


def recency_cutoff(days: int, *, now: datetime | None = None) -> datetime:
    if days < 0:
        raise ValueError("days must be a non-negative integer.")
    try:
        return (now or _utc_now()) - timedelta(days=days)
    except OverflowError:
        # Window reaches past year 1: every card is recent.
        return EARLIEST_CUTOFF


def select_recent_cards(
    cards: list[schemas.Card],
    days: int,
    *,
    now: datetime | None = None,
) -> list[schemas.Card]:
    """
    Keep cards whose last activity is at or after `now - days`.
    """
    cutoff = recency_cutoff(days, now=now)
    return [card for card in cards if card.date_last_activity >= cutoff]


async def fetch_recent_cards(
    client: TrelloClient,
    board_id: str,
    days: int = DEFAULT_RECENT_DAYS,
    *,
    now: datetime | None = None,
) -> list[schemas.Card]:
    now = now or _utc_now()
    # Validate before touching the network.
    recency_cutoff(days, now=now)

    cards = await fetch_cards(client, board_id)
    recent = select_recent_cards(cards, days, now=now)
    logger.info(
        "recent_cards_selected board_id=%s days=%s total=%s recent=%s",
        board_id,
        days,
        len(cards),
        len(recent),
    )
    return recent
