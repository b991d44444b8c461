"""
Pydantic models for Trello entities and board responses.

Field names on the wire keep Trello's camelCase; Python attributes are
snake_case. Serialize with `by_alias=True` to pass payloads through.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TrelloModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Board(TrelloModel):
    id: str
    name: str
    desc: str = ""
    url: str = ""
    closed: bool = False


class TrelloList(TrelloModel):
    id: str
    name: str
    closed: bool = False
    pos: int | float = 0


class Label(TrelloModel):
    id: str
    name: str = ""
    # Trello allows colorless labels.
    color: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.color or ""


class Card(TrelloModel):
    id: str
    name: str
    desc: str = ""
    due: datetime | None = None
    due_complete: bool = Field(default=False, alias="dueComplete")
    closed: bool = False
    id_list: str = Field(alias="idList")
    labels: list[Label] = Field(default_factory=list)
    date_last_activity: datetime = Field(alias="dateLastActivity")
    url: str = ""

    @field_validator("due", "date_last_activity")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class BoardWithDetails(Board):
    lists: list[TrelloList] = Field(default_factory=list)
    cards: list[Card] = Field(default_factory=list)


class RecentCardsResponse(TrelloModel):
    board_id: str = Field(alias="boardId")
    board_name: str = Field(alias="boardName")
    days: int
    cards: list[Card]
