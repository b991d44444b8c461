"""
Markdown-ish text summaries of boards, meant for humans and LLM prompts.

Both renderers are pure: same input, same text. Lines are joined with newlines
and there is no extra trailing newline beyond the last emitted line.
"""

from __future__ import annotations

from datetime import datetime, timezone

from . import schemas

BOARD_DESC_LIMIT = 200
RECENT_DESC_LIMIT = 150


def format_date(value: datetime) -> str:
    """
    M/D/YYYY in UTC, e.g. 3/7/2024.
    """
    value = value.astimezone(timezone.utc)
    return f"{value.month}/{value.day}/{value.year}"


def truncate_description(desc: str, limit: int) -> str:
    text = desc.replace("\n", " ")
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def _label_line(card: schemas.Card) -> str | None:
    if not card.labels:
        return None
    names = ", ".join(label.display_name for label in card.labels)
    return f"  - Labels: {names}"


def _description_line(card: schemas.Card, limit: int) -> str | None:
    if not card.desc:
        return None
    return f"  - {truncate_description(card.desc, limit)}"


def format_board_summary(board: schemas.BoardWithDetails) -> str:
    lines: list[str] = [f"# Board: {board.name}"]
    if board.desc:
        lines.append("")
        lines.append(board.desc)
    lines.append("")

    # sorted() is stable, so equal `pos` keeps fetch order.
    for trello_list in sorted(board.lists, key=lambda item: item.pos):
        list_cards = [
            card for card in board.cards if card.id_list == trello_list.id and not card.closed
        ]
        if not list_cards:
            continue

        lines.append(f"## List: {trello_list.name}")
        lines.append("")

        for card in list_cards:
            lines.append(f"- **{card.name}**")

            if card.due is not None:
                status = "(completed)" if card.due_complete else ""
                lines.append(f"  - Due: {format_date(card.due)} {status}".rstrip())

            label_line = _label_line(card)
            if label_line:
                lines.append(label_line)

            desc_line = _description_line(card, BOARD_DESC_LIMIT)
            if desc_line:
                lines.append(desc_line)

            lines.append("")

    return "\n".join(lines)


def format_recent_cards_summary(board_name: str, cards: list[schemas.Card], days: int) -> str:
    lines: list[str] = [
        f"# Recent Activity: {board_name}",
        f"Cards modified in the last {days} days:",
        "",
    ]

    if not cards:
        lines.append("No recent activity.")
        return "\n".join(lines)

    for card in sorted(cards, key=lambda item: item.date_last_activity, reverse=True):
        lines.append(f"- **{card.name}** ({format_date(card.date_last_activity)})")

        label_line = _label_line(card)
        if label_line:
            lines.append(label_line)

        desc_line = _description_line(card, RECENT_DESC_LIMIT)
        if desc_line:
            lines.append(desc_line)

        lines.append("")

    return "\n".join(lines)
