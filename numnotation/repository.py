"""Hymn metadata and verses stored in an SQLite database."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from typing import Any

_HYMN_DATA_QUERY = """
    SELECT
        a.ID as hymn_id,
        a.hymn_number,
        a.hymn_variant,
        a.title,
        a.footnotes,
        a.footnotes_title,
        a.lyric,
        a.music,
        a.nr_number,
        a.be_number,
        a.copyright,
        a.kids_starred,
        b.ID as verse_id,
        b.verse_num,
        b.style_row,
        b.column_pos,
        b.row_pos,
        b.content
    FROM jdy_hymn a LEFT JOIN jdy_hymn_verces b
        ON a.hymn_number = b.hymn_num AND (a.hymn_variant = b.hymn_variant OR (a.hymn_variant IS NULL AND b.hymn_variant IS NULL))
    WHERE a.hymn_number = ?
"""

_HYMN_VARIANT_QUERY = """
    SELECT
        a.ID as hymn_id,
        a.hymn_number,
        a.hymn_variant
    FROM
        jdy_hymn a
    WHERE
        hymn_number = ? AND hymn_variant IS NOT NULL
"""

_INSERT_VERSE_QUERY = """
    INSERT INTO jdy_hymn_verces
    (
        hymn_num,
        verse_num,
        content,
        style_row,
        column_pos,
        row_pos
    )
    VALUES (?, ?, ?, ?, ?, ?)
"""


class HymnNotFoundError(LookupError):
    """Raised when no hymn matches the requested number and variant."""

    def __init__(self, hymn_num: int, variant: str | None = None) -> None:
        super().__init__("hymn not found")
        self.hymn_num = hymn_num
        self.variant = variant


@dataclass
class HymnIndicator:
    """Identity of a hymn: its row id, number and optional variant."""

    hymn_id: int = 0
    number: int = 0
    variant: str | None = None


@dataclass
class HymnData(HymnIndicator):
    """Title, credits and notes of a hymn."""

    title: str = ""
    footnotes: str | None = None
    title_footnotes: str | None = None
    lyric: str = ""
    music: str = ""
    ref_nr: int | None = None
    ref_be: int | None = None
    copyright: str | None = None
    is_for_kids: int | None = None


@dataclass
class HymnVerse:
    """One verse of a hymn with its layout position."""

    verse_id: int | None = None
    number: int | None = None
    verse_num: int | None = None
    style_row: int | None = None
    content: str | None = None
    col: int | None = None
    row: int | None = None


@dataclass
class HymnMetadata(HymnData):
    """A hymn's data together with all its verses."""

    verses: list[HymnVerse] = field(default_factory=list)


def _fetch(cursor: sqlite3.Cursor) -> list[dict[str, Any]]:
    names = [column[0] for column in cursor.description]
    return [dict(zip(names, values)) for values in cursor.fetchall()]


def _data_fields(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "hymn_id": row["hymn_id"],
        "number": row["hymn_number"],
        "variant": row["hymn_variant"],
        "title": row["title"] or "",
        "footnotes": row["footnotes"],
        "title_footnotes": row["footnotes_title"],
        "lyric": row["lyric"] or "",
        "music": row["music"] or "",
        "ref_nr": row["nr_number"],
        "ref_be": row["be_number"],
        "copyright": row["copyright"],
        "is_for_kids": row["kids_starred"],
    }


def _verse(row: dict[str, Any]) -> HymnVerse:
    return HymnVerse(
        verse_id=row["verse_id"],
        number=row.get("hymn_num"),
        verse_num=row["verse_num"],
        style_row=row["style_row"],
        content=row["content"],
        col=row["column_pos"],
        row=row["row_pos"],
    )


def _null_if_zero(value: int) -> int | None:
    return value if value != 0 else None


class Repository:
    """Reads and writes hymns through an open SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def hymn_metadata(self, hymn_num: int, variant: str | None = None) -> HymnMetadata:
        """Hymn data and verses of ``hymn_num``, optionally of one variant."""
        query = _HYMN_DATA_QUERY
        params: list[Any] = [hymn_num]
        if variant is not None:
            query += " AND a.hymn_variant = ?"
            params.append(variant)

        rows = _fetch(self._connection.execute(query, params))
        if not rows:
            raise HymnNotFoundError(hymn_num, variant)

        return HymnMetadata(
            **_data_fields(rows[0]),
            verses=[_verse(row) for row in rows if row["verse_id"] is not None],
        )

    def insert_verse(
        self, hymn: int, verse: int, style: int, col: int, row: int, content: str
    ) -> int:
        """Store a verse and return its new id; zero style, column or row is stored as NULL."""
        with self._connection:
            cursor = self._connection.execute(
                _INSERT_VERSE_QUERY,
                (
                    hymn,
                    verse,
                    content,
                    _null_if_zero(style),
                    _null_if_zero(col),
                    _null_if_zero(row),
                ),
            )
        return int(cursor.lastrowid)

    def hymn_variants(self, hymn_num: int) -> list[HymnIndicator]:
        """All named variants of ``hymn_num``."""
        rows = _fetch(self._connection.execute(_HYMN_VARIANT_QUERY, (hymn_num,)))
        return [
            HymnIndicator(
                hymn_id=row["hymn_id"], number=row["hymn_number"], variant=row["hymn_variant"]
            )
            for row in rows
        ]