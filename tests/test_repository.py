import sqlite3

import pytest

from numnotation.repository import HymnIndicator, HymnNotFoundError, Repository

_SCHEMA = """
CREATE TABLE jdy_hymn (
    ID INTEGER PRIMARY KEY,
    hymn_number INTEGER,
    hymn_variant TEXT,
    title TEXT,
    footnotes TEXT,
    footnotes_title TEXT,
    lyric TEXT,
    music TEXT,
    nr_number INTEGER,
    be_number INTEGER,
    copyright TEXT,
    kids_starred INTEGER
);
CREATE TABLE jdy_hymn_verces (
    ID INTEGER PRIMARY KEY,
    hymn_num INTEGER,
    hymn_variant TEXT,
    verse_num INTEGER,
    style_row INTEGER,
    column_pos INTEGER,
    row_pos INTEGER,
    content TEXT
);
"""


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    conn.executescript(_SCHEMA)
    conn.executemany(
        "INSERT INTO jdy_hymn (hymn_number, hymn_variant, title, lyric, music, kids_starred)"
        " VALUES (?, ?, ?, ?, ?, ?)",
        [
            (1, None, "Title One", "Lyric One", "Music One", 1),
            (2, "a", "Title Two A", "Lyric A", "Music A", None),
            (2, "b", "Title Two B", "Lyric B", "Music B", None),
            (3, None, "No Verses", "L", "M", None),
        ],
    )
    conn.executemany(
        "INSERT INTO jdy_hymn_verces (hymn_num, hymn_variant, verse_num, content, column_pos)"
        " VALUES (?, ?, ?, ?, ?)",
        [
            (1, None, 1, "first", 1),
            (1, None, 2, "second", 2),
            (2, "b", 1, "variant b verse", 1),
        ],
    )
    conn.commit()
    yield conn
    conn.close()


@pytest.fixture
def repo(connection):
    return Repository(connection)


def test_unknown_hymn_raises(repo):
    with pytest.raises(HymnNotFoundError) as info:
        repo.hymn_metadata(99)
    assert info.value.hymn_num == 99


def test_unknown_variant_raises(repo):
    with pytest.raises(HymnNotFoundError):
        repo.hymn_metadata(1, "z")


def test_metadata_collects_verses(repo):
    metadata = repo.hymn_metadata(1)
    assert metadata.title == "Title One"
    assert metadata.number == 1
    assert metadata.variant is None
    assert metadata.is_for_kids == 1
    assert sorted(v.content for v in metadata.verses) == ["first", "second"]
    assert sorted(v.col for v in metadata.verses) == [1, 2]


def test_hymn_without_verses_has_empty_list(repo):
    metadata = repo.hymn_metadata(3)
    assert metadata.title == "No Verses"
    assert metadata.verses == []


def test_variant_filter(repo):
    metadata = repo.hymn_metadata(2, "b")
    assert metadata.variant == "b"
    assert metadata.title == "Title Two B"
    assert [v.content for v in metadata.verses] == ["variant b verse"]


def test_variant_without_verses(repo):
    metadata = repo.hymn_metadata(2, "a")
    assert metadata.title == "Title Two A"
    assert metadata.verses == []


def test_insert_verse_stores_zero_as_null(repo, connection):
    new_id = repo.insert_verse(3, 1, 0, 2, 0, "text")
    stored = connection.execute(
        "SELECT hymn_num, verse_num, content, style_row, column_pos, row_pos"
        " FROM jdy_hymn_verces WHERE ID = ?",
        (new_id,),
    ).fetchone()
    assert stored == (3, 1, "text", None, 2, None)


def test_insert_verse_ids_grow(repo):
    first = repo.insert_verse(3, 1, 1, 1, 1, "one")
    second = repo.insert_verse(3, 2, 1, 1, 2, "two")
    assert second > first


def test_hymn_variants(repo):
    variants = repo.hymn_variants(2)
    assert sorted(v.variant for v in variants) == ["a", "b"]
    assert all(isinstance(v, HymnIndicator) and v.number == 2 for v in variants)


def test_hymn_without_variants(repo):
    assert repo.hymn_variants(1) == []