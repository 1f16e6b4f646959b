from pathlib import Path

import pytest

from envedit.domain.models import Blank, Change, ChangeKind, Comment, Pair


def test_pair_splits_on_first_equals_only():
    p = Pair.from_text("URL=postgres://u:p@h/db?x=1")
    assert p.key == "URL"
    assert p.value == "postgres://u:p@h/db?x=1"


def test_pair_empty_value():
    assert Pair.from_text("EMPTY=") == Pair("EMPTY", "")


def test_pair_without_equals_raises():
    with pytest.raises(ValueError):
        Pair.from_text("NOPE")


def test_lines_compare_by_value():
    assert Blank() == Blank()
    assert Comment("# a") == Comment("# a")
    assert Pair("A", "1") != Pair("A", "2")


def test_change_messages():
    p = Path("/tmp/.env")
    assert str(Change(ChangeKind.ADDED, "A", "1", path=p)) == "/tmp/.env: Added A=1"
    assert str(Change(ChangeKind.UPDATED, "A", "2", path=p)) == "/tmp/.env: Updated A=2"
    assert (
        str(Change(ChangeKind.SKIPPED, "A", path=p, reason="already exists"))
        == "/tmp/.env: A already exists"
    )
    assert str(Change(ChangeKind.REMOVED, "A", path=p, count=2)) == "/tmp/.env: Removed A"


def test_change_without_path_uses_placeholder():
    assert str(Change(ChangeKind.ADDED, "A", "1")) == "<string>: Added A=1"


@pytest.mark.parametrize(
    "key, value",
    [
        ("A", "x\ny"),
        ("A\nB", "1"),
        ("A=B", "1"),
        ("  A", "1"),
        ("#A", "1"),
        ("A", "1 "),
        ("A", "1\t"),
    ],
)
def test_pair_rejects_text_that_would_not_parse_back(key, value):
    with pytest.raises(ValueError):
        Pair(key, value)


def test_pair_allows_inner_and_leading_value_whitespace():
    assert Pair("A ", " 1 2").value == " 1 2"
    assert Pair("A", "x\ry").value == "x\ry"
