import logging

import pytest

from bondcheck.errors import MissingInputs, ReadFailure, UnsupportedFormat
from bondcheck.models import Bond, WinningBond
from bondcheck.session import CheckerSession

DRAW = b"First Prize 123456\nSecond Prize 999999 345678\nbonus 999999\n"


@pytest.fixture
def session():
    return CheckerSession()


def test_starts_empty(session):
    assert session.own_bonds == ()
    assert session.winning_bonds == ()
    assert session.matches == ()
    assert not session.own_loaded
    assert not session.winning_loaded
    assert not session.has_checked


def test_full_flow(session):
    assert session.load_own_bonds("mine.csv", b"123456\n000111\n999999\n").ok
    assert session.load_winning_bonds("draw.txt", DRAW).ok

    found = session.check_matches()

    assert [m.bond_number for m in found] == ["123456", "999999"]
    assert all(m.prize == "Prize Winner" for m in found)
    assert session.matches == tuple(found)
    assert session.has_checked


def test_winning_entries_carry_prize_label():
    session = CheckerSession(prize_label="Lucky")
    session.load_winning_bonds("draw.txt", DRAW)
    assert session.winning_bonds[0] == WinningBond("123456", "Lucky")


def test_reupload_replaces_list(session):
    session.load_own_bonds("a.csv", b"111111,222222\n")
    session.load_own_bonds("b.csv", b"333333\n")
    assert session.own_bonds == (Bond("333333"),)


def test_failed_upload_keeps_previous_list_and_flag(session, caplog):
    session.load_own_bonds("a.csv", b"111111,222222\n")

    with caplog.at_level(logging.ERROR, logger="bondcheck.session"):
        result = session.load_own_bonds("broken.xlsx", b"not a workbook")

    assert not result.ok
    assert isinstance(result.error, ReadFailure)
    assert result.tokens == ()
    assert [b.number for b in session.own_bonds] == ["111111", "222222"]
    assert session.own_loaded
    assert "broken.xlsx" in caplog.text


def test_unsupported_upload_is_rejected_without_changes(session):
    session.load_winning_bonds("draw.txt", DRAW)

    result = session.load_winning_bonds("draw.docx", b"123456")

    assert isinstance(result.error, UnsupportedFormat)
    assert len(session.winning_bonds) == 3


def test_own_list_does_not_accept_text_files(session):
    result = session.load_own_bonds("mine.txt", b"123456")
    assert isinstance(result.error, UnsupportedFormat)
    assert not session.own_loaded


def test_successful_load_clears_matches(session):
    session.load_own_bonds("mine.csv", b"123456\n")
    session.load_winning_bonds("draw.txt", DRAW)
    session.check_matches()
    assert session.matches

    session.load_winning_bonds("draw2.txt", b"nothing to see 654321")

    assert session.matches == ()
    assert not session.has_checked


def test_own_list_reload_clears_matches(session):
    session.load_own_bonds("mine.csv", b"123456\n")
    session.load_winning_bonds("draw.txt", DRAW)
    session.check_matches()
    assert session.matches

    session.load_own_bonds("mine2.csv", b"123456,999999\n")

    assert session.matches == ()
    assert not session.has_checked


def test_failed_load_keeps_matches(session):
    session.load_own_bonds("mine.csv", b"123456\n")
    session.load_winning_bonds("draw.txt", DRAW)
    session.check_matches()

    session.load_own_bonds("mine.xls", b"garbage")

    assert len(session.matches) == 1
    assert session.has_checked


def test_loaded_file_with_no_numbers_counts_as_loaded(session):
    result = session.load_winning_bonds("draw.txt", b"no numbers here")
    assert result.ok
    assert session.winning_loaded
    assert session.winning_bonds == ()


def test_check_requires_both_lists(session):
    session.load_own_bonds("mine.csv", b"123456\n")
    with pytest.raises(MissingInputs) as exc:
        session.check_matches()
    assert exc.value.winning_missing
    assert not exc.value.own_missing
    assert not session.has_checked


def test_check_with_no_intersection(session):
    session.load_own_bonds("mine.csv", b"111111\n")
    session.load_winning_bonds("draw.txt", DRAW)
    assert session.check_matches() == []
    assert session.has_checked


def test_reset(session):
    session.load_own_bonds("mine.csv", b"123456\n")
    session.reset()
    assert session.own_bonds == ()
    assert not session.own_loaded
