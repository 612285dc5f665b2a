import io

import pytest

from puzzlekit.puyo import chain_count, main, parse_field

BLANK = "......"


def _field(*bottom_rows):
    rows = [BLANK] * (12 - len(bottom_rows)) + list(bottom_rows)
    return "\n".join(rows) + "\n"


TWO_CHAIN = _field("G.....", "R.....", "R.....", "R.....", "RGGG..")
SINGLE = _field("RRRR..")
THREE_ONLY = _field("RRR...")
SIMULTANEOUS = _field("....GG", "RRRRGG")


def test_parse_field_shape():
    rows = parse_field(TWO_CHAIN)
    assert len(rows) == 12
    assert all(len(row) == 6 for row in rows)


def test_parse_field_round_trip():
    assert "".join(parse_field(TWO_CHAIN)) == "".join(TWO_CHAIN.split())


def test_parse_field_ignores_layout():
    flat = "".join(TWO_CHAIN.split())
    spaced = " ".join(flat)
    assert parse_field(spaced) == parse_field(TWO_CHAIN)


def test_parse_field_too_short():
    with pytest.raises(ValueError):
        parse_field("......\n" * 11)


def test_single_group_pops_once():
    assert chain_count(parse_field(SINGLE)) == 1


def test_three_blocks_do_not_pop():
    assert chain_count(parse_field(THREE_ONLY)) == 0


def test_empty_field_matches_no_pop():
    assert chain_count([BLANK] * 12) == chain_count(parse_field(THREE_ONLY))


def test_falling_blocks_make_a_chain():
    assert chain_count(parse_field(TWO_CHAIN)) == 2


def test_simultaneous_groups_count_as_one_round():
    assert chain_count(parse_field(SIMULTANEOUS)) == chain_count(parse_field(SINGLE))


def test_input_rows_are_not_modified():
    rows = parse_field(TWO_CHAIN)
    before = list(rows)
    chain_count(rows)
    assert rows == before


def test_chain_count_rejects_bad_shape():
    with pytest.raises(ValueError):
        chain_count([BLANK] * 11)
    with pytest.raises(ValueError):
        chain_count([BLANK] * 11 + ["...."])


def test_main_prints_count(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(TWO_CHAIN))
    assert main([]) == 0
    assert capsys.readouterr().out == str(chain_count(parse_field(TWO_CHAIN)))