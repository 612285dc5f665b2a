import io

import pytest

from puzzlekit.aplusb import add_pairs, main


def _text(pairs, sep="+"):
    lines = [str(len(pairs))] + [f"{a}{sep}{b}" for a, b in pairs]
    return "\n".join(lines)


def test_single_pair():
    assert add_pairs("1\n1+1") == [2]


@pytest.mark.parametrize(
    "pairs",
    [
        [(1, 2)],
        [(10, 20), (3, 4), (-5, 9)],
        [(100, 0), (0, 7)],
    ],
)
def test_each_sum_recovers_operands(pairs):
    result = add_pairs(_text(pairs))
    assert len(result) == len(pairs)
    for total, (a, b) in zip(result, pairs):
        assert total - a == b


def test_stops_at_zero_pair():
    result = add_pairs("3\n4+5\n0+0\n7+8")
    assert result == add_pairs("1\n4+5")
    assert len(result) == 1


def test_count_limits_pairs_read():
    assert len(add_pairs("1\n1+2\n3+4")) == 1


def test_separator_may_be_any_character():
    result = add_pairs("3\n3,4\n3 x 4\n3+4")
    assert result[0] == result[1] == result[2]


def test_missing_pairs_raise():
    with pytest.raises(ValueError):
        add_pairs("5\n1+2")


def test_missing_count_raises():
    with pytest.raises(ValueError):
        add_pairs("")


def test_main_prints_sums(monkeypatch, capsys):
    text = _text([(2, 3), (6, 1)], sep=",")
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [str(v) for v in add_pairs(text)]