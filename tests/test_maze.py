import io
import random

import pytest

from puzzlekit.maze import main, parse_layers, rotate_layer, shortest_escape


def _full():
    return [[1] * 5 for _ in range(5)]


def _empty():
    return [[0] * 5 for _ in range(5)]


def _random_layers(seed):
    rng = random.Random(seed)
    return [
        [[1 if rng.random() < 0.85 else 0 for _ in range(5)] for _ in range(5)]
        for _ in range(5)
    ]


def _to_text(layers):
    return "\n".join(" ".join(str(cell) for cell in row) for layer in layers for row in layer)


def test_rotate_moves_top_left_to_top_right():
    layer = _empty()
    layer[0][0] = 1
    rotated = rotate_layer(layer)
    assert rotated[0][4] == 1
    assert sum(map(sum, rotated)) == 1


def test_rotate_follows_quarter_turn_rule():
    layer = _random_layers(3)[0]
    rotated = rotate_layer(layer)
    for i in range(5):
        for j in range(5):
            assert rotated[j][4 - i] == layer[i][j]


def test_four_rotations_restore_layer():
    layer = _random_layers(7)[2]
    turned = layer
    for _ in range(4):
        turned = rotate_layer(turned)
    assert turned == layer


def test_parse_round_trip():
    layers = _random_layers(11)
    assert parse_layers(_to_text(layers)) == layers


def test_parse_too_few_cells():
    with pytest.raises(ValueError):
        parse_layers("1 0 1")


def test_parse_rejects_other_values():
    layers = [_full() for _ in range(5)]
    layers[1][2][3] = 2
    with pytest.raises(ValueError):
        parse_layers(_to_text(layers))


def test_bad_shape_rejected():
    with pytest.raises(ValueError):
        shortest_escape([_full() for _ in range(4)])


def test_fully_open_cube():
    assert shortest_escape([_full() for _ in range(5)]) == 12


def test_blocked_layer_means_no_path():
    layers = [_full() for _ in range(4)] + [_empty()]
    assert shortest_escape(layers) == -1


def test_single_open_cell_layers_have_no_path():
    layers = []
    for _ in range(5):
        layer = _empty()
        layer[0][0] = 1
        layers.append(layer)
    assert shortest_escape(layers) == -1


def test_invariant_under_input_order_and_rotation():
    layers = _random_layers(5)
    base = shortest_escape(layers)
    assert base == -1 or base >= 12
    shuffled = [layers[3], rotate_layer(layers[0]), layers[4], layers[1], rotate_layer(layers[2])]
    assert shortest_escape(shuffled) == base


def test_main_prints_result(monkeypatch, capsys):
    text = _to_text([_full() for _ in range(5)])
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    assert capsys.readouterr().out == "12"