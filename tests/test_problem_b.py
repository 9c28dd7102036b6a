import io

import pytest

from cpsolve.problem_b import can_reach, main


def test_same_cell_is_reachable():
    assert can_reach(10, 10, 2, 3, 4, 4, 4, 4)


def test_both_offsets_multiples():
    assert can_reach(10, 10, 2, 3, 0, 0, 4, 6)


def test_neither_offset_multiple():
    assert not can_reach(10, 10, 2, 3, 0, 0, 1, 1)


def test_vertical_remainder_without_horizontal_room():
    assert not can_reach(10, 10, 2, 3, 0, 0, 0, 1)


def test_vertical_remainder_with_horizontal_room():
    assert can_reach(10, 10, 2, 3, 0, 0, 4, 1)


@pytest.mark.parametrize(
    "coords", [(0, 0, 4, 1), (1, 2, 7, 3), (5, 5, 2, 9), (3, 0, 0, 6)]
)
def test_symmetric_in_endpoints(coords):
    x1, y1, x2, y2 = coords
    assert can_reach(10, 10, 2, 3, x1, y1, x2, y2) == can_reach(
        10, 10, 2, 3, x2, y2, x1, y1
    )


def test_main_prints_yes_no(monkeypatch, capsys):
    cases = [(10, 10, 2, 3, 0, 0, 4, 6), (10, 10, 2, 3, 0, 0, 1, 1)]
    text = f"{len(cases)}\n" + "\n".join(" ".join(map(str, c)) for c in cases)
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    expected = ["YES" if can_reach(*c) else "NO" for c in cases]
    assert capsys.readouterr().out.split() == expected