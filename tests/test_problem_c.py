import io

import pytest

from cpsolve.problem_c import main, max_gold


def _gold(grid):
    return sum(row.count("g") for row in grid)


def test_no_empty_cell_gives_nothing():
    assert max_gold(["g#", "#g"], 2) == 0


def test_unit_blast_keeps_all_gold():
    grid = ["g.g", "..g", "g#."]
    assert max_gold(grid, 1) == _gold(grid)


def test_huge_blast_destroys_everything():
    grid = ["g.g", "..g", "g#."]
    assert max_gold(grid, 10) == 0


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_result_within_bounds(k):
    grid = ["g..g#", ".g.#g", "gg..g", "#.g.."]
    assert 0 <= max_gold(grid, k) <= _gold(grid)


def test_larger_blast_never_helps():
    grid = ["g..g#", ".g.#g", "gg..g", "#.g.."]
    results = [max_gold(grid, k) for k in range(1, 6)]
    assert results == sorted(results, reverse=True)


def test_ragged_grid_raises():
    with pytest.raises(ValueError):
        max_gold(["g.", "g"], 1)


def test_nonpositive_blast_raises():
    with pytest.raises(ValueError):
        max_gold(["g."], 0)


def test_main_reads_grid(monkeypatch, capsys):
    first = ["g.g", "..g", "g#."]
    second = ["g..g#", ".g.#g"]
    text = "2\n3 3 2\n" + "\n".join(first) + "\n2 5 1\n" + "\n".join(second) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    expected = [str(max_gold(first, 2)), str(max_gold(second, 1))]
    assert capsys.readouterr().out.split() == expected