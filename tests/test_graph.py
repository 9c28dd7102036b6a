from cpsolve.graph import reachable


def test_isolated_node_reaches_itself():
    adj = [[], [], []]
    assert reachable(adj, 1) == {1}


def test_chain_is_fully_reached():
    adj = [[1], [2], [3], []]
    assert reachable(adj, 0) == set(range(4))


def test_disconnected_part_excluded():
    adj = [[1], [0], [3], [2]]
    result = reachable(adj, 0)
    assert 2 not in result
    assert 3 not in result
    assert result == {0, 1}


def test_result_is_closed_under_edges():
    adj = [[1, 2], [3], [], [1], [0]]
    result = reachable(adj, 0)
    for node in result:
        assert set(adj[node]) <= result
    assert 4 not in result


def test_cycle_terminates():
    adj = [[1], [2], [0]]
    assert reachable(adj, 2) == {0, 1, 2}