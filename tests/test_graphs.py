import pytest
from hypothesis import given
from hypothesis import strategies as st

from puzzlekit.graphs import (
    WeightedGraph,
    find_redundant_connection,
    is_bipartite,
    ladder_length,
)


# ladder_length

def test_classic_ladder():
    words = ["hot", "dot", "dog", "lot", "log", "cog"]
    assert ladder_length("hit", "cog", words) == 5


def test_missing_end_word():
    assert ladder_length("hit", "cog", ["hot", "dot", "dog", "lot", "log"]) == 0


def test_same_begin_and_end():
    assert ladder_length("abc", "abc", []) == 1


def test_straight_chain_uses_every_word():
    words = ["baa", "bba", "bbb"]
    assert ladder_length("aaa", "bbb", words) == len(words) + 1


def test_ladder_ignores_order_of_word_list():
    words = ["hot", "dot", "dog", "lot", "log", "cog"]
    assert ladder_length("hit", "cog", words) == ladder_length(
        "hit", "cog", list(reversed(words))
    )


# find_redundant_connection

def test_triangle_last_edge_is_redundant():
    edges = [[1, 2], [1, 3], [2, 3]]
    assert find_redundant_connection(edges) == (2, 3)


def test_tree_has_no_redundant_edge():
    assert find_redundant_connection([[1, 2], [2, 3], [3, 4]]) is None


@given(st.integers(3, 30))
def test_cycle_closes_on_last_edge(n):
    edges = [[i, i + 1] for i in range(1, n)] + [[n, 1]]
    assert find_redundant_connection(edges) == (n, 1)


@given(st.permutations(range(1, 12)))
def test_redundant_edge_of_shuffled_tree_plus_one(nodes):
    edges = [[a, b] for a, b in zip(nodes, nodes[1:])]
    extra = [nodes[0], nodes[-1]]
    assert find_redundant_connection(edges + [extra]) == tuple(extra)


# is_bipartite

def test_square_is_bipartite():
    assert is_bipartite([[1, 3], [0, 2], [1, 3], [0, 2]]) is True


def test_triangle_is_not_bipartite():
    assert is_bipartite([[1, 2], [0, 2], [0, 1]]) is False


def test_self_loop_is_not_bipartite():
    assert is_bipartite([[0]]) is False


def test_empty_and_isolated_nodes_are_bipartite():
    assert is_bipartite([]) is True
    assert is_bipartite([[], [], []]) is True


def test_odd_cycle_in_second_component():
    graph = [[1], [0], [3, 4], [2, 4], [2, 3]]
    assert is_bipartite(graph) is False


@given(st.integers(3, 20))
def test_cycle_parity(n):
    graph = [[(i - 1) % n, (i + 1) % n] for i in range(n)]
    assert is_bipartite(graph) is (n % 2 == 0)


# WeightedGraph

def test_weighted_graph_example():
    graph = WeightedGraph(4, [[0, 2, 5], [0, 1, 2], [1, 2, 1], [3, 0, 3]])
    assert graph.shortest_path(3, 2) == 6
    assert graph.shortest_path(0, 3) == -1
    graph.add_edge([1, 3, 4])
    assert graph.shortest_path(0, 3) == 6


def test_path_to_self_costs_nothing():
    graph = WeightedGraph(2, [[0, 1, 7]])
    assert graph.shortest_path(1, 1) == 0


def test_edges_are_directed():
    graph = WeightedGraph(2, [[0, 1, 7]])
    assert graph.shortest_path(0, 1) == 7
    assert graph.shortest_path(1, 0) == -1


def test_unknown_node_rejected():
    graph = WeightedGraph(2)
    with pytest.raises(IndexError):
        graph.shortest_path(0, 5)


edge_lists = st.lists(
    st.tuples(st.integers(0, 5), st.integers(0, 5), st.integers(1, 20)), max_size=20
)


@given(edge_lists, st.integers(0, 5), st.integers(0, 5))
def test_direct_edge_bounds_shortest_path(edges, a, b):
    graph = WeightedGraph(6, edges)
    for source, target, cost in edges:
        result = graph.shortest_path(source, target)
        assert 0 <= result <= cost


@given(edge_lists, st.tuples(st.integers(0, 5), st.integers(0, 5), st.integers(1, 20)),
       st.integers(0, 5), st.integers(0, 5))
def test_adding_edge_never_lengthens_path(edges, extra, a, b):
    graph = WeightedGraph(6, edges)
    before = graph.shortest_path(a, b)
    graph.add_edge(extra)
    after = graph.shortest_path(a, b)
    if before != -1:
        assert 0 <= after <= before


@given(edge_lists, st.integers(0, 5), st.integers(0, 5), st.integers(0, 5))
def test_triangle_inequality(edges, a, b, c):
    graph = WeightedGraph(6, edges)
    ab = graph.shortest_path(a, b)
    bc = graph.shortest_path(b, c)
    ac = graph.shortest_path(a, c)
    if ab != -1 and bc != -1:
        assert ac != -1 and ac <= ab + bc