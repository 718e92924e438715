import pytest

from switchcover.utils import GraphGenerator


def test_linear():
    g = GraphGenerator.linear_generator(4)
    assert sorted(g.nodes) == [0, 1, 2, 3]
    assert sorted(g.edges) == [(0, 1), (1, 2), (2, 3)]


def test_erdos_renyi_extremes():
    full = GraphGenerator.erdos_renyi_generator(5, 1)
    assert full.number_of_edges() == 10
    empty = GraphGenerator.erdos_renyi_generator(5, 0)
    assert empty.number_of_nodes() == 5
    # random() can return exactly 0.0, which is <= 0
    assert empty.number_of_edges() <= 1


def test_seeded_graphs_repeat():
    a = GraphGenerator.erdos_renyi_generator(15, 0.3, seed=11)
    b = GraphGenerator.erdos_renyi_generator(15, 0.3, seed=11)
    assert sorted(a.edges) == sorted(b.edges)
    c = GraphGenerator.waxman_generator_1(15, 0.4, 0.6, seed=5)
    d = GraphGenerator.waxman_generator_1(15, 0.4, 0.6, seed=5)
    assert sorted(c.edges) == sorted(d.edges)


def test_waxman_nodes():
    g = GraphGenerator.waxman_generator_2(9, 0.5, 0.5, L=10.0, seed=2)
    assert sorted(g.nodes) == list(range(9))
    single = GraphGenerator.waxman_generator_1(1, 0.5, 0.5, seed=2)
    assert list(single.nodes) == [0]


@pytest.mark.parametrize("random_type", GraphGenerator.RANDOM_TYPES)
def test_generate_topology(random_type):
    g = GraphGenerator.generate_topology(random_type, 8, seed=1)
    assert sorted(g.nodes) == list(range(8))


def test_generate_topology_unknown_type():
    with pytest.raises(ValueError):
        GraphGenerator.generate_topology('star', 5)
