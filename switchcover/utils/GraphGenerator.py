from itertools import product
from math import sqrt, ceil, exp
from random import Random
from typing import Optional

from networkx import Graph

RANDOM_TYPES = ('linear', 'erdos-renyi', 'waxman')


def erdos_renyi_generator(n: int, p: float, seed: Optional[int] = None) -> Graph:
    rng = Random(seed)
    g = Graph()
    g.add_nodes_from(range(n))
    for s1, s2 in product(range(n), range(n)):
        if s1 >= s2:
            continue
        if rng.random() <= p:
            g.add_edge(s1, s2)
    return g


def linear_generator(n: int) -> Graph:
    g = Graph()
    g.add_nodes_from(range(n))
    for i in range(n - 1):
        g.add_edge(i, i+1)
    return g


def waxman_generator_1(n: int, alpha: float, beta: float, seed: Optional[int] = None) -> Graph:
    """Waxman graph with switches placed on a sqrt(n) x sqrt(n) grid; L is the largest pairwise distance."""
    rng = Random(seed)
    g = Graph()
    g.add_nodes_from(range(n))
    side_length = ceil(sqrt(n))
    all_possible_coords = list(product(range(1, side_length+1), range(1, side_length+1)))
    coords: dict[int, tuple[int, int]] = {}
    for i in range(n):
        coords[i] = rng.choice(all_possible_coords)
    dist: dict[tuple[int, int], float] = {}
    for i, j in product(coords.keys(), coords.keys()):
        i_coords = coords[i]
        j_coords = coords[j]
        dist[(i, j)] = sqrt((i_coords[0] - j_coords[0])**2 + (i_coords[1] - j_coords[1])**2)
    L = max(dist.values(), default=0)
    if L == 0:
        # all switches share one coordinate; every pair is at distance 0
        L = 1
    for i, j in product(range(n), range(n)):
        if i >= j:
            continue
        p = beta * exp(-dist[(i, j)] / (L * alpha))
        if rng.random() <= p:
            g.add_edge(i, j)
    return g


def waxman_generator_2(n: int, alpha: float, beta: float, L: float, seed: Optional[int] = None) -> Graph:
    """Waxman graph with pairwise distances drawn uniformly from [0, L)."""
    rng = Random(seed)
    g = Graph()
    g.add_nodes_from(range(n))
    dist: dict[tuple[int, int], float] = {}
    for i, j in product(range(n), range(n)):
        if i == j:
            dist[(i, j)] = 0
        else:
            dist[(i, j)] = rng.random() * L
    for i, j in product(range(n), range(n)):
        if i >= j:
            continue
        p = beta * exp(-dist[(i, j)] / (L * alpha))
        if rng.random() <= p:
            g.add_edge(i, j)
    return g


def generate_topology(random_type: str, n: int, prob: float = 0.5, waxman_alpha: float = 0.5,
                      waxman_beta: float = 0.5, seed: Optional[int] = None) -> Graph:
    """
    Builds a topology of n switches.
    :param random_type: linear/erdos-renyi/waxman
    :param prob: edge probability for erdos-renyi
    :param waxman_alpha: alpha for waxman
    :param waxman_beta: beta for waxman
    :param seed: seed for the random generators
    """
    assert 0 <= prob <= 1
    assert 0 < waxman_alpha <= 1
    assert 0 <= waxman_beta <= 1
    if random_type == 'linear':
        return linear_generator(n)
    elif random_type == 'erdos-renyi':
        return erdos_renyi_generator(n, prob, seed)
    elif random_type == 'waxman':
        return waxman_generator_1(n, waxman_alpha, waxman_beta, seed)
    raise ValueError(f'unknown random type {random_type!r}, expected one of {RANDOM_TYPES}')
