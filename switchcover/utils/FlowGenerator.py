import logging
from itertools import islice, permutations
from random import Random
from typing import Optional

import networkx as nx
from networkx import connected_components

from switchcover.utils.Errors import InvalidIndexError

logger = logging.getLogger(__name__)


def count_distinct_flows(topology: nx.Graph, limit: Optional[int] = None) -> int:
    """
    Number of distinct simple paths (at least two switches, direction matters) in a topology.
    Enumeration stops once limit paths are found, so dense graphs stay cheap to check.
    """
    count = 0
    for component in connected_components(topology):
        for source, target in permutations(sorted(component), 2):
            remaining = None if limit is None else limit - count
            count += sum(1 for _ in islice(nx.all_simple_paths(topology, source, target), remaining))
            if limit is not None and count >= limit:
                return count
    return count


def generate_random_flows(m: int, topology: nx.Graph, seed: Optional[int] = None) -> list[list[int]]:
    """
    Generate random flows in a topology. Ensures no flow is the same and stops a walk early when no unvisited
    neighbors are available.
    :param m: Number of flows to generate.
    :param topology: Networkx graph representing the topology; nodes are switch ids.
    :param seed: Seed for the random generator; the same seed yields the same flows.
    :return: List of paths, indexed by flow id.
    """
    rng = Random(seed)
    flows: list[list[int]] = []
    nodes = sorted(topology.nodes())
    all_paths = set()

    available = count_distinct_flows(topology, limit=m)
    if m > available:
        raise ValueError(f"Impossible to generate {m} flows for this graph, it only has {available} distinct paths. "
                         f"Either raise generation probability (by changing parameters) or retry.")

    def generate_path(start_node):
        path = [int(start_node)]
        visited = {start_node}
        path_length = rng.randint(1, len(nodes))
        current_node = start_node

        for _ in range(path_length - 1):
            neighbors = sorted(n for n in topology.neighbors(current_node) if n not in visited)
            if not neighbors:
                break
            next_node = rng.choice(neighbors)
            path.append(int(next_node))
            visited.add(next_node)
            current_node = next_node

        return tuple(path)

    while len(flows) < m:
        start_node = rng.choice(nodes)
        path = generate_path(start_node)
        if path not in all_paths and len(path) > 1:
            all_paths.add(path)
            flows.append(list(path))
            logger.debug('Flow %d generated: %s', len(flows) - 1, path)

    return flows


def generate_switch_flow_list(n_switches: int, paths: list[list[int]]) -> list[list[int]]:
    """
    Inverts the flow -> switches relation into switch -> flows.
    A flow listing the same switch twice appears twice in that switch's list; every switch in range gets a
    (possibly empty) list.
    :param n_switches: number of switches, ids are 0..n_switches-1
    :param paths: paths[flow_id] is the list of switch ids on the flow's path
    :return: list indexed by switch id of the flow ids that run on the switch, in ascending flow order
    """
    switch_flows: list[list[int]] = [[] for _ in range(n_switches)]

    for flow_id, switches in enumerate(paths):
        for switch_id in switches:
            if not 0 <= switch_id < n_switches:
                raise InvalidIndexError(f'flow {flow_id} references switch {switch_id}, '
                                        f'valid range is [0, {n_switches})')
            switch_flows[switch_id].append(flow_id)

    return switch_flows
