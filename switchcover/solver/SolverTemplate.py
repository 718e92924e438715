import logging

from switchcover.utils.Errors import InvalidIndexError
from switchcover.utils.SetCover import CoverResult

logger = logging.getLogger(__name__)

DEFAULT_TIME_LIMIT = 120.0  # seconds
DEFAULT_MIP_GAP = 0.01


class SolverTemplate:
    """
    A strategy that picks switches so that every flow has a chosen switch on its path.
    Every back end returns a CoverResult of the same shape so heuristic and exact results can be compared.
    """
    name = 'template'

    def solve(self, n_flows: int, n_switches: int, paths: list[list[int]]) -> CoverResult:
        raise NotImplementedError

    def info(self, text):
        print("*" * (len(text) + 4))
        print(f"* {text} *")
        print("*" * (len(text) + 4))


def flow_constraints(n_flows: int, n_switches: int, paths: list[list[int]]) -> tuple[list[tuple[int, list[int]]], list[int]]:
    """
    Rows of the covering ILP: for every flow, the distinct switches on its path (sum of x_s >= 1).
    Flows with an empty path can never be satisfied and are returned separately instead of as a row.
    :return: (flow id, sorted distinct switch ids) rows, flows with an empty path
    """
    if len(paths) != n_flows:
        raise InvalidIndexError(f'got {len(paths)} paths for {n_flows} flows')
    rows = []
    empty_flows = []
    for flow_id, path in enumerate(paths):
        for sw in path:
            if not 0 <= sw < n_switches:
                raise InvalidIndexError(f'switch index {sw} out of range on the path of flow {flow_id}')
        if path:
            rows.append((flow_id, sorted(set(path))))
        else:
            empty_flows.append(flow_id)
    if empty_flows:
        logger.warning('%d flows have no switches in their path; they are left out of the model', len(empty_flows))
    return rows, empty_flows
