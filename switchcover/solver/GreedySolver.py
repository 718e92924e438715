from typing import Optional

from switchcover.utils.FlowGenerator import generate_switch_flow_list
from switchcover.utils.SetCover import CoverObserver, CoverResult, set_cover_solve
from .SolverTemplate import SolverTemplate


class GreedySolver(SolverTemplate):
    name = 'greedy'
    strategy: str
    observer: Optional[CoverObserver]

    def __init__(self, strategy: str = 'scan', observer: Optional[CoverObserver] = None):
        self.strategy = strategy
        self.observer = observer

    def solve(self, n_flows: int, n_switches: int, paths: list[list[int]]) -> CoverResult:
        switch_flows = generate_switch_flow_list(n_switches, paths)
        return set_cover_solve(n_flows, n_switches, paths, switch_flows,
                               observer=self.observer, strategy=self.strategy)
