import heapq
import logging
from typing import NamedTuple, Optional

from switchcover.utils.Errors import InfeasibleCoverage, InvalidIndexError
from switchcover.utils.FlowGenerator import generate_switch_flow_list

logger = logging.getLogger(__name__)

STRATEGIES = ('scan', 'heap')


class CoverStep(NamedTuple):
    step: int  # 1-based
    switch: int
    gain: int
    covered: int  # total covered flows right after this step


class CoverObserver:
    """Receives the decisions of a greedy solve. The default implementation ignores everything."""

    def on_step(self, step: CoverStep, n_flows: int) -> None:
        pass

    def on_infeasible(self, uncovered_flows: list[int], n_flows: int) -> None:
        pass


class PrintObserver(CoverObserver):
    def on_step(self, step: CoverStep, n_flows: int) -> None:
        print(f'Step {step.step}: chose switch {step.switch} '
              f'(gain = {step.gain}, total covered = {step.covered}/{n_flows})')

    def on_infeasible(self, uncovered_flows: list[int], n_flows: int) -> None:
        print(f'Error: remaining flows cannot be covered ({len(uncovered_flows)} of {n_flows} uncovered).')


class CoverResult:
    chosen: list[bool]  # switch id -> selected
    steps: list[CoverStep]  # empty for exact solvers
    covered_count: int
    uncovered_flows: list[int]

    def __init__(self, chosen: list[bool], steps: list[CoverStep], covered_count: int,
                 uncovered_flows: list[int]):
        self.chosen = chosen
        self.steps = steps
        self.covered_count = covered_count
        self.uncovered_flows = uncovered_flows

    @classmethod
    def from_selection(cls, n_flows: int, paths: list[list[int]], chosen: list[bool]) -> 'CoverResult':
        covered = covered_flags(n_flows, paths, chosen)
        uncovered = [f for f, c in enumerate(covered) if not c]
        return cls(chosen, [], n_flows - len(uncovered), uncovered)

    @property
    def n_flows(self) -> int:
        return self.covered_count + len(self.uncovered_flows)

    @property
    def num_chosen(self) -> int:
        return sum(self.chosen)

    @property
    def selected_switches(self) -> list[int]:
        return [s for s, c in enumerate(self.chosen) if c]

    @property
    def is_complete(self) -> bool:
        return not self.uncovered_flows

    def raise_for_infeasible(self) -> None:
        if self.uncovered_flows:
            raise InfeasibleCoverage(self.uncovered_flows, self.n_flows)

    def __repr__(self):
        return (f'CoverResult(chosen={self.selected_switches}, covered={self.covered_count}/{self.n_flows}, '
                f'steps={len(self.steps)})')


def covered_flags(n_flows: int, paths: list[list[int]], chosen: list[bool]) -> list[bool]:
    if len(paths) != n_flows:
        raise InvalidIndexError(f'got {len(paths)} paths for {n_flows} flows')
    covered = [False] * n_flows
    for f in range(n_flows):
        for sw in paths[f]:
            if 0 <= sw < len(chosen) and chosen[sw]:
                covered[f] = True
                break
    return covered


def count_covered_flows(n_flows: int, paths: list[list[int]], chosen: list[bool]) -> int:
    """Number of flows with at least one chosen switch on their path. Out-of-range switch ids are ignored."""
    return sum(covered_flags(n_flows, paths, chosen))


def _gain(flows: list[int], covered: list[bool]) -> int:
    # distinct flows only; the reverse list keeps duplicates
    return len({f for f in flows if not covered[f]})


def _scan_best_switch(switch_flows: list[list[int]], covered: list[bool], chosen: list[bool]) -> tuple[int, int]:
    best_switch = -1
    best_gain = 0
    for s, flows in enumerate(switch_flows):
        # len(flows) bounds the gain; a switch that cannot beat best_gain strictly would lose the tie anyway
        if chosen[s] or len(flows) <= best_gain:
            continue
        gain = _gain(flows, covered)
        if gain > best_gain:
            best_gain = gain
            best_switch = s
    return best_switch, best_gain


class _LazyGainQueue:
    """
    Max-gain priority queue over switches with lazily refreshed gains.
    Coverage only grows, so a stored gain is an upper bound of the current one. Entries are (-gain, switch) so
    equal gains pop in ascending switch order, which keeps the selection sequence of the full scan.
    """

    def __init__(self, switch_flows: list[list[int]]):
        self._switch_flows = switch_flows
        self._pq = [(-len(set(flows)), s) for s, flows in enumerate(switch_flows) if flows]
        heapq.heapify(self._pq)

    def pop_best(self, covered: list[bool]) -> tuple[int, int]:
        while self._pq:
            _, switch_id = heapq.heappop(self._pq)
            gain = _gain(self._switch_flows[switch_id], covered)
            if gain == 0:
                continue
            entry = (-gain, switch_id)
            if not self._pq or entry <= self._pq[0]:
                return switch_id, gain
            heapq.heappush(self._pq, entry)
        return -1, 0


def set_cover_solve(n_flows: int, n_switches: int, paths: list[list[int]],
                    switch_flows: Optional[list[list[int]]] = None,
                    observer: Optional[CoverObserver] = None,
                    strategy: str = 'scan') -> CoverResult:
    """
    Greedy set cover: repeatedly choose the switch covering the most uncovered flows, lowest switch id on ties.
    Stops when all flows are covered or when no remaining switch covers anything new; in the latter case the
    partial selection is returned and the uncovered flows are listed in the result.
    :param n_flows: number of flows, ids are 0..n_flows-1
    :param n_switches: number of switches, ids are 0..n_switches-1
    :param paths: paths[flow_id] -> switch ids on the path
    :param switch_flows: reverse relation from generate_switch_flow_list; built from paths when omitted
    :param observer: receives every step and the infeasibility report
    :param strategy: 'scan' rescans every switch per step, 'heap' keeps lazily refreshed gains in a heap;
        both choose the same switches in the same order
    """
    if strategy not in STRATEGIES:
        raise ValueError(f'unknown strategy {strategy!r}, expected one of {STRATEGIES}')
    if len(paths) != n_flows:
        raise InvalidIndexError(f'got {len(paths)} paths for {n_flows} flows')
    if switch_flows is None:
        switch_flows = generate_switch_flow_list(n_switches, paths)
    elif len(switch_flows) != n_switches:
        raise InvalidIndexError(f'got {len(switch_flows)} switch flow lists for {n_switches} switches')
    else:
        for switch_id, flows in enumerate(switch_flows):
            for f in flows:
                if not 0 <= f < n_flows:
                    raise InvalidIndexError(f'switch {switch_id} references flow {f}, valid range is [0, {n_flows})')
    if observer is None:
        observer = CoverObserver()

    covered = [False] * n_flows
    chosen = [False] * n_switches
    steps: list[CoverStep] = []
    covered_count = 0

    if strategy == 'heap':
        queue = _LazyGainQueue(switch_flows)

        def pick():
            return queue.pop_best(covered)
    else:
        def pick():
            return _scan_best_switch(switch_flows, covered, chosen)

    while covered_count < n_flows:
        best_switch, best_gain = pick()
        if best_switch == -1:
            break

        chosen[best_switch] = True
        for f in switch_flows[best_switch]:
            if not covered[f]:
                covered[f] = True
                covered_count += 1

        step = CoverStep(len(steps) + 1, best_switch, best_gain, covered_count)
        steps.append(step)
        logger.debug('Step %d: chose switch %d (gain = %d, total covered = %d/%d)',
                     step.step, step.switch, step.gain, step.covered, n_flows)
        observer.on_step(step, n_flows)

    uncovered_flows = [f for f, c in enumerate(covered) if not c]
    if uncovered_flows:
        logger.warning('Not all flows could be covered with the available switches: %d of %d uncovered.',
                       len(uncovered_flows), n_flows)
        observer.on_infeasible(uncovered_flows, n_flows)
    else:
        logger.debug('All flows have been successfully covered.')

    return CoverResult(chosen, steps, covered_count, uncovered_flows)
