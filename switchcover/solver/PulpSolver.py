import logging

from pulp import (GLPK_CMD, PULP_CBC_CMD, LpMinimize, LpProblem, LpSolutionIntegerFeasible, LpSolutionOptimal,
                  LpStatus, LpVariable, lpSum)

from switchcover.utils.Errors import SolverError
from switchcover.utils.SetCover import CoverResult
from .SolverTemplate import DEFAULT_MIP_GAP, DEFAULT_TIME_LIMIT, SolverTemplate, flow_constraints

logger = logging.getLogger(__name__)

BACKENDS = ('cbc', 'glpk')


class PulpSolver(SolverTemplate):
    """
    Exact minimum switch cover as a binary ILP solved through PuLP:
    minimize sum x_s subject to sum_{s in path(f)} x_s >= 1 for every flow f.
    The 'cbc' backend uses the CBC binary bundled with PuLP, 'glpk' needs glpsol on the PATH.
    """
    name = 'ilp'
    backend: str
    time_limit: float
    mip_gap: float
    msg: bool

    def __init__(self, backend: str = 'cbc', time_limit: float = DEFAULT_TIME_LIMIT,
                 mip_gap: float = DEFAULT_MIP_GAP, msg: bool = False):
        if backend not in BACKENDS:
            raise ValueError(f'unknown backend {backend!r}, expected one of {BACKENDS}')
        self.backend = backend
        self.time_limit = time_limit
        self.mip_gap = mip_gap
        self.msg = msg

    def _make_backend(self):
        if self.backend == 'glpk':
            return GLPK_CMD(msg=self.msg, timeLimit=self.time_limit, options=['--mipgap', str(self.mip_gap)])
        return PULP_CBC_CMD(msg=self.msg, timeLimit=self.time_limit, gapRel=self.mip_gap)

    def solve(self, n_flows: int, n_switches: int, paths: list[list[int]]) -> CoverResult:
        rows, _ = flow_constraints(n_flows, n_switches, paths)
        if not rows:
            # nothing coverable; an empty selection is optimal
            return CoverResult.from_selection(n_flows, paths, [False] * n_switches)

        prob = LpProblem('switch_set_cover', LpMinimize)
        x = [LpVariable(f'switch_{j}', cat='Binary') for j in range(n_switches)]
        prob += lpSum(x)
        for flow_id, switches in rows:
            prob += lpSum(x[s] for s in switches) >= 1, f'flow_{flow_id}'

        prob.solve(self._make_backend())
        if prob.sol_status not in (LpSolutionOptimal, LpSolutionIntegerFeasible):
            raise SolverError(f'No feasible MIP solution found, status = {LpStatus[prob.status]}')

        chosen = [x[j].varValue is not None and x[j].varValue > 0.5 for j in range(n_switches)]
        logger.info('%s objective = %s switches (%s)', self.backend, prob.objective.value(), LpStatus[prob.status])
        return CoverResult.from_selection(n_flows, paths, chosen)
