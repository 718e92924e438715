import logging
from typing import Optional

from switchcover.utils.Errors import SolverError
from switchcover.utils.SetCover import CoverResult
from .SolverTemplate import DEFAULT_MIP_GAP, DEFAULT_TIME_LIMIT, SolverTemplate, flow_constraints

logger = logging.getLogger(__name__)


class GurobiSolver(SolverTemplate):
    """
    Minimum switch cover solved with Gurobi under a time limit and a relative MIP gap.
    A solution hitting the time limit is accepted as long as Gurobi found one.
    gurobipy is an optional dependency (the 'gurobi' extra) and is imported on first solve.
    """
    name = 'gurobi'
    time_limit: float
    mip_gap: float
    presolve: int
    threads: int  # 0 uses all cores
    log_file: Optional[str]
    verbose: bool

    def __init__(self, time_limit: float = DEFAULT_TIME_LIMIT, mip_gap: float = DEFAULT_MIP_GAP,
                 presolve: int = 2, threads: int = 0, log_file: Optional[str] = None, verbose: bool = False):
        self.time_limit = time_limit
        self.mip_gap = mip_gap
        self.presolve = presolve
        self.threads = threads
        self.log_file = log_file
        self.verbose = verbose

    def solve(self, n_flows: int, n_switches: int, paths: list[list[int]]) -> CoverResult:
        import gurobipy as gp
        from gurobipy import GRB

        rows, _ = flow_constraints(n_flows, n_switches, paths)
        if not rows:
            return CoverResult.from_selection(n_flows, paths, [False] * n_switches)

        try:
            with gp.Env(empty=True) as env:
                env.setParam('OutputFlag', 1 if self.verbose else 0)
                if self.log_file:
                    env.setParam('LogFile', self.log_file)
                env.start()
                with gp.Model('switch_set_cover', env=env) as model:
                    x = model.addVars(n_switches, vtype=GRB.BINARY, obj=1.0, name='switch')
                    for flow_id, switches in rows:
                        model.addConstr(gp.quicksum(x[s] for s in switches) >= 1, name=f'flow_{flow_id}')
                    model.ModelSense = GRB.MINIMIZE

                    model.setParam('TimeLimit', self.time_limit)
                    model.setParam('MIPGap', self.mip_gap)
                    model.setParam('Presolve', self.presolve)
                    model.setParam('Threads', self.threads)
                    model.optimize()

                    if model.Status not in (GRB.OPTIMAL, GRB.TIME_LIMIT) or model.SolCount == 0:
                        raise SolverError(f'No feasible solution found, status = {model.Status}')

                    chosen = [x[j].X > 0.5 for j in range(n_switches)]
                    logger.info('Best solution found = %g switches', model.ObjVal)
                    logger.info('Final MIP gap = %.4g%%', model.MIPGap * 100)
        except gp.GurobiError as e:
            raise SolverError(f'Gurobi error: {e}') from e

        return CoverResult.from_selection(n_flows, paths, chosen)
