from .GreedySolver import GreedySolver
from .GurobiSolver import GurobiSolver
from .PulpSolver import PulpSolver
from .SolverTemplate import SolverTemplate

SOLVERS: dict[str, type[SolverTemplate]] = {
    GreedySolver.name: GreedySolver,
    PulpSolver.name: PulpSolver,
    GurobiSolver.name: GurobiSolver,
}


def make_solver(name: str, **kwargs) -> SolverTemplate:
    try:
        solver_class = SOLVERS[name]
    except KeyError:
        raise ValueError(f'unknown solver {name!r}, expected one of {sorted(SOLVERS)}')
    return solver_class(**kwargs)
