class InvalidIndexError(ValueError):
    """A flow or switch index lies outside its declared range."""


class InfeasibleCoverage(Exception):
    """
    Some flows can never be covered because no switch on their path exists.
    Carries the uncovered flow ids so the caller can decide whether a partial cover is acceptable.
    """
    uncovered_flows: list[int]
    n_flows: int

    def __init__(self, uncovered_flows: list[int], n_flows: int):
        self.uncovered_flows = uncovered_flows
        self.n_flows = n_flows
        super().__init__(f'{len(uncovered_flows)} of {n_flows} flows cannot be covered')


class SolverError(RuntimeError):
    """An exact solver back end finished without a usable solution."""
