import argparse
import logging
import sys
from timeit import default_timer as timer

from switchcover.solver.PulpSolver import BACKENDS
from switchcover.solver.SolverTemplate import DEFAULT_MIP_GAP, DEFAULT_TIME_LIMIT
from switchcover.solver.Solvers import SOLVERS, make_solver
from switchcover.utils.DatasetLoader import load_dataset_csv
from switchcover.utils.Errors import InfeasibleCoverage
from switchcover.utils.SelectionWriter import write_selected_switches
from switchcover.utils.SetCover import PrintObserver, STRATEGIES, count_covered_flows

DEFAULT_DATASET = 'flows_10k_100s.csv'
DEFAULT_GREEDY_OUTPUT = 'selected_switches_greedy.txt'
DEFAULT_OUTPUT = 'selected_switches.txt'


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Pick a small set of switches that covers every flow')
    parser.add_argument('dataset', nargs='?', default=DEFAULT_DATASET, help='CSV with a header and flow_id,switch_id rows')
    parser.add_argument('--solver', default='greedy', choices=sorted(SOLVERS))
    parser.add_argument('--strategy', default='scan', choices=STRATEGIES, help='greedy only')
    parser.add_argument('--backend', default='cbc', choices=BACKENDS, help='ilp only')
    parser.add_argument('--time-limit', default=DEFAULT_TIME_LIMIT, type=float, help='ilp/gurobi, in seconds')
    parser.add_argument('--mip-gap', default=DEFAULT_MIP_GAP, type=float, help='ilp/gurobi, relative gap')
    parser.add_argument('--output', default=None, help='file receiving the selected switch ids')
    parser.add_argument('--quiet', action='store_true', help='do not print every greedy step')
    parser.add_argument('--verbose', action='store_true', help='debug logging')
    parser.add_argument('--strict', action='store_true', help='exit with status 1 if some flows stay uncovered')
    return parser.parse_args(argv)


def solver_kwargs(args) -> dict:
    if args.solver == 'greedy':
        return {'strategy': args.strategy, 'observer': None if args.quiet else PrintObserver()}
    kwargs = {'time_limit': args.time_limit, 'mip_gap': args.mip_gap}
    if args.solver == 'ilp':
        kwargs['backend'] = args.backend
    else:
        kwargs['log_file'] = 'gurobi.log'
    return kwargs


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    output = args.output or (DEFAULT_GREEDY_OUTPUT if args.solver == 'greedy' else DEFAULT_OUTPUT)

    n_flows, n_switches, paths = load_dataset_csv(args.dataset)
    print('Loaded dataset:')
    print(f'  Flows    : {n_flows}')
    print(f'  Switches : {n_switches}')

    solver = make_solver(args.solver, **solver_kwargs(args))
    start = timer()
    result = solver.solve(n_flows, n_switches, paths)
    runtime = timer() - start

    solver.info(f'Chosen switches ({solver.name} solution)')
    for switch_id in result.selected_switches:
        print(f'  switch {switch_id}')
    print(f'Total chosen switches = {result.num_chosen} / {n_switches}')
    print(f'{solver.name} runtime = {runtime:.6f} seconds')

    covered_flows = count_covered_flows(n_flows, paths, result.chosen)
    print(f'Flows actually covered = {covered_flows} / {n_flows}')
    if covered_flows != n_flows:
        print('Warning: not all flows are covered! (may be due to empty paths)')

    write_selected_switches(result.chosen, output)
    print(f'Selected switches written to {output}')

    if args.strict:
        try:
            result.raise_for_infeasible()
        except InfeasibleCoverage as e:
            print(f'Error: {e}', file=sys.stderr)
            return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
