import os
import time

import pandas as pd

from switchcover.solver.GreedySolver import GreedySolver
from switchcover.solver.PulpSolver import PulpSolver
from switchcover.utils import FlowGenerator
from switchcover.utils import GraphGenerator

# Compares the number of switches picked by the greedy heuristic with the ILP optimum.
erdos_renyi_graph = GraphGenerator.erdos_renyi_generator(n=20, p=0.1, seed=1)
waxman_graph = GraphGenerator.waxman_generator_1(n=20, alpha=0.5, beta=0.5, seed=1)

graphs = {
    'Erdos-Renyi': erdos_renyi_graph,
    'Waxman': waxman_graph
}

number_of_flows = [i for i in range(100, 1001, 100)]
solvers = [GreedySolver(strategy='heap'), PulpSolver(time_limit=60)]

results = []

for name, graph in graphs.items():
    max_flows = FlowGenerator.count_distinct_flows(graph, limit=max(number_of_flows))
    for flow_count in number_of_flows:
        if flow_count > max_flows:
            print(f'{name}: cannot host {flow_count} distinct flows, skipped')
            continue
        flows = FlowGenerator.generate_random_flows(flow_count, graph, seed=flow_count)
        row = {'Graph': name, 'Number of Flows': flow_count, 'Number of Switches': graph.number_of_nodes()}
        for solver in solvers:
            result = solver.solve(len(flows), graph.number_of_nodes(), flows)
            row[f'{solver.name} Switches'] = result.num_chosen
        results.append(row)
        print(row)

timestamp = time.strftime("%Y%m%d-%H%M%S")
filename = f"data/figure_4_{timestamp}.csv"

# Ensure the data directory exists
os.makedirs(os.path.dirname(filename), exist_ok=True)

df = pd.DataFrame(results)
df.to_csv(filename, index=False)

print(f"Results saved to {filename}")
