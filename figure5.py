import csv
import os
import sys
from timeit import default_timer as timer

from switchcover.utils import FlowGenerator
from switchcover.utils import GraphGenerator
from switchcover.utils import SetCover

TIMING_FILE = 'data/timing_results.csv'

num_flows = int(sys.argv[1])
strategy = sys.argv[2] if len(sys.argv) > 2 else 'scan'

erdos_renyi_graph = GraphGenerator.erdos_renyi_generator(n=50, p=0.1)


def save_timing_results(num_flows, strategy, construction_time, calc_time, num_chosen):
    # Ensure the data directory exists
    os.makedirs(os.path.dirname(TIMING_FILE), exist_ok=True)

    # Append results to the CSV file
    with open(TIMING_FILE, 'a', newline='') as csvfile:
        csvwriter = csv.writer(csvfile)
        if csvfile.tell() == 0:  # Check if file is empty to write header
            csvwriter.writerow(['Number of Active Flows', 'Strategy', 'Construction Time (ms)',
                                'Calculation Time (ms)', 'Chosen Switches'])
        csvwriter.writerow([num_flows, strategy, construction_time * 1000, calc_time * 1000, num_chosen])


flows = FlowGenerator.generate_random_flows(num_flows, erdos_renyi_graph)
n_switches = erdos_renyi_graph.number_of_nodes()
# Construction Timer
construction_time_start = timer()
switch_flows = FlowGenerator.generate_switch_flow_list(n_switches, flows)
construction_time_elapsed = timer() - construction_time_start
# Calculate Timer
calc_time_start = timer()
result = SetCover.set_cover_solve(len(flows), n_switches, flows, switch_flows, strategy=strategy)
calc_time_elapsed = timer() - calc_time_start
# Save Result
save_timing_results(len(flows), strategy, construction_time_elapsed, calc_time_elapsed, result.num_chosen)
print(f'{len(flows)} flows: construction {construction_time_elapsed * 1000:.2f} ms, '
      f'calculation ({strategy}) {calc_time_elapsed * 1000:.2f} ms, {result.num_chosen} switches')
