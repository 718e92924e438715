import argparse

from switchcover.utils.DatasetLoader import write_dataset_csv
from switchcover.utils.FlowGenerator import generate_random_flows
from switchcover.utils.GraphGenerator import RANDOM_TYPES, generate_topology


def main(argv=None):
    parser = argparse.ArgumentParser(description='Generate a random flow/switch dataset')
    parser.add_argument('--num-switches', default=100, type=int)
    parser.add_argument('--num-flows', default=10000, type=int)
    parser.add_argument('--random-type', default='erdos-renyi', choices=RANDOM_TYPES)
    parser.add_argument('--erdos-renyi-prob', default=0.1, type=float)
    parser.add_argument('--waxman-alpha', default=0.5, type=float)
    parser.add_argument('--waxman-beta', default=0.5, type=float)
    parser.add_argument('--seed', default=None, type=int)
    parser.add_argument('--output', default='flows_10k_100s.csv')
    args = parser.parse_args(argv)

    topology = generate_topology(
        args.random_type,
        args.num_switches,
        prob=args.erdos_renyi_prob,
        waxman_alpha=args.waxman_alpha,
        waxman_beta=args.waxman_beta,
        seed=args.seed,
    )
    flows = generate_random_flows(args.num_flows, topology, seed=args.seed)
    write_dataset_csv(flows, args.output)
    print(f'{len(flows)} flows over {args.num_switches} switches written to {args.output}')


if __name__ == '__main__':
    main()
