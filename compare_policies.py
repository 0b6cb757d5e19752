"""
Multi-seed comparison of disk scheduling policies.

Uses Common Random Numbers (CRN) for variance reduction across policies: every
policy replays the same generated workload for a given seed. Reports mean ± 95%
confidence intervals for all metrics and saves raw and summarised results for
plotting.

Usage:
    python compare_policies.py                       # Default: 20 seeds, random base
    python compare_policies.py --seeds 50            # Override to 50 seeds
    python compare_policies.py --base-seed 42        # Reproducible: seeds 42-61
    python compare_policies.py --arrival-rate 0.05   # Lighter load
"""

import argparse
import csv
import json
import sys
from copy import deepcopy
from datetime import datetime

import numpy as np

import metrics
from disk import Disk
from policies.registry import create_policy
from simulator import Simulator
from workload import generate_requests

DEBUG = False

POLICY_ORDER = ["N", "S", "L", "C", "F"]
POLICY_NAMES = {"N": "FCFS", "S": "SSTF", "L": "LOOK", "C": "CLOOK", "F": "FLOOK"}
METRIC_NAMES = ['total_time', 'total_movement', 'io_utilization', 'avg_turnaround', 'avg_wait', 'max_wait',
                'p95_wait']


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Multi-seed disk scheduling policy comparison with CRN",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python compare_policies.py                 # Default: 20 seeds, random base
  python compare_policies.py --seeds 50      # Run 50 seeds
  python compare_policies.py --base-seed 42  # Reproducible: seeds 42-61
        """
    )
    parser.add_argument('--seeds', type=int, default=20,
                        help='Number of seeds to run (default: 20)')
    parser.add_argument('--base-seed', type=int, default=None,
                        help='Base seed for reproducibility (default: random). Seeds will be base_seed to base_seed+N-1')
    parser.add_argument('--num-requests', type=int, default=200,
                        help='Requests per workload (default: 200)')
    parser.add_argument('--arrival-rate', type=float, default=0.1,
                        help='Mean arrivals per tick (default: 0.1)')
    parser.add_argument('--max-track', type=int, default=199,
                        help='Highest track number (default: 199)')
    parser.add_argument('--output-prefix', default='policy_comparison',
                        help='Prefix for the .json and .csv result files (default: policy_comparison)')

    return parser.parse_args(argv)


def run_single_trial(seed, num_requests, arrival_rate, max_track):
    """Run all policies on the same workload (CRN)."""
    base_requests = generate_requests(
        num_requests=num_requests,
        arrival_rate=arrival_rate,
        max_track=max_track,
        seed=seed
    )

    results = {}
    for letter in POLICY_ORDER:
        requests = deepcopy(base_requests)
        sim = Simulator(Disk(), requests, create_policy(letter), verbose=DEBUG)
        finished = sim.run()

        summary = metrics.summarize(sim)
        summary['finished'] = len(finished)
        results[letter] = summary

    return results


def mean_ci(values):
    """Mean and half-width of the 95% normal-approximation confidence interval."""
    values = np.asarray(values, dtype=float)
    mean = np.mean(values)
    if len(values) < 2:
        return float(mean), 0.0
    std_err = np.std(values, ddof=1) / np.sqrt(len(values))
    return float(mean), float(1.96 * std_err)


def collect(seeds, num_requests, arrival_rate, max_track):
    """
    Run every seed and gather per-seed metric values.

    Returns:
        {policy_letter: {metric_name: [value per seed]}}
    """
    all_results = {letter: {name: [] for name in METRIC_NAMES + ['finished']} for letter in POLICY_ORDER}

    for seed in seeds:
        trial_results = run_single_trial(seed, num_requests, arrival_rate, max_track)
        for letter in POLICY_ORDER:
            for name, value in trial_results[letter].items():
                all_results[letter][name].append(value)

        print(f"{seed:>10}  ", end="")
        for letter in POLICY_ORDER:
            print(f"{trial_results[letter]['total_movement']:>10} ", end="")
        print()

    return all_results


def compute_stats(all_results):
    """Pre-compute mean, CI bounds and median for every (policy, metric)."""
    stats = {}
    for letter, policy_data in all_results.items():
        for metric_name in METRIC_NAMES:
            values = np.array(policy_data[metric_name], dtype=float)
            mean, half_width = mean_ci(values)
            stats[(POLICY_NAMES[letter], metric_name)] = {
                'mean': mean,
                'ci_lower': mean - half_width,
                'ci_upper': mean + half_width,
                'median': float(np.median(values)),
            }
    return stats


def print_summary(all_results, num_requests):
    print("-" * 120)
    print(f"{'Policy':<10}  {'Ticks':>16}  {'Movement':>16}  {'Util':>14}  "
          f"{'Avg TA':>14}  {'Avg Wait':>14}  {'P95 Wait':>14}  {'Compl %':>8}")
    print("-" * 120)

    for letter in POLICY_ORDER:
        data = all_results[letter]
        ticks, ticks_ci = mean_ci(data['total_time'])
        movement, movement_ci = mean_ci(data['total_movement'])
        util, util_ci = mean_ci(data['io_utilization'])
        turnaround, turnaround_ci = mean_ci(data['avg_turnaround'])
        wait, wait_ci = mean_ci(data['avg_wait'])
        p95, p95_ci = mean_ci(data['p95_wait'])
        compl_pct = np.mean(np.array(data['finished']) / num_requests) * 100 if num_requests else 100.0

        print(f"{POLICY_NAMES[letter]:<10}  "
              f"{ticks:>9.1f}±{ticks_ci:<6.1f}  "
              f"{movement:>9.1f}±{movement_ci:<6.1f}  "
              f"{util:>7.4f}±{util_ci:<6.4f}  "
              f"{turnaround:>7.1f}±{turnaround_ci:<6.1f}  "
              f"{wait:>7.1f}±{wait_ci:<6.1f}  "
              f"{p95:>7.1f}±{p95_ci:<6.1f}  "
              f"{compl_pct:>7.1f}%")


def save_results(all_results, stats, metadata, output_prefix):
    json_file = f"{output_prefix}.json"
    csv_file = f"{output_prefix}.csv"

    raw = {POLICY_NAMES[letter]: data for letter, data in all_results.items()}
    with open(json_file, 'w') as f:
        json.dump({'metadata': metadata, 'results': raw}, f, indent=2)
    print(f"\n✓ Results saved to {json_file}")

    with open(csv_file, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['Policy', 'Metric', 'Mean', 'CILower', 'CIUpper', 'Median'])
        for (policy, metric), stat in stats.items():
            writer.writerow([
                policy, metric,
                f"{stat['mean']:.6f}",
                f"{stat['ci_lower']:.6f}",
                f"{stat['ci_upper']:.6f}",
                f"{stat['median']:.6f}",
            ])
    print(f"✓ Pre-computed stats saved to {csv_file}")
    print("  Run: python plot_results.py --csv " + csv_file)
    return json_file, csv_file


def main(argv=None):
    args = parse_args(argv)
    base_seed = args.base_seed if args.base_seed is not None else int(np.random.randint(0, 2**31 - args.seeds))
    seeds = list(range(base_seed, base_seed + args.seeds))

    print("=" * 120)
    print(f"Disk Scheduling Policy Comparison: {args.seeds} Seeds with Common Random Numbers (CRN)")
    print("=" * 120)
    print(f"  Requests: {args.num_requests}, Arrival rate: {args.arrival_rate}/tick, Tracks: 0-{args.max_track}")
    print(f"  Seed range: {base_seed} to {base_seed + args.seeds - 1}")
    print()
    print(f"{'Seed':>10}  " + "".join(f"{POLICY_NAMES[letter]:>10} " for letter in POLICY_ORDER) + "(movement)")

    all_results = collect(seeds, args.num_requests, args.arrival_rate, args.max_track)
    print_summary(all_results, args.num_requests)

    metadata = {
        'seeds': seeds,
        'base_seed': base_seed,
        'num_requests': args.num_requests,
        'arrival_rate': args.arrival_rate,
        'max_track': args.max_track,
        'timestamp': datetime.now().isoformat(),
    }
    save_results(all_results, compute_stats(all_results), metadata, args.output_prefix)
    print(f"  Reproducibility: Run with --base-seed {base_seed} to recreate")
    return 0


if __name__ == "__main__":
    sys.exit(main())
