#!/usr/bin/env python3
"""
Generate figures for disk scheduling policy comparisons.

Figures:
1. Metric bars: mean ± 95% CI per policy, loaded from compare_policies.py CSV output
2. Head trajectory: head track over time for every policy replaying one input file
"""
import argparse
import csv
import os
import sys

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt

from disk import Disk
from policies.registry import create_policy
from simulator import Simulator
from workload import load_requests

# Global styling, shared by all figures
COLORS = {
    'FCFS': '#808080',   # gray
    'SSTF': '#1f77b4',   # blue
    'LOOK': '#ff7f0e',   # orange
    'CLOOK': '#2ca02c',  # green
    'FLOOK': '#d62728',  # red
}

POLICY_ORDER = ["FCFS", "SSTF", "LOOK", "CLOOK", "FLOOK"]
POLICY_LETTERS = {"FCFS": "N", "SSTF": "S", "LOOK": "L", "CLOOK": "C", "FLOOK": "F"}
PLOTTED_METRICS = [
    ('total_movement', 'Total head movement (tracks)'),
    ('io_utilization', 'I/O utilization'),
    ('avg_wait', 'Average wait (ticks)'),
    ('p95_wait', 'P95 wait (ticks)'),
]


def load_stats(csv_file="policy_comparison.csv"):
    """Load pre-computed stats written by compare_policies.py."""
    if not os.path.exists(csv_file):
        print(f"✗ {csv_file} not found")
        print("  Run: python compare_policies.py")
        sys.exit(1)

    stats = {}
    with open(csv_file, 'r') as f:
        reader = csv.DictReader(f)
        for row in reader:
            stats[(row['Policy'], row['Metric'])] = {
                'mean': float(row['Mean']),
                'ci_lower': float(row['CILower']),
                'ci_upper': float(row['CIUpper']),
                'median': float(row['Median']),
            }

    print(f"✓ Loaded pre-computed stats from {csv_file}")
    return stats


def plot_metric_bars(stats, output_file):
    policies = [p for p in POLICY_ORDER if any(key[0] == p for key in stats)]
    fig, axes = plt.subplots(1, len(PLOTTED_METRICS), figsize=(4 * len(PLOTTED_METRICS), 4))

    for ax, (metric, label) in zip(axes, PLOTTED_METRICS):
        means = []
        errors = []
        for policy in policies:
            stat = stats.get((policy, metric), {'mean': 0.0, 'ci_lower': 0.0, 'ci_upper': 0.0})
            means.append(stat['mean'])
            errors.append(stat['ci_upper'] - stat['mean'])
        ax.bar(policies, means, yerr=errors, capsize=4,
               color=[COLORS[p] for p in policies], edgecolor='black', linewidth=0.5)
        ax.set_title(label, fontsize=10)
        ax.tick_params(axis='x', labelsize=8)
        ax.grid(axis='y', alpha=0.3)

    fig.tight_layout()
    fig.savefig(output_file, dpi=150)
    plt.close(fig)
    print(f"✓ Saved {output_file}")


def head_histories(input_file):
    """Replay input_file under every policy and return {policy: [(tick, track), ...]}."""
    histories = {}
    for policy in POLICY_ORDER:
        requests = load_requests(input_file)
        sim = Simulator(Disk(), requests, create_policy(POLICY_LETTERS[policy]))
        sim.run()
        histories[policy] = sim.history
    return histories


def plot_head_trace(input_file, output_file):
    histories = head_histories(input_file)
    fig, axes = plt.subplots(len(histories), 1, figsize=(10, 2.2 * len(histories)), sharex=True)

    for ax, (policy, history) in zip(axes, histories.items()):
        ticks = [tick for tick, _ in history]
        tracks = [track for _, track in history]
        ax.plot(ticks, tracks, marker='o', markersize=2, linewidth=1, color=COLORS[policy])
        ax.set_ylabel(policy, fontsize=9)
        ax.grid(alpha=0.3)
    axes[-1].set_xlabel('Tick')

    fig.suptitle(f"Head position: {os.path.basename(input_file)}", fontsize=11)
    fig.tight_layout()
    fig.savefig(output_file, dpi=150)
    plt.close(fig)
    print(f"✓ Saved {output_file}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Plot disk scheduling policy comparison results")
    parser.add_argument('--csv', default='policy_comparison.csv',
                        help='Stats CSV written by compare_policies.py (default: policy_comparison.csv)')
    parser.add_argument('--trace', default=None,
                        help='Input file to replay for a head trajectory figure')
    parser.add_argument('--out-dir', default='figures',
                        help='Directory for the generated figures (default: figures)')
    args = parser.parse_args(argv)

    os.makedirs(args.out_dir, exist_ok=True)
    if args.trace is not None:
        plot_head_trace(args.trace, os.path.join(args.out_dir, 'head_trace.png'))
    else:
        stats = load_stats(args.csv)
        plot_metric_bars(stats, os.path.join(args.out_dir, 'policy_metrics.png'))
    return 0


if __name__ == "__main__":
    sys.exit(main())
