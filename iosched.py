#!/usr/bin/env python3
"""
Disk I/O scheduling simulator.

Replays an input file of "arrival_time target_track" requests against one
scheduling policy and prints per-request timings plus a summary line.

Usage:
    python iosched.py [-v] [-q] [-f] [-s<schedalgo>] inputfile

Options:
    -v    per-event trace (add / issue / finish)
    -q    show the policy queue before every dispatch
    -f    show FLOOK active/staging queues
    -s    policy letter: N (FCFS), S (SSTF), L (LOOK), C (CLOOK), F (FLOOK)
"""
import argparse
import sys

import metrics
from disk import Disk
from errors import IOSchedError, UsageError
from policies.registry import create_policy
from simulator import Simulator
from workload import load_requests

DEFAULT_POLICY = "N"


class _ArgumentParser(argparse.ArgumentParser):
    # argparse exits with status 2 on bad options; usage errors here exit with 1
    def error(self, message):
        raise UsageError()


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = _ArgumentParser(prog="iosched", add_help=False)
    parser.add_argument('-v', dest='verbose', action='store_true')
    parser.add_argument('-q', dest='show_queue', action='store_true')
    parser.add_argument('-f', dest='show_flook', action='store_true')
    parser.add_argument('-s', dest='policy', default=DEFAULT_POLICY)
    parser.add_argument('inputfile', nargs='?')
    return parser.parse_args(argv)


def format_request(request):
    return f"{request.rid:5d}: {request.arrival_time:5d} {request.start_time:5d} {request.end_time:5d}"


def format_summary(summary):
    return (f"SUM: {summary['total_time']} {summary['total_movement']} "
            f"{summary['io_utilization']:.4f} {summary['avg_turnaround']:.2f} "
            f"{summary['avg_wait']:.2f} {summary['max_wait']}")


def print_results(requests, summary):
    for request in requests:
        print(format_request(request))
    print(format_summary(summary))


def main(argv=None):
    try:
        args = parse_args(argv)
        policy = create_policy(args.policy)
        if args.inputfile is None:
            raise UsageError("Not a valid inputfile <(null)>")
        requests = load_requests(args.inputfile)
    except IOSchedError as e:
        print(e, file=sys.stderr)
        return e.exit_code

    sim = Simulator(Disk(), requests, policy,
                    verbose=args.verbose, show_queue=args.show_queue, show_flook=args.show_flook)
    sim.run()
    print_results(requests, metrics.summarize(sim))
    return 0


if __name__ == "__main__":
    sys.exit(main())
