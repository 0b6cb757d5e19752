"""
I/O request workloads.

Two sources of requests:
- Input files: one "arrival_time target_track" pair per line, '#' lines are comments
- Synthetic workloads: Poisson arrivals with uniformly distributed target tracks

Input files are expected to be sorted by arrival time already; they are not
re-sorted. Synthetic workloads support Common Random Numbers (CRN) through a
configurable seed, so every policy can be run against the same request stream.
"""
import numpy as np
from io_requests import IORequest
from errors import InputUnavailableError, MalformedInputError


def parse_requests(lines, path="<input>"):
    """
    Parse request lines into IORequest objects, numbered in input order.

    Blank lines and lines starting with '#' are skipped.
    """
    requests = []
    for line_number, line in enumerate(lines, start=1):
        if line.startswith('#') or not line.strip():
            continue
        fields = line.split()
        try:
            arrival_time, target_track = int(fields[0]), int(fields[1])
        except (IndexError, ValueError):
            raise MalformedInputError(path, line_number, line)
        requests.append(IORequest(len(requests), arrival_time, target_track))
    return requests


def load_requests(path):
    try:
        with open(path, 'r') as f:
            lines = f.readlines()
    except OSError:
        raise InputUnavailableError(path)
    return parse_requests(lines, path)


def generate_requests(
    num_requests=100,
    arrival_rate=0.1,   # requests per tick
    max_track=199,      # highest track number on the disk
    seed=42
):
    """
    Generate a synthetic workload of I/O requests.
    Returns a list of IORequest objects sorted by arrival time.

    Args:
        num_requests: number of requests to generate
        arrival_rate: mean arrivals per tick (interarrival ~ Exponential(1/rate))
        max_track: target tracks are drawn uniformly from [0, max_track]
        seed: numpy seed for reproducible workloads
    """
    np.random.seed(seed)

    requests = []
    t = 0.0
    for rid in range(num_requests):
        # Interarrival time ~ Exponential(lambda = arrival_rate), truncated to whole ticks
        t += np.random.exponential(1.0 / arrival_rate)
        arrival_time = int(t)
        target_track = int(np.random.randint(0, max_track + 1))
        requests.append(IORequest(rid, arrival_time, target_track))

    return requests
