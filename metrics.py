"""
Performance metrics for disk scheduling policies.

Per request:
1. Turnaround: end_time - arrival_time (lower is better)
2. Wait: start_time - arrival_time, time spent queued before dispatch (lower is better)

Per run:
3. Utilization: fraction of ticks the head spent seeking (0–1)
4. Average turnaround, average wait, maximum wait, P95 wait
5. Total ticks and total head movement (taken from the simulator counters)

All metrics are computed once the run has completed.
"""
import numpy as np


def turnaround(request):
    return request.end_time - request.arrival_time


def wait_time(request):
    return request.start_time - request.arrival_time


def _finished(requests):
    return [r for r in requests if r.start_time is not None and r.end_time is not None]


def avg_turnaround(requests):
    finished = _finished(requests)
    if not finished:
        return 0.0
    return float(np.mean([turnaround(r) for r in finished]))


def avg_wait(requests):
    finished = _finished(requests)
    if not finished:
        return 0.0
    return float(np.mean([wait_time(r) for r in finished]))


def max_wait(requests):
    finished = _finished(requests)
    if not finished:
        return 0
    return int(np.max([wait_time(r) for r in finished]))


def p95_wait(requests):
    """
    95th percentile of wait time across finished requests.

    Tail waits expose starvation (SSTF, LOOK) that averages hide.
    """
    finished = _finished(requests)
    if not finished:
        return 0.0
    return float(np.percentile([wait_time(r) for r in finished], 95))


def utilization(busy_time, total_time):
    """
    Utilization = ticks spent seeking / total ticks.
    Returns a value in [0, 1]; an empty run (zero ticks) counts as 0.
    """
    if total_time <= 0:
        return 0.0
    return busy_time / total_time


def summarize(sim):
    """
    Reduce a completed simulation into its summary metrics.

    Args:
        sim: Simulator instance after run()

    Returns:
        dict with total_time, total_movement, io_utilization, avg_turnaround,
        avg_wait, max_wait and p95_wait
    """
    requests = sim.requests
    return {
        'total_time': sim.time,
        'total_movement': sim.movement,
        'io_utilization': utilization(sim.busy_time, sim.time),
        'avg_turnaround': avg_turnaround(requests),
        'avg_wait': avg_wait(requests),
        'max_wait': max_wait(requests),
        'p95_wait': p95_wait(requests),
    }
