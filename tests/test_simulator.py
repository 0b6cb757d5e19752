"""
Tests for the tick-driven simulation kernel.
"""
import pytest
from test_utils import *
from disk import Disk, BACKWARD
from policies.registry import POLICIES, create_policy
from policies.fcfs import FCFS
from policies.look import LOOK
from simulator import Simulator


def test_empty_input_terminates_immediately():
    """Test that a run with no requests ends at tick 0."""
    result = run_policy_test(FCFS(), [])
    assert result['total_time'] == 0
    assert result['movement'] == 0
    assert result['finished_requests'] == []


def test_request_on_current_track_costs_no_ticks():
    """Test that a request on the head's track is dispatched and completed in one tick."""
    requests = create_test_requests([(0, 0)])
    result = run_policy_test(FCFS(), requests)

    assert (requests[0].start_time, requests[0].end_time) == (0, 0)
    assert result['total_time'] == 0
    assert result['movement'] == 0


def test_idle_until_first_arrival():
    """Test that the clock runs through idle ticks until a request arrives."""
    requests = create_test_requests([(3, 0)])
    result = run_policy_test(FCFS(), requests)

    assert (requests[0].start_time, requests[0].end_time) == (3, 3)
    assert result['total_time'] == 3
    assert result['simulator'].busy_time == 0


def test_idle_gap_between_requests():
    """Test that idle ticks between requests count towards total time but not busy time."""
    requests = create_test_requests([(0, 5), (20, 10)])
    result = run_policy_test(FCFS(), requests)
    sim = result['simulator']

    assert requests[0].end_time == 5
    assert (requests[1].start_time, requests[1].end_time) == (20, 25)
    assert result['total_time'] == 25
    assert result['movement'] == 10
    assert sim.busy_time == 10


def test_completion_and_redispatch_share_a_tick(two_requests):
    """Test that the next request starts on the tick the previous one finished."""
    run_policy_test(FCFS(), two_requests)
    assert two_requests[1].start_time == two_requests[0].end_time


def test_head_starts_at_origin():
    """Test that the head starts at the configured origin and can move backward."""
    requests = create_test_requests([(0, 90)])
    result = run_policy_test(FCFS(), requests, origin=100)

    assert requests[0].end_time == 10
    assert result['simulator'].disk.track == 90
    assert result['simulator'].disk.direction == BACKWARD


def test_all_due_requests_admitted_per_tick(three_requests):
    """Test the default admission: every request due this tick is admitted together."""
    result = run_policy_test(LOOK(), three_requests)
    assert result['order'] == [2, 0, 1]
    assert all(r.start_time >= 0 for r in three_requests)


def test_single_admission_per_tick(three_requests):
    """Test the legacy admission: one request per tick, the rest lag a tick each."""
    result = run_policy_test(LOOK(), three_requests, admit_all=False)
    requests = result['requests']

    # Only request 0 is queued at tick 0, so it is dispatched before the nearer track 5
    assert result['order'] == [0, 1, 2]
    assert (requests[1].start_time, requests[1].end_time) == (10, 20)
    assert (requests[2].start_time, requests[2].end_time) == (20, 35)
    assert result['total_time'] == 35


def test_single_admission_delays_same_tick_arrivals():
    """Test that requests sharing an arrival tick are admitted on consecutive ticks."""
    pairs = [(0, 0), (0, 0), (0, 0)]

    together = run_policy_test(FCFS(), create_test_requests(pairs))
    one_by_one = run_policy_test(FCFS(), create_test_requests(pairs), admit_all=False)

    assert together['total_time'] == 0
    assert [r.start_time for r in together['finished_requests']] == [0, 0, 0]
    assert one_by_one['total_time'] == 2
    assert [r.start_time for r in one_by_one['finished_requests']] == [0, 1, 2]


@pytest.mark.parametrize("letter", sorted(POLICIES))
def test_every_request_completes(letter, random_workload):
    """Test that no policy loses a request and every timeline is ordered."""
    result = run_policy_test(create_policy(letter), random_workload)

    assert sorted(result['order']) == [r.rid for r in random_workload], "Each request completes exactly once"
    assert_conserved(random_workload)
    assert not result['policy'].has_pending()


@pytest.mark.parametrize("letter", sorted(POLICIES))
def test_movement_matches_busy_ticks(letter, random_workload):
    """Test that every busy tick moved the head by exactly one track."""
    result = run_policy_test(create_policy(letter), random_workload)
    sim = result['simulator']

    assert sim.movement == sim.busy_time
    assert sim.busy_time <= sim.time
    # The head moves in straight lines between recorded dispatch/completion points
    travelled = sum(abs(b[1] - a[1]) for a, b in zip(sim.history, sim.history[1:]))
    assert travelled == sim.movement


@pytest.mark.parametrize("letter", sorted(POLICIES))
def test_replay_is_deterministic(letter, random_workload):
    """Test that rerunning one Simulator resets state and reproduces the same timeline."""
    sim = Simulator(Disk(), random_workload, create_policy(letter))
    sim.run()
    first = [(r.rid, r.start_time, r.end_time) for r in random_workload]
    first_counters = (sim.time, sim.movement, sim.busy_time)

    sim.run()
    second = [(r.rid, r.start_time, r.end_time) for r in random_workload]

    assert first == second
    assert (sim.time, sim.movement, sim.busy_time) == first_counters


def test_verbose_trace(capsys):
    """Test the add/issue/finish trace format."""
    sim = Simulator(Disk(), create_test_requests([(0, 2)]), FCFS(), verbose=True)
    sim.run()

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "TRACE",
        "0:     0 add 2",
        "0:     0 issue 2 0",
        "2:     0 finish 2",
    ]


def test_quiet_run_prints_nothing(capsys, two_requests):
    """Test that a run without trace flags prints nothing."""
    Simulator(Disk(), two_requests, FCFS()).run()
    assert capsys.readouterr().out == ""


def test_queue_trace(capsys, two_requests):
    """Test that -q style tracing shows the queue before each dispatch."""
    Simulator(Disk(), two_requests, create_policy("S"), show_queue=True).run()

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "\tGet: (0:50:50) (1:30:30) dir=FORWARD"
    assert len(lines) == 2


def test_flook_trace_only_for_flook(capsys, two_requests):
    """Test that -f style tracing prints staging state for FLOOK only."""
    Simulator(Disk(), two_requests, create_policy("N"), show_flook=True).run()
    assert capsys.readouterr().out == ""

    Simulator(Disk(), two_requests, create_policy("F"), show_flook=True).run()
    out = capsys.readouterr().out
    assert "\tactive=[] staging=[(0:50)] swaps=0" in out.splitlines()
    assert "swaps=1" in out
