"""
Pytest configuration and shared fixtures for policy and simulator tests.
"""
import pytest
from test_utils import create_test_requests
from workload import generate_requests


@pytest.fixture
def two_requests():
    """Two simultaneous requests, the farther one first (tracks 50 and 30)."""
    return create_test_requests([(0, 50), (0, 30)])


@pytest.fixture
def three_requests():
    """Three simultaneous requests, forward of the origin (tracks 10, 20, 5)."""
    return create_test_requests([(0, 10), (0, 20), (0, 5)])


@pytest.fixture
def textbook_tracks():
    """Classic disk scheduling example, used with the head at track 53."""
    return [98, 183, 37, 122, 14, 124, 65, 67]


@pytest.fixture
def random_workload():
    """A seeded synthetic workload with overlapping arrivals."""
    return generate_requests(num_requests=60, arrival_rate=0.2, max_track=99, seed=7)
