"""
Abstract base class for disk scheduling policies.

All policies implement the same three operations:
1. add: Queue a request that has just arrived
2. has_pending: Report whether any request is still waiting
3. get_next: Remove and return the request the head should pursue next

Subclasses implement concrete seek orders (FCFS, SSTF, LOOK, CLOOK, FLOOK).
Policies only choose *which* request comes next; the simulator moves the head.
"""
from abc import ABC, abstractmethod
from collections import deque


class Policy(ABC):
    name = None

    def __init__(self):
        self.queue = deque()

    def add(self, request):
        self.queue.append(request)

    def has_pending(self):
        return len(self.queue) > 0

    @abstractmethod
    def get_next(self, disk):
        """
        Remove and return the next request to service.

        Must only be called while has_pending() is true.

        Args:
            disk: Disk instance (current track and sweep direction, read-only here)
        """
        pass

    def describe(self, disk):
        """Queue contents as (rid:track:signed distance) for queue tracing."""
        return format_queue(self.queue, disk)

    def describe_staging(self):
        """Staging queue contents for policies that freeze their scan, else None."""
        return None


def format_queue(queue, disk):
    return " ".join(f"({r.rid}:{r.target_track}:{disk.signed_distance_to(r.target_track)})" for r in queue)


def closest_in_direction(queue, disk, direction):
    """
    Find the nearest request on the direction side of the head (or exactly at it).

    Ties go to the request queued first. Returns None if nothing lies that way.
    """
    candidates = [r for r in queue if disk.signed_distance_to(r.target_track, direction) >= 0]
    return min(candidates, key=lambda r: disk.signed_distance_to(r.target_track, direction), default=None)
