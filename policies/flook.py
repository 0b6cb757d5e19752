from collections import deque

from .base import format_queue
from .look import LOOK


class FLOOK(LOOK):
    """
    Frozen LOOK (FLOOK) disk policy.

    Scans like LOOK, but only over a frozen active queue. Arrivals go to a staging
    queue and are never mixed into the sweep in progress. When the active queue is
    drained, the staging queue becomes the new active queue.

    Properties: A request waits at most for the current frozen batch plus its own
    batch, so newer nearby arrivals cannot starve it the way they can under LOOK.
    """

    name = "FLOOK"

    def __init__(self):
        super().__init__()
        # self.queue is the active (frozen) queue
        self.staging = deque()
        self.swaps = 0

    def add(self, request):
        self.staging.append(request)

    def has_pending(self):
        return len(self.queue) > 0 or len(self.staging) > 0

    def get_next(self, disk):
        assert self.has_pending(), "get_next called with no pending requests"
        if not self.queue:
            self.queue, self.staging = self.staging, deque()
            self.swaps += 1
        request = self._sweep(self.queue, disk)
        self.queue.remove(request)
        return request

    def describe_staging(self):
        active = " ".join(f"({r.rid}:{r.target_track})" for r in self.queue)
        staging = " ".join(f"({r.rid}:{r.target_track})" for r in self.staging)
        return f"active=[{active}] staging=[{staging}] swaps={self.swaps}"

    def describe(self, disk):
        # Before the first swap the next scan runs over the staging queue
        if not self.queue:
            return format_queue(self.staging, disk)
        return format_queue(self.queue, disk)
