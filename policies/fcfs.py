from .base import Policy


class FCFS(Policy):
    """
    First-Come, First-Served (FCFS) disk policy.

    Services requests strictly in the order they were admitted, ignoring where
    the head is. Fair and starvation-free, but the head zigzags across the disk.
    """

    name = "FCFS"

    def get_next(self, disk):
        assert self.queue, "get_next called with no pending requests"
        return self.queue.popleft()
