from disk import FORWARD
from .base import Policy, closest_in_direction


class CLOOK(Policy):
    """
    Circular LOOK (CLOOK) disk policy.

    Sweeps forward only. Once no request remains at or beyond the head, the head
    jumps back to the lowest requested track and starts the next forward sweep.
    The trip back services nothing on the way, so the head's temporary backward
    direction has no effect on later choices.
    """

    name = "CLOOK"

    def get_next(self, disk):
        assert self.queue, "get_next called with no pending requests"
        request = closest_in_direction(self.queue, disk, FORWARD)
        if request is None:
            # Wrap around
            request = min(self.queue, key=lambda r: r.target_track)
        self.queue.remove(request)
        return request
