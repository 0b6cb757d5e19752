from .base import Policy


class SSTF(Policy):
    """
    Shortest Seek Time First (SSTF) disk policy.

    Always picks the pending request closest to the head, in either direction.
    Ties go to the request queued first, not to the lower track.

    Properties: Low total movement, but a far-away request can starve for as
    long as nearer requests keep arriving.
    """

    name = "SSTF"

    def get_next(self, disk):
        assert self.queue, "get_next called with no pending requests"
        # min() keeps the first of equal keys, which gives queue-order tie breaking
        request = min(self.queue, key=lambda r: disk.distance_to(r.target_track))
        self.queue.remove(request)
        return request
