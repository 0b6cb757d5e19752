from .base import Policy, closest_in_direction


class LOOK(Policy):
    """
    LOOK (elevator) disk policy.

    Keeps sweeping in the head's current direction, picking the nearest request on
    that side of the head (a request on the current track counts). When nothing is
    left ahead, the sweep reverses and the nearest request behind the head is taken.
    Unlike SCAN, the head never travels to the disk edge without a request there.
    """

    name = "LOOK"

    def get_next(self, disk):
        assert self.has_pending(), "get_next called with no pending requests"
        request = self._sweep(self.queue, disk)
        self.queue.remove(request)
        return request

    @staticmethod
    def _sweep(queue, disk):
        request = closest_in_direction(queue, disk, disk.direction)
        if request is None:
            request = closest_in_direction(queue, disk, -disk.direction)
        return request
