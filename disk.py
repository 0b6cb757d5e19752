"""
Disk head model.

The head occupies exactly one track at a time and sweeps in one of two directions:
- FORWARD: towards higher track numbers
- BACKWARD: towards lower track numbers

Only the simulator moves the head, one track per tick. Policies read the track
and direction to decide which request to pursue next, but never move the head.
"""

FORWARD = 1
BACKWARD = -1

DEFAULT_ORIGIN = 0


class Disk:
    def __init__(self, origin=DEFAULT_ORIGIN):
        self.origin = origin
        self.track = origin
        self.direction = FORWARD

    def reset(self):
        self.track = self.origin
        self.direction = FORWARD

    def face(self, target):
        """
        Point the head towards target.

        Leaves the direction untouched when the head is already on target, so a
        zero-distance dispatch never counts as a reversal.
        """
        if target > self.track:
            self.direction = FORWARD
        elif target < self.track:
            self.direction = BACKWARD

    def step(self):
        self.track += self.direction

    def distance_to(self, target):
        return abs(target - self.track)

    def signed_distance_to(self, target, direction=None):
        """
        Distance to target measured along direction (defaults to the current one).

        Negative when the target lies behind the head.
        """
        if direction is None:
            direction = self.direction
        return (target - self.track) * direction


def direction_name(direction):
    return "FORWARD" if direction == FORWARD else "BACKWARD"
