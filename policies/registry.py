"""
Policy factory: maps the single-letter -s codes to policy classes.
"""
from errors import UnknownPolicyError
from .fcfs import FCFS
from .sstf import SSTF
from .look import LOOK
from .clook import CLOOK
from .flook import FLOOK


POLICIES = {
    "N": FCFS,
    "S": SSTF,
    "L": LOOK,
    "C": CLOOK,
    "F": FLOOK,
}


def create_policy(letter):
    """Create a fresh policy instance for an -s letter."""
    cls = POLICIES.get(letter)
    if cls is None:
        raise UnknownPolicyError(letter)
    return cls()
