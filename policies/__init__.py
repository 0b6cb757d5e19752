from .base import Policy
from .fcfs import FCFS
from .sstf import SSTF
from .look import LOOK
from .clook import CLOOK
from .flook import FLOOK
from .registry import POLICIES, create_policy
