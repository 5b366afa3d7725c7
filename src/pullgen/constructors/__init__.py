"""Import factory functions creating commonly used generators."""

from .accumulator import AccumulatorState as AccumulatorState
from .accumulator import accumulate as accumulate
from .counter import CounterState as CounterState
from .counter import count as count
from .cycler import CyclerState as CyclerState
from .cycler import cycle as cycle
from .repeater import RepeaterState as RepeaterState
from .repeater import repeat as repeat
