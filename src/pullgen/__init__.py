"""Pull-based generators built from a state and a transition function."""

from .constructors import accumulate as accumulate
from .constructors import count as count
from .constructors import cycle as cycle
from .constructors import repeat as repeat
from .core import END as END
from .core import End as End
from .core import EndOfIteration as EndOfIteration
from .core import Generator as Generator
from .core import YieldResult as YieldResult
from .core import Yielded as Yielded
