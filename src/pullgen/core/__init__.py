"""Import the generic generator abstraction and its retrieval results."""

from .errors import EndOfIteration as EndOfIteration
from .generator import Generator as Generator
from .generator import TransitionFunction as TransitionFunction
from .yield_result import END as END
from .yield_result import End as End
from .yield_result import YieldResult as YieldResult
from .yield_result import Yielded as Yielded
