"""Define the error raised when pulling from an exhausted generator."""


class EndOfIteration(Exception):
    """Raised by Generator.next_value() when the generator's sequence is exhausted."""
