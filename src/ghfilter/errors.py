"""Error kinds raised by the generator and the filter."""


class GHFilterError(Exception):
    """Base class for ghfilter errors."""


class InvalidArgument(GHFilterError, ValueError):
    """A caller-supplied argument is outside its valid range."""


class NumericDegenerate(GHFilterError, ArithmeticError):
    """An intermediate value became non-finite."""
