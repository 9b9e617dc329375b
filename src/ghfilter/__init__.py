"""G-H filter and synthetic signal generator."""

__version__ = "0.1.0"

from .errors import GHFilterError, InvalidArgument, NumericDegenerate
from .gh_filter import GHFilter, StepRecord, gh_filter
from .numeric import GHState
from .params import GainSettings, SignalParameters
from .report import format_table, plot_run
from .signal import generate

__all__ = [
    "GHFilter",
    "GHFilterError",
    "GHState",
    "GainSettings",
    "InvalidArgument",
    "NumericDegenerate",
    "SignalParameters",
    "StepRecord",
    "format_table",
    "generate",
    "gh_filter",
    "plot_run",
]
