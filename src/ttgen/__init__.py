'''
ttgen - truth table generator for boolean logic expressions.
'''

from .errors import TruthTableError, LineError, VariableCapacityError
from .parser import parse_line
from .evaluator import evaluate
from .table import build_table
from .session import Session

__version__ = "1.0.0"

__all__ = [
    "TruthTableError",
    "LineError",
    "VariableCapacityError",
    "parse_line",
    "evaluate",
    "build_table",
    "Session",
]
