"""Pocket calculator: an input state machine with Tk and console front ends."""

from loguru import logger

from calcpad.engine import Calculator, CalculatorState, compute, format_number, transition
from calcpad.exceptions import CalculatorError, DivisionByZeroError, UnknownKeyError
from calcpad.keys import BUTTON_ROWS, Key, KeyKind, Operator

__all__ = [
	"BUTTON_ROWS",
	"Calculator",
	"CalculatorError",
	"CalculatorState",
	"DivisionByZeroError",
	"Key",
	"KeyKind",
	"Operator",
	"UnknownKeyError",
	"compute",
	"format_number",
	"transition",
]

__version__ = "0.1.0"

# Silent as a library; setup_logging turns package logs back on.
logger.disable("calcpad")
