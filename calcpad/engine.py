"""Calculator input state machine.

Every key press is a transition from one immutable ``CalculatorState`` to the
next. ``Calculator`` wraps a single state for a front end session.

Supported:
- Digit and decimal entry, without leading zeros
- Chained binary operators (``5 + 3 +`` evaluates to 8 and keeps going)
- Equals, clear, backspace, percent
- Division by zero leaves the display untouched
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import operator

from loguru import logger

from calcpad.exceptions import DivisionByZeroError
from calcpad.keys import Key, Operator


_INT64_MIN = -(2**63)
_INT64_LIMIT = 2**63

_OPERATIONS = {
	Operator.ADD: operator.add,
	Operator.SUBTRACT: operator.sub,
	Operator.MULTIPLY: operator.mul,
	Operator.DIVIDE: operator.truediv,
}


def compute(a: float, op: Operator, b: float) -> float:
	if op is Operator.DIVIDE and b == 0:
		raise DivisionByZeroError()
	return _OPERATIONS[op](a, b)


def format_number(value: float) -> str:
	# Integral values print without ".0"; the rest use the shortest repr.
	value = float(value)
	if value.is_integer() and _INT64_MIN <= value < _INT64_LIMIT:
		return str(int(value))
	return repr(value)


def _is_number(text: str) -> bool:
	try:
		float(text)
	except ValueError:
		return False
	return True


def _is_plain(text: str) -> bool:
	"""True for typed-style numbers; False for "1e-05", "inf" or "nan"."""
	return all(c in _PLAIN_CHARS for c in text)


_PLAIN_CHARS = frozenset("-0123456789.")


@dataclass(frozen=True)
class CalculatorState:
	display: str = "0"
	pending_operand: float | None = None
	pending_operator: Operator | None = None
	awaiting_fresh_entry: bool = False

	def __post_init__(self) -> None:
		if (self.pending_operand is None) != (self.pending_operator is None):
			raise ValueError("pending operand and operator must be set together")
		if not _is_number(self.display):
			raise ValueError(f"display is not a number: {self.display!r}")

	@property
	def value(self) -> float:
		return float(self.display)

	@property
	def has_pending(self) -> bool:
		return self.pending_operator is not None


def _enter(state: CalculatorState, char: str) -> CalculatorState:
	# Exponent and non-finite results are not extended; typing starts over.
	if state.awaiting_fresh_entry or not _is_plain(state.display):
		return replace(state, display="0." if char == "." else char, awaiting_fresh_entry=False)
	if char == "." and "." in state.display:
		return state
	if state.display == "0" and char != ".":
		return replace(state, display=char)
	return replace(state, display=state.display + char)


def _evaluate(state: CalculatorState) -> float | None:
	"""Apply the pending operator to the display, or None on division by zero."""
	try:
		return compute(state.pending_operand, state.pending_operator, state.value)
	except DivisionByZeroError:
		logger.warning(
			"division by zero ignored: {} {} {}",
			format_number(state.pending_operand),
			state.pending_operator.value,
			state.display,
		)
		return None


def _press_operator(state: CalculatorState, op: Operator) -> CalculatorState:
	display = state.display
	if state.has_pending and not state.awaiting_fresh_entry:
		result = _evaluate(state)
		if result is None:
			operand = state.pending_operand
		else:
			display = format_number(result)
			operand = result
	else:
		operand = state.value

	return CalculatorState(
		display=display,
		pending_operand=operand,
		pending_operator=op,
		awaiting_fresh_entry=True,
	)


def _press_equals(state: CalculatorState) -> CalculatorState:
	display = state.display
	if state.has_pending:
		result = _evaluate(state)
		if result is not None:
			display = format_number(result)
	return CalculatorState(display=display, awaiting_fresh_entry=True)


def _backspace(state: CalculatorState) -> CalculatorState:
	if not _is_plain(state.display):
		return replace(state, display="0")
	text = state.display[:-1] if len(state.display) > 1 else "0"
	# "-5" -> "-" is not a number.
	if not _is_number(text):
		text = "0"
	return replace(state, display=text)


def _percent(state: CalculatorState) -> CalculatorState:
	return replace(state, display=format_number(state.value / 100))


def transition(state: CalculatorState, key: Key | str) -> CalculatorState:
	"""Return the state that follows ``state`` when ``key`` is pressed."""
	key = Key.parse(key)

	if key.is_entry:
		return _enter(state, key.value)
	if key.operator is not None:
		return _press_operator(state, key.operator)
	if key is Key.EQUALS:
		return _press_equals(state)
	if key is Key.CLEAR:
		return CalculatorState()
	if key is Key.BACKSPACE:
		return _backspace(state)
	return _percent(state)


class Calculator:
	def __init__(self, state: CalculatorState | None = None) -> None:
		self._state = state if state is not None else CalculatorState()

	@property
	def state(self) -> CalculatorState:
		return self._state

	@property
	def display(self) -> str:
		return self._state.display

	def handle_key(self, key: Key | str) -> None:
		key = Key.parse(key)
		self._state = transition(self._state, key)
		logger.debug("{} -> {}", key.title, self._state)

	def press(self, *keys: Key | str) -> str:
		"""Press several keys in order and return the resulting display."""
		for key in keys:
			self.handle_key(key)
		return self.display

	def reset(self) -> None:
		self._state = CalculatorState()
