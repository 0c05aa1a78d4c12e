"""Key tokens and the button grid shared by every front end."""

from __future__ import annotations

from enum import Enum

from calcpad.exceptions import UnknownKeyError


class Operator(Enum):
	ADD = "+"
	SUBTRACT = "−"
	MULTIPLY = "×"
	DIVIDE = "÷"


class KeyKind(Enum):
	DIGIT = "digit"
	OPERATOR = "operator"
	FUNCTION = "function"


class Key(Enum):
	ZERO = "0"
	ONE = "1"
	TWO = "2"
	THREE = "3"
	FOUR = "4"
	FIVE = "5"
	SIX = "6"
	SEVEN = "7"
	EIGHT = "8"
	NINE = "9"
	DECIMAL = "."
	ADD = "+"
	SUBTRACT = "−"
	MULTIPLY = "×"
	DIVIDE = "÷"
	EQUALS = "="
	CLEAR = "C"
	BACKSPACE = "⌫"
	PERCENT = "%"

	@property
	def title(self) -> str:
		return self.value

	@property
	def kind(self) -> KeyKind:
		if self in _OPERATOR_KEYS or self is Key.EQUALS:
			return KeyKind.OPERATOR
		if self in (Key.CLEAR, Key.BACKSPACE, Key.PERCENT):
			return KeyKind.FUNCTION
		return KeyKind.DIGIT

	@property
	def is_entry(self) -> bool:
		"""True for the digits and the decimal point."""
		return self.kind is KeyKind.DIGIT

	@property
	def operator(self) -> Operator | None:
		return _OPERATOR_KEYS.get(self)

	@classmethod
	def parse(cls, token: Key | str) -> Key:
		if isinstance(token, Key):
			return token
		if not isinstance(token, str):
			raise UnknownKeyError(token)
		text = token.strip()
		text = _ALIASES.get(text, text)
		try:
			return cls(text)
		except ValueError:
			raise UnknownKeyError(token) from None


_OPERATOR_KEYS = {
	Key.ADD: Operator.ADD,
	Key.SUBTRACT: Operator.SUBTRACT,
	Key.MULTIPLY: Operator.MULTIPLY,
	Key.DIVIDE: Operator.DIVIDE,
}

# ASCII spellings accepted alongside the button titles.
_ALIASES = {
	"-": "−",
	"*": "×",
	"/": "÷",
	"c": "C",
}

BUTTON_ROWS: tuple[tuple[Key, ...], ...] = (
	(Key.CLEAR, Key.BACKSPACE, Key.PERCENT, Key.DIVIDE),
	(Key.SEVEN, Key.EIGHT, Key.NINE, Key.MULTIPLY),
	(Key.FOUR, Key.FIVE, Key.SIX, Key.SUBTRACT),
	(Key.ONE, Key.TWO, Key.THREE, Key.ADD),
	(Key.ZERO, Key.DECIMAL, Key.EQUALS),
)
