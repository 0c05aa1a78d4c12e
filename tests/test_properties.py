"""Property-based tests over arbitrary key sequences."""
from hypothesis import given, strategies as st

from calcpad.engine import Calculator, CalculatorState
from calcpad.keys import Key

entry_chars = st.lists(st.sampled_from("0123456789."), min_size=1, max_size=30)
any_keys = st.lists(st.sampled_from(list(Key)), max_size=40)


def _expected_entry(chars):
	"""What a digit-only sequence should display."""
	text = "".join(chars)
	head, point, tail = text.partition(".")
	whole = head.lstrip("0") or "0"
	return whole + point + tail.replace(".", "")


@given(entry_chars)
def test_digit_sequence_displays_what_was_typed(chars):
	calc = Calculator()
	assert calc.press(*chars) == _expected_entry(chars)


@given(any_keys)
def test_clear_always_restores_default(keys):
	calc = Calculator()
	calc.press(*keys, Key.CLEAR)
	assert calc.state == CalculatorState()


@given(any_keys)
def test_display_always_parses(keys):
	calc = Calculator()
	for key in keys:
		calc.handle_key(key)
		float(calc.display)
		assert (calc.state.pending_operand is None) == (calc.state.pending_operator is None)


@given(any_keys)
def test_second_equals_is_noop(keys):
	calc = Calculator()
	calc.press(*keys, Key.EQUALS)
	first = calc.state
	calc.handle_key(Key.EQUALS)
	assert calc.state == first


@given(entry_chars)
def test_backspace_removes_one_char(chars):
	calc = Calculator()
	before = calc.press(*chars)
	after = calc.press(Key.BACKSPACE)
	if len(before) > 1:
		assert after == before[:-1]
	else:
		assert after == "0"
