"""Errors raised by the calculator core."""

from __future__ import annotations


class CalculatorError(Exception):
	"""Base class for calculator errors."""

	def __init__(self, message: str) -> None:
		self.message = message
		super().__init__(message)


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
	def __init__(self, message: str = "division by zero") -> None:
		super().__init__(message)


class UnknownKeyError(CalculatorError, ValueError):
	def __init__(self, token: object) -> None:
		self.token = token
		super().__init__(f"unknown key: {token!r}")
