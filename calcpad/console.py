"""Line-oriented front end.

Each input line is a whitespace-separated list of key tokens, for example
``5 + 3 =``. The display is printed after every line.
"""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from loguru import logger

from calcpad.engine import Calculator
from calcpad.exceptions import UnknownKeyError


PROMPT = "> "
QUIT_WORDS = {"quit", "exit"}


def run(
	lines: Iterable[str],
	out: TextIO,
	calculator: Calculator | None = None,
	prompt: str = "",
) -> Calculator:
	"""Feed ``lines`` to a calculator, writing the display after each line."""
	calculator = calculator if calculator is not None else Calculator()
	out.write(prompt)
	for line in lines:
		tokens = line.split()
		if tokens and tokens[0].lower() in QUIT_WORDS:
			break
		for token in tokens:
			try:
				calculator.handle_key(token)
			except UnknownKeyError as e:
				logger.debug("rejected token {!r}", token)
				out.write(f"error: {e.message}\n")
				break
		out.write(f"{calculator.display}\n{prompt}")
	return calculator


def main() -> None:
	logger.info("starting console front end")
	run(sys.stdin, sys.stdout, prompt=PROMPT if sys.stdin.isatty() else "")
