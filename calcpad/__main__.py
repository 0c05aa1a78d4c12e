"""Command line entry point: ``python -m calcpad`` and the ``calcpad`` script."""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from calcpad import __version__
from calcpad.config import settings
from calcpad.engine import Calculator
from calcpad.exceptions import UnknownKeyError
from calcpad.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="calcpad", description="Pocket calculator.")
	parser.add_argument(
		"--frontend",
		choices=("tk", "console"),
		default=settings.FRONTEND,
		help="user interface to start (default: %(default)s)",
	)
	parser.add_argument("--debug", action="store_true", help="log every key press")
	parser.add_argument(
		"--keys",
		metavar="SEQUENCE",
		help='press the given keys, e.g. "5 + 3 =", print the display and exit',
	)
	parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
	return parser


def main(argv: list[str] | None = None) -> int:
	args = build_parser().parse_args(argv)
	setup_logging(level="DEBUG" if args.debug else None)

	if args.keys is not None:
		calculator = Calculator()
		try:
			calculator.press(*args.keys.split())
		except UnknownKeyError as e:
			print(f"calcpad: {e.message}", file=sys.stderr)
			return 2
		print(calculator.display)
		return 0

	if args.frontend == "console":
		from calcpad import console

		console.main()
	else:
		from calcpad import tk_app

		tk_app.run(settings)
	logger.debug("session ended")
	return 0


if __name__ == "__main__":
	sys.exit(main())
