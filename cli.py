from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from introspector.config import DEFAULT_FILTER_PATTERN, OUTPUT_FILENAME, RunConfig
from introspector.errors import ConfigurationError
from introspector.report import generate_report


logger = logging.getLogger("introspector.cli")


def _configure_logging(level_name: Optional[str]) -> None:
	level = getattr(logging, (level_name or "INFO").upper(), logging.INFO)
	logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
	logging.getLogger().setLevel(level)


def cmd_report(args: argparse.Namespace) -> int:
	# configuration problems end the run without a report but are not an error exit
	try:
		config = RunConfig.from_inputs(args.root, args.entities, args.filter)
		output = generate_report(config)
	except ConfigurationError as exc:
		logger.error("%s", exc)
		return 0
	except OSError as exc:
		logger.error("Failed to produce %s: %s", OUTPUT_FILENAME, exc)
		return 1
	print(f"Generated {output}")
	return 0


def main(argv: Optional[List[str]] = None) -> int:
	parser = argparse.ArgumentParser(
		prog="introspect",
		description=f"Write a markdown snapshot of a C# project to <root>/{OUTPUT_FILENAME}",
	)
	parser.add_argument("root", nargs="?", help="Path to the project root")
	parser.add_argument("--entities", help="Directory whose types get a field/property listing")
	parser.add_argument(
		"--filter",
		default=DEFAULT_FILTER_PATTERN,
		help="Pipe-delimited directory names to skip (default: %(default)s)",
	)
	parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...)")
	args = parser.parse_args(argv)
	_configure_logging(args.log_level)
	return cmd_report(args)


def serve_main(argv: Optional[List[str]] = None) -> None:
	parser = argparse.ArgumentParser(prog="introspect-serve")
	parser.add_argument("--host", default="127.0.0.1")
	parser.add_argument("--port", type=int, default=8000)
	parser.add_argument("--reload", action="store_true")
	parser.add_argument("--log-level", default="INFO")
	args = parser.parse_args(argv)
	_configure_logging(args.log_level)
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
	sys.exit(main())
