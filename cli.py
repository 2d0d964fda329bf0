from __future__ import annotations

import argparse
import logging
import os
import sys

import uvicorn

from component_usage.analysis import analyze_component
from component_usage.errors import AnalysisError
from component_usage.model import ScanConfig
from component_usage.render import format_path_list, format_tree
from component_usage.summarize import format_summary


def _configure_logging(args: argparse.Namespace) -> None:
	level = logging.WARNING
	if args.verbose:
		level = logging.DEBUG
	elif args.quiet:
		level = logging.ERROR
	logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def cmd_analyze(args: argparse.Namespace) -> None:
	config = ScanConfig()
	if args.exclude:
		config.ignored_dirs = config.ignored_dirs + args.exclude
	try:
		result = analyze_component(
			args.directory,
			args.component,
			config=config,
			max_depth=args.max_depth,
			workers=args.workers,
		)
	except AnalysisError as e:
		print(f"Error: {e}", file=sys.stderr)
		sys.exit(1)

	summary = format_summary(result.stats)
	if args.format == "json":
		output = result.model_dump_json(indent=2)
	elif args.format == "tree":
		output = f"{summary}\n\nComponent Usage Tree:\n{format_tree(result.hierarchy, relative_to=os.getcwd())}"
	elif args.format == "list":
		output = f"{summary}\n\nComponent Usage List:\n{format_path_list(result.hierarchy)}"
	else:
		output = summary

	if result.scan.failures:
		print(f"Skipped {result.scan.files_failed} of {result.scan.files_scanned} files", file=sys.stderr)

	if args.output:
		with open(args.output, "w", encoding="utf-8") as fh:
			fh.write(output + "\n")
	else:
		print(output)


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def create_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="component-usage")
	parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
	parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Show every component that renders COMPONENT")
	pa.add_argument("component", help="Component name to search for")
	pa.add_argument("-d", "--directory", default=os.getcwd(), help="Root directory to scan")
	pa.add_argument(
		"-f", "--format", default="summary", choices=["summary", "tree", "list", "json"],
		help="Output format (default: summary)",
	)
	pa.add_argument("-o", "--output", default=None, help="Write output to this file")
	pa.add_argument("--max-depth", type=int, default=None, help="Stop expanding below this depth")
	pa.add_argument("--workers", type=int, default=1, help="Parse files on this many threads")
	pa.add_argument(
		"--exclude", action="append", default=[],
		help="Extra directory name fragment to skip (repeatable)",
	)
	pa.set_defaults(func=cmd_analyze)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	return parser


def main(argv=None) -> None:
	args = create_parser().parse_args(argv)
	_configure_logging(args)
	args.func(args)


if __name__ == "__main__":
	main()
