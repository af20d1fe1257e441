from __future__ import annotations

import argparse
import json
import os
import sys

import uvicorn

from config import get_settings
from logging_setup import configure_logging, get_logger
from usegraph.errors import UsegraphError
from usegraph.pipeline import analyze_repository
from usegraph.render import render_report

logger = get_logger("usegraph.cli")


def cmd_analyze(args: argparse.Namespace) -> int:
	settings = get_settings().with_overrides(
		known_modules_only=True if args.known_modules_only else None,
		wrap_width=args.wrap_width,
	)
	problems = settings.validate()
	if problems:
		for problem in problems:
			logger.error("Invalid settings: %s", problem)
		return 1
	root = os.path.abspath(args.path)
	try:
		report = analyze_repository(root, settings)
	except UsegraphError as e:
		logger.error("Analysis of %s failed: %s", root, e.detail)
		return 1

	if args.json:
		print(json.dumps(report.model_dump(), indent=2))
	else:
		color = not args.no_color and sys.stdout.isatty()
		sys.stdout.write(render_report(report, color=color, wrap_width=settings.wrap_width))
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def cmd_view(args: argparse.Namespace) -> int:
	root = os.path.abspath(args.path)
	if not os.path.isdir(root):
		logger.error("Not a directory: %s", root)
		return 1
	# the web app reads its default root from the environment at startup
	os.environ["USEGRAPH_ROOT"] = root
	get_settings.cache_clear()
	logger.info("Serving report for %s at http://%s:%d/", root, args.host, args.port)
	uvicorn.run("web.app:app", host=args.host, port=args.port)
	return 0


def main(argv=None) -> int:
	settings = get_settings()
	parser = argparse.ArgumentParser(prog="usegraph")
	parser.add_argument("--log-level", default=settings.log_level)
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Analyze a source tree and print its dependency report")
	pa.add_argument("path", help="Path to the source root")
	pa.add_argument("--json", action="store_true", help="Print the report as JSON")
	pa.add_argument("--no-color", action="store_true")
	pa.add_argument("--known-modules-only", action="store_true", help="Ignore modules with no file in the tree")
	pa.add_argument("--wrap-width", type=int, default=None)
	pa.set_defaults(func=cmd_analyze)

	ps = sub.add_parser("serve", help="Run the JSON API server")
	ps.add_argument("--host", default=settings.host)
	ps.add_argument("--port", type=int, default=settings.port)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	pv = sub.add_parser("view", help="Serve an HTML report for a source tree")
	pv.add_argument("path", help="Path to the source root")
	pv.add_argument("--host", default=settings.host)
	pv.add_argument("--port", type=int, default=settings.port)
	pv.set_defaults(func=cmd_view)

	args = parser.parse_args(argv)
	configure_logging(args.log_level, enable_color=sys.stderr.isatty())
	for problem in settings.validate():
		logger.warning("Settings: %s", problem)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
