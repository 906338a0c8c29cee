"""Command-line interface: report step definitions no scenario uses.

Usage:
    stepsweep
    stepsweep --steps "cypress/e2e/**/*.steps.{js,ts}" --features "cypress/e2e/**/*.feature"
    STEP_GLOB="features/**/*.js" stepsweep --format json
"""

import argparse
import logging
import sys

from .config import DEFAULT_MAX_UNPARSED, AuditConfig
from .discovery import discover_files, read_sources
from .matcher import analyze
from .report import render_json, render_text

logger = logging.getLogger(__name__)


def _param_type(value: str) -> tuple[str, str]:
    name, sep, regex = value.partition("=")
    name = name.strip().strip("{}")
    if not sep or not name or not regex:
        raise argparse.ArgumentTypeError(
            f"expected NAME=REGEX, got {value!r}"
        )
    return name, regex


def build_parser(config: AuditConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stepsweep",
        description="Find step definitions that no feature file step uses",
    )
    parser.add_argument(
        "--steps",
        default=config.step_glob,
        help=f"Glob for step definition files (default: {config.step_glob})",
    )
    parser.add_argument(
        "--features",
        default=config.feature_glob,
        help=f"Glob for feature files (default: {config.feature_glob})",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Directory globs and reported paths are relative to (default: .)",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--max-unparsed",
        type=int,
        default=DEFAULT_MAX_UNPARSED,
        help=f"Unparsed patterns to list in text output (default: {DEFAULT_MAX_UNPARSED})",
    )
    parser.add_argument(
        "--keyword",
        action="append",
        default=[],
        help="Additional step registration function name (repeatable)",
    )
    parser.add_argument(
        "--param-type",
        action="append",
        type=_param_type,
        default=[],
        metavar="NAME=REGEX",
        help="Custom Cucumber parameter type, e.g. color='(red|blue)' (repeatable)",
    )
    parser.add_argument(
        "--fail-on-unused",
        action="store_true",
        help="Exit with status 1 when unused step definitions are found",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv=None) -> int:
    """Run the audit and print the report to stdout."""
    config = AuditConfig.from_env()
    args = build_parser(config).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.keyword:
        config = config.with_declaration_keywords(*args.keyword)
    if args.param_type:
        config = config.with_parameter_types(**dict(args.param_type))

    step_files = discover_files(args.steps, args.root)
    feature_files = discover_files(args.features, args.root)
    logger.info(
        "Scanning %d step files and %d feature files", len(step_files), len(feature_files)
    )

    report = analyze(read_sources(step_files), read_sources(feature_files), config)

    if args.format == "json":
        print(render_json(report, args.root))
    else:
        print(render_text(report, args.root, args.max_unparsed))

    if args.fail_on_unused and report.unused:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
