"""Command-line entry point for the quality gate."""

from __future__ import annotations

import argparse
import dataclasses
from typing import List, Sequence

from .config import GateConfig, load_config
from .errors import ConfigurationError, DiscoveryError
from .logging import init_logging
from .reporters import AVAILABLE_REPORTERS, Reporter, build_reporters
from .result import RunResult
from .rules import Rule
from .rules.registry import default_registry
from .runner import Runner
from .walker import FileWalker, normalize_extension

EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quality-gate",
        description="Run syntactic quality gates over a source tree",
    )
    parser.add_argument("path", help="Root directory to scan.")
    parser.add_argument(
        "--config",
        "-c",
        default=None,
        help="Path to the gate configuration (defaults to ./.analyzerrc when present).",
    )
    parser.add_argument(
        "--reporter",
        "-r",
        dest="reporters",
        action="append",
        choices=sorted(AVAILABLE_REPORTERS),
        default=None,
        help="Reporter to use (repeatable). Overrides the configured reporters.",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_file",
        default=None,
        help="Where the json reporter writes its report (e.g., artifacts/violations.json).",
    )
    parser.add_argument("--extension", default=None, help="Only scan files with this extension.")
    parser.add_argument("--workers", type=int, default=None, help="Maximum number of files analysed concurrently.")
    parser.add_argument(
        "--fail-on-diagnostics",
        action="store_true",
        help="Fail the gate when a file could not be read or parsed.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log verbosity (defaults to $QUALITY_GATE_LOG_LEVEL or WARNING).",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> GateConfig:
    config = load_config(args.config)
    overrides = {}
    if args.reporters:
        overrides["reporters"] = tuple(args.reporters)
    if args.output_file:
        overrides["output_file"] = args.output_file
    if args.extension:
        try:
            overrides["extension"] = normalize_extension(args.extension)
        except ValueError as exc:
            raise ConfigurationError(f"--extension: {exc}") from exc
    if args.workers is not None:
        if args.workers < 1:
            raise ConfigurationError("--workers must be a positive integer")
        overrides["max_workers"] = args.workers
    return dataclasses.replace(config, **overrides)


def run_gate(path: str, config: GateConfig, rules: Sequence[Rule]) -> RunResult:
    walker = FileWalker(config.extension, max_depth=config.max_depth)
    runner = Runner(walker, max_workers=config.max_workers)
    return runner.run(path, rules)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    log = init_logging(args.log_level)

    try:
        config = resolve_config(args)
        rules = default_registry().resolve(config.rules)
        reporters: List[Reporter] = build_reporters(config.reporters, output_file=config.output_file)
    except ConfigurationError as exc:
        parser.error(str(exc))
        return EXIT_CONFIG_ERROR

    try:
        result = run_gate(args.path, config, rules)
    except DiscoveryError as exc:
        log.error("%s", exc)
        return EXIT_CONFIG_ERROR

    for reporter in reporters:
        reporter.report(result.violations)

    if result.diagnostics:
        log.warning("%d file(s) or directories could not be analysed", len(result.diagnostics))
        if args.fail_on_diagnostics:
            return 1
    return result.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
