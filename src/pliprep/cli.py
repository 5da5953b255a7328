"""Command-line interface for pliprep."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from pliprep.errors import ConfigError, SourceFileError, UnsupportedFileError, format_fault
from pliprep.gate import (
    SOURCE_EXTENSIONS,
    check_source_file,
    normalize_extensions,
    read_source_lines,
)
from pliprep.logger import configure_logging, get_logger, reset_logging
from pliprep.report import ReportWriter, RunSummary, process_lines

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    log_file: Path | None
    extensions: tuple[str, ...]
    verbose: bool
    dry_run: bool
    strict: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="pliprep",
        description="Tokenize and classify PL/I preprocessor source lines",
    )
    p.add_argument("input", help="Input .pp or .pli file")
    p.add_argument("-o", "--output", help="Output file for the processed lines (default: stdout)")
    p.add_argument("-l", "--log", metavar="FILE", help="Write a run report to FILE")
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover pliprep.toml)",
    )
    p.add_argument(
        "--extension",
        action="append",
        default=[],
        metavar="EXT",
        help="Accepted input extension (repeatable, replaces the default .pp/.pli)",
    )
    p.add_argument("--verbose", action="store_true", help="Report progress on stderr")
    p.add_argument("--dry-run", action="store_true", help="Do not write processed output")
    p.add_argument("--strict", action="store_true", help="Exit 1 if any line is malformed")
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "pliprep.toml"

    if not path.is_file():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid config file {path}: {exc}") from exc


def _config_bool(section: Any, key: str, default: bool) -> bool:
    if not isinstance(section, dict) or key not in section:
        return default
    value = section[key]
    if not isinstance(value, bool):
        raise ConfigError(f"config value '{key}' must be true or false, got {value!r}")
    return value


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Accepted extensions: default < config < CLI
    extensions = SOURCE_EXTENSIONS
    cfg_gate = config.get("gate")
    if isinstance(cfg_gate, dict) and "extensions" in cfg_gate:
        cfg_exts = cfg_gate["extensions"]
        if not isinstance(cfg_exts, list) or not all(isinstance(e, str) for e in cfg_exts):
            raise ConfigError("config value 'gate.extensions' must be a list of strings")
        extensions = normalize_extensions(cfg_exts)
    if args.extension:
        extensions = normalize_extensions(args.extension)
    if not extensions:
        raise ConfigError("no accepted input extensions configured")

    # Report file and verbosity: config < CLI
    cfg_report = config.get("report")
    log_file: Path | None = None
    if isinstance(cfg_report, dict) and "log" in cfg_report:
        cfg_log = cfg_report["log"]
        if not isinstance(cfg_log, str):
            raise ConfigError("config value 'report.log' must be a string")
        log_file = input_dir / cfg_log
    if args.log:
        log_file = Path(args.log)
    verbose = args.verbose or _config_bool(cfg_report, "verbose", False)

    strict = args.strict or _config_bool(config.get("run"), "strict", False)

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        log_file=log_file,
        extensions=extensions,
        verbose=verbose,
        dry_run=args.dry_run,
        strict=strict,
        debug=args.debug,
    )


def run(options: CliOptions, lines: list[str], out: TextIO | None) -> RunSummary:
    """Process ``lines``, echoing them to ``out`` and writing the report.

    Malformed lines are printed to stderr with their fault snippet.
    """
    from pliprep.debug import dump_tokens

    filename = str(options.input_file)
    report_stream = (
        open(options.log_file, "w", encoding="utf-8") if options.log_file is not None else None
    )
    try:
        writer = ReportWriter(report_stream, filename) if report_stream is not None else None
        summary = writer.summary if writer is not None else RunSummary()
        if writer is not None:
            writer.start()

        for report in process_lines(lines):
            if options.verbose:
                print(f"Processing line {report.line_number}: {report.text}", file=sys.stderr)
            if options.debug:
                dump_tokens(report, file=sys.stderr)
            if report.fault is not None:
                print(format_fault(report.fault, report.text, filename), file=sys.stderr)

            if writer is not None:
                writer.line(report)
            else:
                summary.add(report)

            if out is not None:
                out.write(report.text + "\n")

        if writer is not None:
            writer.finish()
    finally:
        if report_stream is not None:
            report_stream.close()

    log.info(
        "processed %d lines from %s (%d malformed)", summary.total, filename, summary.malformed
    )
    return summary


def _log_level(options: CliOptions) -> int:
    if options.debug:
        return logging.DEBUG
    if options.verbose:
        return logging.INFO
    return logging.WARNING


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    handler = configure_logging(_log_level(options))
    try:
        return process_file(options)
    finally:
        reset_logging(handler)


def process_file(options: CliOptions) -> int:
    """Gate, tokenize, and report one input file. Returns exit code (0/1)."""
    try:
        check_source_file(options.input_file, options.extensions)
        lines = read_source_lines(options.input_file)
    except (UnsupportedFileError, SourceFileError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        if options.dry_run:
            summary = run(options, lines, None)
        elif options.output_file is not None:
            with open(options.output_file, "w", encoding="utf-8") as out:
                summary = run(options, lines, out)
        else:
            summary = run(options, lines, sys.stdout)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if options.verbose:
        target = options.log_file if options.log_file is not None else "(none)"
        print(f"Processing complete. Report written to: {target}", file=sys.stderr)

    if options.strict and summary.malformed:
        return 1
    return 0
