#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Command-line interface for resumark.

Usage::

    resumark summary.md --to latex
    resumark summary.json --from tree --to html --link-underline
    cat summary.md | resumark --to tree --indent 2

Input is read from INPUT or stdin and output goes to stdout or ``--out``.
``RESUMARK_FROM``, ``RESUMARK_TO`` and ``RESUMARK_LOG_LEVEL`` supply
defaults; explicit arguments win.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from resumark import __version__
from resumark.api import compile_text
from resumark.cli.config import build_settings, load_config_file
from resumark.constants import ENV_PREFIX, SOURCE_FORMATS, TARGET_FORMATS
from resumark.exceptions import FormatError, ParsingError, RenderingError, ResumarkError, ValidationError
from resumark.logging_utils import configure_logging
from resumark.options import TreeRendererOptions
from resumark.renderers import cventry_argument, write_text_output

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code."""
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, OSError):
        return EXIT_FILE_ERROR
    if isinstance(exception, FormatError):
        return EXIT_FORMAT_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def _env_default(name: str, fallback: Optional[str]) -> Optional[str]:
    return os.environ.get(f"{ENV_PREFIX}{name}", fallback)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="resumark",
        description="Compile resume summary text (Markdown or editor JSON) to HTML, LaTeX or editor JSON.",
    )
    parser.add_argument("input", nargs="?", help="Input file (default: stdin)")
    parser.add_argument(
        "--from",
        dest="source_format",
        choices=SOURCE_FORMATS,
        default=_env_default("FROM", "markdown"),
        help="Source format (env: RESUMARK_FROM, default: markdown)",
    )
    parser.add_argument(
        "--to",
        dest="target_format",
        choices=TARGET_FORMATS,
        default=_env_default("TO", "html"),
        help="Target format (env: RESUMARK_TO, default: html)",
    )
    parser.add_argument("--out", "-o", help="Output file (default: stdout)")
    parser.add_argument(
        "--link-underline",
        action="store_true",
        help="Render links as underlined (drops HTML target attributes, wraps LaTeX link text in \\underline)",
    )
    parser.add_argument(
        "--cventry",
        action="store_true",
        help="Strip LaTeX output and comment out blank lines for use inside \\cventry/\\cvitem",
    )
    parser.add_argument("--indent", type=int, default=None, help="Indentation for --to tree output")
    parser.add_argument("--config", help="Configuration file (.json, .toml, .yaml)")
    parser.add_argument(
        "--log-level",
        default=_env_default("LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (env: RESUMARK_LOG_LEVEL, default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log records to this file")
    parser.add_argument("--trace", action="store_true", help="Verbose log format with timestamps")
    parser.add_argument("--version", action="version", version=f"resumark {__version__}")
    return parser


def _read_input(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return an exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        if parsed_args.indent is not None and parsed_args.indent < 0:
            raise ValidationError("--indent must be non-negative", parameter_name="indent")

        config = load_config_file(parsed_args.config) if parsed_args.config else {}
        settings = build_settings(config, link_underline=parsed_args.link_underline)

        source_format = parsed_args.source_format
        target_format = parsed_args.target_format
        renderer_options = settings.renderer_options.get(target_format)
        if target_format == "tree":
            renderer_options = TreeRendererOptions(indent=parsed_args.indent)

        source = _read_input(parsed_args.input)
        output = compile_text(
            source,
            source_format,
            target_format,
            context=settings.context,
            parser_options=settings.parser_options.get(source_format),
            renderer_options=renderer_options,
        )
        if parsed_args.cventry and target_format == "latex":
            output = cventry_argument(output)

        if parsed_args.out:
            write_text_output(output, parsed_args.out)
        else:
            sys.stdout.write(output)
            if output and not output.endswith("\n"):
                sys.stdout.write("\n")
    except (ResumarkError, OSError) as e:
        logger.error("%s", e)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        return EXIT_ERROR

    return EXIT_SUCCESS
