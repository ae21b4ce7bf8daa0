#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command line interface for mdspans.

Parses a markdown-like file (or stdin) and prints the result as styled
terminal text, plain text, a node tree, or JSON.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, get_args

from rich.console import Console

from .api import build_parser
from .ast.serialization import nodes_to_json
from .ast.utils import count_nodes
from .config import discover_config_file, load_config_file, options_from_config
from .constants import OutputFormat
from .exceptions import MdSpansError
from .logging_utils import configure_logging, match_logging_enabled
from .options import MarkdownRuleOptions, ParserOptions
from .renderers import PlainTextRenderer, RichTextRenderer, TreeRenderer
from .utils.decorators import debug_timer

logger = logging.getLogger(__name__)

ENV_PREFIX = "MDSPANS_"


def get_env_var_value(key: str) -> Optional[str]:
    """Get environment variable with MDSPANS_ prefix.

    Parameters
    ----------
    key : str
        The parameter name (e.g., 'format', 'log_level')

    Returns
    -------
    Optional[str]
        Environment variable value or None if not set

    """
    env_key = f"{ENV_PREFIX}{key.upper().replace('-', '_')}"
    return os.environ.get(env_key)


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Apply environment variables as defaults to parser arguments.

    CLI arguments still take precedence over environment variables.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The argument parser to modify

    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "input"):
            continue
        env_value = get_env_var_value(action.dest)
        if env_value is None:
            continue

        if action.type is positive_int:
            try:
                action.default = positive_int(env_value)
            except argparse.ArgumentTypeError:
                logger.warning(f"Invalid integer value for {ENV_PREFIX}{action.dest.upper()}: {env_value}")
        elif action.choices:
            if env_value in action.choices:
                action.default = env_value
            else:
                logger.warning(
                    f"Invalid choice for {ENV_PREFIX}{action.dest.upper()}: {env_value}. "
                    f"Choices: {list(action.choices)}"
                )
        elif isinstance(action, argparse._StoreTrueAction):
            action.default = env_value.lower() in ("true", "1", "yes", "on")
        else:
            action.default = env_value


def _get_version() -> str:
    """Get the version of the mdspans package."""
    try:
        from importlib.metadata import PackageNotFoundError, version

        return version("mdspans")
    except PackageNotFoundError:
        return "unknown"


def positive_int(value: str) -> int:
    """Validate positive integer for argparse."""
    try:
        ivalue = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value} is not a valid integer")
    if ivalue <= 0:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return ivalue


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mdspans",
        description="Parse markdown-like text into styled spans and print the result.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Input file, or '-' for stdin (default)")
    parser.add_argument("--version", action="version", version=f"mdspans {_get_version()}")
    parser.add_argument(
        "--format",
        "-f",
        choices=list(get_args(OutputFormat)),
        default="rich",
        help="Output format (default: rich)",
    )
    parser.add_argument("--config", type=str, help="Configuration file (.toml, .yaml, .json or pyproject.toml)")
    parser.add_argument(
        "--no-config",
        action="store_true",
        help="Do not search for a configuration file",
    )
    parser.add_argument(
        "--classed-headers",
        action="store_true",
        help="Allow '{class}' suffixes on underline headers",
    )
    parser.add_argument(
        "--max-input-length",
        type=positive_int,
        help="Reject inputs longer than this many characters",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", type=str, help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Timestamped logs with logger names")

    apply_env_vars_to_parser(parser)
    return parser


def _load_options(parsed_args: argparse.Namespace) -> tuple[MarkdownRuleOptions, ParserOptions]:
    """Merge config file options with command line flags."""
    config_path: Optional[Path] = None
    if parsed_args.config:
        config_path = Path(parsed_args.config)
    elif not parsed_args.no_config:
        config_path = discover_config_file()

    if config_path is not None:
        logger.info("Using configuration file: %s", config_path)
        rule_options, parser_options = options_from_config(load_config_file(config_path))
    else:
        rule_options, parser_options = MarkdownRuleOptions(), ParserOptions()

    if parsed_args.classed_headers:
        rule_options = rule_options.create_updated(classed_headers=True)
    if parsed_args.max_input_length is not None:
        parser_options = parser_options.create_updated(max_input_length=parsed_args.max_input_length)
    if match_logging_enabled():
        parser_options = parser_options.create_updated(debug_matches=True)
    return rule_options, parser_options


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(args: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        text = _read_input(parsed_args.input)
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1

    try:
        rule_options, parser_options = _load_options(parsed_args)
        span_parser = build_parser(rule_options, parser_options)
        with debug_timer(logger, "Parsing"):
            nodes = span_parser.parse(text)
        logger.info("Parsed %d characters into %d nodes", len(text), count_nodes(nodes))

        console = Console()
        if parsed_args.format == "json":
            print(nodes_to_json(nodes))
        elif parsed_args.format == "plain":
            print(PlainTextRenderer().render_to_string(nodes))
        elif parsed_args.format == "tree":
            console.print(TreeRenderer().render(nodes))
        else:
            console.print(RichTextRenderer().render(nodes))
    except MdSpansError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0
