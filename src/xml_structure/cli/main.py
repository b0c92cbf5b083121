"""Main CLI entry point for the xml2struct command-line tool.

Converts XML files into their structure representation and prints it as
JSON.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from xml_structure import __version__
from xml_structure.api import ParseError, XMLStructureConverter
from xml_structure.shared.config import ConfigError, ConversionConfig
from xml_structure.shared.logging import get_logger
from xml_structure.structure import structure_to_dict


class CLIConfig:
    """Configuration management for CLI operations."""

    def __init__(self):
        self.conversion_config = ConversionConfig()
        self.output_indent = 2

    @classmethod
    def from_file(cls, config_path: Path) -> "CLIConfig":
        """Load CLI configuration from a JSON file.

        The optional ``conversion`` object is passed to
        ``ConversionConfig.from_dict``.
        """
        config = cls()
        if not config_path.exists():
            return config

        try:
            with config_path.open() as f:
                data = json.load(f)
            if "conversion" in data:
                config.conversion_config = ConversionConfig.from_dict(data["conversion"])
            config.output_indent = data.get("output_indent", config.output_indent)
        except (OSError, ValueError, ConfigError) as e:
            print(f"Warning: Could not load config file: {e}", file=sys.stderr)

        return config


class StructureProcessor:
    """Core conversion logic for CLI operations."""

    def __init__(self, config: CLIConfig):
        self.config = config
        self.converter = XMLStructureConverter(config.conversion_config)
        self.logger = get_logger(__name__, None, "cli_processor")

    def process_single_file(self, file_path: Path) -> Dict[str, Any]:
        """Convert a single file and return its plain structure."""
        structure = self.converter.convert_file(file_path)
        return structure_to_dict(structure, self.config.conversion_config)

    def batch_process(
        self, paths: List[Path]
    ) -> Tuple[Dict[str, Dict[str, Any]], List[str]]:
        """Convert several files, collecting results and error messages."""
        results: Dict[str, Dict[str, Any]] = {}
        errors: List[str] = []

        for path in paths:
            try:
                results[str(path)] = self.process_single_file(path)
            except FileNotFoundError as e:
                errors.append(str(e))
            except ParseError as e:
                self.logger.debug("Failed to parse file", extra={"file": str(path)})
                errors.append(f"Could not parse {path}: {e}")

        return results, errors


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="xml2struct",
        description="Convert XML documents into nested structures printed as JSON"
    )

    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Convert command
    convert_parser = subparsers.add_parser("convert", help="Convert XML files")
    convert_parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="XML files to convert (the .xml extension may be omitted)"
    )
    convert_parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: stdout)"
    )
    convert_parser.add_argument(
        "--indent",
        type=int,
        help="JSON indentation (default: 2)"
    )
    convert_parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file path"
    )
    convert_parser.add_argument(
        "--no-default-extension",
        action="store_true",
        help="Do not retry missing paths with the default extension"
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    return parser


def format_results(
    results: Dict[str, Dict[str, Any]], indent: Optional[int], single: bool
) -> str:
    """Format conversion results for output.

    A single input prints its structure directly; several inputs are keyed by
    path.
    """
    if single and len(results) == 1:
        payload: Any = next(iter(results.values()))
    else:
        payload = results
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def cmd_convert(args: argparse.Namespace) -> int:
    """Handle convert command."""
    config = CLIConfig()
    if args.config and args.config.exists():
        config = CLIConfig.from_file(args.config)

    # Apply command-line overrides
    if args.no_default_extension:
        config.conversion_config = config.conversion_config.override(
            append_default_extension=False
        )
    if args.indent is not None:
        config.output_indent = args.indent

    processor = StructureProcessor(config)
    results, errors = processor.batch_process(args.paths)

    for error in errors:
        print(f"Error: {error}", file=sys.stderr)

    if results:
        formatted_output = format_results(
            results, config.output_indent, single=len(args.paths) == 1
        )
        if args.output:
            try:
                args.output.write_text(formatted_output, encoding="utf-8")
                print(f"Results written to {args.output}", file=sys.stderr)
            except OSError as e:
                print(f"Error writing output: {e}", file=sys.stderr)
                return 1
        else:
            print(formatted_output)

    return 1 if errors or not results else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Set up logging verbosity
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif args.quiet:
        logging.basicConfig(level=logging.ERROR)

    try:
        if args.command == "convert":
            return cmd_convert(args)
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
