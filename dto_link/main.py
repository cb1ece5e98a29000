#!/usr/bin/env python3
# Path: dto_link/main.py
"""
dto_link - Main Entry Point

Decodes every DTO described in YAML descriptor files and reports which
DTO properties mirror entity keys and which mutator methods each DTO
binds to.

Data Flow:
    INPUT:   YAML descriptors (file or directory)
    PROCESS: DtoDecoder via DecodedDtoRegistry
    OUTPUT:  Text or JSON decode report

Usage:
    dto-link descriptors/                 # Decode a directory
    dto-link orders.yaml --format json    # JSON report
    dto-link orders.yaml --matcher strict # Case-only name matching
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .config_loader import ConfigLoader
from .constants import STATUS_FAIL, NAME_MATCHER_DEFAULT, NAME_MATCHER_STRICT
from .core.logger import setup_ipo_logging, get_input_logger
from .output import DecodeReport, FormatterRegistry
from .process.matcher.engine import DecodedDtoRegistry, DescriptorLoader, DtoDecoder
from .process.matcher.evaluators import build_name_matcher
from .process.matcher.models import DescriptorLoadError, DescriptorSet


def load_descriptors(path: Path) -> DescriptorSet:
    """
    Load descriptors from a file or a directory.

    Args:
        path: YAML file or directory of YAML files

    Returns:
        DescriptorSet

    Raises:
        DescriptorLoadError: If the path is missing or a file is invalid
    """
    if path.is_dir():
        return DescriptorLoader(path).load_all(use_cache=False)
    if path.is_file():
        return DescriptorLoader().load_file(path)
    raise DescriptorLoadError(f"Descriptor path not found: {path}")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog='dto-link',
        description='dto_link - decode DTO to entity mappings',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dto-link descriptors/                   Decode every YAML file in a directory
  dto-link orders.yaml --format json      Print a JSON report
  dto-link orders.yaml -o reports/        Also write the report to a file
        """
    )

    parser.add_argument(
        'path',
        type=Path,
        nargs='?',
        help='Descriptor file or directory (default: DTO_LINK_DESCRIPTOR_DIR)'
    )

    parser.add_argument(
        '--format', '-f',
        default='text',
        choices=FormatterRegistry.get_available(),
        help='Report format'
    )

    parser.add_argument(
        '--matcher', '-m',
        choices=[NAME_MATCHER_DEFAULT, NAME_MATCHER_STRICT],
        help='Name matcher (default: DTO_LINK_NAME_MATCHER)'
    )

    parser.add_argument(
        '--output', '-o',
        type=Path,
        help='Directory to write the report into'
    )

    parser.add_argument(
        '--log-level',
        help='Logging level (default: DTO_LINK_LOG_LEVEL)'
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for dto_link.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for decode errors or bad input)
    """
    args = build_parser().parse_args(argv)
    config = ConfigLoader()

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=args.log_level or config.get('log_level'),
        console_output=config.get('log_console'),
    )
    logger = get_input_logger('main')

    path = args.path or config.get('descriptor_dir')
    if path is None:
        print(f"{STATUS_FAIL} No descriptor path given and DTO_LINK_DESCRIPTOR_DIR is not set")
        return 1

    try:
        name_matcher = build_name_matcher(args.matcher or config.get('name_matcher'))
        descriptors = load_descriptors(Path(path))
    except (ValueError, DescriptorLoadError) as e:
        print(f"{STATUS_FAIL} Error: {e}")
        return 1

    logger.info(f"Decoding {len(descriptors)} DTOs from {path}")

    registry = DecodedDtoRegistry(DtoDecoder(name_matcher))
    status = registry.register_all(descriptors)
    registry.freeze()

    report = DecodeReport(source=str(path), decoded=list(registry), status=status)
    formatter = FormatterRegistry.get(args.format)
    print(formatter.format_report(report))

    if args.output:
        formatter.write_report(report, args.output)

    if status.has_errors and config.get('fail_on_errors'):
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
