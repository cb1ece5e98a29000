# Path: dto_link/core/logger/__init__.py
"""
dto_link Logger Package

IPO-aware logging for the DTO decoder.

Provides separate log streams for:
- INPUT layer (descriptor loading)
- PROCESS layer (name matching, method grading, decoding)
- OUTPUT layer (reports)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
