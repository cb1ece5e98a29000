# Path: dto_link/output/formatters/__init__.py
"""
Report Formatters

Each formatter renders a DecodeReport into a specific output format.
"""

from .base_formatter import BaseFormatter, FormatterRegistry
from .json_formatter import JsonFormatter
from .text_formatter import TextFormatter


__all__ = [
    'BaseFormatter',
    'FormatterRegistry',
    'JsonFormatter',
    'TextFormatter',
]
