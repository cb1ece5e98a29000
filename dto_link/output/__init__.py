# Path: dto_link/output/__init__.py
"""OUTPUT layer: decode reports."""

from .report_models import DecodeReport
from .formatters import BaseFormatter, FormatterRegistry, JsonFormatter, TextFormatter

__all__ = [
    'DecodeReport',
    'BaseFormatter',
    'FormatterRegistry',
    'JsonFormatter',
    'TextFormatter',
]
