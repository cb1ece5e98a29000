# Path: dto_link/output/formatters/base_formatter.py
"""
Report formatter base and lookup.

A formatter turns a DecodeReport into one output format. Concrete
formatters declare their format name and file extension as class
attributes and register themselves with @FormatterRegistry.register;
the CLI picks one by the name given to --format.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Type

from ...core.logger.ipo_logging import get_output_logger
from ..report_models import DecodeReport


REPORT_FILE_STEM = 'decode_report'


class BaseFormatter(ABC):
    """Renders a DecodeReport; subclasses set format_name and file_extension."""

    format_name: str = ''
    file_extension: str = ''

    def __init__(self):
        self.logger = get_output_logger(f'formatter.{self.format_name}')

    @abstractmethod
    def format_report(self, report: DecodeReport) -> str:
        """Render the whole report as one string."""

    def write_report(self, report: DecodeReport, output_dir: Path) -> Path:
        """
        Render the report into output_dir/decode_report<extension>.

        Args:
            report: Report to render
            output_dir: Directory, created if missing

        Returns:
            Path of the written file
        """
        output_dir.mkdir(parents=True, exist_ok=True)
        target = output_dir / f"{REPORT_FILE_STEM}{self.file_extension}"
        target.write_text(self.format_report(report), encoding='utf-8')

        self.logger.info(f"Wrote {self.format_name} report to {target}")
        return target


class FormatterRegistry:
    """Formatter classes keyed by format name."""

    _formatters: Dict[str, Type[BaseFormatter]] = {}

    @classmethod
    def register(cls, formatter_class: Type[BaseFormatter]) -> Type[BaseFormatter]:
        """Class decorator adding a formatter under its format_name."""
        cls._formatters[formatter_class.format_name] = formatter_class
        return formatter_class

    @classmethod
    def get(cls, format_name: str) -> Optional[BaseFormatter]:
        """New formatter for a format name, or None when unknown."""
        formatter_class = cls._formatters.get(format_name)
        return formatter_class() if formatter_class else None

    @classmethod
    def get_available(cls) -> list[str]:
        return sorted(cls._formatters)


__all__ = ['BaseFormatter', 'FormatterRegistry']
