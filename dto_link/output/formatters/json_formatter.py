# Path: dto_link/output/formatters/json_formatter.py
"""
JSON Formatter

Renders a DecodeReport as structured JSON for downstream tools.
"""

import json
from typing import Any, Dict

from ..report_models import DecodeReport
from .base_formatter import BaseFormatter, FormatterRegistry


@FormatterRegistry.register
class JsonFormatter(BaseFormatter):
    """Renders report as JSON."""

    format_name = 'json'
    file_extension = '.json'

    def format_report(self, report: DecodeReport) -> str:
        """Serialize report to JSON string."""
        return json.dumps(self._serialize_report(report), indent=2, default=str)

    def _serialize_report(self, report: DecodeReport) -> Dict[str, Any]:
        return {
            'source': report.source,
            'generated_at': report.generated_at,
            'summary': report.summary,
            'decoded': [d.to_dict() for d in report.decoded],
            'status': report.status.to_dict(),
        }


__all__ = ['JsonFormatter']
