# Path: dto_link/output/formatters/text_formatter.py
"""
Text Formatter

Renders a DecodeReport as ASCII text suitable for console display
and plain-text file output.
"""

from ...constants import (
    REPORT_LINE_WIDTH,
    STATUS_FAIL,
    STATUS_NONE,
    STATUS_OK,
)
from ...process.matcher.models.decoded_dto import DecodedDto
from ...process.matcher.models.status import DecodeStatus
from ..report_models import DecodeReport
from .base_formatter import BaseFormatter, FormatterRegistry

DIVIDER = '=' * REPORT_LINE_WIDTH
SUB_DIVIDER = '-' * REPORT_LINE_WIDTH


@FormatterRegistry.register
class TextFormatter(BaseFormatter):
    """Renders report as ASCII text."""

    format_name = 'text'
    file_extension = '.txt'

    def format_report(self, report: DecodeReport) -> str:
        """Render full report as text."""
        lines = ['', DIVIDER, f"  DTO DECODE REPORT: {report.source}", DIVIDER]

        summary = report.summary
        lines.append(
            f"  DTOs: {summary['dtos']} | "
            f"with setter methods: {summary['with_setter_methods']} | "
            f"key mirrors: {summary['key_mirrors']} | "
            f"errors: {summary['errors']}"
        )

        for decoded in report.decoded:
            lines.extend(self.format_decoded(decoded))

        lines.extend(self.format_status(report.status))

        lines.append('')
        lines.append(DIVIDER)
        if report.generated_at:
            lines.append(f"  Generated: {report.generated_at}")
        lines.append('')
        return '\n'.join(lines)

    def format_decoded(self, decoded: DecodedDto) -> list[str]:
        """Render one decoded DTO."""
        tag = STATUS_OK if decoded.is_valid else STATUS_FAIL
        lines = [
            '',
            f"  {tag} {decoded.dto_type} -> {decoded.linked_entity_type}",
            SUB_DIVIDER,
        ]

        for prop in decoded.property_infos:
            flags = []
            if prop.is_key_mirror:
                flags.append('key')
            if not prop.is_writable:
                flags.append('read-only')
            flag_text = f" [{', '.join(flags)}]" if flags else ''
            lines.append(f"    {prop.name:25s} {prop.type_name:12s}{flag_text}")

        if decoded.matched_setter_methods:
            lines.append("    Setter methods:")
            for match in decoded.matched_setter_methods:
                lines.append(
                    f"      {match.candidate.render()} "
                    f"({match.provenance.value}, score={match.score:.6f})"
                )
        else:
            lines.append(f"    {STATUS_NONE} no setter method")

        return lines

    def format_status(self, status: DecodeStatus) -> list[str]:
        """Render collected errors."""
        if status.is_valid:
            return ['', f"  {STATUS_OK} No decode errors"]

        lines = ['', f"  {STATUS_FAIL} {len(status)} decode error(s):", SUB_DIVIDER]
        for error in status.errors:
            lines.append(f"    {error.error_type}: {error}")
        return lines


__all__ = ['TextFormatter']
