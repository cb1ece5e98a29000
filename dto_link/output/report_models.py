# Path: dto_link/output/report_models.py
"""
Report Models

Container handed to formatters: what was decoded, from where, and the
combined status of the registration pass.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from ..process.matcher.models.decoded_dto import DecodedDto
from ..process.matcher.models.status import DecodeStatus


@dataclass
class DecodeReport:
    """
    Result of one registration pass, ready for rendering.

    Attributes:
        source: Where the descriptors came from (file or directory)
        decoded: Decoded DTOs in registration order
        status: Combined status of every DTO
        generated_at: ISO timestamp of report creation
    """
    source: str
    decoded: list[DecodedDto] = field(default_factory=list)
    status: DecodeStatus = field(default_factory=DecodeStatus)
    generated_at: Optional[str] = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(timespec='seconds')
    )

    @property
    def summary(self) -> dict:
        """Counts shown at the top of every report."""
        return {
            'dtos': len(self.decoded),
            'with_setter_methods': sum(1 for d in self.decoded if d.has_setter_methods),
            'key_mirrors': sum(len(d.key_mirror_properties) for d in self.decoded),
            'errors': len(self.status),
        }


__all__ = ['DecodeReport']
