# Path: dto_link/process/matcher/models/status.py
"""
Decode Status and Errors

Problems found while decoding are collected, not raised, so that one
registration pass reports every problem at once. The caller decides
whether a non-valid status is fatal (see DecodeStatus.raise_if_invalid).
"""

from typing import Optional


# =============================================================================
# COLLECTED ERRORS
# =============================================================================

class DecodeError(Exception):
    """
    Base class for problems collected during decoding.

    Instances are stored in a DecodeStatus rather than raised.

    Attributes:
        dto_type: The DTO being decoded when the problem was found
        message: Human-readable description
    """

    def __init__(self, message: str, dto_type: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.dto_type = dto_type

    @property
    def error_type(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        if self.dto_type:
            return f"{self.dto_type}: {self.message}"
        return self.message

    def __eq__(self, other: object) -> bool:
        return (
            type(other) is type(self)
            and other.message == self.message
            and other.dto_type == self.dto_type
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.message, self.dto_type))

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'error_type': self.error_type,
            'dto_type': self.dto_type,
            'message': self.message,
        }


class ConfigurationNotFoundError(DecodeError):
    """An explicitly configured update method does not exist on the entity."""

    def __init__(
        self,
        method_name: str,
        entity_type: str,
        dto_type: Optional[str] = None
    ):
        self.method_name = method_name
        self.entity_type = entity_type
        super().__init__(
            f"In the per-DTO config you asked for the method {method_name}, "
            f"but that wasn't found in entity class {entity_type}.",
            dto_type=dto_type,
        )


class ImperfectMatchError(DecodeError):
    """
    Candidate methods were found but none paired perfectly.

    closest_fit holds the rendering of the best-scoring candidate, if any.
    by_convention is True when the method name was derived from the
    DTO type name rather than configured.
    """

    def __init__(
        self,
        method_name: str,
        closest_fit: Optional[str] = None,
        dto_type: Optional[str] = None,
        by_convention: bool = False
    ):
        self.method_name = method_name
        self.closest_fit = closest_fit
        self.by_convention = by_convention
        if by_convention:
            asked = f"The DTO name suggests update method {method_name}"
        else:
            asked = f"You asked for update method {method_name}"
        message = f"{asked}, but could not find an exact match of parameters."
        if closest_fit:
            message += f" Closest fit is {closest_fit}."
        super().__init__(message, dto_type=dto_type)


class UnknownEntityError(DecodeError):
    """A DTO is linked to an entity that has no descriptor."""

    def __init__(self, entity_type: str, dto_type: Optional[str] = None):
        self.entity_type = entity_type
        super().__init__(
            f"The DTO is linked to entity {entity_type}, "
            f"but no descriptor for that entity was supplied.",
            dto_type=dto_type,
        )


# =============================================================================
# RAISED AT THE BOUNDARY
# =============================================================================

class SetupError(Exception):
    """Raised when a caller treats a non-valid DecodeStatus as fatal."""


class RegistryFrozenError(Exception):
    """Raised when registering into a registry after it was frozen."""


class DescriptorLoadError(Exception):
    """Raised when a descriptor file cannot be read or validated."""


# =============================================================================
# STATUS
# =============================================================================

class DecodeStatus:
    """
    Accumulates decode errors.

    Statuses from several DTOs (or several methods of one DTO) can be
    combined into one, so a single setup call surfaces every problem.

    Example:
        status = DecodeStatus()
        status.add_error(ConfigurationNotFoundError('UpdateStatus', 'Order'))
        overall.combine_statuses(status)
        if not overall.is_valid:
            print(overall.get_all_errors())
    """

    def __init__(self):
        self._errors: list[DecodeError] = []

    @property
    def errors(self) -> tuple[DecodeError, ...]:
        return tuple(self._errors)

    @property
    def is_valid(self) -> bool:
        """True when no errors were collected."""
        return not self._errors

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def add_error(self, error: DecodeError) -> 'DecodeStatus':
        """
        Collect an error.

        Args:
            error: The problem found

        Returns:
            self, so calls can be chained
        """
        self._errors.append(error)
        return self

    def combine_statuses(self, other: 'DecodeStatus') -> 'DecodeStatus':
        """
        Append all errors from another status.

        Args:
            other: Status to merge into this one

        Returns:
            self, so calls can be chained
        """
        self._errors.extend(other.errors)
        return self

    def errors_of_type(self, error_type: type) -> list[DecodeError]:
        """Get collected errors of one class."""
        return [e for e in self._errors if isinstance(e, error_type)]

    def get_all_errors(self, separator: str = '\n') -> str:
        """Join all error messages into one string."""
        return separator.join(str(e) for e in self._errors)

    def raise_if_invalid(self) -> None:
        """
        Raise SetupError listing every collected error.

        Raises:
            SetupError: If any error was collected
        """
        if self._errors:
            raise SetupError(
                f"SETUP FAILED with {len(self._errors)} errors. "
                f"Errors are:\n{self.get_all_errors()}"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'is_valid': self.is_valid,
            'error_count': len(self._errors),
            'errors': [e.to_dict() for e in self._errors],
        }

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DecodeStatus) and other.errors == self.errors

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"DecodeStatus(is_valid={self.is_valid}, errors={len(self._errors)})"


__all__ = [
    'DecodeError',
    'ConfigurationNotFoundError',
    'ImperfectMatchError',
    'UnknownEntityError',
    'SetupError',
    'RegistryFrozenError',
    'DescriptorLoadError',
    'DecodeStatus',
]
