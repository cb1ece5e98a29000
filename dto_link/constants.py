# Path: dto_link/constants.py
"""
System-Wide Constants for dto_link

Central repository for the constant values used by the DTO decoder.
NO HARDCODED VALUES in module code - all constants defined here.

Constants are organized by category:
- Match Scores
- Property Access
- Provenance
- Naming Conventions
- Type Aliases
- Environment Keys
"""

from enum import Enum
from typing import Final


# ==============================================================================
# MATCH SCORES
# ==============================================================================

# Minimum score at which a name or signature match is accepted as binding.
# Not user-tunable.
PERFECT_MATCH_VALUE: Final[float] = 1.0

# Lowest possible score (no candidate, or nothing matched)
NO_MATCH_VALUE: Final[float] = 0.0

# Score a method parameter earns when a DTO property has its name
# but not its type
NAME_ONLY_PARAMETER_SCORE: Final[float] = 0.5

# Extra credit a fully paired method earns for the share of writable
# DTO properties it consumes. Kept below 1 - NAME_ONLY_PARAMETER_SCORE.
COVERAGE_WEIGHT: Final[float] = 0.01

# Number of decimal places scores are rounded to before comparison
SCORE_PRECISION: Final[int] = 6


# ==============================================================================
# PROPERTY ACCESS
# ==============================================================================

class PropertyAccess(str, Enum):
    """Whether a DTO property can be written back to the entity."""
    READ_ONLY = 'read_only'
    WRITABLE = 'writable'


# ==============================================================================
# PROVENANCE
# ==============================================================================

class Provenance(str, Enum):
    """
    Which resolution tier put a mutator method forward.

    Ordered by priority: explicit configuration wins over the
    DTO-name convention, which wins over the default scan.
    """
    EXPLICITLY_CONFIGURED = 'explicitly_configured'
    CONVENTION_FROM_DTO_NAME = 'convention_from_dto_name'
    DEFAULT_SCAN = 'default_scan'


class PairingKind(str, Enum):
    """How a method parameter was paired with a DTO property."""
    EXACT = 'exact'
    NAME_ONLY = 'name_only'
    UNMATCHED = 'unmatched'


# ==============================================================================
# NAMING CONVENTIONS
# ==============================================================================

# Suffixes stripped from a DTO type name to guess the mutator method name.
# Most specific first; compared case-insensitively.
DTO_NAME_SUFFIXES: Final[tuple[str, ...]] = ('ViewModel', 'Dto', 'VM')

# Identity suffix treated as optional when comparing names
# (e.g., "Customer" and "CustomerId")
IDENTITY_SUFFIX: Final[str] = 'id'

# Characters ignored when normalizing identifiers
IDENTIFIER_SEPARATORS: Final[str] = '_- '

# Separator for the comma-separated update method configuration
UPDATE_METHODS_SEPARATOR: Final[str] = ','


# ==============================================================================
# TYPE ALIASES
# ==============================================================================

# Declared type names that refer to the same type.
# Keys and values are lower case.
TYPE_ALIASES: Final[dict[str, str]] = {
    'str': 'string',
    'integer': 'int',
    'int32': 'int',
    'long': 'int64',
    'boolean': 'bool',
    'double': 'float',
    'datetime.datetime': 'datetime',
    'decimal.decimal': 'decimal',
}


# ==============================================================================
# ENVIRONMENT
# ==============================================================================

ENV_PREFIX: Final[str] = 'DTO_LINK_'

NAME_MATCHER_DEFAULT: Final[str] = 'default'
NAME_MATCHER_STRICT: Final[str] = 'strict'


# ==============================================================================
# STATUS CODES (console output)
# ==============================================================================

STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_INFO: Final[str] = '[INFO]'
STATUS_NONE: Final[str] = '[--]'

REPORT_LINE_WIDTH: Final[int] = 70


__all__ = [
    'PERFECT_MATCH_VALUE',
    'NO_MATCH_VALUE',
    'NAME_ONLY_PARAMETER_SCORE',
    'COVERAGE_WEIGHT',
    'SCORE_PRECISION',
    'PropertyAccess',
    'Provenance',
    'PairingKind',
    'DTO_NAME_SUFFIXES',
    'IDENTITY_SUFFIX',
    'IDENTIFIER_SEPARATORS',
    'UPDATE_METHODS_SEPARATOR',
    'TYPE_ALIASES',
    'ENV_PREFIX',
    'NAME_MATCHER_DEFAULT',
    'NAME_MATCHER_STRICT',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_INFO',
    'STATUS_NONE',
    'REPORT_LINE_WIDTH',
]
