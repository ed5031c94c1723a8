"""Data model of the naming linter.

Defines immutable Pydantic models for name tokens, their structural
decomposition, validation verdicts, and aggregated reports.
"""

from .contexts import MatchContext
from .parsed import ParsedName
from .tokens import Location, NameEntry
from .verdicts import FileError, Finding, Report, RuleNote, Verdict

__all__ = (
    'FileError',
    'Finding',
    'Location',
    'MatchContext',
    'NameEntry',
    'ParsedName',
    'Report',
    'RuleNote',
    'Verdict',
)
