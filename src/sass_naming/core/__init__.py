"""Core validation pipeline.

It provides:
- a tokenizer splitting names into their grammar parts;
- a matcher evaluating builtin and plugin rules in a fixed order;
- a heuristic scanner extracting names from stylesheet sources;
- a reporter aggregating verdicts into a report.
"""

from .matcher import SYNTAX_RULE, NameMatcher
from .reporter import Reporter
from .scanner import StylesheetScanner
from .tokenizer import tokenize

__all__ = (
    'SYNTAX_RULE',
    'NameMatcher',
    'Reporter',
    'StylesheetScanner',
    'tokenize',
)
