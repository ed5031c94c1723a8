"""Stylesheet name extraction.

This module extracts class, variable, and mixin names from SCSS and CSS
sources. It is a heuristic scanner, not a full parser: it walks rule
preludes and statements delimited by `{`, `}` and `;`, after blanking
comments, strings, and interpolations so that offsets stay aligned with
the original source for line reporting.
"""

from bisect import bisect_right
from fnmatch import fnmatch
from pathlib import Path
from re import ASCII, DOTALL, IGNORECASE
from re import compile as regexp
from typing import TYPE_CHECKING

from sass_naming.errors import ErrorContext, ScanError
from sass_naming.names import ADJOINING_SEPARATOR, STATE_PREFIX
from sass_naming.schema import Location, NameEntry
from sass_naming.settings import LinterSettings

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from re import Match

#: Comments, strings and unquoted URLs, matched in a single pass so
#: that the token starting first wins.
_OPAQUE = regexp(
    r'/\*.*?\*/'
    r'|(?<![\w-])url\(\s*[^)\s"\']*\s*\)'
    r'|"(?:\\.|[^"\\\n])*"'
    r"|'(?:\\.|[^'\\\n])*'"
    r'|(?<![:"\'\w/])//[^\n]*',
    flags=DOTALL | IGNORECASE,
)
_INTERPOLATION = regexp(r'#\{[^{}]*\}')

_DELIMITERS = regexp(r'[{};]')
_SELECTOR = regexp(r'[^,]+')
_COMPOUND = regexp(r'[^\s>+~]+')
_ATTRIBUTE = regexp(r'\[[^\]]*\]')
_PARENT_SUFFIX = regexp(r'^&([\w-]*)', flags=ASCII)
_CLASS = regexp(r'\.([A-Za-z_-][\w-]*)', flags=ASCII)

_MIXIN = regexp(r'^@mixin\s+([\w-]+)', flags=ASCII)
_VARIABLE = regexp(r'^\$([\w-]+)\s*:', flags=ASCII)

#: Interpolations are replaced with this character so that names
#: built at compile time can be recognized and skipped.
_DYNAMIC = '#'

_PARENT = '&'
_STATE = f'{STATE_PREFIX}-'

#: Class names `&` refers to, one per selector of the enclosing rule.
type Subjects = tuple[str | None, ...]

_NO_SUBJECT: Subjects = (None,)


def _blank(match: 'Match[str]') -> str:
    """Replace a match with whitespace, keeping line breaks."""
    return ''.join(char if char == '\n' else ' ' for char in match.group())


def _mark_dynamic(match: 'Match[str]') -> str:
    """Replace an interpolation with dynamic markers of the same length."""
    return _DYNAMIC * len(match.group())


class SourceIndex:
    """Map source offsets to locations with 1-based line numbers."""

    def __init__(self, source: str, filename: str | None = None) -> None:
        self.filename = filename
        self.newlines = [
            position
            for position, char in enumerate(source)
            if char == '\n'
        ]

    def line(self, offset: int) -> int:
        """Line number of an offset."""
        return bisect_right(self.newlines, offset - 1) + 1

    def locate(self, offset: int) -> Location:
        """Location of an offset."""
        return Location(filename=self.filename, line=self.line(offset))


class StylesheetScanner:
    """Extract name tokens from stylesheet sources.

    Class names come from rule preludes. Parent suffixes (`&--primary`,
    `&-item`) are resolved against the enclosing rule, and state classes
    adjoining a component are emitted together with it as a single
    compound name such as `dropdown.is-active`.
    """

    def __init__(self, settings: LinterSettings | None = None) -> None:
        self.settings = settings or LinterSettings()

    @staticmethod
    def clean(text: str) -> str:
        """Blank comments, strings, and URLs and mark interpolations.

        The result has the same length and line layout as the input.
        """
        source = _OPAQUE.sub(_blank, text)

        return _INTERPOLATION.sub(_mark_dynamic, source)

    def scan(self, text: str, filename: str | None = None) -> list[NameEntry]:
        """Extract name tokens from stylesheet source text.

        Args:
            text: SCSS or CSS source.
            filename: Optional source filename for locations.

        Returns:
            Name tokens in source order.
        """
        source = self.clean(text)
        index = SourceIndex(source, filename)

        entries: list[NameEntry] = []
        parents: list[Subjects] = []

        start = 0
        for delimiter in _DELIMITERS.finditer(source):
            segment, offset = source[start:delimiter.start()], start
            start = delimiter.end()

            if delimiter.group() == '{':
                subjects = parents[-1] if parents else _NO_SUBJECT
                parents.append(self._scan_prelude(segment, offset, subjects, entries, index))
                continue

            self._scan_statement(segment, offset, entries, index)
            if delimiter.group() == '}' and parents:
                parents.pop()

        self._scan_statement(source[start:], start, entries, index)

        return entries

    def _scan_statement(self, segment: str, offset: int,
                        entries: list[NameEntry], index: SourceIndex) -> None:
        """Extract a variable declaration from a statement."""
        if not self.settings.check_variables:
            return

        stripped = segment.lstrip()
        if (match := _VARIABLE.match(stripped)) is None:
            return

        position = offset + len(segment) - len(stripped)
        entries.append(NameEntry(
            name=match.group(1),
            kind='variable',
            location=index.locate(position),
        ))

    def _scan_prelude(self, segment: str, offset: int, parents: Subjects,
                      entries: list[NameEntry], index: SourceIndex) -> Subjects:
        """Extract names from a rule prelude.

        Selectors referring to `&` are resolved once per enclosing
        subject, so `.a, .b { &--x {} }` yields both `a--x` and `b--x`.

        Returns:
            The class names that `&` refers to inside the rule body.
        """
        stripped = segment.strip()
        if not stripped or stripped.endswith(':'):
            return parents

        position = offset + len(segment) - len(segment.lstrip())

        if stripped.startswith('@'):
            if (match := _MIXIN.match(stripped)) is None:
                return parents
            if self.settings.check_mixins:
                entries.append(NameEntry(
                    name=match.group(1),
                    kind='mixin',
                    location=index.locate(position),
                ))
            return _NO_SUBJECT

        subjects: list[str | None] = []
        for selector in _SELECTOR.finditer(segment):
            scoped = parents if _PARENT in selector.group() else parents[:1]
            found: list[NameEntry] = []

            for parent in scoped:
                base = parent
                for compound in _COMPOUND.finditer(selector.group()):
                    base = self._scan_compound(
                        compound.group(),
                        offset + selector.start() + compound.start(),
                        parent,
                        found,
                        index,
                    )
                subjects.append(base)

            entries.extend(
                entry
                for number, entry in enumerate(found)
                if entry not in found[:number]
            )

        return tuple(dict.fromkeys(subjects)) or _NO_SUBJECT

    def _scan_compound(self, compound: str, offset: int, parent: str | None,
                       entries: list[NameEntry], index: SourceIndex) -> str | None:
        """Extract names from a single compound selector.

        Returns:
            The component class of the compound, if any.
        """
        text = _ATTRIBUTE.sub('', compound).split(':', 1)[0]
        location = index.locate(offset)

        adjoins_parent = text.startswith(_PARENT)
        classes: list[str] = []
        base: str | None = None

        if adjoins_parent and (match := _PARENT_SUFFIX.match(text)):
            suffix, text = match.group(1), text[match.end():]
            if suffix and parent is not None and not text.startswith(_DYNAMIC):
                base = f'{parent}{suffix}'
                classes.append(base)
            elif not suffix:
                base = parent

        for match in _CLASS.finditer(text):
            if text[match.end():match.end() + 1] == _DYNAMIC:
                continue
            classes.append(match.group(1))

        states = [item for item in classes if item.lower().startswith(_STATE)]
        components = [item for item in classes if item not in states]
        standalone = len(classes) == 1 and not adjoins_parent

        if states:
            if components:
                owner = components.pop(0)
            elif adjoins_parent and base is not None:
                owner = base
            else:
                owner = None

            if owner is not None:
                entries.append(NameEntry(
                    name=ADJOINING_SEPARATOR.join((owner, *states)),
                    location=location,
                    standalone=False,
                ))
            else:
                entries.extend(
                    NameEntry(name=state, location=location, standalone=standalone)
                    for state in states
                )

        entries.extend(
            NameEntry(name=item, location=location, standalone=standalone)
            for item in components
        )

        if base is not None and base in classes:
            return base

        if classes:
            return next((item for item in classes if item not in states), base)

        return base

    def scan_file(self, path: Path) -> list[NameEntry]:
        """Extract name tokens from a stylesheet file.

        Args:
            path: Stylesheet path.

        Returns:
            Name tokens in source order.

        Raises:
            ScanError: If the file can not be read or decoded.
        """
        filename = path.as_posix()

        try:
            text = path.read_text(encoding='utf-8')

        except UnicodeDecodeError as base:
            raise ScanError(
                'Can not decode stylesheet as UTF-8',
                context=ErrorContext(filename=filename, error=base),
            ) from base

        except OSError as base:
            raise ScanError.from_os_error(filename, base) from base

        return self.scan(text, filename=filename)

    def is_excluded(self, path: Path) -> bool:
        """Whether a path matches one of the exclude patterns."""
        return any(
            fnmatch(path.as_posix(), pattern) or fnmatch(path.name, pattern)
            for pattern in self.settings.exclude
        )

    def expand(self, paths: 'Iterable[Path]') -> 'Iterator[Path]':
        """Expand directories into stylesheet files.

        Directories are searched recursively for files with a configured
        extension that do not match an exclude pattern. Other paths are
        yielded as given, so that missing files surface as scan errors.

        Args:
            paths: Files and directories to scan.

        Yields:
            Stylesheet paths in a stable order.
        """
        for path in paths:
            if not path.is_dir():
                yield path
                continue

            yield from (
                item
                for item in sorted(path.rglob('*'))
                if item.is_file()
                and item.suffix in self.settings.extensions
                and not self.is_excluded(item)
            )

    @staticmethod
    def scan_names(names: 'Iterable[str]') -> list[NameEntry]:
        """Build name tokens from pre-extracted names.

        The kind of each name is inferred from its sigil.
        """
        return [NameEntry.from_string(name) for name in names]
