"""Command-line interface for the SASS naming linter.

Exit codes of `check`: 0 when every name passes, 1 when any name fails,
and 2 when only unreadable files were found.
"""

from json import dumps
from pathlib import Path
from typing import TYPE_CHECKING

from click import Choice, ClickException, argument, echo, group, option
from click import Path as PathParam
from yaml import safe_dump

from sass_naming.core import NameMatcher, Reporter, StylesheetScanner, tokenize
from sass_naming.errors import MalformedName, NamingError
from sass_naming.schema import NameEntry, Report
from sass_naming.settings import load_settings

if TYPE_CHECKING:
    from sass_naming.schema import ParsedName

InputPath = PathParam(
    exists=False,
    path_type=Path,
)

ConfigPath = PathParam(
    dir_okay=False,
    exists=True,
    readable=True,
    path_type=Path,
)

FORMATS = ('text', 'json', 'yaml')
KINDS = ('class', 'variable', 'mixin')


def _render(report: Report, output_format: str) -> str:
    """Render a report in the requested format."""
    if output_format == 'json':
        return dumps(report.model_dump(mode='json'), ensure_ascii=False, indent=4)

    if output_format == 'yaml':
        return safe_dump(report.model_dump(mode='json'), sort_keys=False, allow_unicode=True).rstrip()

    return report.render_text()


def _describe(parsed: 'ParsedName') -> dict[str, object]:
    """Describe the non-empty parts of a parsed name."""
    return parsed.model_dump(
        exclude={'raw'},
        exclude_none=True,
        exclude_defaults=True,
    )


@group(help='Validate SASS class, variable, and mixin names against the naming guide.')
def cli() -> None:
    """Root CLI group for sass-naming tools."""
    return None


@cli.command(
    name='check',
    help=(
        'Check names found in stylesheets and directories, plus names given '
        'with --name. Exits with 1 when any name breaks the naming grammar.'
    ),
)
@argument('paths', nargs=-1, type=InputPath)
@option(
    '-n', '--name', 'names',
    multiple=True,
    help='Name to check; `$` marks a variable and `@mixin ` a mixin.',
)
@option(
    '-c', '--config',
    type=ConfigPath,
    default=None,
    help='YAML settings file (defaults to .sass-naming.yml when present).',
)
@option(
    '-f', '--format', 'output_format',
    type=Choice(FORMATS),
    default='text',
    show_default=True,
    help='Report output format.',
)
@option(
    '--max-descendants',
    type=int,
    default=None,
    help='Allowed descendant depth.',
)
@option(
    '--strict-nesting/--no-strict-nesting',
    default=None,
    help='Report deep descendant nesting as a failure.',
)
@option(
    '--max-failures',
    type=int,
    default=None,
    help='Stop after this many failures.',
)
def check(paths: tuple[Path, ...], names: tuple[str, ...], config: Path | None,  # noqa: PLR0913
          output_format: str, max_descendants: int | None,
          strict_nesting: bool | None, max_failures: int | None) -> None:
    """Check names and exit with the report status.

    Raises:
        ClickException: If the configuration or a rules plugin is invalid.
    """
    try:
        settings = load_settings(
            config,
            max_descendants=max_descendants,
            strict_nesting=strict_nesting,
            max_failures=max_failures,
        )
        matcher = NameMatcher(settings)

    except NamingError as error:
        raise ClickException(str(error)) from error

    reporter = Reporter(matcher)
    report = reporter.run_files(
        paths,
        StylesheetScanner(settings),
        names=StylesheetScanner.scan_names(names),
    )

    echo(_render(report, output_format))

    raise SystemExit(report.exit_code)


@cli.command(
    name='explain',
    help='Show how a single name is tokenized and which rule it breaks.',
)
@argument('name')
@option(
    '-k', '--kind',
    type=Choice(KINDS),
    default=None,
    help='Grammar to apply; inferred from the sigil when omitted.',
)
@option(
    '-c', '--config',
    type=ConfigPath,
    default=None,
    help='YAML settings file (defaults to .sass-naming.yml when present).',
)
def explain(name: str, kind: str | None, config: Path | None) -> None:
    """Print the parsed structure and verdict of a name.

    Raises:
        ClickException: If the configuration or a rules plugin is invalid.
    """
    try:
        matcher = NameMatcher(load_settings(config))

    except NamingError as error:
        raise ClickException(str(error)) from error

    entry = NameEntry.from_string(name)
    if kind is not None:
        entry = entry.model_copy(update={'kind': kind})

    echo(f'name: {entry.name}')
    echo(f'kind: {entry.kind}')

    try:
        parsed = tokenize(entry.name, entry.kind)

    except MalformedName as error:
        echo(f'malformed: {error.message}')
        raise SystemExit(1) from error

    for key, value in _describe(parsed).items():
        if key == 'kind':
            continue
        echo(f'{key}: {value}')

    verdict = matcher.match(parsed, matcher.make_context(entry))
    for note in verdict.warnings:
        echo(f'warning [{note.rule}]: {note.reason}')

    if verdict.passed:
        echo('verdict: pass')
        return

    echo(f'verdict: fail [{verdict.rule}] {verdict.reason}')
    raise SystemExit(1)


@cli.command(
    name='schema',
    help='Print the JSON Schema of the report produced by `check --format json`.',
)
def print_schema() -> None:
    """Generate and print the report JSON Schema."""
    echo(dumps(Report.model_json_schema(), ensure_ascii=False, indent=4))


if __name__ == '__main__':
    cli()
