"""
Root entrypoint for the stamp CLI.

`stamp` (and its alias `nid`) print a note filename built from the current
date and time:

    stamp              2024-01-05-0930
    stamp daily        2024-01-05
    stamp fleeting     2024-01-05-F093012
    stamp voice        2024-01-05-VT093012
    stamp analog       2024-01-05-A1
    stamp monthly      2024-01
    stamp yearly       2024
    stamp project      P0001
    stamp seq          custom prefix + zero-padded number
    stamp new <kind>   any of the above, by name

Every command writes one line to stdout. Diagnostics (--verbose, --debug)
and errors go to stderr. Failures exit with status 1.

The commands here only dispatch: all naming rules live in stamp.generator.
"""

# ---------------------------------------------------------------------------
# Imports (must be at top to satisfy flake8 E402)
# ---------------------------------------------------------------------------
import json
from typing import Any, Dict, List, NoReturn, Optional

from dotenv import load_dotenv
import typer
from typer.core import TyperGroup

from stamp import BUILD_DATE, COMMIT, __version__
from stamp.config import load_settings
from stamp.disambiguators import MonotonicClockSuffix, SequenceCounter
from stamp.errors import InvalidKind, StampError
from stamp.generator import current_time, generate
from stamp.logging_utils import log_debug, log_verbose
from stamp.sequential import format_code, next_value
from stamp.types import Disambiguator, NoteKind, SequenceSpec

# Load environment variables
load_dotenv()

# ---------------------------------------------------------------------------
# Note-type dispatch
# ---------------------------------------------------------------------------
# `stamp <name>` where <name> is not a registered command is treated as a
# note type: known kinds without a dedicated command (`stamp default`,
# `stamp Daily`) run through `stamp new`, anything else is reported as an
# unknown note type with exit code 1.
# ---------------------------------------------------------------------------
class NoteTypeGroup(TyperGroup):
    def resolve_command(self, ctx: typer.Context, args: List[str]):
        name = args[0] if args else ""
        if name and not name.startswith("-") and self.get_command(ctx, name) is None:
            try:
                NoteKind.parse(name)
            except InvalidKind as e:
                _fail(e)
            return "new", self.get_command(ctx, "new"), list(args)
        return super().resolve_command(ctx, args)


# ---------------------------------------------------------------------------
# Root CLI application
# ---------------------------------------------------------------------------
cli = typer.Typer(
    cls=NoteTypeGroup,
    help=(
        "Generate note filenames based on date/time.\n\n"
        "Run without a command for the default YYYY-MM-DD-HHMM stamp, or pick "
        "a note type: daily, fleeting, voice, analog, monthly, yearly, "
        "project, seq."
    ),
    add_completion=False,
)

# ---------------------------------------------------------------------------
# Shared options
# ---------------------------------------------------------------------------
# Accepted both before the command (`stamp --ext daily`) and after it
# (`stamp daily --ext`); either placement turns the option on.
# ---------------------------------------------------------------------------
EXT_OPTION = typer.Option(False, "--ext", help="Add .md extension to output.")
VERBOSE_OPTION = typer.Option(False, "--verbose", help="Show progress on stderr.")
DEBUG_OPTION = typer.Option(
    False, "--debug", help="Show resolved settings and timestamps on stderr."
)


def _merge_flags(ctx: typer.Context, ext: bool, verbose: bool, debug: bool) -> Dict[str, Any]:
    root = ctx.obj or {}
    return {
        "ext": ext or root.get("ext", False),
        "verbose": verbose or root.get("verbose", False),
        "debug": debug or root.get("debug", False),
        "timezone": root.get("timezone"),
    }


def _fail(error: Exception) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


def _output(result: str, ext: bool) -> None:
    if ext:
        result += ".md"
    typer.echo(result)


def _emit(
    ctx: typer.Context,
    kind: NoteKind,
    ext: bool,
    verbose: bool,
    debug: bool,
    source: Optional[Disambiguator] = None,
    title: str = "",
) -> None:
    """
    Resolve settings, read the clock, generate one identifier and print it.

    Any StampError raised on the way is reported and turned into exit code 1.
    """
    flags = _merge_flags(ctx, ext, verbose, debug)

    try:
        settings = load_settings(flags["timezone"])
        log_debug(f"settings: {json.dumps(settings)}", flags["debug"])

        now = current_time(settings["timezone"])
        log_debug(f"timestamp: {now.isoformat()}", flags["debug"])

        if kind is NoteKind.PROJECT and source is None:
            source = SequenceCounter(settings["project_start"])

        log_verbose(f"Generating {kind.value} identifier.", flags["verbose"])
        result = generate(kind, now, source, project_width=settings["project_width"])
    except StampError as e:
        _fail(e)

    if title:
        result += " " + title
    _output(result, flags["ext"] or settings["always_extension"])


# ---------------------------------------------------------------------------
# stamp (no command)
# ---------------------------------------------------------------------------
@cli.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    ext: bool = EXT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    debug: bool = DEBUG_OPTION,
    timezone: Optional[str] = typer.Option(
        None,
        "--timezone",
        "--tz",
        help="IANA timezone (overrides STAMP_TIMEZONE).",
    ),
) -> None:
    """Generate note filenames based on date/time."""
    ctx.obj = {"ext": ext, "verbose": verbose, "debug": debug, "timezone": timezone}

    if ctx.invoked_subcommand is None:
        _emit(ctx, NoteKind.DEFAULT, ext, verbose, debug)


# ---------------------------------------------------------------------------
# stamp version
# ---------------------------------------------------------------------------
@cli.command("version")
def version_command() -> None:
    """Print version information."""
    typer.echo(f"stamp version {__version__}\ncommit: {COMMIT}\nbuilt: {BUILD_DATE}")


# ---------------------------------------------------------------------------
# Date-based note types
# ---------------------------------------------------------------------------
@cli.command("daily")
def daily_command(
    ctx: typer.Context,
    ext: bool = EXT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Generate daily note filename (YYYY-MM-DD)."""
    _emit(ctx, NoteKind.DAILY, ext, verbose, debug)


@cli.command("fleeting")
def fleeting_command(
    ctx: typer.Context,
    ext: bool = EXT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Generate fleeting note filename (YYYY-MM-DD-FHHMMSS)."""
    _emit(ctx, NoteKind.FLEETING, ext, verbose, debug, source=MonotonicClockSuffix())


@cli.command("voice")
def voice_command(
    ctx: typer.Context,
    ext: bool = EXT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Generate voice transcript filename (YYYY-MM-DD-VTHHMMSS)."""
    _emit(ctx, NoteKind.VOICE, ext, verbose, debug, source=MonotonicClockSuffix())


@cli.command("analog")
def analog_command(
    ctx: typer.Context,
    number: int = typer.Option(
        1,
        "--number",
        "-n",
        min=1,
        help="Slip number for the day.",
    ),
    ext: bool = EXT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Generate analog/slipbox note filename (YYYY-MM-DD-AN)."""
    _emit(ctx, NoteKind.ANALOG, ext, verbose, debug, source=SequenceCounter(number))


@cli.command("monthly")
def monthly_command(
    ctx: typer.Context,
    ext: bool = EXT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Generate monthly review filename (YYYY-MM)."""
    _emit(ctx, NoteKind.MONTHLY, ext, verbose, debug)


@cli.command("yearly")
def yearly_command(
    ctx: typer.Context,
    ext: bool = EXT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Generate yearly review filename (YYYY)."""
    _emit(ctx, NoteKind.YEARLY, ext, verbose, debug)


# ---------------------------------------------------------------------------
# Sequential codes
# ---------------------------------------------------------------------------
@cli.command("project")
def project_command(
    ctx: typer.Context,
    title: Optional[List[str]] = typer.Argument(
        None, help="Optional project title appended after the number."
    ),
    after: Optional[str] = typer.Option(
        None,
        "--after",
        help="Last existing project code (e.g. P0041); the next number follows it.",
    ),
    check: bool = typer.Option(
        False, "--check", help="Print the next number only, without the title."
    ),
    ext: bool = EXT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Generate project number (PXXXX)."""
    try:
        settings = load_settings()
    except StampError as e:
        _fail(e)

    spec = SequenceSpec("P", settings["project_width"], settings["project_start"])
    counter = SequenceCounter(next_value(spec, after))
    log_debug(
        f"project number: {counter.peek()} (after={after!r})",
        _merge_flags(ctx, ext, verbose, debug)["debug"],
    )

    _emit(
        ctx,
        NoteKind.PROJECT,
        ext,
        verbose,
        debug,
        source=counter,
        title="" if check else " ".join(title or []),
    )


def seq_command(
    ctx: typer.Context,
    title: Optional[List[str]] = typer.Argument(
        None, help="Optional title appended after the code."
    ),
    prefix: str = typer.Option("P", "--prefix", help="Prefix for generated code."),
    width: int = typer.Option(4, "--width", help="Number of digits for zero padding."),
    start: int = typer.Option(1, "--start", help="Starting number when there is no previous code."),
    after: Optional[str] = typer.Option(
        None,
        "--after",
        help="Last existing code; matched case-insensitively against --prefix.",
    ),
    check: bool = typer.Option(
        False, "--check", help="Print the next code only, without the title."
    ),
    ext: bool = EXT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Generate a custom prefixed, zero-padded sequence code."""
    flags = _merge_flags(ctx, ext, verbose, debug)

    spec = SequenceSpec(prefix, width, start).normalized()
    log_debug(f"sequence spec: {spec._asdict()}", flags["debug"])

    code = format_code(spec, next_value(spec, after))
    log_verbose(f"Generated sequence code with prefix {spec.prefix.upper()}.", flags["verbose"])

    if title and not check:
        code += " " + " ".join(title)

    try:
        always_extension = load_settings()["always_extension"]
    except StampError as e:
        _fail(e)
    _output(code, flags["ext"] or always_extension)


cli.command("seq")(seq_command)
cli.command("sequential", hidden=True)(seq_command)


# ---------------------------------------------------------------------------
# stamp new <kind>
# ---------------------------------------------------------------------------
@cli.command("new")
def new_command(
    ctx: typer.Context,
    kind: str = typer.Argument(..., help="Note type, e.g. daily or fleeting."),
    ext: bool = EXT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Generate an identifier for a note type given by name."""
    try:
        note_kind = NoteKind.parse(kind)
    except StampError as e:
        _fail(e)

    source: Optional[Disambiguator] = None
    if note_kind in (NoteKind.FLEETING, NoteKind.VOICE):
        source = MonotonicClockSuffix()
    _emit(ctx, note_kind, ext, verbose, debug, source=source)


# ---------------------------------------------------------------------------
# Entry point for `python -m stamp.cli.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cli()
