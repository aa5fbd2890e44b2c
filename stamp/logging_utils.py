"""
logging_utils.py

Logging helpers for the stamp CLI.

stamp prints exactly one identifier per run on stdout so its output can be
piped or captured. Progress and debug messages therefore go to stderr,
through Typer's echo, and only when the matching flag is set.
"""

import typer


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a short progress message when verbose mode is enabled.

    Parameters
    ----------
    message : str
        Plain-English description of the current step.
    verbose : bool
        When False, nothing is printed.
    """
    if verbose:
        typer.echo(message, err=True)


def log_debug(message: str, debug: bool) -> None:
    """Print a `[debug]`-prefixed line when debug mode is enabled."""
    if debug:
        typer.echo(f"[debug] {message}", err=True)
