"""Cli utilities."""

import click


def icon_message(icon: str, message: str) -> str:
    """Prefix a message with an icon."""
    return f"{icon} {message}"


def echo_verbose(verbose: bool, icon: str, message: str) -> None:  # noqa: FBT001
    """Print an action line, but only in verbose mode."""
    if verbose:
        click.echo(icon_message(icon, message))


def echo_warning(message: str) -> None:
    """Print a warning to stderr."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def echo_error(message: str) -> None:
    """Print a non-fatal error to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)
