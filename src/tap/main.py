"""Main entry point for tap."""

import pathlib as pl

import click

from tap import cli, consts, paths
from tap.fsplan import run_plans
from tap.options import TapOptions


@click.command(
    name=consts.PROGRAM_NAME,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("arg_paths", metavar="PATHS...", nargs=-1, required=True)
@click.option("-d", "--dir", "arg_dir", is_flag=True, help="Create a directory instead of a file.")
@click.option("-c", "--chmod", "arg_chmod", type=str, help="Set specific permissions (octal format, e.g. 644).")
@click.option("-w", "--write", "arg_write", type=str, help="Add content to the file.")
@click.option(
    "-t",
    "--timestamp",
    "arg_timestamp",
    type=str,
    help=f'Set the modification time ("{consts.TIMESTAMP_FORMAT_HUMAN}", UTC).',
)
@click.option("-a", "--append", "arg_append", is_flag=True, help="Append content instead of overwriting.")
@click.option("-v", "--verbose", "arg_verbose", is_flag=True, help="Enable verbose output.")
@click.option(
    "-R",
    "--recursive",
    "arg_recursive",
    is_flag=True,
    help="Apply chmod recursively (only works with directories).",
)
@click.option(
    "--template",
    "arg_template",
    type=click.Path(dir_okay=False, path_type=pl.Path),
    help="Use a template file for content.",
)
@click.option("--trim", "arg_trim", is_flag=True, help="Remove trailing whitespace from each line.")
@click.option("--check", "arg_check", is_flag=True, help="Check if the file or directory exists (dry run).")
@click.version_option(package_name=consts.DISTRIBUTION_NAME, prog_name=consts.PROGRAM_NAME)
def main(  # noqa: PLR0913
    arg_paths: tuple[str, ...],
    arg_dir: bool,  # noqa: FBT001
    arg_chmod: str | None,
    arg_write: str | None,
    arg_timestamp: str | None,
    arg_append: bool,  # noqa: FBT001
    arg_verbose: bool,  # noqa: FBT001
    arg_recursive: bool,  # noqa: FBT001
    arg_template: pl.Path | None,
    arg_trim: bool,  # noqa: FBT001
    arg_check: bool,  # noqa: FBT001
) -> None:
    """A next-gen version of touch with extended capabilities.

    Creates or updates each of PATHS. Glob patterns are expanded; a pattern
    matching nothing is created as a new file (or directory with --dir).
    """
    options = TapOptions(
        paths=arg_paths,
        dir=arg_dir,
        chmod=arg_chmod,
        write=arg_write,
        timestamp=arg_timestamp,
        append=arg_append,
        verbose=arg_verbose,
        recursive=arg_recursive,
        template=arg_template,
        trim=arg_trim,
        check=arg_check,
    )

    if options.recursive and options.chmod is None:
        cli.echo_warning("--recursive has no effect without --chmod.")

    run_plans(paths.expand_paths(options.paths), options)


if __name__ == "__main__":
    main()
