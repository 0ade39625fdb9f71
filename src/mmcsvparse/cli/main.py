"""Click-based CLI entry point for the Mattermost CSV converter."""

import sys

import click

from ..core.config import DEFAULT_PORT, DEFAULT_SCHEME
from ..utils.display_utils import RED, RESET, YELLOW
from ..utils.rich_utils import install_rich_tracebacks
from .commands import OperationHandler


def connection_options(func):
    """Shared Mattermost connection options."""
    func = click.option(
        "--token", help="The auth token used to connect to Mattermost [env: MM_TOKEN]"
    )(func)
    func = click.option(
        "--scheme",
        type=click.Choice(["http", "https"], case_sensitive=False),
        help=f"The HTTP scheme to be used [env: MM_SCHEME, default: {DEFAULT_SCHEME}]",
    )(func)
    func = click.option(
        "--port",
        help=f"The TCP port used by Mattermost [env: MM_PORT, default: {DEFAULT_PORT}]",
    )(func)
    func = click.option(
        "--url",
        help="The host of the Mattermost instance, without the HTTP scheme [env: MM_URL]",
    )(func)
    return func


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """mm-csv-parse - convert Mattermost user IDs in a CSV file."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@connection_options
@click.option("--infile", help="*Required* The name of the CSV file to be processed")
@click.option(
    "--outfile",
    help="*Required* The name of the output file that the CSV should be written to",
)
@click.option(
    "--column",
    help="*Required* The name of the column within the CSV file that contains the user ID",
)
@click.option(
    "--fullname",
    is_flag=True,
    help="Return the full name of the Mattermost user instead of the username "
    "(if a full name is available)",
)
@click.option("--debug", is_flag=True, help="Enable debug output [env: MM_DEBUG]")
def convert(
    url: str | None,
    port: str | None,
    scheme: str | None,
    token: str | None,
    infile: str | None,
    outfile: str | None,
    column: str | None,
    fullname: bool,
    debug: bool,
) -> None:
    """Replace user IDs in a CSV column with usernames or full names."""
    handler = OperationHandler()
    success = handler.handle_convert(
        url, port, scheme, token, infile, outfile, column, fullname, debug
    )
    if not success:
        sys.exit(1)


@cli.command()
@connection_options
@click.option("--test-api", is_flag=True, help="Test API access with the token")
def doctor(
    url: str | None,
    port: str | None,
    scheme: str | None,
    token: str | None,
    test_api: bool,
) -> None:
    """Check Mattermost settings and, optionally, API access."""
    handler = OperationHandler()
    if not handler.handle_doctor(url, port, scheme, token, test_api):
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI application."""
    try:
        install_rich_tracebacks()
        cli()
    except KeyboardInterrupt:
        click.echo(f"\n{YELLOW}Operation interrupted by user.{RESET}", err=True)
        sys.exit(130)
    except Exception as e:
        click.echo(f"{RED}Unexpected error: {e}{RESET}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
