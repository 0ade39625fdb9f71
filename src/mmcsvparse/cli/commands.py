"""Command handlers for CLI operations."""

import click

from ..core.config import get_env_config
from ..core.exceptions import ConfigError, MMCsvParseError
from ..models.user import RunSummary
from ..operations.csv_ops import process_csv_file
from ..operations.user_ops import check_connection
from ..utils.display_utils import (
    RED,
    RESET,
    print_debug,
    print_error,
    print_info,
    print_success,
)
from ..utils.logging_utils import configure_from_env
from ..utils.rich_utils import render_summary
from .validators import build_endpoint, build_run_config


class OperationHandler:
    """Handles CLI operations for the Mattermost CSV converter.

    Each ``handle_*`` method returns True on success and False on failure;
    the click layer turns that into the process exit status.
    """

    def __init__(self) -> None:
        self.last_summary: RunSummary | None = None

    def _setup_logging(self, debug: bool) -> bool:
        """Configure logging, honouring MM_DEBUG when --debug is not given."""
        debug = debug or bool(get_env_config()["debug"])
        configure_from_env(debug=debug)
        return debug

    def _report_config_error(self, error: ConfigError) -> None:
        print_error(error.message)
        for problem in (error.details or "").split("; "):
            if problem:
                click.echo(f"{RED}  - {problem}{RESET}", err=True)

    def handle_convert(
        self,
        url: str | None,
        port: str | None,
        scheme: str | None,
        token: str | None,
        input_file: str | None,
        output_file: str | None,
        column: str | None,
        fullname: bool = False,
        debug: bool = False,
    ) -> bool:
        """Convert user IDs in a CSV file to usernames or full names.

        Returns:
            bool: True if the run reached completion
        """
        debug = self._setup_logging(debug)

        try:
            config = build_run_config(
                url,
                port,
                scheme,
                token,
                input_file,
                output_file,
                column,
                fullname=fullname,
                debug=debug,
            )
        except ConfigError as e:
            self._report_config_error(e)
            return False

        print_debug(f"Parameters: {config.to_dict()}")
        if config.fullname:
            print_debug("Fullname flag is set")

        try:
            summary = process_csv_file(config)
        except MMCsvParseError:
            # Already logged by the pipeline
            return False

        self.last_summary = summary
        print_success("CSV processing complete!")
        if debug:
            render_summary("Run summary", summary.get_summary())
        return True

    def handle_doctor(
        self,
        url: str | None,
        port: str | None,
        scheme: str | None,
        token: str | None,
        test_api: bool = False,
    ) -> bool:
        """Check configuration and optionally that the token works.

        Returns:
            bool: True if every requested check passed
        """
        self._setup_logging(debug=False)

        try:
            endpoint = build_endpoint(url, port, scheme, token)
        except ConfigError as e:
            self._report_config_error(e)
            return False

        print_info(f"Mattermost server: {endpoint.base_url}")
        print_info(f"Auth token: {endpoint.token[:4]}{'*' * 8}")

        if not test_api:
            print_success("Configuration looks valid")
            return True

        result = check_connection(endpoint)
        render_summary("Connection check", result)
        if not result["success"]:
            print_error(f"API access test failed: {result['details']}")
            return False

        print_success(f"API access successful as {result['username']}")
        return True
