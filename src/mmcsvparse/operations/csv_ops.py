"""CSV conversion pipeline: read, resolve user IDs, write."""

from collections.abc import Callable
from enum import Enum

from ..core.exceptions import MMCsvParseError
from ..models.config import EndpointDescriptor, RunConfig
from ..models.user import RunSummary
from ..utils.csv_utils import CsvTableReader, CsvTableWriter, find_column_index
from ..utils.display_utils import (
    print_debug,
    print_error,
    print_info,
    print_warning,
)
from ..utils.file_utils import open_output, safe_file_read
from .user_ops import resolve_user

Resolver = Callable[[EndpointDescriptor, str, bool], tuple[str, bool]]


class PipelineState(Enum):
    """Lifecycle of a conversion run."""

    AWAIT_HEADER = "await_header"
    COLUMN_LOOKUP = "column_lookup"
    STREAMING = "streaming"
    DONE = "done"
    FAILED = "failed"


class CsvUserIdPipeline:
    """Rewrites one column of Mattermost user IDs in a CSV file.

    Rows are handled strictly one at a time: read, resolve, write. A row
    whose user cannot be resolved is left out of the output; anything
    that makes the whole run pointless (missing header or column, broken
    CSV, unreachable server) stops the run by raising.

    Args:
        config: Run configuration
        resolver: Lookup function, ``resolve_user`` unless overridden
    """

    def __init__(self, config: RunConfig, resolver: Resolver = resolve_user):
        self.config = config
        self.resolver = resolver
        self.state = PipelineState.AWAIT_HEADER
        self.column_index: int | None = None
        self.summary = RunSummary(input_file=config.input_file)

    def run(self) -> RunSummary:
        """Execute the conversion.

        Returns:
            RunSummary: Counts for the run with ``success`` set

        Raises:
            MMCsvParseError: Any fatal condition; the pipeline is left in
                the FAILED state and output written so far is flushed
        """
        config = self.config
        print_info(f"Processing data from file: {config.input_file}")
        print_info(f"Writing output to file:    {config.output_file}")

        try:
            with safe_file_read(config.input_file) as input_file:
                reader = CsvTableReader(input_file, file_path=config.input_file)

                header = reader.read_header()
                print_debug(f"CSV Header: {', '.join(header)}")

                self.state = PipelineState.COLUMN_LOOKUP
                index = find_column_index(header, config.column)
                self.column_index = index
                print_debug(f"Selected column is at index: {index} (zero-based)")

                self.state = PipelineState.STREAMING
                self._stream_rows(reader, header, index)
        except MMCsvParseError as e:
            self.state = PipelineState.FAILED
            print_error(str(e), file_path=config.input_file, operation="process_csv")
            raise

        self.state = PipelineState.DONE
        self.summary.success = True
        print_info(f"Records processed: {self.summary.rows_written}")
        if self.summary.rows_skipped:
            print_warning(f"Records skipped: {self.summary.rows_skipped}")
        return self.summary

    def _stream_rows(
        self, reader: CsvTableReader, header: list[str], index: int
    ) -> None:
        with open_output(self.config.output_file) as (stream, written_path):
            self.summary.output_file = written_path
            writer = CsvTableWriter(stream)
            writer.write_header(header)

            for record in reader:
                print_debug(f"Current record: [ {', '.join(record)} ]")
                user_id = record[index]

                display_value, ok = self.resolver(
                    self.config.endpoint, user_id, self.config.fullname
                )
                if not ok:
                    print_warning(
                        "Error looking up User ID - skipping record!",
                        user_id=user_id,
                        csv_line=reader.line_num,
                    )
                    self.summary.record_skipped(user_id)
                    continue

                print_debug(f"User data from Mattermost: {display_value}")
                output_row = list(record)
                output_row[index] = display_value
                writer.write_row(output_row)
                self.summary.record_written()


def process_csv_file(config: RunConfig, resolver: Resolver = resolve_user) -> RunSummary:
    """Convert the configured CSV file.

    Args:
        config: Run configuration
        resolver: Lookup function, ``resolve_user`` unless overridden

    Returns:
        RunSummary: Counts for the run

    Raises:
        MMCsvParseError: Any fatal condition
    """
    return CsvUserIdPipeline(config, resolver=resolver).run()
