"""
CSV reader for per-method test input data.

A Method may point at a comma-separated file whose rows hold parameter
values for generated tests. Rows are split on ',' only: no quoting rules,
no type coercion, and ragged rows are returned exactly as given.
"""

import logging
from pathlib import Path
from typing import Optional

from engine.models import Method
from engine.parser.lines import split_lines

logger = logging.getLogger(__name__)


def split_csv_line(line: str) -> list[str]:
    """
    Split one row into its fields.

    Empty fields, including trailing ones, are kept.

    Example:
        >>> split_csv_line("1,abc,,")
        ['1', 'abc', '', '']
    """
    return line.split(",")


def parse_csv_source(text: str) -> list[list[str]]:
    """Split CSV text into rows of raw field strings, one row per line."""
    return [split_csv_line(line) for line in split_lines(text)]


def parse_csv_file(csv_path: Path | str) -> list[list[str]]:
    """
    Read a CSV data file into rows of raw field strings.

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    csv_path = Path(csv_path)
    try:
        text = csv_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error reading CSV file %s: %s", csv_path, e)
        raise
    except UnicodeDecodeError as e:
        logger.error("CSV file %s is not valid UTF-8: %s", csv_path, e)
        raise

    rows = parse_csv_source(text)
    logger.debug("Read %d rows from %s", len(rows), csv_path)
    return rows


def load_input_data(method: Method) -> Optional[list[list[str]]]:
    """Return the rows of a method's input data file, or None if it has none."""
    if method.input_data_file is None:
        return None
    return parse_csv_file(method.input_data_file)
