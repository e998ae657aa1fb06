"""
Delimited text reader for bulk graph construction.

Each line holds a hub vertex followed by its neighbors, separated by a
delimiter:

    A B C G H
    B C H

No header, quoting or escaping is supported.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from ..exceptions import GraphLoadError

logger = logging.getLogger(__name__)


def check_delimiter(delimiter: Optional[str]) -> None:
    """
    Reject delimiters str.split cannot use.

    Raises:
        ValueError: If delimiter is an empty string
    """
    if delimiter == "":
        raise ValueError("Delimiter must be a non-empty string, or None for whitespace")


def split_fields(line: str, delimiter: Optional[str] = None) -> List[str]:
    """
    Split one record into vertex labels.

    Args:
        line: Raw line, with or without its terminator
        delimiter: Field separator; None splits on runs of whitespace

    Returns:
        Non-empty labels in line order. The first one is the hub. A line
        whose hub field is empty yields no labels.

    Raises:
        ValueError: If delimiter is an empty string
    """
    check_delimiter(delimiter)
    line = line.rstrip("\r\n")
    if delimiter is None:
        return line.split()

    fields = line.split(delimiter)
    # trailing empty fields carry no label
    while fields and fields[-1] == "":
        fields.pop()
    if fields and fields[0] == "":
        logger.warning(f"Skipping line with an empty hub field: {line!r}")
        return []
    labels = [field for field in fields if field != ""]
    if len(labels) != len(fields):
        logger.warning(f"Skipping {len(fields) - len(labels)} empty field(s) in {line!r}")
    return labels


def iter_records(lines: Iterable[str],
                 delimiter: Optional[str] = None) -> Iterator[Tuple[int, str, str, List[str]]]:
    """
    Parse lines into hub/neighbor records.

    Lines with fewer than two labels are skipped.

    Args:
        lines: Source lines in order
        delimiter: Field separator, see split_fields

    Yields:
        (lineno, line, hub, neighbors) with 1-based line numbers
    """
    for lineno, line in enumerate(lines, start=1):
        labels = split_fields(line, delimiter)
        if len(labels) < 2:
            logger.debug(f"Line {lineno} has no neighbors, skipped")
            continue
        yield lineno, line, labels[0], labels[1:]


def read_lines(filename: str, encoding: str = "utf-8") -> Iterator[str]:
    """
    Yield the lines of a text file.

    Args:
        filename: Path of the file to read
        encoding: Text encoding of the file

    Raises:
        GraphLoadError: If the file cannot be opened, read or decoded
    """
    try:
        with open(filename, "r", encoding=encoding) as infile:
            yield from infile
    except (OSError, UnicodeDecodeError) as exc:
        raise GraphLoadError(f"Cannot read graph source {filename!r}: {exc}", filename) from exc
