"""Streaming readers for value and record files."""

import json
import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from models.ranked import RankedItem

logger = logging.getLogger(__name__)

Number = Union[int, float]


def parse_value(text: str) -> Optional[Number]:
    """
    Parse a single numeric value.

    Integers stay integers, everything else is parsed as float.

    Args:
        text: Raw line, surrounding whitespace is ignored

    Returns:
        Parsed number, or None for a blank line

    Raises:
        ValueError: If the text is not a number
    """
    text = text.strip()
    if not text:
        return None

    try:
        return int(text)
    except ValueError:
        pass

    value = float(text)
    if value != value:
        raise ValueError(f"NaN is not orderable: {text!r}")
    return value


def iter_values(path: Union[str, Path]) -> Iterator[Number]:
    """
    Yield numbers from a file with one value per line.

    Malformed lines are logged and skipped.

    Args:
        path: Input file

    Yields:
        Parsed numbers in file order
    """
    # Undecodable bytes become U+FFFD so the line fails parsing and is skipped
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line_no, line in enumerate(f, start=1):
            try:
                value = parse_value(line)
            except ValueError as e:
                logger.warning(f"Skipping line {line_no} of {path}: {e}")
                continue
            if value is not None:
                yield value


def iter_records(path: Union[str, Path], key_field: str) -> Iterator[RankedItem]:
    """
    Yield ranked records from a JSON-lines file.

    Args:
        path: Input file, one JSON object per line
        key_field: Numeric field each record is ranked by

    Yields:
        RankedItem per valid record
    """
    # Undecodable bytes become U+FFFD so the line fails parsing and is skipped
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
                if not isinstance(record, dict):
                    raise ValueError("expected a JSON object")
                ranked = RankedItem.from_record(record, key_field)
            except ValueError as e:
                # json.JSONDecodeError is a ValueError subclass
                logger.warning(f"Skipping record on line {line_no} of {path}: {e}")
                continue
            yield ranked
