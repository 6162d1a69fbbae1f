"""Score wrapper for ranking arbitrary payloads."""

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True, order=True)
class RankedItem:
    """
    Pair a payload with the score it is ranked by.

    Only ``score`` takes part in comparisons, so payloads that are not
    comparable themselves (dicts, listings, ...) can go through ``MaxValues``.
    """

    score: float
    item: Any = field(compare=False)

    @classmethod
    def from_record(cls, record: Mapping[str, Any], key_field: str) -> "RankedItem":
        """
        Build a ranked item from a mapping, scored by one of its fields.

        Args:
            record: Parsed record (e.g. one JSON object)
            key_field: Name of the numeric field to rank by

        Returns:
            RankedItem wrapping the whole record

        Raises:
            ValueError: If the field is missing or not numeric
        """
        if key_field not in record:
            raise ValueError(f"Missing key field '{key_field}'")

        score = record[key_field]
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            raise ValueError(f"Key field '{key_field}' is not numeric: {score!r}")
        if score != score:
            raise ValueError(f"Key field '{key_field}' is NaN, which is not orderable")

        return cls(score=score, item=record)
