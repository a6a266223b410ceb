"""Coercion of raw string values into typed field values."""
from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence

from catalog_meta.domain.encoding.period import decode_period
from catalog_meta.shared.enums import FieldType
from catalog_meta.shared.errors import NumericParseError
from catalog_meta.shared.logging import get_logger


logger = get_logger(__name__)

INTEGER_RE = re.compile(r"^[+-]?\d+$")
LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1


def filter_blank(values: Iterable[Optional[str]]) -> List[str]:
    """Drop None and whitespace-only values, keeping the order of the rest."""
    return [v for v in values if v is not None and v.strip()]


def select_values(field_type: FieldType, values: Sequence[str]) -> List[str]:
    """
    Apply the cardinality policy of a field type to filtered values.

    Multi-valued types keep every value. Single-valued types keep only the
    last one; receiving more than one is logged as a warning, not an error.
    """
    if field_type.is_multi_valued or len(values) <= 1:
        return list(values)
    logger.warning(
        "Cannot put multiple values into a single-value field, only the last value is used. %s",
        list(values),
    )
    return [values[-1]]


def parse_boolean(value: str) -> bool:
    """True only for 'true' in any case; everything else is False."""
    return value.lower() == "true"


def _parse_int(value: str) -> Optional[int]:
    if not INTEGER_RE.match(value):
        return None
    return int(value)


def parse_long(value: str) -> int:
    """
    Parse a signed 64-bit base-10 integer.

    Raises NumericParseError on malformed or out-of-range input.
    """
    parsed = _parse_int(value)
    if parsed is None:
        raise NumericParseError(f"For input string: {value!r}", value=value)
    if not LONG_MIN <= parsed <= LONG_MAX:
        raise NumericParseError(f"Value out of range for a long: {value!r}", value=value)
    return parsed


def parse_duration(value: str) -> Optional[int]:
    """
    Parse a duration in milliseconds. Strategies, in this order:

    1. ``H:M:S`` when the value has exactly three colon-separated parts
       (trailing empty parts ignored);
    2. a DCMI period with both start and end (end - start);
    3. a plain base-10 integer of milliseconds.

    A value with three colon parts never falls through to 2 or 3. Returns
    None when nothing applies or the result is not positive.
    """
    duration: Optional[int] = None
    parts = value.split(":")
    # trailing empty parts do not count, "1:2:3:" is still H:M:S
    while parts and parts[-1] == "":
        parts.pop()
    if len(parts) == 3:
        numbers = [_parse_int(part) for part in parts]
        if any(n is None for n in numbers):
            logger.debug("Unable to parse duration '%s' as hours:minutes:seconds.", value)
            return None
        hours, minutes, seconds = numbers
        duration = ((hours * 60 + minutes) * 60 + seconds) * 1000
    else:
        period = decode_period(value)
        if period is not None and period.has_start and period.has_end:
            duration = period.duration_ms()
        else:
            duration = _parse_int(value)
            if duration is None:
                logger.debug(
                    "Unable to parse duration '%s' value as either a period or millisecond duration.",
                    value,
                )
                return None

    if duration is None or duration <= 0:
        return None
    return duration
