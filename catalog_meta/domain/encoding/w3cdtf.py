"""W3C-DTF (ISO 8601 profile) date decoding and encoding."""
from __future__ import annotations

import datetime as dt
import re
from typing import Optional


# Profiles accepted, from coarse to fine:
#   YYYY | YYYY-MM | YYYY-MM-DD
#   YYYY-MM-DDThh:mm[TZD] | YYYY-MM-DDThh:mm:ss[TZD] | YYYY-MM-DDThh:mm:ss.s+[TZD]
W3CDTF_RE = re.compile(
    r"^(?P<year>\d{4})"
    r"(?:-(?P<month>\d{2})"
    r"(?:-(?P<day>\d{2})"
    r"(?:T(?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d+))?)?"
    r"(?P<tzd>Z|[+-]\d{2}:\d{2})?"
    r")?)?)?$"
)


def _parse_tzd(tzd: Optional[str]) -> dt.tzinfo:
    if not tzd or tzd == "Z":
        return dt.timezone.utc
    sign = 1 if tzd[0] == "+" else -1
    hours, minutes = int(tzd[1:3]), int(tzd[4:6])
    return dt.timezone(sign * dt.timedelta(hours=hours, minutes=minutes))


def parse_w3cdtf(value: str) -> Optional[dt.datetime]:
    """
    Parse a W3C-DTF string into an aware UTC datetime.

    Missing parts default to their lowest value and a missing time zone
    designator means UTC. Returns None for anything that is not a valid
    W3C-DTF date (including impossible calendar dates).
    """
    m = W3CDTF_RE.match(value.strip())
    if not m:
        return None

    parts = m.groupdict()
    fraction = parts["fraction"] or "0"
    # Only millisecond precision is kept; extra digits are truncated.
    microsecond = int(fraction[:6].ljust(6, "0"))
    try:
        parsed = dt.datetime(
            int(parts["year"]),
            int(parts["month"] or 1),
            int(parts["day"] or 1),
            int(parts["hour"] or 0),
            int(parts["minute"] or 0),
            int(parts["second"] or 0),
            microsecond - microsecond % 1000,
            tzinfo=_parse_tzd(parts["tzd"]),
        )
    except ValueError:
        return None
    return parsed.astimezone(dt.timezone.utc)


def decode_date(value: Optional[str]) -> Optional[dt.datetime]:
    """
    Decode a date value, W3C-DTF first, then as a DCMI period.

    A period is reduced to its start. Returns None when neither works.
    """
    if value is None:
        return None
    parsed = parse_w3cdtf(value)
    if parsed is not None:
        return parsed

    # Imported here because period decoding reuses parse_w3cdtf.
    from catalog_meta.domain.encoding.period import decode_period  # pylint: disable=import-outside-toplevel

    period = decode_period(value)
    if period is not None and period.has_start:
        return period.start
    return None


def encode_date(value: dt.datetime) -> str:
    """Render a datetime as YYYY-MM-DDThh:mm:ss.sssZ (naive values are taken as UTC)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt.timezone.utc)
    value = value.astimezone(dt.timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
