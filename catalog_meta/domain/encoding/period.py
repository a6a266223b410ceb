"""DCMI Period encoding: ``start=...; end=...; name=...; scheme=W3C-DTF;``."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Dict, Optional

from catalog_meta.domain.encoding.w3cdtf import encode_date, parse_w3cdtf


SCHEME_W3CDTF = "W3C-DTF"


@dataclass(frozen=True)
class Period:
    """A time interval; either bound may be open."""

    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    name: Optional[str] = None

    @property
    def has_start(self) -> bool:
        return self.start is not None

    @property
    def has_end(self) -> bool:
        return self.end is not None

    def duration_ms(self) -> Optional[int]:
        """Milliseconds from start to end, None for open periods."""
        if self.start is None or self.end is None:
            return None
        delta = self.end - self.start
        return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def _split_components(value: str) -> Optional[Dict[str, str]]:
    components: Dict[str, str] = {}
    for chunk in value.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        key, sep, raw = chunk.partition("=")
        if not sep:
            return None
        key = key.strip().lower()
        if key in components:
            return None
        components[key] = raw.strip()
    return components


def decode_period(value: Optional[str]) -> Optional[Period]:
    """
    Decode a DCMI period.

    Components may come in any order. A ``scheme`` other than W3C-DTF, an
    unknown component, or a bound that is not a W3C-DTF date makes the whole
    value undecodable and None is returned.
    """
    if not value or "=" not in value:
        return None
    components = _split_components(value)
    if not components:
        return None
    if set(components) - {"start", "end", "name", "scheme"}:
        return None

    scheme = components.get("scheme")
    if scheme is not None and scheme.upper() != SCHEME_W3CDTF:
        return None

    start = end = None
    if "start" in components:
        start = parse_w3cdtf(components["start"])
        if start is None:
            return None
    if "end" in components:
        end = parse_w3cdtf(components["end"])
        if end is None:
            return None
    name = components.get("name") or None

    if start is None and end is None and name is None:
        return None
    return Period(start=start, end=end, name=name)


def encode_period(period: Period) -> str:
    parts = []
    if period.start is not None:
        parts.append(f"start={encode_date(period.start)};")
    if period.end is not None:
        parts.append(f"end={encode_date(period.end)};")
    if period.name:
        parts.append(f"name={period.name};")
    parts.append(f"scheme={SCHEME_W3CDTF};")
    return " ".join(parts)
