# path: gpx-geojson/gpx_geojson/services/host_helpers.py

"""
Helpers for the host that feeds files to the converter.

Neither touches the file system: callers hand over the path and, if they
have them, the first bytes of the file.
"""

from __future__ import annotations

from datetime import date
from pathlib import PurePath
from typing import Iterable, Optional, Tuple
import re

from gpx_geojson.config import normalize_extensions, settings


SNIFF_BYTES = 1024

_GPX_ROOT_RE = re.compile(rb"<(?:[A-Za-z_][\w.-]*:)?gpx[\s>/]")

MONTHS = {
    "january": 1, "february": 2, "march": 3, "april": 4,
    "may": 5, "june": 6, "july": 7, "august": 8,
    "september": 9, "october": 10, "november": 11, "december": 12,
}
MONTHS.update({name[:3]: num for name, num in list(MONTHS.items())})
MONTHS["sept"] = 9

_SEP = r"[-_ .]"
_MONTH = r"(?P<month_name>[A-Za-z]{3,9})"

# Tried in order; each must match at the start of the stem
_DATE_PATTERNS = (
    re.compile(rf"^(?P<year>\d{{4}})-(?P<month>\d{{1,2}})-(?P<day>\d{{1,2}})(?:{_SEP}+|$)"),
    re.compile(rf"^(?P<year>\d{{4}})(?P<month>\d{{2}})(?P<day>\d{{2}})(?:{_SEP}+|$)"),
    re.compile(rf"^(?P<day>\d{{1,2}}){_SEP}+{_MONTH}{_SEP}+(?P<year>\d{{4}})(?:{_SEP}+|$)"),
    re.compile(rf"^{_MONTH}{_SEP}+(?P<day>\d{{1,2}}),?{_SEP}+(?P<year>\d{{4}})(?:{_SEP}+|$)"),
)


def is_geo_track_file(
    path: str,
    sniff: bytes = b"",
    extensions: Optional[Iterable[str]] = None,
) -> bool:
    """True if ``path`` should be read as a GPX track.

    Matches on extension first (case-insensitive); failing that, looks for a
    ``<gpx`` root element in the sniffed leading bytes.
    """
    if extensions is None:
        allowed = settings.extensions
    else:
        allowed = normalize_extensions(extensions)
    if PurePath(path).suffix.lower() in allowed:
        return True
    return bool(sniff) and _GPX_ROOT_RE.search(sniff[:SNIFF_BYTES]) is not None


def _title_from(rest: str) -> Optional[str]:
    words = [w for w in re.split(r"[-_ ]+", rest) if w]
    if not words:
        return None
    title = " ".join(words)
    return title[0].upper() + title[1:]


def _match_date(stem: str) -> Tuple[Optional[date], str]:
    for pattern in _DATE_PATTERNS:
        m = pattern.match(stem)
        if not m:
            continue
        parts = m.groupdict()
        if parts.get("month_name") is not None:
            month = MONTHS.get(parts["month_name"].lower())
            if month is None:
                continue
        else:
            month = int(parts["month"])
        try:
            found = date(int(parts["year"]), month, int(parts["day"]))
        except ValueError:
            # matched the shape but not a real calendar day
            return None, stem[m.end():]
        return found, stem[m.end():]
    return None, stem


def infer_date_and_title(filename: str) -> Tuple[Optional[date], Optional[str]]:
    """Pull a ride date and a title out of a file name.

    >>> infer_date_and_title("2021-06-13-morning-ride.gpx")
    (datetime.date(2021, 6, 13), 'Morning ride')
    """
    stem = PurePath(filename).stem
    found, rest = _match_date(stem)
    return found, _title_from(rest)
