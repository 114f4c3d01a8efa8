# path: gpx-geojson/gpx_geojson/utils/xml.py

from __future__ import annotations

from functools import lru_cache
from typing import Iterator, Optional
from xml.etree.ElementTree import Element
import logging
import math

from gpx_geojson.errors import GPXParseError, MissingDependencyError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def xml_backend():
    """Import the XML parser once. Failing to import it is fatal."""
    try:
        from defusedxml import ElementTree
    except ImportError as e:
        logger.critical("You are missing a library required for GPX conversion. Please run:")
        logger.critical("  $ pip install defusedxml")
        raise MissingDependencyError("Missing dependency: defusedxml") from e
    return ElementTree


def parse_document(content: bytes) -> Element:
    et = xml_backend()
    try:
        return et.fromstring(content)
    except et.ParseError as e:
        raise GPXParseError(f"Invalid GPX file: {e}") from e
    except ValueError as e:
        # defusedxml refuses DTDs/entities with DefusedXmlException (a ValueError)
        raise GPXParseError(f"Invalid GPX file: {e}") from e


def local_name(el: Element) -> str:
    """Tag without its "{namespace}" prefix; GPX 1.0, 1.1 and bare files all match."""
    tag = el.tag
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def iter_named(el: Element, name: str) -> Iterator[Element]:
    """``el`` and its descendants named ``name``, in document order."""
    for child in el.iter():
        if local_name(child) == name:
            yield child


def find_child(el: Element, name: str) -> Optional[Element]:
    for child in el:
        if local_name(child) == name:
            return child
    return None


def child_text(el: Element, name: str) -> Optional[str]:
    child = find_child(el, name)
    if child is None or child.text is None:
        return None
    text = child.text.strip()
    return text or None


def parse_float(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def float_attr(el: Element, name: str) -> Optional[float]:
    return parse_float(el.get(name))
