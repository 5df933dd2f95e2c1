"""
XML record helpers.

Plays the part of the markup writer around the nullable types: elements of
absent values are never written and attributes with an empty name are
dropped.
"""

import re
from typing import Mapping, Optional
from xml.etree.ElementTree import Element, ParseError, fromstring, tostring

from nulls.core.models import Nullable, XmlAttr
from nulls.infra.exceptions import NullsError
from nulls.infra.logger import get_logger

log = get_logger("nulls.xml")

_XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>\s*")


def set_attr(element: Element, attr: XmlAttr) -> None:
    """Apply ``attr`` to ``element``, dropping it when its name is empty."""
    if attr.is_empty:
        return
    element.set(attr.name, attr.value)


def marshal_record(
    tag: str,
    elements: Optional[Mapping[str, Nullable]] = None,
    attributes: Optional[Mapping[str, Nullable]] = None,
) -> str:
    """
    Render ``<tag>`` with one attribute or child element per nullable.

    An element with nothing inside keeps its explicit end tag
    (``<tag></tag>``).
    """
    root = Element(tag)
    for name, field in (attributes or {}).items():
        set_attr(root, field.encode_xml_attr(name))
    for name, field in (elements or {}).items():
        field.encode_xml(root, name)
    return tostring(root, encoding="unicode", short_empty_elements=False)


def unmarshal_record(
    text: str,
    elements: Optional[Mapping[str, Nullable]] = None,
    attributes: Optional[Mapping[str, Nullable]] = None,
) -> Element:
    """
    Decode ``text`` into the given nullables, in place.

    Missing children and attributes leave their nullable untouched.
    Returns the parsed root element.
    """
    try:
        root = fromstring(_XML_DECLARATION.sub("", text, count=1))
    except ParseError as e:
        log.debug("nulls.xml.parse_failed", error=str(e))
        raise NullsError(f"malformed XML document: {e}") from e

    for name, field in (attributes or {}).items():
        value = root.get(name)
        if value is not None:
            field.decode_xml_attr(XmlAttr(name=name, value=value))
    for name, field in (elements or {}).items():
        field.decode_xml(root.find(name))
    return root
