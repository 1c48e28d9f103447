"""XML front end for coded-instance scout files.

Decodes documents made of repeated
``<instance><code/><start/><label><group/><text/></label></instance>``
blocks into :class:`~scoutlog.ingest.schemas.CodedInstance` records.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from scoutlog.exceptions import DecodeError
from scoutlog.ingest.detect import format_timestamp
from scoutlog.ingest.schemas import CodedInstance, Label

logger = logging.getLogger(__name__)


def read_xml_document(text: str | bytes) -> ET.Element:
    """Parse XML text into an element tree.

    Args:
        text: Raw XML document.

    Returns:
        Root element of the document.

    Raises:
        DecodeError: If the document is not well-formed XML.
    """
    try:
        return ET.fromstring(text)
    except ET.ParseError as exc:
        msg = f"Malformed XML scout file: {exc}"
        raise DecodeError(msg) from exc


def _child_text(element: ET.Element, tag: str) -> str | None:
    child = element.find(tag)
    if child is None:
        return None
    return child.text or ""


def decode_xml_instances(root: ET.Element) -> list[CodedInstance]:
    """Decode every ``<instance>`` element in document order.

    A missing ``<code>`` becomes ``""`` and a missing ``<start>``
    becomes ``"0"``.

    Args:
        root: Root element of the document.

    Returns:
        List of :class:`CodedInstance` records.
    """
    instances: list[CodedInstance] = []
    for element in root.iter("instance"):
        labels = tuple(
            Label(
                group=_child_text(label, "group"),
                text=_child_text(label, "text"),
            )
            for label in element.findall("label")
        )
        instances.append(
            CodedInstance(
                code=_child_text(element, "code") or "",
                start=format_timestamp(_child_text(element, "start")),
                labels=labels,
            )
        )
    logger.debug("Decoded %d XML instances", len(instances))
    return instances


def detect_player_name(
    instances: list[CodedInstance],
    separator: str = " - ",
) -> str | None:
    """Extract a player name from the first ``"Name - Action"`` code.

    Args:
        instances: Decoded instances in document order.
        separator: Separator between name and action.

    Returns:
        The stripped name prefix, or ``None`` if no code carries one.
    """
    for instance in instances:
        if separator in instance.code:
            name = instance.code.split(separator)[0].strip()
            if name:
                return name
    return None
