"""Format detection and record decoding.

Inspects an already decoded payload with structural probes only and
turns each raw item into a typed :data:`ParsedRecord` variant. Nothing
in this module raises on unexpected shapes: an unrecognized payload is
reported as :attr:`SchemaVariant.UNKNOWN` with no records.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from scoutlog.ingest.schemas import (
    CodedInstance,
    Label,
    RecordFlags,
    SchemaVariant,
    TaggedEvent,
)

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from scoutlog.ingest.schemas import ParsedRecord

logger = logging.getLogger(__name__)

_FLAG_KEYS: tuple[str, ...] = ("isPass", "isShot", "isSuccess", "isFailure")

_JSON_RECORD_VARIANTS: frozenset[SchemaVariant] = frozenset(
    {
        SchemaVariant.CODED_INSTANCES,
        SchemaVariant.EVENT_OBJECTS,
        SchemaVariant.FLAGGED_EVENT_OBJECTS,
    }
)


@dataclass(frozen=True, slots=True)
class DecodedPayload:
    """A payload after schema detection and per-record decoding.

    Attributes:
        variant: Detected schema variant.
        records: Decoded records in source order (empty for ``UNKNOWN``).
    """

    variant: SchemaVariant
    records: tuple[ParsedRecord, ...]


def _text(value: object) -> str:
    """Return *value* as text, mapping ``None`` to an empty string."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def format_timestamp(value: object) -> str:
    """Render a raw ``start`` value as the timestamp label.

    Strings pass through verbatim. Falsy values become ``"0"`` and
    integral floats drop their fraction (``5.0`` -> ``"5"``), matching
    how the exporters' own viewers display them.

    Args:
        value: Raw ``start`` field.

    Returns:
        Timestamp label.
    """
    if isinstance(value, str):
        return value if value else "0"
    if value is None or value is False or value == 0:
        return "0"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def _decode_labels(raw_labels: object) -> tuple[Label, ...]:
    if not isinstance(raw_labels, list):
        return ()
    labels: list[Label] = []
    for raw in raw_labels:
        if not isinstance(raw, Mapping):
            continue
        group = raw.get("group")
        text = raw.get("text")
        labels.append(
            Label(
                group=None if group is None else _text(group),
                text=None if text is None else _text(text),
            )
        )
    return tuple(labels)


def decode_record(item: object, variant: SchemaVariant) -> ParsedRecord | None:
    """Decode one raw item under the schema detected for its payload.

    Items of a top-level array are always coded instances and items of
    an ``events`` array are always event objects, whatever stray keys
    they carry. Non-mapping items cannot be decoded.

    Args:
        item: One element of the raw record list.
        variant: Schema variant detected for the whole payload.

    Returns:
        A :class:`CodedInstance` or :class:`TaggedEvent`, or ``None``
        when *item* is not a mapping or *variant* has no JSON records.
    """
    if not isinstance(item, Mapping) or variant not in _JSON_RECORD_VARIANTS:
        return None

    flags = RecordFlags.from_mapping(dict(item))

    if variant is SchemaVariant.CODED_INSTANCES:
        return CodedInstance(
            code=_text(item.get("code")),
            start=format_timestamp(item.get("start")),
            labels=_decode_labels(item.get("label")),
            flags=flags,
        )

    tags = item.get("tags")
    return TaggedEvent(
        type=_text(item.get("type")),
        start=format_timestamp(item.get("start")),
        tags=tuple(tags) if isinstance(tags, list) else (),
        flags=flags,
    )


def detect_json_variant(payload: object) -> SchemaVariant:
    """Identify the schema variant of a decoded JSON value.

    Args:
        payload: Result of JSON deserialization.

    Returns:
        The detected :class:`SchemaVariant`.
    """
    if isinstance(payload, list):
        return SchemaVariant.CODED_INSTANCES

    if isinstance(payload, Mapping):
        events = payload.get("events")
        if isinstance(events, list):
            flagged = any(
                isinstance(e, Mapping)
                and any(isinstance(e.get(k), bool) for k in _FLAG_KEYS)
                for e in events
            )
            if flagged:
                return SchemaVariant.FLAGGED_EVENT_OBJECTS
            return SchemaVariant.EVENT_OBJECTS

    return SchemaVariant.UNKNOWN


def decode_json_payload(payload: object) -> DecodedPayload:
    """Detect the schema of *payload* and decode every record.

    Args:
        payload: Result of JSON deserialization.

    Returns:
        A :class:`DecodedPayload`; ``UNKNOWN`` payloads carry no records.
    """
    variant = detect_json_variant(payload)

    if variant is SchemaVariant.UNKNOWN:
        logger.warning(
            "Unrecognized scout payload of type %s -- returning empty result",
            type(payload).__name__,
        )
        return DecodedPayload(variant=variant, records=())

    if variant is SchemaVariant.CODED_INSTANCES:
        raw_items: list[Any] = payload  # type: ignore[assignment]
    else:
        raw_items = payload["events"]  # type: ignore[index]

    records: list[ParsedRecord] = []
    for index, item in enumerate(raw_items):
        record = decode_record(item, variant)
        if record is None:
            logger.debug("Skipping non-object record at index %d", index)
            continue
        records.append(record)

    return DecodedPayload(variant=variant, records=tuple(records))


def detect_xml_variant(root: Element) -> SchemaVariant:
    """Identify the schema variant of a parsed XML document.

    Args:
        root: Root element of the document.

    Returns:
        ``XML_INSTANCES`` when at least one ``<instance>`` carries a
        ``<code>`` or ``<label>`` child, otherwise ``UNKNOWN``.
    """
    for instance in root.iter("instance"):
        if instance.find("code") is not None or instance.find("label") is not None:
            return SchemaVariant.XML_INSTANCES
    return SchemaVariant.UNKNOWN
