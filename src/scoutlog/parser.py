"""Public parse operations.

Each function is pure: one decoded payload in, one fresh
:class:`~scoutlog.ingest.schemas.ParseResult` out, with no state kept
between calls.

Public API
----------
.. function:: parse_scout_json

    JSON path: coded-instance arrays and ``{"events": [...]}`` objects.

.. function:: parse_scout_document

    XML path on an already parsed tree, with temporal grouping.

.. function:: parse_scout_xml

    XML path from raw text.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from scoutlog.config import ParserConfig
from scoutlog.ingest.detect import decode_json_payload, detect_xml_variant
from scoutlog.ingest.grouping import group_by_timestamp
from scoutlog.ingest.normalize import normalize_records
from scoutlog.ingest.schemas import ParseResult, PlayerStats, SchemaVariant
from scoutlog.ingest.xml_reader import (
    decode_xml_instances,
    detect_player_name,
    read_xml_document,
)
from scoutlog.rules.metrics import JSON_PROFILE, XML_PROFILE, aggregate

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

logger = logging.getLogger(__name__)


def empty_result(
    config: ParserConfig | None = None,
    variant: SchemaVariant = SchemaVariant.UNKNOWN,
    *,
    with_extras: bool = True,
) -> ParseResult:
    """Return the result for a payload with nothing usable in it.

    Args:
        config: Parser configuration (for the placeholder rating).
        variant: Variant to report.
        with_extras: Whether the JSON-only stats are zero (JSON path) or
            absent (XML path).

    Returns:
        A :class:`ParseResult` with no events and zeroed stats.
    """
    cfg = config or ParserConfig()
    return ParseResult(
        events=(),
        stats=PlayerStats.empty(
            cfg.default_rating,
            with_extras=with_extras,
        ),
        variant=variant,
    )


def parse_scout_json(
    payload: object,
    config: ParserConfig | None = None,
) -> ParseResult:
    """Parse a decoded JSON scout file.

    Records are emitted one event each, in source order. Errors and
    dribbles are counted, and ``chances`` is derived as
    ``goals + shots``.

    Args:
        payload: Result of JSON deserialization.
        config: Parser configuration; defaults to ``ParserConfig()``.

    Returns:
        The parse result. Unrecognized payloads yield an empty result.
    """
    cfg = config or ParserConfig()
    decoded = decode_json_payload(payload)
    if decoded.variant is SchemaVariant.UNKNOWN:
        return empty_result(cfg)

    candidates = normalize_records(decoded.records, cfg)
    stats = aggregate(
        (c.to_observation() for c in candidates),
        JSON_PROFILE,
        rating=cfg.default_rating,
    )
    logger.info(
        "Parsed %s payload: %d records -> %d events",
        decoded.variant.value,
        len(decoded.records),
        len(candidates),
    )
    return ParseResult(
        events=tuple(c.to_event() for c in candidates),
        stats=stats,
        variant=decoded.variant,
    )


def parse_scout_document(
    root: Element,
    config: ParserConfig | None = None,
) -> ParseResult:
    """Parse an XML scout document that has already been decoded.

    Rows sharing a start time are merged into one event; category
    membership is tested on the union of the merged actions. ``chances``
    counts big-chance tags directly.

    Args:
        root: Root element of the document.
        config: Parser configuration; defaults to ``ParserConfig()``.

    Returns:
        The parse result, including a best-effort player name.
    """
    cfg = config or ParserConfig()
    variant = detect_xml_variant(root)
    if variant is SchemaVariant.UNKNOWN:
        logger.warning("XML document has no <instance> records -- empty result")
        return empty_result(cfg, with_extras=False)

    instances = decode_xml_instances(root)
    candidates = normalize_records(instances, cfg)
    groups = group_by_timestamp(candidates)
    stats = aggregate(
        (g.to_observation() for g in groups),
        XML_PROFILE,
        rating=cfg.default_rating,
    )
    logger.info(
        "Parsed XML document: %d instances -> %d grouped events",
        len(instances),
        len(groups),
    )
    return ParseResult(
        events=tuple(g.to_event() for g in groups),
        stats=stats,
        variant=variant,
        detected_player_name=detect_player_name(
            instances, cfg.player_name_separator
        ),
    )


def parse_scout_xml(
    text: str | bytes,
    config: ParserConfig | None = None,
) -> ParseResult:
    """Decode and parse raw XML scout text.

    Args:
        text: Raw XML document.
        config: Parser configuration; defaults to ``ParserConfig()``.

    Returns:
        The parse result.

    Raises:
        DecodeError: If the text is not well-formed XML.
    """
    return parse_scout_document(read_xml_document(text), config)
