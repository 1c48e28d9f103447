"""Ingestion layer for the scout-file parsing engine.

Re-exports the record and output schemas, the format detector, the XML
front end, the event normalizer and the temporal grouper so that
downstream code can import everything from :mod:`scoutlog.ingest`.
"""

from scoutlog.ingest.schemas import (
    CodedInstance,
    Label,
    NormalizedEvent,
    ParsedRecord,
    ParseResult,
    PlayerStats,
    RecordFlags,
    SchemaVariant,
    TaggedEvent,
)
from scoutlog.ingest.detect import (
    DecodedPayload,
    decode_json_payload,
    decode_record,
    detect_json_variant,
    detect_xml_variant,
)
from scoutlog.ingest.grouping import EventGroup, group_by_timestamp
from scoutlog.ingest.normalize import (
    Candidate,
    normalize_coordinates,
    normalize_record,
    normalize_records,
)
from scoutlog.ingest.xml_reader import (
    decode_xml_instances,
    detect_player_name,
    read_xml_document,
)

__all__ = [
    "Candidate",
    "CodedInstance",
    "DecodedPayload",
    "EventGroup",
    "Label",
    "NormalizedEvent",
    "ParseResult",
    "ParsedRecord",
    "PlayerStats",
    "RecordFlags",
    "SchemaVariant",
    "TaggedEvent",
    "decode_json_payload",
    "decode_record",
    "decode_xml_instances",
    "detect_json_variant",
    "detect_player_name",
    "detect_xml_variant",
    "group_by_timestamp",
    "normalize_coordinates",
    "normalize_record",
    "normalize_records",
    "read_xml_document",
]
