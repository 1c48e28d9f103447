"""Tests for scout-file loading from disk."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import orjson
import pytest

from scoutlog.exceptions import DecodeError, ScoutFileError, ScoutLogError
from scoutlog.ingest.schemas import SchemaVariant
from scoutlog.io import decode_json_bytes, load_scout_file

if TYPE_CHECKING:
    from pathlib import Path


class TestDecodeJsonBytes:
    """JSON deserialization boundary."""

    def test_valid(self) -> None:
        assert decode_json_bytes(b'{"events": []}') == {"events": []}

    def test_malformed(self) -> None:
        with pytest.raises(DecodeError, match="Malformed JSON"):
            decode_json_bytes(b"{not json")


class TestLoadScoutFile:
    """Suffix dispatch and error mapping."""

    def test_json_file(
        self,
        tmp_path: Path,
        event_object_payload: dict[str, Any],
    ) -> None:
        path = tmp_path / "match.json"
        path.write_bytes(orjson.dumps(event_object_payload))
        result = load_scout_file(path)
        assert result.variant is SchemaVariant.EVENT_OBJECTS
        assert len(result.events) == 4

    def test_xml_file(self, tmp_path: Path, scout_xml: str) -> None:
        path = tmp_path / "match.xml"
        path.write_text(scout_xml, encoding="utf-8")
        result = load_scout_file(path)
        assert result.variant is SchemaVariant.XML_INSTANCES
        assert result.detected_player_name == "Joao Silva"

    def test_suffix_is_case_insensitive(
        self,
        tmp_path: Path,
        coded_instance_payload: list[dict[str, Any]],
    ) -> None:
        path = tmp_path / "MATCH.JSON"
        path.write_bytes(orjson.dumps(coded_instance_payload))
        assert len(load_scout_file(path).events) == 4

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "match.csv"
        path.write_text("a,b\n", encoding="utf-8")
        with pytest.raises(ScoutFileError, match="Unsupported scout file type"):
            load_scout_file(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ScoutFileError, match="Cannot read"):
            load_scout_file(tmp_path / "absent.json")

    def test_bad_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(DecodeError):
            load_scout_file(path)

    def test_bad_xml_is_scoutlog_error(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.xml"
        path.write_text("<file>", encoding="utf-8")
        with pytest.raises(ScoutLogError):
            load_scout_file(path)

    def test_unknown_json_shape_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "other.json"
        path.write_bytes(orjson.dumps({"players": []}))
        result = load_scout_file(path)
        assert result.variant is SchemaVariant.UNKNOWN
        assert result.events == ()
