"""Shared test fixtures for the scout-file parsing engine.

Provides reusable fixtures used across multiple test modules:

* :func:`default_config` -- a zero-argument :class:`ParserConfig`.
* :func:`coded_instance_payload` -- a JSON array of coded instances.
* :func:`event_object_payload` -- an ``{"events": [...]}`` object.
* :func:`flagged_event_payload` -- event objects with boolean hints.
* :func:`scout_xml` -- an XML document with co-occurring tag rows.
"""

from __future__ import annotations

from typing import Any

import pytest

from scoutlog.config import ParserConfig


def _instance(
    code: str,
    start: str,
    *,
    action: str | None = None,
    x: str | None = None,
    y: str | None = None,
) -> dict[str, Any]:
    """Build a JSON coded instance with optional Action/pos labels."""
    labels: list[dict[str, str]] = []
    if action is not None:
        labels.append({"group": "Action", "text": action})
    if x is not None:
        labels.append({"group": "pos_x", "text": x})
    if y is not None:
        labels.append({"group": "pos_y", "text": y})
    return {"code": code, "start": start, "end": start, "label": labels}


def _xml_instance(code: str, start: str, labels: list[tuple[str, str]]) -> str:
    """Build one ``<instance>`` block for an XML scout document."""
    label_xml = "".join(
        f"<label><group>{g}</group><text>{t}</text></label>" for g, t in labels
    )
    return (
        f"<instance><ID>1</ID><start>{start}</start><end>{start}</end>"
        f"<code>{code}</code>{label_xml}</instance>"
    )


def _xml_document(*instances: str) -> str:
    """Wrap instance blocks in a complete XML document."""
    body = "".join(instances)
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        f"<file><ALL_INSTANCES>{body}</ALL_INSTANCES></file>"
    )


@pytest.fixture()
def default_config() -> ParserConfig:
    """Default parser config: 105x68 pitch, midfield default."""
    return ParserConfig()


@pytest.fixture()
def coded_instance_payload() -> list[dict[str, Any]]:
    """Six coded instances, two of them period boundaries."""
    return [
        _instance("Half Start", "0.0", action="Half Start"),
        _instance("Pass", "12.0", action="Pass accurate", x="30", y="40"),
        _instance("Pass", "20.5", action="Pass inaccurate", x="None", y="None"),
        _instance("Shot", "31.0", action="Shot on target", x="88", y="50"),
        _instance("Duel", "45.0", action="Duel won", x="105", y="68"),
        _instance("Half End", "46.0", action="Half End"),
    ]


@pytest.fixture()
def event_object_payload() -> dict[str, Any]:
    """Four event objects with positional tags."""
    return {
        "events": [
            {"type": "Goal", "start": 5, "tags": ["a", "b", "c", 60, 40]},
            {"type": "Long ball complete", "start": 9.0, "tags": ["a", "b", "c", 20, 30]},
            {"type": "Dribble unsuccessful", "start": 14.5, "tags": []},
            {"type": "Lost ball", "start": 20, "tags": ["a", "b", "c", "x", "y"]},
        ]
    }


@pytest.fixture()
def flagged_event_payload() -> dict[str, Any]:
    """Event objects carrying explicit isPass/isShot/isSuccess flags."""
    return {
        "events": [
            {"type": "Action 1", "start": 1, "isPass": True, "isSuccess": True},
            {"type": "Action 2", "start": 2, "isPass": True, "isFailure": True},
            {"type": "Header", "start": 3, "isShot": True, "isSuccess": True},
            {
                "type": "Pass accurate",
                "start": 4,
                "isPass": False,
                "isSuccess": True,
                "isFailure": True,
            },
        ]
    }


@pytest.fixture()
def scout_xml() -> str:
    """XML document with a grouped pass/key pass and a grouped shot."""
    return _xml_document(
        _xml_instance("Joao Silva - Start", "0", [("Action", "Match Start")]),
        _xml_instance(
            "Joao Silva - Pass",
            "10.5",
            [("Action", "Pass"), ("pos_x", "None"), ("pos_y", "None")],
        ),
        _xml_instance(
            "Joao Silva - Key Pass",
            "10.5",
            [("Action", "Key Pass"), ("pos_x", "70"), ("pos_y", "30")],
        ),
        _xml_instance(
            "Joao Silva - Shot",
            "22.0",
            [("Action", "Shot"), ("pos_x", "95"), ("pos_y", "48")],
        ),
        _xml_instance("Joao Silva - Goal", "22.0", [("Action", "Goal")]),
        _xml_instance(
            "Joao Silva - Big Chance",
            "22.0",
            [("Action", "Big Chance")],
        ),
        _xml_instance("Joao Silva - Tackle", "30.0", [("Action", "Tackle won")]),
    )
