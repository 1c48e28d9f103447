"""Multi-file parsing and tabular output.

Every parse is independent, so a batch is a plain loop over files. The
results are exposed as :class:`polars.DataFrame` tables: one for the
events of a file (the shape a heatmap renderer consumes) and one with a
stats row per file.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import TYPE_CHECKING

import polars as pl
from tqdm import tqdm

from scoutlog.exceptions import ScoutLogError
from scoutlog.ingest.schemas import PlayerStats
from scoutlog.io import load_scout_file

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from scoutlog.config import ParserConfig
    from scoutlog.ingest.schemas import ParseResult

logger = logging.getLogger(__name__)

EVENT_SCHEMA: dict[str, type[pl.DataType]] = {
    "type": pl.Utf8,
    "x": pl.Float64,
    "y": pl.Float64,
    "success": pl.Boolean,
    "timestamp": pl.Utf8,
}

_FLOAT_STATS: frozenset[str] = frozenset({"pass_accuracy", "rating"})

STATS_SCHEMA: dict[str, type[pl.DataType]] = {
    "source": pl.Utf8,
    "variant": pl.Utf8,
    "player_name": pl.Utf8,
    "event_count": pl.Int64,
    **{
        f.name: pl.Float64 if f.name in _FLOAT_STATS else pl.Int64
        for f in fields(PlayerStats)
    },
}


def parse_scout_files(
    paths: Iterable[Path],
    config: ParserConfig | None = None,
) -> dict[str, ParseResult]:
    """Parse many scout files.

    Files that fail to load or decode are logged and left out; the
    remaining files are still parsed.

    Args:
        paths: Scout files to parse.
        config: Parser configuration shared by every file.

    Returns:
        Mapping from file name to its :class:`ParseResult`, in input
        order. A file whose name was already taken by an earlier file is
        keyed by its full path instead.
    """
    results: dict[str, ParseResult] = {}
    for path in tqdm(list(paths), desc="Parsing scout files", unit="file"):
        try:
            result = load_scout_file(path, config)
        except ScoutLogError as exc:
            logger.warning("Skipping %s: %s", path.name, exc)
            continue
        if not result.events:
            logger.warning("No events detected in %s", path.name)
        key = path.name
        if key in results:
            key = str(path)
            logger.warning("Duplicate file name %s, keying by path %s", path.name, key)
        results[key] = result
    return results


def events_frame(result: ParseResult) -> pl.DataFrame:
    """Return the events of *result* as a DataFrame.

    Args:
        result: A single parse result.

    Returns:
        One row per event with columns ``type``, ``x``, ``y``,
        ``success`` and ``timestamp``.
    """
    rows = [e.to_dict() for e in result.events]
    return pl.DataFrame(rows, schema=EVENT_SCHEMA)


def stats_frame(results: Mapping[str, ParseResult]) -> pl.DataFrame:
    """Return one stats row per parsed file.

    JSON-only fields are null on rows parsed from XML.

    Args:
        results: Mapping from source name to parse result.

    Returns:
        A DataFrame with ``source``, ``variant``, ``player_name``,
        ``event_count`` and every :class:`PlayerStats` field.
    """
    rows: list[dict[str, object]] = []
    for source, result in results.items():
        row: dict[str, object] = {
            "source": source,
            "variant": result.variant.value,
            "player_name": result.detected_player_name,
            "event_count": len(result.events),
        }
        for f in fields(PlayerStats):
            row[f.name] = getattr(result.stats, f.name)
        rows.append(row)
    return pl.DataFrame(rows, schema=STATS_SCHEMA)
