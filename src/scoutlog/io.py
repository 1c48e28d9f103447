"""Scout-file loading.

Reads a file from disk, decodes it according to its extension, and
hands the decoded payload to the matching parse operation. Decoding is
the caller-side boundary: unreadable files and undecodable payloads
raise, whereas problems inside a decoded payload never do.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import orjson

from scoutlog.exceptions import DecodeError, ScoutFileError
from scoutlog.parser import parse_scout_json, parse_scout_xml

if TYPE_CHECKING:
    from pathlib import Path

    from scoutlog.config import ParserConfig
    from scoutlog.ingest.schemas import ParseResult

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES: frozenset[str] = frozenset({".json", ".xml"})


def decode_json_bytes(data: bytes | str) -> object:
    """Deserialize JSON text.

    Args:
        data: Raw JSON document.

    Returns:
        The decoded value.

    Raises:
        DecodeError: If *data* is not valid JSON.
    """
    try:
        return orjson.loads(data)
    except orjson.JSONDecodeError as exc:
        msg = f"Malformed JSON scout file: {exc}"
        raise DecodeError(msg) from exc


def load_scout_file(path: Path, config: ParserConfig | None = None) -> ParseResult:
    """Read, decode and parse one scout file.

    Args:
        path: Path to a ``.json`` or ``.xml`` file (suffix is matched
            case-insensitively).
        config: Parser configuration; defaults to ``ParserConfig()``.

    Returns:
        The parse result.

    Raises:
        ScoutFileError: If the suffix is unsupported or the file cannot
            be read.
        DecodeError: If the file content cannot be decoded.
    """
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        msg = (
            f"Unsupported scout file type {path.suffix!r} for {path.name}; "
            f"expected one of {sorted(SUPPORTED_SUFFIXES)}"
        )
        raise ScoutFileError(msg)

    try:
        data = path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read scout file {path}: {exc}"
        raise ScoutFileError(msg) from exc

    logger.debug("Loaded %d bytes from %s", len(data), path)

    if suffix == ".json":
        return parse_scout_json(decode_json_bytes(data), config)
    return parse_scout_xml(data, config)
