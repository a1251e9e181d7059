"""Parse the host's indentation-encoded hierarchy dump into flat records."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

__all__ = ["NodeRecord", "parse_line", "parse_dump", "DEFAULT_INDENT_WIDTH"]

logger = logging.getLogger(__name__)

DEFAULT_INDENT_WIDTH = 4
CONNECTOR = "→"
BANNERS = ("Attributes:", "Element subtree:")

_IDENTIFIER = re.compile(r"identifier: '([^']+)'")
_LABEL = re.compile(r"label: '([^']+)'")


@dataclass(frozen=True)
class NodeRecord:
    """One element row of the dump.

    Hierarchy is implicit: a record descends from the nearest earlier record
    with a smaller ``level``.
    """

    level: int
    element_type: str
    identifier: Optional[str] = None
    label: Optional[str] = None


def _capture(pattern: re.Pattern, text: str) -> Optional[str]:
    match = pattern.search(text)
    return match.group(1) if match else None


def parse_line(line: str, indent_width: int = DEFAULT_INDENT_WIDTH) -> Optional[NodeRecord]:
    """Turn a single dump line into a record, or ``None`` for non-element rows."""

    level = (len(line) - len(line.lstrip(" "))) // indent_width

    content = line.strip()
    if content.startswith(CONNECTOR):
        content = content[len(CONNECTOR):].strip()

    if content.startswith(BANNERS):
        return None

    comma = content.find(",")
    if comma < 0:
        if content:
            logger.debug("Skipping row without separator: %r", content)
        return None

    return NodeRecord(
        level=level,
        element_type=content[:comma],
        identifier=_capture(_IDENTIFIER, content),
        label=_capture(_LABEL, content),
    )


def parse_dump(text: str, indent_width: int = DEFAULT_INDENT_WIDTH) -> List[NodeRecord]:
    """Parse a whole dump, keeping element rows in their original order."""

    records: List[NodeRecord] = []
    # Rows end at "\n" only; labels may carry other Unicode line separators.
    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        record = parse_line(line, indent_width)
        if record is not None:
            records.append(record)
    logger.debug("Parsed %d element rows", len(records))
    return records
