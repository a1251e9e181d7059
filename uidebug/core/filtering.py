"""Select matching records together with their ancestor chains."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Set, Union

from uidebug.core.element_types import resolve, type_token
from uidebug.core.parser import NodeRecord

__all__ = ["FilterSpec", "FilterOutcome", "FilterResult", "ancestor_indices", "select"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterSpec:
    """Optional identifier and element type restriction for one render."""

    identifier: Optional[str] = None
    element_type: Optional[Union[int, str]] = None

    @property
    def type_name(self) -> Optional[str]:
        if self.element_type is None:
            return None
        return resolve(self.element_type)


class FilterOutcome(Enum):
    MATCHED = "matched"
    NO_MATCH = "no_match"
    TYPE_MISMATCH = "type_mismatch"


@dataclass
class FilterResult:
    outcome: FilterOutcome
    kept: List[int] = field(default_factory=list)
    available_types: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.outcome is FilterOutcome.MATCHED


def ancestor_indices(records: Sequence[NodeRecord], index: int) -> List[int]:
    """
    Walk backwards from ``index`` collecting its ancestors, nearest first.

    An earlier record is an ancestor when its level is below the lowest level
    seen so far on the walk. Indentation that skips levels is taken literally:
    the nearest shallower row becomes the parent, whatever its depth.
    """
    chain: List[int] = []
    lvl = records[index].level
    j = index - 1
    while j >= 0 and lvl > 0:
        if records[j].level < lvl:
            chain.append(j)
            lvl = records[j].level
        j -= 1
    return chain


def _distinct(values: Sequence[str]) -> List[str]:
    seen: List[str] = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


def select(records: Sequence[NodeRecord], spec: Optional[FilterSpec] = None) -> FilterResult:
    """Compute the keep-set for ``spec`` (or every identified record when ``None``)."""

    spec = spec or FilterSpec()
    wanted_type = type_token(spec.element_type) if spec.element_type is not None else None

    if spec.identifier is not None:
        id_matches = [record for record in records if record.identifier == spec.identifier]
        if not id_matches:
            logger.info("No element with identifier %r", spec.identifier)
            return FilterResult(FilterOutcome.NO_MATCH)
        if wanted_type is not None and all(r.element_type != wanted_type for r in id_matches):
            available = _distinct([resolve(r.element_type) for r in id_matches])
            logger.info("Identifier %r present but not as %s (found %s)", spec.identifier, wanted_type, available)
            return FilterResult(FilterOutcome.TYPE_MISMATCH, available_types=available)

    keep: Set[int] = set()
    for i, record in enumerate(records):
        if record.identifier is None:
            continue
        if spec.identifier is not None and record.identifier != spec.identifier:
            continue
        if wanted_type is not None and record.element_type != wanted_type:
            continue
        keep.add(i)
        keep.update(ancestor_indices(records, i))

    return FilterResult(FilterOutcome.MATCHED, kept=sorted(keep))
