"""Runtime element state (hittable/enabled) fetched once per identifier."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

__all__ = ["NodeState", "DEFAULT_STATE", "StateLookup", "StaticStateLookup", "enrich"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeState:
    hittable: bool = False
    enabled: bool = False


# Display default for rows the host could not be asked about. Not a real
# "disabled" reading.
DEFAULT_STATE = NodeState()

StateLookup = Callable[[str], Union[NodeState, Tuple[bool, bool]]]


def _coerce(value: Union[NodeState, Tuple[bool, bool]]) -> NodeState:
    if isinstance(value, NodeState):
        return value
    hittable, enabled = value
    return NodeState(bool(hittable), bool(enabled))


def enrich(identifiers: Iterable[Optional[str]], lookup: Optional[StateLookup]) -> Dict[str, NodeState]:
    """
    Query ``lookup`` once for every distinct non-empty identifier.

    Args:
        identifiers: Identifiers of the rows about to be rendered; duplicates
            and ``None`` are allowed.
        lookup: Callable returning the live state for an identifier. When
            ``None`` every identifier gets ``DEFAULT_STATE``.

    Returns:
        Mapping from identifier to its state.
    """
    states: Dict[str, NodeState] = {}
    for identifier in identifiers:
        if not identifier or identifier in states:
            continue
        if lookup is None:
            states[identifier] = DEFAULT_STATE
            continue
        try:
            states[identifier] = _coerce(lookup(identifier))
        except Exception as exc:
            logger.warning("State lookup failed for %r: %s", identifier, exc)
            states[identifier] = DEFAULT_STATE
    logger.debug("Resolved state for %d identifiers", len(states))
    return states


class StaticStateLookup:
    """State lookup answering from a fixed mapping, e.g. a recorded snapshot."""

    def __init__(self, states: Mapping[str, Union[NodeState, Tuple[bool, bool]]], default: NodeState = DEFAULT_STATE):
        self._states = {key: _coerce(value) for key, value in states.items()}
        self._default = default
        self.calls = 0

    @classmethod
    def from_json(cls, payload: Mapping[str, Mapping[str, bool]]) -> "StaticStateLookup":
        """Build from ``{identifier: {"hittable": bool, "enabled": bool}}``."""
        if not isinstance(payload, Mapping):
            raise ValueError("State file must contain a JSON object keyed by identifier")
        states: Dict[str, NodeState] = {}
        for identifier, entry in payload.items():
            if not isinstance(entry, Mapping):
                raise ValueError(f"State for {identifier!r} must be an object with hittable/enabled flags")
            states[identifier] = NodeState(bool(entry.get("hittable", False)), bool(entry.get("enabled", False)))
        return cls(states)

    def __call__(self, identifier: str) -> NodeState:
        self.calls += 1
        return self._states.get(identifier, self._default)
