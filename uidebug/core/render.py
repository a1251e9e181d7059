"""Text reports for the tree and path views."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from uidebug.core.element_types import resolve
from uidebug.core.filtering import FilterOutcome, FilterResult, FilterSpec, ancestor_indices
from uidebug.core.parser import NodeRecord
from uidebug.core.state import DEFAULT_STATE, NodeState

__all__ = [
    "TREE_LEGEND",
    "PATH_LEGEND",
    "DEFAULT_RENDER_INDENT",
    "render_tree",
    "render_path",
    "tree_to_dict",
]

TREE_LEGEND = "Legend: ✅ hittable, ⚠️ not hittable, 🟢 enabled, 🔴 disabled"
PATH_LEGEND = "Legend: 🔗 path, ❌ not found"
DEFAULT_RENDER_INDENT = 3

BULLET = "•"
ARROW = " → "
PLACEHOLDER = "-"


def _header(spec: FilterSpec) -> str:
    if spec.identifier is not None and spec.element_type is not None:
        return f"UI Tree (id='{spec.identifier}', type={spec.type_name}):"
    if spec.identifier is not None:
        return f"UI Tree (matching '{spec.identifier}'):"
    if spec.element_type is not None:
        return f"UI Tree (type={spec.type_name}):"
    return "UI Tree (all identifiers):"


def _state_for(record: NodeRecord, states: Mapping[str, NodeState]) -> NodeState:
    if record.identifier is None:
        return DEFAULT_STATE
    return states.get(record.identifier, DEFAULT_STATE)


def _failure_message(result: FilterResult, spec: FilterSpec) -> Optional[str]:
    if result.outcome is FilterOutcome.NO_MATCH:
        return f"❌ No elements found with identifier '{spec.identifier}'"
    if result.outcome is FilterOutcome.TYPE_MISMATCH:
        available = ", ".join(result.available_types)
        return f"❌ Identifier '{spec.identifier}' found but not of type {spec.type_name}. Available: {available}"
    return None


def render_tree(
    records: Sequence[NodeRecord],
    result: FilterResult,
    states: Mapping[str, NodeState],
    spec: Optional[FilterSpec] = None,
    indent_width: int = DEFAULT_RENDER_INDENT,
) -> str:
    """
    Render the kept records as an indented listing with a summary line.

    Args:
        records: All parsed records, in dump order.
        result: Output of ``select`` for ``spec``.
        states: Identifier to state mapping from ``enrich``.
        spec: The filter that produced ``result``.
        indent_width: Spaces per level in the listing.

    Returns:
        The report text. Filter failures yield a one-line message; the
        legend is always the last line.
    """
    spec = spec or FilterSpec()

    failure = _failure_message(result, spec)
    if failure is not None:
        return f"{failure}\n{TREE_LEGEND}"

    lines: List[str] = [_header(spec)]
    hittable = enabled = 0
    for index in result.kept:
        record = records[index]
        state = _state_for(record, states)
        hittable += state.hittable
        enabled += state.enabled

        indent = " " * (indent_width * record.level)
        label = f"({record.label})" if record.label is not None else ""
        flags = ("✅" if state.hittable else "⚠️") + ("🟢" if state.enabled else "🔴")
        lines.append(
            f"{indent}{BULLET} {resolve(record.element_type)} {record.identifier or PLACEHOLDER}{label} {flags}"
        )

    lines.append(f"-- Summary: total={len(result.kept)}, hittable={hittable}, enabled={enabled}")
    lines.append(TREE_LEGEND)
    return "\n".join(lines)


def render_path(records: Sequence[NodeRecord], identifier: str) -> str:
    """Render the root-to-node chain for every record carrying ``identifier``."""

    lines: List[str] = []
    for i, record in enumerate(records):
        if record.identifier != identifier:
            continue
        chain = [i] + ancestor_indices(records, i)
        segments = [
            f"{resolve(records[j].element_type)}[{records[j].identifier or PLACEHOLDER}]"
            for j in reversed(chain)
        ]
        lines.append(f"🔗 Path to '{identifier}': " + ARROW.join(segments))

    if not lines:
        lines.append(f"❌ No element found with identifier '{identifier}'")
    lines.append(PATH_LEGEND)
    return "\n".join(lines)


def tree_to_dict(
    records: Sequence[NodeRecord],
    result: FilterResult,
    states: Mapping[str, NodeState],
    spec: Optional[FilterSpec] = None,
) -> Dict[str, Any]:
    """Structured form of the tree report, safe to pass to ``json.dumps``."""

    spec = spec or FilterSpec()
    nodes: List[Dict[str, Any]] = []
    for index in result.kept:
        record = records[index]
        state = _state_for(record, states)
        nodes.append({
            "index": index,
            "level": record.level,
            "type": resolve(record.element_type),
            "raw_type": record.element_type,
            "identifier": record.identifier,
            "label": record.label,
            "hittable": state.hittable,
            "enabled": state.enabled,
        })

    return {
        "filter": {"identifier": spec.identifier, "type": spec.type_name},
        "outcome": result.outcome.value,
        "message": _failure_message(result, spec),
        "available_types": list(result.available_types),
        "nodes": nodes,
        "summary": {
            "total": len(nodes),
            "hittable": sum(1 for node in nodes if node["hittable"]),
            "enabled": sum(1 for node in nodes if node["enabled"]),
        },
    }
