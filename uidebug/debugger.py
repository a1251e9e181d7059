"""
UI tree debugger facade.

Ties the pipeline together for callers such as test helpers:

    debugger = UIDebugger(lambda: app.debug_description, lookup)
    debugger.print_tree()
    debugger.print_tree("cell", ElementType.CELL)
    debugger.print_path("leadingButton")

Every call fetches a fresh dump, so reports always reflect the current
hierarchy.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from uidebug.config import DebugConfig, config as default_config
from uidebug.core.filtering import FilterOutcome, FilterResult, FilterSpec, select
from uidebug.core.parser import NodeRecord, parse_dump
from uidebug.core.render import render_path, render_tree, tree_to_dict
from uidebug.core.state import NodeState, StateLookup, enrich

logger = logging.getLogger(__name__)

DumpSource = Union[str, Callable[[], str]]


class UIDebugger:
    """Builds tree and path reports from a hierarchy dump."""

    def __init__(
        self,
        dump_source: DumpSource,
        state_lookup: Optional[StateLookup] = None,
        config: Optional[DebugConfig] = None,
    ):
        """
        Initialize the debugger.

        Args:
            dump_source: The dump text, or a zero-argument callable returning it.
            state_lookup: Callable answering ``(hittable, enabled)`` for an
                identifier. Without one, every row shows the default state.
            config: Settings; the global configuration is used when omitted.

        Raises:
            ValueError: If ``config`` holds out-of-range settings.
        """
        self.dump_source = dump_source
        self.state_lookup = state_lookup
        self.config = config or default_config
        self.config.validate_config()

    def _records(self) -> List[NodeRecord]:
        raw = self.dump_source() if callable(self.dump_source) else self.dump_source
        return parse_dump(raw or "", self.config.indent_width)

    def _evaluate(
        self, identifier: Optional[str], element_type: Optional[Union[int, str]]
    ) -> Tuple[List[NodeRecord], FilterSpec, FilterResult, Dict[str, NodeState]]:
        records = self._records()
        spec = FilterSpec(identifier=identifier, element_type=element_type)
        result = select(records, spec)

        states: Dict[str, NodeState] = {}
        if result.outcome is FilterOutcome.MATCHED:
            states = enrich((records[i].identifier for i in result.kept), self.state_lookup)
        logger.debug(
            "Tree filter id=%r type=%r -> %s (%d rows)",
            identifier, element_type, result.outcome.value, len(result.kept),
        )
        return records, spec, result, states

    def build_tree(self, identifier: Optional[str] = None, element_type: Optional[Union[int, str]] = None) -> str:
        """Return the tree report, optionally filtered by identifier and/or type."""
        records, spec, result, states = self._evaluate(identifier, element_type)
        return render_tree(records, result, states, spec, self.config.render_indent)

    def build_tree_data(
        self, identifier: Optional[str] = None, element_type: Optional[Union[int, str]] = None
    ) -> Dict[str, Any]:
        """Return the tree report as a JSON-serialisable dict."""
        records, spec, result, states = self._evaluate(identifier, element_type)
        return tree_to_dict(records, result, states, spec)

    def build_path(self, identifier: str) -> str:
        """Return the ancestor path report for ``identifier``."""
        return render_path(self._records(), identifier)

    def print_tree(self, identifier: Optional[str] = None, element_type: Optional[Union[int, str]] = None) -> None:
        print(self.build_tree(identifier, element_type))

    def print_path(self, identifier: str) -> None:
        print(self.build_path(identifier))
