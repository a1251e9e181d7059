"""Core package initialization."""

from uidebug.core.element_types import ELEMENT_TYPE_NAMES, ElementType, resolve
from uidebug.core.filtering import FilterOutcome, FilterResult, FilterSpec, select
from uidebug.core.parser import NodeRecord, parse_dump
from uidebug.core.render import PATH_LEGEND, TREE_LEGEND, render_path, render_tree
from uidebug.core.state import DEFAULT_STATE, NodeState, StaticStateLookup, enrich

__all__ = [
    'ELEMENT_TYPE_NAMES',
    'ElementType',
    'resolve',
    'FilterOutcome',
    'FilterResult',
    'FilterSpec',
    'select',
    'NodeRecord',
    'parse_dump',
    'PATH_LEGEND',
    'TREE_LEGEND',
    'render_path',
    'render_tree',
    'DEFAULT_STATE',
    'NodeState',
    'StaticStateLookup',
    'enrich',
]
