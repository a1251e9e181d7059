"""
ui-tree-debug - Readable views of UI automation hierarchy dumps.

This package rebuilds the element tree from an indentation-encoded dump and
renders filtered tree and path reports enriched with live element state.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from uidebug.core.element_types import ElementType
from uidebug.core.state import NodeState
from uidebug.debugger import UIDebugger

__all__ = ["ElementType", "NodeState", "UIDebugger", "__version__"]
