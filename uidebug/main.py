"""
Command-line entry point for the UI tree debugger.

Reads a hierarchy dump from a file or stdin and prints the tree or path
report.
"""
import argparse
import json
import logging
import sys
from typing import Optional, Union

from uidebug.config import load_config
from uidebug.core.element_types import ElementType
from uidebug.core.state import StaticStateLookup
from uidebug.debugger import UIDebugger
from uidebug.utils.logger import setup_logger

logger = logging.getLogger("uidebug.main")


def read_dump(path: Optional[str]) -> str:
    """Return the dump text from ``path``, or stdin for ``None``/``-``."""
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as fh:
        return fh.read()


def load_state_lookup(path: Optional[str]) -> Optional[StaticStateLookup]:
    """Load a recorded ``{identifier: {hittable, enabled}}`` snapshot."""
    if not path:
        return None
    with open(path, "r", encoding="utf-8") as fh:
        return StaticStateLookup.from_json(json.load(fh))


def parse_type(value: str) -> Union[ElementType, int, str]:
    """Accept a type name, an ``XCUIElementType<N>`` token or a bare code."""
    if value.isdigit():
        code = int(value)
        try:
            return ElementType(code)
        except ValueError:
            return code
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Inspect UI hierarchy dumps as filtered trees and paths')
    parser.add_argument('--env-file', help='Path to a .env file with UIDEBUG_* settings')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    tree = subparsers.add_parser('tree', help='Print the element tree')
    tree.add_argument('dump', nargs='?', help='Dump file (default: stdin)')
    tree.add_argument('--id', dest='identifier', help='Only show branches leading to this identifier')
    tree.add_argument('--type', dest='element_type', type=parse_type, help='Restrict matches to this element type')
    tree.add_argument('--state-file', help='JSON file with recorded hittable/enabled state per identifier')
    tree.add_argument('--json', action='store_true', help='Emit the report as JSON')

    path = subparsers.add_parser('path', help='Print the ancestor path to an identifier')
    path.add_argument('identifier', help='Identifier to locate')
    path.add_argument('dump', nargs='?', help='Dump file (default: stdin)')

    return parser


def main(argv=None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.env_file)
        if args.debug:
            config.debug_mode = True
            config.log_level = "DEBUG"
        config.validate_config()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logger("uidebug", config.log_level, config.log_file)
    logger.debug("Configuration loaded from %s", config.config_source)

    try:
        dump = read_dump(args.dump)
        lookup = load_state_lookup(getattr(args, 'state_file', None))
    except (OSError, ValueError) as e:
        logger.error(f"Unable to read input: {str(e)}")
        return 1

    debugger = UIDebugger(dump, lookup, config)

    if args.command == 'path':
        print(debugger.build_path(args.identifier))
    elif args.json:
        print(json.dumps(debugger.build_tree_data(args.identifier, args.element_type), indent=2, ensure_ascii=False))
    else:
        print(debugger.build_tree(args.identifier, args.element_type))
    return 0


if __name__ == "__main__":
    sys.exit(main())
