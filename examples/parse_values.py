#!/usr/bin/env python3
"""
Example: The token value language.

Shows how value strings parse into typed nodes and what CSS each
node turns into.

Usage:
    python examples/parse_values.py
"""

from chuk_mcp_theme.errors import ParseError
from chuk_mcp_theme.tokens import parse_value, resolve_value_node

VALUES = [
    "black palette",
    "16 px",
    "1 rem",
    "1.5 em",
    "2 base",
    "1 inner gutter",
    "10 absolute",
    "abc px",
    "1 xyz",
]


def main() -> None:
    """Parse a handful of values and print their CSS form."""
    for value in VALUES:
        try:
            node = parse_value(value)
        except ParseError as e:
            print(f"{value!r:>18} -> error: {e}")
            continue
        print(f"{value!r:>18} -> {node.kind.value:<12} {resolve_value_node(node)}")


if __name__ == "__main__":
    main()
