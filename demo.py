#!/usr/bin/env python3
"""
CellGraph Demo

This script builds a value graph around an unresolved cell, resolves the
cell to a list that refers back to it, and prints the graph before and after.
"""

from cellgraph import cell, int_, list_, format_value


def demo_cycle():
    """Demonstrate rendering a graph before and after it becomes cyclic."""

    print("CellGraph Demo - Cyclic Values")
    print("=" * 50)

    # Placeholder, referenced three times from the list below
    x = cell()
    y = list_([int_(1), int_(2), int_(3), x, x, x])

    print("\n1. Before resolving x")
    print(f"   x = {format_value(x)}")
    print(f"   y = {format_value(y)}")

    x.resolve(y)

    print("\n2. After resolving x to y")
    print(f"   x = {format_value(x)}")
    print(f"   y = {format_value(y)}")


def demo_sharing():
    """Demonstrate that a shared cell renders once, then as a back-reference."""

    print("\n3. Shared cell")
    shared = cell()
    shared.resolve(int_(5))
    print(f"   {format_value(list_([shared, shared]))}")


if __name__ == "__main__":
    demo_cycle()
    demo_sharing()
