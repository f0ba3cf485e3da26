#!/usr/bin/env python3
"""Command-line interface for CellGraph."""

import argparse
import logging
from typing import List, Optional, Tuple

from .config import CellGraphConfig, CellConfig, FormatterConfig, set_config, setup_logging
from .core import Value, cell, int_, list_
from .formatter import format_value
from .verify import check_acyclic, verify_value

logger = logging.getLogger(__name__)


def build_demo_graph() -> Tuple[Value, Value]:
    """Build the demo placeholder and the list that refers to it three times."""
    x = cell()
    y = list_([int_(1), int_(2), int_(3), x, x, x])
    return x, y


def _print_checks(root: Value) -> None:
    is_valid, errors = verify_value(root)
    print(f"   verify: {'ok' if is_valid else 'failed'}")
    for error in errors:
        print(f"     - {error}")

    is_acyclic, cycles = check_acyclic(root)
    print(f"   acyclic: {'yes' if is_acyclic else 'no'}")
    for cycle in cycles:
        print(f"     - {cycle}")


def demo_main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for cellgraph-demo command."""
    parser = argparse.ArgumentParser(description="Render a cyclic value graph before and after resolving it")
    parser.add_argument("--strict", action="store_true", help="Refuse to rebind resolved cells")
    parser.add_argument("--back-reference", default="*", help="Token for an already rendered node")
    parser.add_argument("--uninit-token", default="uninit", help="Token for an unresolved cell")
    parser.add_argument("--check", action="store_true", help="Print verification results")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)

    config = CellGraphConfig(
        formatter=FormatterConfig(back_reference=args.back_reference, uninit_token=args.uninit_token),
        cells=CellConfig(allow_rebind=not args.strict),
        log_level="DEBUG" if args.verbose else args.log_level,
    )
    set_config(config)
    setup_logging(config.log_level)

    x, y = build_demo_graph()

    print("Before resolve:")
    print(f"   {format_value(x)}")
    if args.check:
        _print_checks(x)

    x.resolve(y)
    logger.info("Placeholder resolved")

    print("After resolve:")
    print(f"   {format_value(x)}")
    if args.check:
        _print_checks(x)

    return 0


if __name__ == "__main__":
    raise SystemExit(demo_main())
