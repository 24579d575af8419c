"""
Package information and naming report utility.

This module provides the ``variants-info`` command. Without arguments it
prints information about the installation; given declaration files it
resolves every declared enum and prints its naming report.
"""

import argparse
import platform
import sys
from typing import Any, Dict, List, Optional

import variants
from .config import configure_logging, get_config
from .exceptions import VariantsError
from .report import render_report


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to Variants.

    Returns:
        Dictionary containing system information
    """
    return {
        'python_version': sys.version,
        'platform': platform.platform(),
    }


def get_variants_info() -> Dict[str, Any]:
    """
    Get Variants-specific information.

    Returns:
        Dictionary containing Variants information
    """
    config = get_config()
    return {
        'version': variants.__version__,
        'author': variants.__author__,
        'config_file': str(config.config_file),
        'detect_collisions': config.reverse_map.detect_collisions,
        'strict_collisions': config.reverse_map.strict,
    }


def print_info() -> None:
    """Print formatted information about Variants and the system."""
    print("Variants Naming Engine")
    print("=" * 40)

    variants_info = get_variants_info()
    print(f"\nVariants Version: {variants_info['version']}")
    print(f"Author: {variants_info['author']}")
    print(f"Config File: {variants_info['config_file']}")
    print(f"Detect Collisions: {variants_info['detect_collisions']}")
    print(f"Strict Collisions: {variants_info['strict_collisions']}")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")


def print_reports(paths: List[str], strict: Optional[bool] = None) -> None:
    """
    Resolve every declaration file and print its reports.

    Raises:
        VariantsError: If a declaration is invalid or, in strict mode, has
            shared match keys
    """
    for path in paths:
        for table in variants.load_declaration(path):
            artifacts = variants.run_naming(table, strict=strict)
            print(render_report(artifacts))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="variants-info",
        description="Show Variants installation info or resolve enum naming declarations.",
    )
    parser.add_argument("declarations", nargs="*", help="YAML or JSON declaration files")
    parser.add_argument("--strict", action="store_true", default=None,
                        help="fail when distinct variants share a match key")
    parser.add_argument("--log-level", default=None, help="logging level (DEBUG, INFO, ...)")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the variants-info command."""
    args = build_parser().parse_args(argv)
    config = get_config()
    if args.log_level:
        config.logging.level = args.log_level
    configure_logging(config)

    try:
        if args.declarations:
            print_reports(args.declarations, strict=args.strict)
        else:
            print_info()
    except VariantsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
