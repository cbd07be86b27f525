from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates raw argparse
namespaces into scan settings overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the PhotoIndex CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="photoindex",
        description="Find and index folders that contain images.",
    )

    # --- Scan Target ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Folder to scan for image folders.",
    )

    # --- Display Mode ---
    p.add_argument(
        "--tree",
        action="store_true",
        help="Show the indexed folders as a tree instead of a flat list.",
    )
    p.add_argument(
        "--list",
        action="store_true",
        help="Show a flat list of image folders (default).",
    )
    p.add_argument(
        "--counts",
        action="store_true",
        help="Count the images of each folder shown in the tree.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print results as JSON.",
    )

    # --- Scan Bounds ---
    p.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        help="Maximum folder nesting level to descend into.",
    )
    p.add_argument(
        "--exclude",
        dest="exclusion_list",
        default=None,
        help="Comma-separated absolute paths never to descend into.",
    )
    p.add_argument(
        "--no-persist",
        action="store_true",
        help="Do not write newly found folders to the index file.",
    )

    # --- Index and Settings Maintenance ---
    p.add_argument(
        "--clear-cache",
        action="store_true",
        help="Forget every indexed folder before doing anything else.",
    )
    p.add_argument(
        "--recent",
        action="store_true",
        help="List recently scanned folders and exit.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore saved settings.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Store the effective settings for future runs.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective settings and exit.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--log-file",
        action="store_true",
        help="Also write diagnostics to the log file in the user data directory.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a scan settings dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Settings overrides; only flags that were given.
    """
    overrides: Dict[str, Any] = {}

    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    if args.exclusion_list is not None:
        overrides["exclusion_list"] = _split_csv(args.exclusion_list)
    if args.no_persist:
        overrides["persist_after_scan"] = False

    if args.tree:
        overrides["display_mode"] = "tree"
    elif args.list:
        overrides["display_mode"] = "list"

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> List[str]:
    """Convert a comma-separated string into a list of sanitized strings."""
    if value is None:
        return []
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
