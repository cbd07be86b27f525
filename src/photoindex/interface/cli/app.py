from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, settings resolution
(defaults, persisted settings and CLI overrides), index startup, the scan
itself, and rendering of the result as a flat list, a tree, or JSON.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from photoindex.core.analysis.tree_renderer import render_folder_tree
from photoindex.core.services.folder_index import FolderIndex
from photoindex.core.services.recent_folders import RecentFolders
from photoindex.core.services.validator import validate_scan_settings
from photoindex.domain.config import (
    get_default_scan_settings,
    load_scan_settings,
    save_scan_settings,
)
from photoindex.domain.tree_models import FolderNode
from photoindex.infra.fs import normalize_path
from photoindex.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from photoindex.interface.cli import args as cli_args

logger = get_logger(__name__)

NO_RESULTS_MESSAGE = "No folders with images found."

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 2 bad input, 130 interrupted,
             1 unexpected failure).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Logging bootstrap
    configure_logging(LoggingConfig(
        level="DEBUG" if args.debug else "WARNING",
        console=True,
        log_file=get_default_log_path() if args.log_file else None,
    ))

    # 2. Settings resolution
    base = get_default_scan_settings() if args.use_defaults else load_scan_settings()
    merged = dict(base)
    merged.update(cli_args.args_to_overrides(args))
    settings, warnings = validate_scan_settings(merged)
    for w in warnings:
        logger.warning(f"Settings Constraint: {w}")

    if args.save_config:
        save_scan_settings(settings)

    if args.dump_config:
        print(json.dumps(settings, indent=2))
        return 0

    recent = RecentFolders()
    if args.recent:
        for folder in recent.folders():
            print(folder)
        return 0

    # 3. Index startup (load + invalidation)
    index = FolderIndex.open(settings=settings)
    if args.clear_cache:
        index.clear()
        if args.input_path is None:
            print("Index cleared.")
            return 0

    # 4. Input verification
    root = normalize_path(args.input_path, os.getcwd())
    if not os.path.isdir(root):
        msg = f"Input folder does not exist: {root}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 5. Scan
    try:
        folders = index.scan(root)
    except KeyboardInterrupt:
        print("Scan interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.critical(f"Scan failed: {e}", exc_info=True)
        print(f"ERROR: Scan failed: {e}", file=sys.stderr)
        return 1

    recent.add(root)

    # 6. Rendering
    if settings["display_mode"] == "tree":
        tree = index.folder_tree(root, with_counts=args.counts)
        _print_tree(root, tree, folders, as_json=args.json_output)
    else:
        _print_list(root, folders, as_json=args.json_output)

    return 0

# -----------------------------------------------------------------------------
# OUTPUT RENDERING
# -----------------------------------------------------------------------------

def _print_list(root: str, folders: List[str], as_json: bool) -> None:
    ordered = sorted(folders)
    if as_json:
        print(json.dumps({"root": root, "folders": ordered}, indent=2))
        return
    if not ordered:
        print(NO_RESULTS_MESSAGE)
        return
    for folder in ordered:
        print(folder)


def _print_tree(root: str, tree: Optional[FolderNode], folders: List[str], as_json: bool) -> None:
    if as_json:
        payload = _tree_to_dict(tree) if tree is not None else None
        print(json.dumps({"root": root, "tree": payload}, indent=2))
        return
    if tree is None or not folders:
        print(NO_RESULTS_MESSAGE)
        return

    lines: List[str] = []
    render_folder_tree(tree, lines)
    print("\n".join(lines))


def _tree_to_dict(node: FolderNode) -> Dict[str, Any]:
    return {
        "path": node.url,
        "label": node.display_label(),
        "image_count": node.image_count,
        "subfolders": [_tree_to_dict(child) for child in node.subfolders],
    }
