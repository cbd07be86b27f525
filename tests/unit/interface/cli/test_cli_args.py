from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to settings overrides.
2. CSV string parsing logic.
3. Omission of flags that were not given.
"""

from photoindex.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_no_flags_produce_no_overrides():
    args = parse_args([])

    assert args.input_path is None
    assert args_to_overrides(args) == {}


def test_cli_scan_bounds_mapping():
    args = parse_args(["--max-depth", "7", "--exclude", "/System, /usr,,", "--no-persist"])

    overrides = args_to_overrides(args)

    assert overrides["max_depth"] == 7
    assert overrides["exclusion_list"] == ["/System", "/usr"]
    assert overrides["persist_after_scan"] is False


def test_cli_empty_exclude_disables_exclusions():
    overrides = args_to_overrides(parse_args(["--exclude", ""]))

    assert overrides["exclusion_list"] == []


def test_cli_display_mode_mapping():
    assert args_to_overrides(parse_args(["--tree"]))["display_mode"] == "tree"
    assert args_to_overrides(parse_args(["--list"]))["display_mode"] == "list"
    assert "display_mode" not in args_to_overrides(parse_args(["--counts"]))


def test_cli_path_argument():
    args = parse_args(["-i", "/Users/me/Pictures"])

    assert args.input_path == "/Users/me/Pictures"
