from __future__ import annotations

"""
Unit tests for the Recently Opened Folders list.
"""

import json
from pathlib import Path

from photoindex.core.services.recent_folders import RecentFolders
from photoindex.domain.config import load_app_state


def _recent(tmp_path: Path, pictures: str = "/home/me/Pictures") -> RecentFolders:
    return RecentFolders(config_file=str(tmp_path / "config.json"), pictures_dir=pictures)


def test_pictures_folder_is_seeded(tmp_path: Path) -> None:
    recent = _recent(tmp_path)

    assert recent.folders() == ["/home/me/Pictures"]


def test_pictures_folder_is_not_duplicated(tmp_path: Path) -> None:
    _recent(tmp_path)
    recent = _recent(tmp_path)

    assert recent.folders() == ["/home/me/Pictures"]


def test_add_puts_folder_first(tmp_path: Path) -> None:
    recent = _recent(tmp_path)
    recent.add("/a")
    recent.add("/b")

    assert recent.folders() == ["/b", "/a", "/home/me/Pictures"]


def test_add_existing_folder_moves_it_to_front(tmp_path: Path) -> None:
    recent = _recent(tmp_path)
    recent.add("/a")
    recent.add("/b")
    recent.add("/a")

    assert recent.folders() == ["/a", "/b", "/home/me/Pictures"]


def test_capacity_evicts_oldest(tmp_path: Path) -> None:
    recent = _recent(tmp_path)
    for name in ["/1", "/2", "/3", "/4", "/5"]:
        recent.add(name)

    assert recent.folders() == ["/5", "/4", "/3", "/2", "/1"]


def test_list_is_persisted(tmp_path: Path) -> None:
    recent = _recent(tmp_path)
    recent.add("/a")

    state = load_app_state(str(tmp_path / "config.json"))
    assert state["recent_folders"] == ["/a", "/home/me/Pictures"]

    reopened = _recent(tmp_path)
    assert reopened.folders() == ["/a", "/home/me/Pictures"]


def test_folder_at(tmp_path: Path) -> None:
    recent = _recent(tmp_path)
    recent.add("/a")

    assert recent.folder_at(0) == "/a"
    assert recent.folder_at(1) == "/home/me/Pictures"
    assert recent.folder_at(2) is None
    assert recent.folder_at(-1) is None


def test_default_pictures_dir_comes_from_home(tmp_path: Path, user_home: Path) -> None:
    recent = RecentFolders(config_file=str(tmp_path / "config.json"))

    assert recent.folders() == [str(user_home / "Pictures")]


def test_undecodable_folder_name_is_persisted(tmp_path: Path) -> None:
    """Names os.fsdecode turns into surrogate escapes do not break saving."""
    recent = _recent(tmp_path, pictures="/pics")
    odd = "/photos/caf\udce9"

    recent.add(odd)

    assert recent.folders() == [odd, "/pics"]
    assert _recent(tmp_path, pictures="/pics").folders() == [odd, "/pics"]


def test_seeding_full_list_respects_capacity(tmp_path: Path) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text(
        json.dumps({"recent_folders": ["/1", "/2", "/3", "/4", "/5"]}), encoding="utf-8"
    )

    recent = _recent(tmp_path, pictures="/pics")

    assert recent.folders() == ["/pics", "/1", "/2", "/3", "/4"]
    assert recent.folder_at(5) is None

    recent.add("/6")
    assert recent.folders() == ["/6", "/pics", "/1", "/2", "/3"]
    assert load_app_state(str(config_file))["recent_folders"] == ["/6", "/pics", "/1", "/2", "/3"]


def test_oversized_stored_list_is_trimmed(tmp_path: Path) -> None:
    config_file = tmp_path / "config.json"
    stored = ["/pics", "/1", "/2", "/3", "/4", "/5", "/6"]
    config_file.write_text(json.dumps({"recent_folders": stored}), encoding="utf-8")

    recent = _recent(tmp_path, pictures="/pics")

    assert recent.folders() == stored[:5]
