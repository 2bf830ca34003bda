"""Godeps.json 导入测试"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import pytest

from wgo.core.exceptions import ConfigError
from wgo.core.godeps import RepoRoot, import_godeps, repo_root_for
from wgo.core.models import GodepsRecord
from wgo.core.workspace import Workspace


def _write_godeps(root: Path, deps: list) -> None:
    d = root / "Godeps"
    d.mkdir(parents=True, exist_ok=True)
    (d / "Godeps.json").write_text(json.dumps({
        "ImportPath": "example.com/app",
        "GoVersion": "go1.4",
        "Deps": deps,
    }), encoding="utf-8")


class TestRepoRoot:
    @pytest.mark.parametrize("path,expected", [
        ("github.com/gorilla/mux", RepoRoot("github.com/gorilla/mux", "https://github.com/gorilla/mux", "git")),
        ("github.com/a/b/c/d", RepoRoot("github.com/a/b", "https://github.com/a/b", "git")),
        ("bitbucket.org/u/r/sub", RepoRoot("bitbucket.org/u/r", "https://bitbucket.org/u/r", "git")),
        ("gopkg.in/yaml.v2", RepoRoot("gopkg.in/yaml.v2", "https://gopkg.in/yaml.v2", "git")),
        ("gopkg.in/user/pkg.v1/sub", RepoRoot("gopkg.in/user/pkg.v1", "https://gopkg.in/user/pkg.v1", "git")),
        ("golang.org/x/net/context", RepoRoot("golang.org/x/net", "https://go.googlesource.com/net", "git")),
        ("code.google.com/p/go.net/html", RepoRoot("code.google.com/p/go.net", "https://code.google.com/p/go.net", "hg")),
        ("launchpad.net/goyaml", RepoRoot("launchpad.net/goyaml", "https://launchpad.net/goyaml", "bzr")),
        ("example.com/team/repo.hg/pkg", RepoRoot("example.com/team/repo.hg", "https://example.com/team/repo.hg", "hg")),
    ])
    def test_known_hosts(self, path: str, expected: RepoRoot) -> None:
        assert repo_root_for(path) == expected

    @pytest.mark.parametrize("path", ["example.com/x/y", "fmt", "github.com/onlyuser"])
    def test_unknown(self, path: str) -> None:
        assert repo_root_for(path) is None


class TestImportGodeps:
    def test_records_rooted_in_vendor_src(self, tmp_path: Path) -> None:
        _write_godeps(tmp_path, [
            {"ImportPath": "github.com/a/b/sub", "Rev": "abc"},
            {"ImportPath": "github.com/a/b/other", "Rev": "abc"},
            {"ImportPath": "code.google.com/p/x", "Comment": "tip", "Rev": "def"},
        ])
        ws = Workspace(str(tmp_path), ["go"])
        records = import_godeps(ws)
        vendor_src = os.path.join("go", "src")
        assert records == [
            GodepsRecord(os.path.join(vendor_src, "github.com/a/b"), "https://github.com/a/b", "abc", "git"),
            GodepsRecord(os.path.join(vendor_src, "code.google.com/p/x"), "https://code.google.com/p/x", "def", "hg"),
        ]

    def test_conflicting_revisions_keep_first(self, tmp_path: Path, caplog) -> None:
        _write_godeps(tmp_path, [
            {"ImportPath": "github.com/a/b", "Rev": "one"},
            {"ImportPath": "github.com/a/b/c", "Rev": "two"},
        ])
        with caplog.at_level(logging.WARNING):
            records = import_godeps(Workspace(str(tmp_path), ["go"]))
        assert [r.rev for r in records] == ["one"]
        assert "冲突" in caplog.text

    def test_unknown_and_incomplete_entries_skipped(self, tmp_path: Path) -> None:
        _write_godeps(tmp_path, [
            {"ImportPath": "example.com/private/pkg", "Rev": "x"},
            {"ImportPath": "github.com/a/b"},
        ])
        assert import_godeps(Workspace(str(tmp_path), ["go"])) == []

    def test_non_object_entries_skipped(self, tmp_path: Path, caplog) -> None:
        _write_godeps(tmp_path, [
            "github.com/a/b",
            42,
            None,
            {"ImportPath": "github.com/c/d", "Rev": "r"},
        ])
        with caplog.at_level(logging.WARNING):
            records = import_godeps(Workspace(str(tmp_path), ["go"]))
        assert [r.repo for r in records] == ["https://github.com/c/d"]
        assert caplog.text.count("格式无效") == 3

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="不存在"):
            import_godeps(Workspace(str(tmp_path), ["go"]))

    def test_malformed_file(self, tmp_path: Path) -> None:
        (tmp_path / "Godeps").mkdir()
        (tmp_path / "Godeps" / "Godeps.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="格式错误"):
            import_godeps(Workspace(str(tmp_path), ["go"]))

    def test_custom_location(self, tmp_path: Path) -> None:
        (tmp_path / "deps.json").write_text(json.dumps({"Deps": [
            {"ImportPath": "github.com/a/b", "Rev": "r1"},
        ]}), encoding="utf-8")
        records = import_godeps(Workspace(str(tmp_path), ["go"]), "deps.json")
        assert [r.rev for r in records] == ["r1"]
