"""测试共享 fixture — fake 执行器 / 列举器 / vendor + 临时工作空间

所有外部工具（go list、vendor）都由 fake 返回预设输出，无需真实 Go 工具链。

  tmp_path/
    ws/                  工作空间根目录 (.gocfg/gopaths = go)
      go/src/app/        工作空间内的包
    gocode/src/...       用户原有 GOPATH（工作空间外）
    goroot/src/...       标准库
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from wgo.core.workspace import Workspace
from wgo.utils.shell import CommandResult


class _FakeExecutor:
    """按命令前缀返回预设结果的执行器，并记录所有调用"""

    def __init__(self, responses: dict[tuple[str, ...], CommandResult] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[dict] = []

    def execute(self, cmd, *, cwd=".", env=None, capture=True) -> CommandResult:
        self.calls.append({"cmd": list(cmd), "cwd": cwd, "env": env, "capture": capture})
        key = tuple(cmd)
        while key:
            if key in self.responses:
                r = self.responses[key]
                if isinstance(r, BaseException):
                    raise r
                return r
            key = key[:-1]
        return CommandResult(returncode=0, stdout="", stderr="")


@dataclass
class _FakeLister:
    """go list 的 fake：按调用顺序记录目标，返回预设导入路径"""

    test_imports_out: list[str] = field(default_factory=list)
    deps_out: list[str] = field(default_factory=list)
    goroot_dir: str = ""
    calls: list[tuple[str, list[str], str, dict]] = field(default_factory=list)

    def test_imports(self, targets, *, cwd, env):
        self.calls.append(("test_imports", list(targets), cwd, env))
        return list(self.test_imports_out)

    def deps(self, targets, *, cwd, env):
        self.calls.append(("deps", list(targets), cwd, env))
        return list(self.deps_out)

    def goroot(self, *, env):
        self.calls.append(("goroot", [], "", env))
        return self.goroot_dir


@dataclass
class _FakeVendorer:
    runs: list[tuple[list[str], str, dict]] = field(default_factory=list)

    def run(self, args, *, cwd, env):
        self.runs.append((list(args), cwd, env))


def _make_pkg(base: Path, import_path: str) -> Path:
    d = base / "src" / import_path
    d.mkdir(parents=True, exist_ok=True)
    (d / (import_path.rsplit("/", 1)[-1] + ".go")).write_text("package x\n", encoding="utf-8")
    return d


# =========================================================================
# 工厂 fixture — 测试用例按需构造 fake，只写差异参数
# =========================================================================

@pytest.fixture()
def make_executor():
    """make_executor({("go", "list"): CommandResult(...)}) -> fake 执行器"""
    return _FakeExecutor


@pytest.fixture()
def make_lister():
    """make_lister(deps_out=[...], goroot_dir=...) -> fake go list"""
    return _FakeLister


@pytest.fixture()
def make_vendorer():
    return _FakeVendorer


@pytest.fixture()
def make_pkg():
    """make_pkg(base, import_path) 在 base/src 下创建一个最小 Go 包"""
    return _make_pkg


# =========================================================================
# 临时工作空间
# =========================================================================

@pytest.fixture()
def layout(tmp_path: Path) -> dict[str, Path]:
    ws_root = tmp_path / "ws"
    (ws_root / ".gocfg").mkdir(parents=True)
    (ws_root / ".gocfg" / "gopaths").write_text("go\n", encoding="utf-8")
    gocode = tmp_path / "gocode"
    goroot = tmp_path / "goroot"
    _make_pkg(ws_root / "go", "app")
    _make_pkg(gocode, "example.com/dep")
    _make_pkg(goroot, "fmt")
    return {"root": ws_root, "gocode": gocode, "goroot": goroot}


@pytest.fixture()
def workspace(layout: dict[str, Path]) -> Workspace:
    return Workspace.load(str(layout["root"]))


@pytest.fixture()
def base_env(layout: dict[str, Path]) -> dict[str, str]:
    return {"PATH": "/usr/bin", "GOPATH": str(layout["gocode"])}


@pytest.fixture()
def lister(layout: dict[str, Path]) -> _FakeLister:
    return _FakeLister(
        test_imports_out=["testing", "example.com/testonly"],
        deps_out=["app", "fmt", "example.com/dep", "C", "example.com/missing"],
        goroot_dir=str(layout["goroot"]),
    )
