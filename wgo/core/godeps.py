"""旧版依赖清单 (Godeps/Godeps.json) 导入

把清单中每个依赖映射到其代码仓根目录，生成 vendor 可用的固定版本记录。
代码仓根目录按常见托管站点的路径规则离线推断，不做网络探测；
无法识别的站点会被跳过并记录警告。
"""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass

from wgo.core.exceptions import ConfigError
from wgo.core.models import GodepsRecord
from wgo.core.workspace import Workspace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepoRoot:
    root: str  # 代码仓对应的导入路径前缀
    repo: str
    kind: str


@dataclass(frozen=True)
class _HostRule:
    pattern: re.Pattern[str]
    kind: str
    repo: str  # 以 match.groupdict() 格式化


_HOST_RULES = [
    _HostRule(
        re.compile(r"^(?P<root>github\.com/[A-Za-z0-9_.\-]+/[A-Za-z0-9_.\-]+)(/.*)?$"),
        "git", "https://{root}",
    ),
    _HostRule(
        re.compile(r"^(?P<root>bitbucket\.org/[A-Za-z0-9_.\-]+/[A-Za-z0-9_.\-]+)(/.*)?$"),
        "git", "https://{root}",
    ),
    _HostRule(
        re.compile(r"^(?P<root>gopkg\.in/(?:[A-Za-z0-9_\-]+/)?[A-Za-z0-9_\-.]+\.v\d+)(/.*)?$"),
        "git", "https://{root}",
    ),
    _HostRule(
        re.compile(r"^(?P<root>golang\.org/x/(?P<name>[A-Za-z0-9_.\-]+))(/.*)?$"),
        "git", "https://go.googlesource.com/{name}",
    ),
    _HostRule(
        re.compile(r"^(?P<root>code\.google\.com/p/[a-z0-9\-]+(?:\.[a-z0-9\-]+)?)(/.*)?$"),
        "hg", "https://{root}",
    ),
    _HostRule(
        re.compile(r"^(?P<root>launchpad\.net/[A-Za-z0-9_.\-]+)(/.*)?$"),
        "bzr", "https://{root}",
    ),
    # 路径中显式带 VCS 后缀，如 example.com/team/repo.git/pkg
    _HostRule(
        re.compile(r"^(?P<root>(?P<host>[A-Za-z0-9_.\-]+\.[A-Za-z]+)(?:/[A-Za-z0-9_.\-]+)*?\.(?P<vcs>git|hg|bzr))(/.*)?$"),
        "", "https://{root}",
    ),
]


def repo_root_for(import_path: str) -> RepoRoot | None:
    """推断导入路径所属的代码仓，无法识别返回 None"""
    for rule in _HOST_RULES:
        m = rule.pattern.match(import_path)
        if m is None:
            continue
        groups = {k: v for k, v in m.groupdict().items() if v is not None}
        kind = rule.kind or groups["vcs"]
        return RepoRoot(groups["root"], rule.repo.format(**groups), kind)
    return None


def load_godeps(path: str) -> list[dict]:
    """读取 Godeps.json 中的 Deps 列表"""
    if not os.path.exists(path):
        raise ConfigError(f"依赖清单不存在: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"依赖清单格式错误: {path}: {e}") from e
    deps = data.get("Deps") if isinstance(data, dict) else None
    if deps is None:
        return []
    if not isinstance(deps, list):
        raise ConfigError(f"依赖清单 Deps 字段必须是列表: {path}")
    return deps


def import_godeps(
    workspace: Workspace, godeps_file: str = "Godeps/Godeps.json",
) -> list[GodepsRecord]:
    """把清单转换为 GodepsRecord 列表（按代码仓去重，先出现者优先）"""
    path = os.path.join(workspace.root, godeps_file)
    vendor_src = workspace.vendor_root_src()

    records: dict[str, GodepsRecord] = {}
    for dep in load_godeps(path):
        if not isinstance(dep, dict):
            logger.warning("清单条目格式无效，已跳过: %r", dep)
            continue
        import_path = dep.get("ImportPath", "")
        rev = dep.get("Rev", "")
        if not import_path or not rev:
            logger.warning("清单条目缺少 ImportPath 或 Rev，已跳过: %s", dep)
            continue

        rr = repo_root_for(import_path)
        if rr is None:
            logger.warning("无法识别代码仓，已跳过: %s", import_path)
            continue

        root = os.path.join(vendor_src, rr.root)
        prev = records.get(root)
        if prev is not None:
            if prev.rev != rev:
                logger.warning(
                    "%s 存在冲突版本 %s / %s，保留 %s",
                    rr.root, prev.rev, rev, prev.rev,
                )
            continue
        records[root] = GodepsRecord(root=root, repo=rr.repo, rev=rev, kind=rr.kind)

    logger.info("从 %s 导入 %d 个代码仓", godeps_file, len(records))
    return list(records.values())
