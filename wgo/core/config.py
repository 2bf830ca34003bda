"""集中配置管理

工作空间级配置放在 <root>/.gocfg/config.yml，缺省时全部取默认值。
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

import yaml

from wgo.core.exceptions import ConfigError
from wgo.utils.yaml_io import load_yaml

logger = logging.getLogger(__name__)

CONFIG_DIR = ".gocfg"
CONFIG_FILE = "config.yml"

# 固定忽略的 VCS / 元数据目录
DEFAULT_IGNORE_DIRS = (".git", ".hg", CONFIG_DIR)


@dataclass
class Config:
    """wgo 配置"""

    # 外部工具
    go_command: str = "go"
    vendor_command: str = "vendor"
    goroot: str = ""  # 为空时通过 `go env GOROOT` 获取

    # 旧版依赖清单
    godeps_file: str = "Godeps/Godeps.json"

    # 传给 vendor 的忽略目录（各 gopath 的 pkg/bin 另行追加）
    base_ignore_dirs: list[str] = field(
        default_factory=lambda: list(DEFAULT_IGNORE_DIRS),
    )

    extra: dict = field(default_factory=dict)

    @classmethod
    def from_file(cls, path: str) -> Config:
        """从 YAML 文件加载配置，不存在则返回默认"""
        try:
            data = load_yaml(path)
        except (yaml.YAMLError, ValueError) as e:
            raise ConfigError(f"配置文件无效: {path}: {e}") from e
        if not data:
            return cls()
        known = {f for f in cls.__dataclass_fields__ if f != "extra"}
        matched = {k: v for k, v in data.items() if k in known}
        extra = {k: v for k, v in data.items() if k not in known}
        if "base_ignore_dirs" in matched and not isinstance(matched["base_ignore_dirs"], list):
            raise ConfigError(f"base_ignore_dirs 必须是列表: {path}")
        cfg = cls(**matched)
        cfg.extra = extra
        return cfg

    @classmethod
    def for_workspace(cls, root: str) -> Config:
        return cls.from_file(os.path.join(root, CONFIG_DIR, CONFIG_FILE))


# 全局单例，由 CLI 入口显式初始化
_current: Config | None = None


def get_config() -> Config:
    """获取当前配置（未初始化则返回默认值）"""
    global _current  # noqa: PLW0603
    if _current is None:
        _current = Config()
    return _current


def init_config(path: str) -> Config:
    """从文件初始化全局配置"""
    global _current  # noqa: PLW0603
    _current = Config.from_file(path)
    logger.info("配置已加载: %s", path)
    return _current
