"""wgo - Go 工作空间外部依赖管理"""

__version__ = "0.3.0"
