"""目录复制"""

from __future__ import annotations

import logging
import os
import shutil

from wgo.core.exceptions import FileCopyError

logger = logging.getLogger(__name__)


def copy_dir(src: str, dst: str) -> None:
    """递归复制 src 到 dst（dst 不能已存在），自动创建父目录

    Raises:
        FileCopyError: 源目录不可读、目标已存在或写入失败
    """
    parent = os.path.dirname(dst)
    try:
        if parent:
            os.makedirs(parent, exist_ok=True)
        shutil.copytree(src, dst, symlinks=True)
    except OSError as e:  # shutil.Error 亦是 OSError
        raise FileCopyError(src, dst, str(e)) from e
    logger.debug("已复制 %s -> %s", src, dst)
