"""
本地文件系统
按当前平台选定唯一的实现
"""

import logging
import os

from .file_system import FileSystem
from .posix_file_system import PosixFileSystem
from .windows_file_system import WindowsFileSystem

logger = logging.getLogger(__name__)

if os.name == "nt":
    LocalFileSystem = WindowsFileSystem
else:
    LocalFileSystem = PosixFileSystem


def get_file_system(**options) -> FileSystem:
    """
    创建当前平台的文件系统

    Args:
        **options: 传给 FileSystem 构造函数的参数

    Returns:
        文件系统实例
    """
    fs = LocalFileSystem(**options)
    logger.debug(f"Created {type(fs).__name__} with options {options}")
    return fs
