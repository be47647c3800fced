"""
数据模型模块 - 定义各种数据结构
"""

from .stat_info import StatInfo
from .file_type import FileType
from .open_mode import OpenMode
from .file_error import FileError, NotFoundError, PlatformError, GenericIOError

__all__ = [
    'StatInfo',
    'FileType',
    'OpenMode',
    'FileError',
    'NotFoundError',
    'PlatformError',
    'GenericIOError'
]
