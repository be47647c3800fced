"""
localfs - 跨平台本地文件访问
提供文件打开、读写、定位、路径状态查询和目录列举的基础操作接口
"""

__version__ = "1.0.0"
__author__ = "localfs Team"

from .core.file_handle import FileHandle
from .core.file_system import FileSystem
from .core.local_file_system import LocalFileSystem, get_file_system
from .domain.stat_info import StatInfo
from .domain.file_type import FileType
from .domain.open_mode import OpenMode
from .domain.file_error import FileError, NotFoundError, PlatformError, GenericIOError

__all__ = [
    'FileHandle',
    'FileSystem',
    'LocalFileSystem',
    'get_file_system',
    'StatInfo',
    'FileType',
    'OpenMode',
    'FileError',
    'NotFoundError',
    'PlatformError',
    'GenericIOError'
]
