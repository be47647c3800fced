"""
核心模块 - 文件系统基础类和实现
"""

from .file_system import FileSystem
from .file_handle import FileHandle
from .posix_file_system import PosixFileSystem
from .windows_file_system import WindowsFileSystem
from .local_file_system import LocalFileSystem, get_file_system

__all__ = [
    'FileSystem',
    'FileHandle',
    'PosixFileSystem',
    'WindowsFileSystem',
    'LocalFileSystem',
    'get_file_system'
]
