"""
文件系统抽象基类
定义路径状态查询、目录列举和文件打开的通用接口
平台相关的部分（类型位判断、目录项枚举）由子类实现，调用方不做平台分支
"""

import errno
import logging
import os
from typing import List, Optional, Union

from .file_handle import FileHandle
from ..domain.file_error import FileError, GenericIOError
from ..domain.file_type import FileType
from ..domain.open_mode import OpenMode
from ..domain.stat_info import StatInfo

logger = logging.getLogger(__name__)


class FileSystem:
    """
    文件系统抽象基类
    定义了通用的文件系统方法和变量
    """

    def __init__(self, encoding: str = "utf-8", include_special_entries: bool = True):
        """
        初始化文件系统

        Args:
            encoding: 目录项名称的编码格式
            include_special_entries: 列举目录时是否保留原生枚举会返回的 "." 和 ".."
        """
        self.encoding: str = encoding
        self.include_special_entries: bool = include_special_entries

    def _stat(self, path: str) -> Optional[os.stat_result]:
        """
        查询路径状态，路径不存在时返回None，其他错误转换后抛出
        """
        try:
            return os.stat(path)
        except OSError as e:
            if e.errno == errno.ENOENT:
                return None
            error = FileError.from_os_error(e, path)
            logger.error(f"Failed to stat {path}: {error}")
            raise error from e
        except ValueError as e:
            # 例如路径中含有 NUL 字符
            error = GenericIOError(str(e), path)
            logger.error(f"Failed to stat {path}: {error}")
            raise error from e

    def _is_directory_stat(self, st: os.stat_result) -> bool:
        """根据平台的类型位判断是否为目录"""
        raise NotImplementedError

    def _list_names(self, path: str) -> List[str]:
        """按平台约定列举目录项名称"""
        raise NotImplementedError

    def _file_type(self, st: os.stat_result) -> FileType:
        if self._is_directory_stat(st):
            return FileType.DIRECTORY
        return FileType.from_mode(st.st_mode)

    def get_file_stats(self, path: str) -> StatInfo:
        """
        获取文件状态信息

        Args:
            path: 文件路径

        Returns:
            文件状态信息，路径不存在时 exists 为 False

        Raises:
            FileError: 除路径不存在以外的平台错误
        """
        st = self._stat(path)
        if st is None:
            return StatInfo.not_found(path)
        stat_info = StatInfo(
            path=path,
            exists=True,
            file_type=self._file_type(st),
            size=st.st_size,
            mtime=st.st_mtime
        )
        logger.debug(f"Got file stats for {path}: {stat_info}")
        return stat_info

    def exists(self, path: str) -> bool:
        """
        检查文件或目录是否存在

        Args:
            path: 路径

        Returns:
            是否存在
        """
        return self._stat(path) is not None

    def is_directory(self, path: str) -> bool:
        """
        检查是否为目录

        Args:
            path: 路径

        Returns:
            是否为目录，路径不存在时为 False
        """
        st = self._stat(path)
        return st is not None and self._is_directory_stat(st)

    def is_file(self, path: str) -> bool:
        """
        检查是否为普通文件

        Args:
            path: 路径

        Returns:
            是否为文件
        """
        return self.get_file_stats(path).is_file()

    def list_files(self, path: str) -> List[str]:
        """
        列出目录下的全部目录项名称，顺序由操作系统决定
        无法有效解码的名称会被跳过

        Args:
            path: 目录路径

        Returns:
            目录项名称列表

        Raises:
            FileError: 打开或读取目录失败
        """
        try:
            names = self._list_names(path)
        except OSError as e:
            error = FileError.from_os_error(e, path)
            logger.error(f"Failed to list directory {path}: {error}")
            raise error from e
        except ValueError as e:
            error = GenericIOError(str(e), path)
            logger.error(f"Failed to list directory {path}: {error}")
            raise error from e
        logger.debug(f"Listed {len(names)} items in {path}")
        return names

    def open(self, path: str, mode: Union[OpenMode, str] = OpenMode.READ) -> FileHandle:
        """
        打开文件

        Args:
            path: 文件路径
            mode: 打开模式

        Returns:
            文件句柄
        """
        return FileHandle.open(path, mode)

    def open_new_for_writing(self, path: str) -> FileHandle:
        """创建或截断文件用于写入"""
        return self.open(path, OpenMode.WRITE)

    def open_for_reading(self, path: str) -> FileHandle:
        """打开文件用于读取"""
        return self.open(path, OpenMode.READ)

    def open_for_writing_and_reading(self, path: str) -> FileHandle:
        """打开已有文件用于读写，不截断"""
        return self.open(path, OpenMode.READ_WRITE)

    def current_working_directory(self) -> str:
        """获取进程当前工作目录"""
        return FileHandle.current_working_directory()
