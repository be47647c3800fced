"""
Windows文件系统实现
"""

import os
import stat
from typing import List

from .file_system import FileSystem
from ..util.path_util import PathUtil

FILE_ATTRIBUTE_DIRECTORY = getattr(stat, "FILE_ATTRIBUTE_DIRECTORY", 0x10)

# ucrt 中的类型位常量
UCRT_S_IFMT = 0xF000
UCRT_S_IFDIR = 0x4000


class WindowsFileSystem(FileSystem):
    """Windows文件系统实现，按宽字符枚举目录项"""

    def _is_directory_stat(self, st: os.stat_result) -> bool:
        attributes = getattr(st, "st_file_attributes", None)
        if attributes is not None:
            return bool(attributes & FILE_ATTRIBUTE_DIRECTORY)
        return (st.st_mode & UCRT_S_IFMT) == UCRT_S_IFDIR

    def _list_names(self, path: str) -> List[str]:
        results: List[str] = []
        # os.scandir 会过滤掉 "." 和 ".."，FindFirstFileW 对非根目录原生会返回它们
        if self.include_special_entries and not self._is_drive_root(path):
            results.extend(PathUtil.SPECIAL_ENTRIES)
        with os.scandir(os.fsdecode(path)) as entries:
            for entry in entries:
                name = PathUtil.validate_wide_name(entry.name)
                if name is not None:
                    results.append(name)
        return results

    @staticmethod
    def _is_drive_root(path: str) -> bool:
        """驱动器根目录的通配符枚举不包含 "." 和 ".." """
        absolute = os.path.abspath(os.fsdecode(path))
        return os.path.dirname(absolute) == absolute
