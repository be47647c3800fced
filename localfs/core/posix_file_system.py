"""
POSIX文件系统实现
"""

import os
import stat
from typing import List

from .file_system import FileSystem
from ..util.path_util import PathUtil


class PosixFileSystem(FileSystem):
    """POSIX文件系统实现，按字节枚举目录项后再解码"""

    def _is_directory_stat(self, st: os.stat_result) -> bool:
        return stat.S_IFMT(st.st_mode) == stat.S_IFDIR

    def _list_names(self, path: str) -> List[str]:
        # readdir 原生会返回 "." 和 ".."，os.scandir 会把它们过滤掉
        results: List[str] = list(PathUtil.SPECIAL_ENTRIES) if self.include_special_entries else []
        # 以字节路径枚举，得到未经解码的原生名称
        with os.scandir(os.fsencode(path)) as entries:
            for entry in entries:
                name = PathUtil.decode_name(entry.name, self.encoding)
                if name is not None:
                    results.append(name)
        return results
