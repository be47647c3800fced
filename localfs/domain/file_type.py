"""
文件类型枚举
"""

import stat
from enum import Enum


class FileType(Enum):
    """文件类型枚举"""
    UNKNOWN = 0
    FILE = 2
    DIRECTORY = 3
    OTHER = 4
    
    @classmethod
    def from_mode(cls, st_mode: int) -> 'FileType':
        """
        根据非目录项的 st_mode 获取文件类型
        目录的判断依赖平台类型位，由 FileSystem 子类负责
        
        Args:
            st_mode: 状态查询返回的模式位
            
        Returns:
            普通文件为 FILE，其他（设备、管道、套接字等）为 OTHER
        """
        if stat.S_ISREG(st_mode):
            return cls.FILE
        return cls.OTHER
    
    def __str__(self):
        return self.name
