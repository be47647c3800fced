"""
文件打开模式枚举
"""

from enum import Enum
from typing import Union


class OpenMode(Enum):
    """文件打开模式枚举，值为对应的原生打开模式"""
    WRITE = "wb"        # 创建或截断后写入
    READ = "rb"         # 只读
    READ_WRITE = "r+b"  # 读写，不截断
    
    @classmethod
    def get(cls, value: Union[str, 'OpenMode']) -> 'OpenMode':
        """
        根据原生模式字符串或枚举名获取打开模式
        
        Args:
            value: 原生模式（如 "rb"）、枚举名（如 "read"）或枚举值本身
            
        Returns:
            对应的打开模式枚举值
            
        Raises:
            ValueError: 未知的打开模式
        """
        if isinstance(value, cls):
            return value
        for mode in cls:
            if mode.value == value or mode.name == str(value).upper():
                return mode
        raise ValueError(f"Unknown open mode: {value!r}")
    
    def is_readable(self) -> bool:
        return self in (OpenMode.READ, OpenMode.READ_WRITE)
    
    def is_writable(self) -> bool:
        return self in (OpenMode.WRITE, OpenMode.READ_WRITE)
    
    def __str__(self):
        return self.name
    
    def __repr__(self):
        return f"OpenMode.{self.name}"
