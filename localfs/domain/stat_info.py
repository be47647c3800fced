"""
文件状态信息类
"""

from .file_type import FileType


class StatInfo:
    """文件状态信息类，每次查询重新计算，不做缓存"""
    
    def __init__(self, path: str = "", exists: bool = False,
                 file_type: FileType = FileType.UNKNOWN, size: int = 0, mtime: float = 0.0):
        """
        初始化文件状态信息
        
        Args:
            path: 文件路径
            exists: 路径是否存在
            file_type: 文件类型
            size: 文件大小
            mtime: 修改时间
        """
        self.path: str = path
        self.exists: bool = exists
        self.type: FileType = file_type
        self.size: int = size
        self.mtime: float = mtime
    
    @classmethod
    def not_found(cls, path: str) -> 'StatInfo':
        """路径不存在时的状态信息"""
        return cls(path=path, exists=False)
    
    def get_path(self) -> str:
        """获取文件路径"""
        return self.path
    
    def get_size(self) -> int:
        """获取文件大小"""
        return self.size
    
    def get_mtime(self) -> float:
        """获取修改时间"""
        return self.mtime
    
    def get_type(self) -> FileType:
        """获取文件类型"""
        return self.type
    
    def is_file(self) -> bool:
        """判断是否为文件"""
        return self.exists and self.type == FileType.FILE
    
    def is_directory(self) -> bool:
        """判断是否为目录"""
        return self.exists and self.type == FileType.DIRECTORY
    
    def __str__(self):
        return (f"StatInfo{{path='{self.path}', exists={self.exists}, type={self.type}, "
                f"size={self.size}, mtime={self.mtime}}}")
    
    def __repr__(self):
        return self.__str__()
