"""
文件错误类型
所有平台错误码统一转换为 FileError 及其子类
"""

import errno
from typing import Optional

# 没有平台错误码时使用的通用 I/O 失败码
GENERIC_IO_FAILURE = 0


class FileError(OSError):
    """文件错误基类，携带平台错误码（errno 或 Windows last-error）"""
    
    def __init__(self, code: int, message: str = "", path: Optional[str] = None):
        """
        初始化文件错误
        
        Args:
            code: 平台错误码，GENERIC_IO_FAILURE 表示无错误码
            message: 错误描述
            path: 相关路径
        """
        super().__init__(code, message or f"I/O error {code}", path)
        self.code: int = code
        self.path: Optional[str] = path
    
    @classmethod
    def from_os_error(cls, exc: OSError, path: Optional[str] = None) -> 'FileError':
        """
        将捕获到的 OSError 转换为对应的 FileError
        必须在捕获异常的 except 块内立即调用
        
        Args:
            exc: 原生异常
            path: 相关路径，未提供时使用异常自带的文件名
            
        Returns:
            转换后的文件错误
        """
        if isinstance(exc, FileError):
            return exc
        if path is None and exc.filename is not None:
            path = str(exc.filename)
        message = exc.strerror or str(exc)
        if exc.errno == errno.ENOENT:
            return NotFoundError(exc.errno, message, path)
        # Windows 上优先使用原生的 last-error 值
        code = getattr(exc, "winerror", None) or exc.errno
        if not code:
            return GenericIOError(message, path)
        return PlatformError(code, message, path)
    
    def __str__(self):
        base = f"[Error {self.code}] {self.strerror}"
        if self.path:
            base = f"{base} (path={self.path})"
        return base


class NotFoundError(FileError):
    """路径不存在"""
    
    def __init__(self, code: int = errno.ENOENT, message: str = "No such file or directory",
                 path: Optional[str] = None):
        super().__init__(code, message, path)


class PlatformError(FileError):
    """其他平台错误"""
    pass


class GenericIOError(FileError):
    """没有平台错误码的 I/O 失败，例如无法解释的短读或短写"""
    
    def __init__(self, message: str = "Generic I/O failure", path: Optional[str] = None):
        super().__init__(GENERIC_IO_FAILURE, message, path)
