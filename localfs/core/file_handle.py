"""
文件句柄类
封装一个原生的缓冲二进制文件流，提供读、写、定位和关闭操作
"""

import io
import logging
import os
from typing import Iterator, Union

from ..domain.file_error import FileError, GenericIOError
from ..domain.open_mode import OpenMode

logger = logging.getLogger(__name__)


class FileHandle:
    """
    文件句柄类
    独占一个底层文件流，关闭后不可再用；重复关闭是无操作
    同一句柄不支持多线程并发使用
    """

    def __init__(self, path: str, mode: OpenMode, stream: io.BufferedIOBase):
        """
        初始化文件句柄，一般通过 FileHandle.open 创建

        Args:
            path: 文件路径
            mode: 打开模式
            stream: 已打开的缓冲二进制流
        """
        self._path = path
        self._mode = mode
        self._stream = stream
        self._closed = False

    @classmethod
    def open(cls, path: str, mode: Union[OpenMode, str] = OpenMode.READ,
             buffering: int = io.DEFAULT_BUFFER_SIZE) -> 'FileHandle':
        """
        打开文件

        Args:
            path: 文件路径
            mode: 打开模式
            buffering: 缓冲区大小

        Returns:
            文件句柄

        Raises:
            FileError: 原生打开失败
        """
        mode = OpenMode.get(mode)
        try:
            stream = open(path, mode.value, buffering=buffering)
        except OSError as e:
            error = FileError.from_os_error(e, path)
            logger.error(f"Failed to open file {path} ({mode}): {error}")
            raise error from e
        except ValueError as e:
            error = GenericIOError(str(e), path)
            logger.error(f"Failed to open file {path} ({mode}): {error}")
            raise error from e
        logger.info(f"Opened file {path} ({mode})")
        return cls(path, mode, stream)

    @property
    def path(self) -> str:
        return self._path

    @property
    def mode(self) -> OpenMode:
        return self._mode

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self):
        if self._closed:
            raise ValueError("File handle is closed")

    def read(self, buffer: Union[bytearray, memoryview]) -> int:
        """
        读取数据到预先分配好大小的缓冲区

        Args:
            buffer: 可写的缓冲区，长度即为最多读取的字节数

        Returns:
            实际读取的字节数；只有到达文件末尾时才可能小于缓冲区长度

        Raises:
            FileError: 读取失败，或在未到文件末尾时读取不足
        """
        self._check_open()
        size = len(buffer)
        if size <= 0:
            return 0
        if not self._mode.is_readable():
            raise self._unsupported("read")

        try:
            count = self._stream.readinto(buffer)
        except OSError as e:
            raise self._fail("read", e) from e
        count = count or 0

        if count == size:
            return count
        if self._at_eof():
            logger.debug(f"Read {count}/{size} bytes from {self._path} (end of file)")
            return count
        # 没有错误码也没有到达文件末尾，不做重试
        error = GenericIOError(f"Short read of {count}/{size} bytes", self._path)
        logger.error(f"Failed to read {self._path}: {error}")
        raise error

    def _at_eof(self) -> bool:
        """判断流是否已到达文件末尾"""
        try:
            peek = getattr(self._stream, "peek", None)
            if peek is not None:
                return not peek(1)
            return self._stream.tell() >= os.fstat(self._stream.fileno()).st_size
        except OSError as e:
            raise self._fail("read", e) from e

    def write(self, data: bytes):
        """
        一次写入全部数据，部分写入视为失败

        Args:
            data: 要写入的数据

        Raises:
            FileError: 写入失败
        """
        self._check_open()
        if not data:
            return
        if not self._mode.is_writable():
            raise self._unsupported("write")

        size = len(data)
        try:
            count = self._stream.write(data)
        except OSError as e:
            raise self._fail("write", e) from e

        if count != size:
            error = GenericIOError(f"Short write of {count}/{size} bytes", self._path)
            logger.error(f"Failed to write {self._path}: {error}")
            raise error

    def write_string(self, text: str, encoding: str = 'utf-8'):
        """
        写入字符串

        Args:
            text: 要写入的字符串
            encoding: 编码格式
        """
        self.write(text.encode(encoding))

    def read_chunks(self, chunk_size: int = 8192) -> Iterator[bytes]:
        """
        按块读取剩余数据直到文件末尾

        Args:
            chunk_size: 分块大小
        """
        buffer = bytearray(chunk_size)
        while True:
            count = self.read(buffer)
            if count:
                yield bytes(buffer[:count])
            if count < chunk_size:
                break

    def seek(self, offset: int) -> bool:
        """
        定位到距文件开头 offset 字节处

        Args:
            offset: 偏移量

        Returns:
            是否定位成功
        """
        self._check_open()
        try:
            self._stream.seek(offset, os.SEEK_SET)
            return True
        except (OSError, ValueError) as e:
            logger.debug(f"Failed to seek {self._path} to {offset}: {e}")
            return False

    def tell(self) -> int:
        """获取当前位置"""
        self._check_open()
        try:
            return self._stream.tell()
        except OSError as e:
            raise self._fail("tell", e) from e

    def flush(self):
        """刷新缓冲区"""
        self._check_open()
        try:
            self._stream.flush()
        except OSError as e:
            raise self._fail("flush", e) from e

    def close(self):
        """关闭句柄，重复关闭不做任何事"""
        if self._closed:
            return
        self._closed = True
        try:
            self._stream.close()
            logger.info(f"Closed file {self._path}")
        except OSError as e:
            logger.error(f"Failed to close file {self._path}: {FileError.from_os_error(e, self._path)}")

    def _unsupported(self, operation: str) -> FileError:
        error = GenericIOError(f"File handle opened in {self._mode} mode does not support {operation}", self._path)
        logger.error(f"Failed to {operation} {self._path}: {error}")
        return error

    def _fail(self, operation: str, exc: OSError) -> FileError:
        error = FileError.from_os_error(exc, self._path)
        logger.error(f"Failed to {operation} {self._path}: {error}")
        return error

    @staticmethod
    def current_working_directory() -> str:
        """
        获取进程当前工作目录
        这是进程级共享状态，其他调用方的修改对此处立即可见

        Returns:
            当前工作目录

        Raises:
            FileError: 查询失败，例如工作目录已被删除
        """
        try:
            return os.getcwd()
        except OSError as e:
            error = FileError.from_os_error(e)
            logger.error(f"Failed to get current working directory: {error}")
            raise error from e

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self):
        state = "closed" if self._closed else "open"
        return f"FileHandle{{path='{self._path}', mode={self._mode}, {state}}}"
