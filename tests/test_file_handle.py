"""
文件句柄测试
"""

import errno
import os
import pytest
from unittest.mock import Mock, patch
from localfs import (
    FileHandle, OpenMode, get_file_system,
    FileError, NotFoundError, PlatformError, GenericIOError
)


class TestFileHandle:
    """文件句柄测试类"""

    @pytest.fixture
    def fs(self):
        """创建当前平台的文件系统"""
        return get_file_system()

    @pytest.fixture
    def sample_file(self, tmp_path):
        """创建示例文件"""
        path = tmp_path / "sample.bin"
        path.write_bytes(b"0123456789")
        return str(path)

    def test_round_trip(self, fs, tmp_path):
        """测试写入后重新打开读取得到相同内容"""
        path = str(tmp_path / "round_trip.bin")
        data = bytes(range(256)) * 10

        with fs.open_new_for_writing(path) as f:
            f.write(data)

        buffer = bytearray(len(data))
        with fs.open_for_reading(path) as f:
            assert f.read(buffer) == len(data)
        assert bytes(buffer) == data

    def test_partial_read_at_eof(self, fs, sample_file):
        """测试缓冲区大于文件时返回文件长度且不报错"""
        buffer = bytearray(10 + 5)
        with fs.open_for_reading(sample_file) as f:
            assert f.read(buffer) == 10
        assert bytes(buffer[:10]) == b"0123456789"

    def test_short_buffer_read(self, fs, sample_file):
        """测试缓冲区小于剩余数据时正好读满"""
        buffer = bytearray(4)
        with fs.open_for_reading(sample_file) as f:
            assert f.read(buffer) == 4
            assert bytes(buffer) == b"0123"
            assert f.read(buffer) == 4
            assert bytes(buffer) == b"4567"
            assert f.read(buffer) == 2
            assert f.read(buffer) == 0

    def test_open_missing_for_reading(self, fs, tmp_path):
        """测试只读打开不存在的文件"""
        path = str(tmp_path / "missing.txt")
        with pytest.raises(NotFoundError) as exc_info:
            fs.open_for_reading(path)
        assert exc_info.value.code == errno.ENOENT
        assert exc_info.value.path == path

    def test_open_missing_for_writing_creates(self, fs, tmp_path):
        """测试写入模式打开不存在的文件会创建它"""
        path = str(tmp_path / "missing.txt")
        f = fs.open_new_for_writing(path)
        f.close()
        assert fs.exists(path) is True

    def test_open_missing_for_read_write(self, fs, tmp_path):
        """测试读写模式不会创建文件"""
        with pytest.raises(NotFoundError):
            fs.open_for_writing_and_reading(str(tmp_path / "missing.txt"))

    def test_write_truncates(self, fs, sample_file):
        """测试写入模式截断已有文件"""
        with fs.open(sample_file, OpenMode.WRITE) as f:
            f.write(b"ab")
        with open(sample_file, "rb") as f:
            assert f.read() == b"ab"

    def test_read_write_without_truncation(self, fs, sample_file):
        """测试读写模式保留原有内容"""
        with fs.open(sample_file, "r+b") as f:
            assert f.seek(2) is True
            f.write(b"xy")
            assert f.seek(0) is True
            buffer = bytearray(10)
            assert f.read(buffer) == 10
        assert bytes(buffer) == b"01xy456789"

    def test_empty_write_and_read(self, fs, sample_file):
        """测试空写入和空缓冲区读取"""
        stream = Mock()
        handle = FileHandle(sample_file, OpenMode.READ_WRITE, stream)
        handle.write(b"")
        assert handle.read(bytearray(0)) == 0
        stream.write.assert_not_called()
        stream.readinto.assert_not_called()

    def test_seek(self, fs, sample_file):
        """测试定位"""
        buffer = bytearray(3)
        with fs.open_for_reading(sample_file) as f:
            assert f.seek(7) is True
            assert f.tell() == 7
            assert f.read(buffer) == 3
            assert bytes(buffer) == b"789"
            assert f.seek(-1) is False

    def test_close_is_idempotent(self, fs, sample_file):
        """测试重复关闭不做任何事"""
        f = fs.open_for_reading(sample_file)
        f.close()
        f.close()
        assert f.closed is True

    def test_closed_handle_rejects_operations(self, fs, sample_file):
        """测试关闭后的句柄拒绝操作"""
        f = fs.open_for_reading(sample_file)
        f.close()
        with pytest.raises(ValueError):
            f.read(bytearray(1))
        with pytest.raises(ValueError):
            f.write(b"x")
        with pytest.raises(ValueError):
            f.seek(0)

    def test_read_on_write_only_handle(self, fs, tmp_path):
        """测试只写句柄读取得到通用I/O错误"""
        with fs.open_new_for_writing(str(tmp_path / "w.bin")) as f:
            with pytest.raises(GenericIOError) as exc_info:
                f.read(bytearray(4))
        assert exc_info.value.code == 0

    def test_write_on_read_only_handle(self, fs, sample_file):
        """测试只读句柄写入得到通用I/O错误"""
        with fs.open_for_reading(sample_file) as f:
            with pytest.raises(GenericIOError):
                f.write(b"x")

    def test_read_chunks(self, fs, tmp_path):
        """测试按块读取"""
        path = str(tmp_path / "chunks.bin")
        with fs.open_new_for_writing(path) as f:
            f.write_string("abcdefghij")
        with fs.open_for_reading(path) as f:
            assert list(f.read_chunks(4)) == [b"abcd", b"efgh", b"ij"]


class TestFileHandleErrors:
    """文件句柄错误路径测试类"""

    def test_mode_checked_before_stream(self):
        """测试打开模式不支持的操作不会触及底层流"""
        stream = Mock()
        reader = FileHandle("/test.bin", OpenMode.READ, stream)
        writer = FileHandle("/test.bin", OpenMode.WRITE, stream)

        with pytest.raises(GenericIOError) as exc_info:
            reader.write(b"x")
        assert "write" in str(exc_info.value)
        with pytest.raises(GenericIOError):
            writer.read(bytearray(4))
        stream.write.assert_not_called()
        stream.readinto.assert_not_called()

    def test_short_read_without_eof(self):
        """测试未到文件末尾的短读视为通用I/O错误（不重试）"""
        stream = Mock()
        stream.readinto.return_value = 3
        stream.peek.return_value = b"x"
        handle = FileHandle("/test.bin", OpenMode.READ, stream)

        with pytest.raises(GenericIOError) as exc_info:
            handle.read(bytearray(8))
        assert exc_info.value.code == 0
        assert stream.readinto.call_count == 1

    def test_short_read_eof_without_peek(self, tmp_path):
        """测试没有peek的流按文件大小判断文件末尾"""
        path = tmp_path / "raw.bin"
        path.write_bytes(b"abc")
        with open(path, "rb", buffering=0) as raw:
            handle = FileHandle(str(path), OpenMode.READ, raw)
            assert handle.read(bytearray(8)) == 3

    def test_read_platform_error(self):
        """测试读取时的平台错误码"""
        stream = Mock()
        stream.readinto.side_effect = OSError(errno.EIO, "Input/output error")
        handle = FileHandle("/test.bin", OpenMode.READ, stream)

        with pytest.raises(PlatformError) as exc_info:
            handle.read(bytearray(8))
        assert exc_info.value.code == errno.EIO
        assert exc_info.value.path == "/test.bin"

    def test_short_write(self):
        """测试部分写入视为失败"""
        stream = Mock()
        stream.write.return_value = 2
        handle = FileHandle("/test.bin", OpenMode.WRITE, stream)

        with pytest.raises(GenericIOError):
            handle.write(b"Hello")

    def test_write_platform_error(self):
        """测试写入时的平台错误码"""
        stream = Mock()
        stream.write.side_effect = OSError(errno.ENOSPC, "No space left on device")
        handle = FileHandle("/test.bin", OpenMode.WRITE, stream)

        with pytest.raises(PlatformError) as exc_info:
            handle.write(b"Hello")
        assert exc_info.value.code == errno.ENOSPC

    def test_flush_platform_error(self):
        """测试刷新时的平台错误码"""
        stream = Mock()
        stream.flush.side_effect = OSError(errno.ENOSPC, "No space left on device")
        handle = FileHandle("/test.bin", OpenMode.WRITE, stream)

        with pytest.raises(PlatformError):
            handle.flush()

    def test_close_failure_is_logged(self, caplog):
        """测试关闭失败只记录日志"""
        stream = Mock()
        stream.close.side_effect = OSError(errno.EIO, "Input/output error")
        handle = FileHandle("/test.bin", OpenMode.WRITE, stream)

        handle.close()
        assert handle.closed is True
        assert "Failed to close file /test.bin" in caplog.text


class TestCurrentWorkingDirectory:
    """当前工作目录测试类"""

    def test_current_working_directory(self, tmp_path, monkeypatch):
        """测试获取当前工作目录"""
        monkeypatch.chdir(tmp_path)
        expected = os.path.realpath(str(tmp_path))
        assert os.path.realpath(FileHandle.current_working_directory()) == expected
        assert os.path.realpath(get_file_system().current_working_directory()) == expected

    def test_current_working_directory_removed(self):
        """测试工作目录已被删除"""
        with patch("os.getcwd", side_effect=FileNotFoundError(errno.ENOENT, "No such file or directory")):
            with pytest.raises(NotFoundError):
                FileHandle.current_working_directory()

    def test_errors_are_os_errors(self):
        """测试错误类型可按OSError捕获"""
        with patch("os.getcwd", side_effect=PermissionError(errno.EACCES, "Permission denied")):
            with pytest.raises(OSError) as exc_info:
                FileHandle.current_working_directory()
        assert isinstance(exc_info.value, FileError)
