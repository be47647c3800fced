"""
localfs 命令行接口
"""

import argparse
import codecs
import logging
import sys
from datetime import datetime

from localfs import FileError, FileSystem, get_file_system
from localfs.util.path_util import PathUtil

def setup_logging(verbose: bool = False):
    """设置日志"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

def ls_command(fs: FileSystem, path: str):
    """列出目录内容"""
    print(f"列出目录: {path}")
    names = fs.list_files(path)

    if not names:
        print("  目录为空")
        return

    print(f"  找到 {len(names)} 个项目:")
    for name in names:
        entry_path = PathUtil.join(path, name)
        suffix = PathUtil.PATH_SEPARATOR if name not in (".", "..") and fs.is_directory(entry_path) else ""
        print(f"    {name}{suffix}")

def stat_command(fs: FileSystem, path: str):
    """显示文件状态"""
    print(f"文件状态: {path}")
    stats = fs.get_file_stats(path)

    if not stats.exists:
        print("  文件不存在")
        return

    print(f"  路径: {stats.get_path()}")
    print(f"  大小: {stats.get_size()} bytes")
    print(f"  类型: {stats.get_type()}")
    print(f"  修改时间: {datetime.fromtimestamp(stats.get_mtime()).isoformat()}")

def cat_command(fs: FileSystem, path: str):
    """显示文件内容"""
    with fs.open_for_reading(path) as f:
        # 增量解码，跨块的多字节字符不会丢失
        decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')
        for chunk in f.read_chunks():
            sys.stdout.write(decoder.decode(chunk))
        sys.stdout.write(decoder.decode(b"", final=True))
    sys.stdout.flush()

def write_command(fs: FileSystem, path: str, text: str):
    """写入文件（创建或截断）"""
    print(f"写入文件: {path}")
    with fs.open_new_for_writing(path) as f:
        f.write_string(text)
        f.flush()
    print("  ✓ 写入成功")

def pwd_command(fs: FileSystem):
    """显示当前工作目录"""
    print(fs.current_working_directory())

def main(argv=None):
    """主函数"""
    parser = argparse.ArgumentParser(description="localfs 命令行工具")
    parser.add_argument("--verbose", "-v", action="store_true", help="详细输出")
    parser.add_argument("--encoding", default="utf-8", help="目录项名称的编码格式")

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    # ls命令
    ls_parser = subparsers.add_parser("ls", help="列出目录内容")
    ls_parser.add_argument("path", nargs="?", default=".", help="目录路径")
    ls_parser.add_argument("--no-special", action="store_true", help="不包含 . 和 ..")

    # stat命令
    stat_parser = subparsers.add_parser("stat", help="显示文件状态")
    stat_parser.add_argument("path", help="文件路径")

    # cat命令
    cat_parser = subparsers.add_parser("cat", help="显示文件内容")
    cat_parser.add_argument("path", help="文件路径")

    # write命令
    write_parser = subparsers.add_parser("write", help="写入文件")
    write_parser.add_argument("path", help="文件路径")
    write_parser.add_argument("text", help="写入的文本")

    # pwd命令
    subparsers.add_parser("pwd", help="显示当前工作目录")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    # 设置日志
    setup_logging(args.verbose)

    fs = get_file_system(
        encoding=args.encoding,
        include_special_entries=not getattr(args, "no_special", False)
    )

    try:
        # 执行命令
        if args.command == "ls":
            ls_command(fs, args.path)
        elif args.command == "stat":
            stat_command(fs, args.path)
        elif args.command == "cat":
            cat_command(fs, args.path)
        elif args.command == "write":
            write_command(fs, args.path, args.text)
        elif args.command == "pwd":
            pwd_command(fs)

    except FileError as e:
        print(f"命令执行失败: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
