"""
基础使用示例
演示localfs的基本用法：写入、读取、定位、状态查询和目录列举
"""

import logging
import tempfile
from localfs import get_file_system, FileError
from localfs.util import PathUtil

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

def main():
    """主函数"""
    print("=== localfs 基础使用示例 ===\n")
    
    fs = get_file_system()
    
    with tempfile.TemporaryDirectory() as demo_dir:
        file_path = PathUtil.join(demo_dir, "test.txt")
        try:
            # 1. 创建并写入文件
            print("1. 创建并写入文件...")
            with fs.open_new_for_writing(file_path) as f:
                f.write_string("Hello, localfs! 这是一个测试文件。")
            print(f"   ✓ 文件创建并写入成功: {file_path}")
            
            # 2. 读取文件
            print("\n2. 读取文件...")
            buffer = bytearray(1024)
            with fs.open_for_reading(file_path) as f:
                count = f.read(buffer)
            print(f"   ✓ 文件读取成功，内容: {buffer[:count].decode('utf-8')}")
            
            # 3. 定位后改写
            print("\n3. 定位后改写...")
            with fs.open_for_writing_and_reading(file_path) as f:
                if f.seek(0):
                    f.write(b"HELLO")
            print("   ✓ 改写成功")
            
            # 4. 获取文件信息
            print("\n4. 获取文件信息...")
            stats = fs.get_file_stats(file_path)
            print(f"   ✓ 文件路径: {stats.get_path()}")
            print(f"   ✓ 文件大小: {stats.get_size()} bytes")
            print(f"   ✓ 文件类型: {stats.get_type()}")
            
            # 5. 列出目录内容
            print("\n5. 列出目录内容...")
            names = fs.list_files(demo_dir)
            print(f"   ✓ 目录中有 {len(names)} 个文件/目录:")
            for name in names:
                print(f"     - {name}")
            
            # 6. 检查文件存在性
            print("\n6. 检查文件存在性...")
            print(f"   存在: {fs.exists(file_path)}")
            print(f"   是目录: {fs.is_directory(demo_dir)}")
            print(f"   不存在的路径: {fs.exists(PathUtil.join(demo_dir, 'missing.txt'))}")
            
            # 7. 当前工作目录
            print("\n7. 当前工作目录...")
            print(f"   ✓ {fs.current_working_directory()}")
            
            print("\n=== 示例执行完成 ===")
            
        except FileError as e:
            print(f"\n✗ 执行过程中发生错误: {e}")


if __name__ == "__main__":
    main()
