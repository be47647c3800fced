"""
工具模块 - 路径工具
"""

from .path_util import PathUtil

__all__ = [
    'PathUtil'
]
