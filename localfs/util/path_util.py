"""
路径工具类
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class PathUtil:
    """路径工具类"""
    
    # 路径分隔符由平台固定，不可配置
    PATH_SEPARATOR = "/"
    
    # 原生目录枚举会返回的特殊目录项
    SPECIAL_ENTRIES = (".", "..")
    
    @classmethod
    def join(cls, base: str, *names: str) -> str:
        """
        拼接路径
        
        Args:
            base: 基础路径
            *names: 依次追加的名称
            
        Returns:
            拼接后的路径
        """
        path = base
        for name in names:
            if not path:
                path = name
            elif path.endswith(cls.PATH_SEPARATOR):
                path = f"{path}{name}"
            else:
                path = f"{path}{cls.PATH_SEPARATOR}{name}"
        return path
    
    @staticmethod
    def decode_name(raw: bytes, encoding: str = "utf-8") -> Optional[str]:
        """
        按字节解码目录项名称
        
        Args:
            raw: 原生字节名称
            encoding: 编码格式
            
        Returns:
            解码后的名称，无法有效解码时返回None
        """
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            logger.debug(f"Skipping entry name not valid in {encoding}: {raw!r}")
            return None
    
    @staticmethod
    def validate_wide_name(name: str) -> Optional[str]:
        """
        校验宽字符目录项名称
        
        Args:
            name: 宽字符名称
            
        Returns:
            有效的名称，包含未配对代理项时返回None
        """
        try:
            name.encode("utf-16-le")
        except UnicodeEncodeError:
            logger.debug(f"Skipping entry name with unpaired surrogates: {name!r}")
            return None
        return name
