"""异常基类。

Catalog Kit 内所有异常的根类型，其他层的异常都应继承此类。
"""

from __future__ import annotations


class CatalogKitError(Exception):
    """Catalog Kit 异常基类。
    
    Attributes:
        message: 错误消息
    """
    
    def __init__(self, message: str = "", *args: object) -> None:
        super().__init__(message, *args)
        self.message = message
    
    def __str__(self) -> str:
        return self.message


__all__ = [
    "CatalogKitError",
]
