"""应用层。

提供配置管理、错误处理、响应出口和应用工厂。
"""

from . import config, errors, interfaces
from .app import create_app

__all__ = [
    "config",
    "errors",
    "interfaces",
    "create_app",
]
