"""Storefront Catalog Kit - 目录商城的数据规范化与 API 契约工具包。

模块结构：
- common: 最基础层（异常基类、日志系统）
- utils: 纯函数工具（slug、输入过滤、价格编解码、消息跳转链接）
- domain: 领域层（分页计算、输入校验）
- schemas: 响应信封模型
- application: 应用层（配置管理、错误处理、响应出口）
- toolkit: 工具包（异步 HTTP 客户端）
- api: API 客户端契约与资源接口
"""

from . import api, application, common, domain, toolkit, utils
from .schemas import ApiResponse, ErrorDetail, create_api_response

__version__ = "0.1.0"
__all__ = [
    "api",
    "application",
    "common",
    "domain",
    "toolkit",
    "utils",
    "ApiResponse",
    "ErrorDetail",
    "create_api_response",
]
