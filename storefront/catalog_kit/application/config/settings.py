"""共享配置基类。

提供 Catalog Kit 的配置结构。
使用 pydantic-settings 进行分层分级配置管理。

注意：纯函数工具（slug、价格、分页）不读取配置，默认值与这里保持一致。
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.catalog_kit.common.exceptions import CatalogKitError
from storefront.catalog_kit.domain.pagination import PaginationWindow, calculate_pagination
from storefront.catalog_kit.utils.messaging import generate_whatsapp_url, product_inquiry_message


class ApiSettings(BaseSettings):
    """API 客户端配置。
    
    环境变量前缀: API_
    示例: API_BASE_URL, API_TOKEN_KEY
    """
    
    base_url: str = Field(
        default="http://localhost:5050/api",
        description="API 基础地址"
    )
    token_key: str = Field(
        default="adminToken",
        description="凭证存储中 Bearer token 的键名"
    )
    
    model_config = SettingsConfigDict(
        env_prefix="API_",
        case_sensitive=False,
    )


class LogSettings(BaseSettings):
    """日志配置。
    
    环境变量前缀: LOG_
    示例: LOG_LEVEL, LOG_FILE
    """
    
    level: str = Field(
        default="INFO",
        description="日志级别"
    )
    file: str | None = Field(
        default=None,
        description="日志文件路径（如果不设置则仅输出到控制台）"
    )
    
    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
    )


class MessagingSettings(BaseSettings):
    """消息跳转配置。
    
    环境变量前缀: MESSAGING_
    示例: MESSAGING_BASE_URL, MESSAGING_PHONE
    """
    
    base_url: str = Field(
        default="https://wa.me",
        description="外部聊天服务的跳转地址"
    )
    phone: str | None = Field(
        default=None,
        description="默认联系电话"
    )
    
    model_config = SettingsConfigDict(
        env_prefix="MESSAGING_",
        case_sensitive=False,
    )
    
    def inquiry_url(self, product_name: str, message: str | None = None, phone: str | None = None) -> str:
        """生成商品咨询跳转链接。
        
        Args:
            product_name: 商品名称
            message: 商品自定义消息（为空时使用默认咨询消息）
            phone: 联系电话（默认使用配置中的 phone）
            
        Raises:
            CatalogKitError: 没有可用的联系电话
        """
        phone = phone or self.phone
        if not phone:
            raise CatalogKitError("未配置联系电话")
        return generate_whatsapp_url(phone, message or product_inquiry_message(product_name), self.base_url)


class PaginationSettings(BaseSettings):
    """分页配置。
    
    环境变量前缀: PAGINATION_
    示例: PAGINATION_DEFAULT_LIMIT, PAGINATION_MAX_LIMIT
    """
    
    default_limit: int = Field(
        default=10,
        ge=1,
        description="默认每页数量"
    )
    max_limit: int = Field(
        default=100,
        ge=1,
        description="每页数量上限"
    )
    
    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        case_sensitive=False,
    )
    
    def calculate(self, page: Any = None, limit: Any = None, total: Any = 0) -> PaginationWindow:
        """按配置的默认值和上限计算分页窗口。"""
        return calculate_pagination(
            page, limit, total,
            default_limit=self.default_limit,
            max_limit=self.max_limit,
        )


class CatalogConfig(BaseSettings):
    """应用配置。
    
    使用 pydantic-settings 自动从环境变量和 .env 文件加载配置。
    """
    
    # API 客户端配置
    api: ApiSettings = Field(default_factory=ApiSettings)
    
    # 日志配置
    log: LogSettings = Field(default_factory=LogSettings)
    
    # 消息跳转配置
    messaging: MessagingSettings = Field(default_factory=MessagingSettings)
    
    # 分页配置
    pagination: PaginationSettings = Field(default_factory=PaginationSettings)
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


__all__ = [
    "ApiSettings",
    "CatalogConfig",
    "LogSettings",
    "MessagingSettings",
    "PaginationSettings",
]
