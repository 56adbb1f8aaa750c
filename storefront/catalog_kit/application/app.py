"""应用工厂。

创建按目录商城响应信封约定输出的 FastAPI 应用：
先加载配置并初始化日志，再注册异常处理器。
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI

from storefront.catalog_kit.common.logging import logger, setup_logging

from .config import CatalogConfig
from .errors import register_exception_handlers


def create_app(
    config: CatalogConfig | None = None,
    *,
    title: str = "Catalog Service",
    version: str = "1.0.0",
    **kwargs: Any,
) -> FastAPI:
    """创建应用。
    
    使用示例:
        app = create_app()
        
        @app.get("/api/products")
        async def list_products(page: str | None = None, limit: str | None = None):
            window = app.state.config.pagination.calculate(page, limit, total)
            return ResponseBuilder.paginated(items, window)
    
    Args:
        config: 应用配置（可选，默认从环境变量加载）
        title: 应用标题
        version: 应用版本
        **kwargs: 传递给 FastAPI 的其他参数
        
    Returns:
        FastAPI: 应用实例，配置保存在 app.state.config
    """
    if config is None:
        config = CatalogConfig()
    
    # 初始化日志（必须在其他操作之前）
    setup_logging(log_level=config.log.level, log_file=config.log.file)
    
    app = FastAPI(title=title, version=version, **kwargs)
    app.state.config = config
    register_exception_handlers(app)
    
    logger.info(f"应用已创建: {title} {version}")
    return app


__all__ = [
    "create_app",
]
