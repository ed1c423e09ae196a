"""
The Dietitian 后端服务 - 主应用入口
提供健康餐订购与营养咨询的完整后端API服务

主要功能模块：
- 演示账号登录与注册
- 餐品目录、定制报价和购物车
- 模拟支付结账与订单状态流转
- 营养咨询预约
- 用户评价审核
- 多语言、多货币与主题偏好
- AI 营养助手聊天

技术栈：FastAPI + DuckDB + JWT认证
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .api import api_router
from .config.settings import settings
from .core.database import db_manager
from .core.error_handler import (
    application_error_handler,
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler
)
from .core.exceptions import BaseApplicationError
from .core.logging_config import setup_logging
from .seed import seed
from .services.preference_service import theme_store_default

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    setup_logging()
    try:
        db_manager.init_database()
        if settings.seed_demo_data and seed():
            logger.info("Demo data seeded")
        logger.info("Database initialized successfully")
    except Exception as e:
        # 不要让应用启动失败，/health 会报告数据库状态
        logger.error("Database initialization failed: %s", e)

    theme_store_default.load()

    yield

    db_manager.reset()


def create_app() -> FastAPI:
    """创建FastAPI应用"""
    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description="The Dietitian 健康餐订购与营养咨询API",
        debug=settings.debug,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 注册异常处理器
    app.add_exception_handler(BaseApplicationError, application_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health_check():
        try:
            db_manager.execute_one("SELECT 1")
            return {
                "status": "healthy",
                "version": settings.api_version,
                "database": "connected"
            }
        except Exception as e:
            return {
                "status": "unhealthy",
                "version": settings.api_version,
                "database": f"error: {str(e)}"
            }

    @app.get("/")
    async def root():
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "description": "The Dietitian 健康餐订购与营养咨询API"
        }

    return app


# 应用实例
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
