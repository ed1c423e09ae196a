from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    # 数据库配置（默认内存库，进程退出即清空）
    database_url: str = "duckdb://:memory:"
    seed_demo_data: bool = True

    # JWT配置
    jwt_secret_key: str = "dev-only-jwt-secret-key-change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expire_hours: int = 24 * 7  # 7天

    # API配置
    api_title: str = "The Dietitian API"
    api_version: str = "1.0.0"
    api_prefix: str = "/api/v1"

    # 货币与偏好
    exchange_rate: float = 15.0  # 1 USD -> GHS
    default_currency: str = "GHS"
    default_language: str = "en"
    theme_file: str = "data/theme.json"

    # 模拟支付处理耗时（秒）
    payment_delay_seconds: float = 2.0

    # 客服聊天（Gemini 的 OpenAI 兼容接口）
    gemini_api_key: Optional[str] = Field(default=None)
    llm_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    llm_model: str = "gemini-2.0-flash"

    # 开发模式
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


# 全局设置实例
settings = Settings()
