"""
日志配置

用法:
    from dietitian.core.logging_config import setup_logging
    setup_logging()  # 应用启动时调用一次

环境变量:
    LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL（默认读取 settings.log_level）
"""
import logging
import os
import sys
from typing import Optional

from ..config.settings import settings

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: Optional[str] = None) -> str:
    """
    配置应用日志

    Args:
        level: 日志级别字符串；为空时依次读取 LOG_LEVEL 环境变量和 settings.log_level

    Returns:
        str: 实际生效的日志级别
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", settings.log_level)
    level = str(level).upper()

    if level not in VALID_LEVELS:
        level = "INFO"

    numeric_level = getattr(logging, level)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    logging.getLogger("dietitian").setLevel(numeric_level)

    # 非调试模式下压低第三方库的噪音
    if level != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
        logging.getLogger("openai").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug("Logging configured at %s level", level)
    return level
