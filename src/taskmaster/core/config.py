"""配置模块 -- 可通过环境变量覆盖

包含存储后端、数据库路径、日志格式等可配置项，以及领域常量。
"""

import os
from pathlib import Path
from typing import Literal

import structlog
from pydantic import BaseModel, Field, ValidationError

log = structlog.get_logger()

# "即将到期" 窗口（天），包含上界
DUE_SOON_WINDOW_DAYS: int = 7

_BACKENDS = ("sqlite", "memory")
_LOG_FORMATS = ("dev", "json")


def _get_base_dir() -> Path:
    """获取项目 data 基础目录"""
    return Path(os.environ.get("TASKMASTER_DATA_DIR", "data"))


def get_db_path() -> str:
    """获取 SQLite 数据库路径"""
    return os.environ.get(
        "TASKMASTER_DB_PATH",
        str(_get_base_dir() / "sqlite" / "taskmaster.db"),
    )


class TaskMasterConfig(BaseModel):
    """运行配置 -- 从环境变量加载

    环境变量:
        TASKMASTER_STORE_BACKEND: 存储后端（sqlite/memory）
        TASKMASTER_DB_PATH: SQLite 数据库路径
        TASKMASTER_LOG_FORMAT: 日志渲染模式（dev/json）
        TASKMASTER_LOG_LEVEL: 日志级别（默认 INFO）
    """

    store_backend: Literal["sqlite", "memory"] = Field(
        default="sqlite",
        description="存储后端",
    )
    db_path: str = Field(default_factory=get_db_path, description="SQLite 数据库路径")
    log_format: Literal["dev", "json"] = Field(default="dev", description="日志渲染模式")
    log_level: str = Field(default="INFO", description="日志级别")


def load_config() -> TaskMasterConfig:
    """从环境变量加载配置

    非法取值记录 warning 后回退默认值，不阻塞启动。

    Returns:
        TaskMasterConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("TASKMASTER_STORE_BACKEND"):
        if val.lower() in _BACKENDS:
            kwargs["store_backend"] = val.lower()
        else:
            log.warning(
                "invalid_store_backend_config",
                env_var="TASKMASTER_STORE_BACKEND",
                value=val,
                fallback="sqlite",
            )

    if val := os.environ.get("TASKMASTER_LOG_FORMAT"):
        if val.lower() in _LOG_FORMATS:
            kwargs["log_format"] = val.lower()
        else:
            log.warning(
                "invalid_log_format_config",
                env_var="TASKMASTER_LOG_FORMAT",
                value=val,
                fallback="dev",
            )

    if val := os.environ.get("TASKMASTER_LOG_LEVEL"):
        kwargs["log_level"] = val.upper()

    try:
        return TaskMasterConfig(**kwargs)
    except ValidationError as e:
        log.warning("invalid_config_fallback_to_defaults", error=str(e))
        return TaskMasterConfig()
