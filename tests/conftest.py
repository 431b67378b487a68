"""测试配置 -- repository fixture + 固定时钟 + Task 工厂"""

import logging
from collections.abc import AsyncGenerator, Callable
from datetime import UTC, datetime
from pathlib import Path

import aiosqlite
import pytest
import pytest_asyncio
import structlog
from taskmaster.core.models import Task
from taskmaster.core.store import InMemoryTaskRepository, SqliteTaskRepository
from taskmaster.core.store.sqlite_init import init_db

FIXED_NOW = datetime(2024, 3, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    """固定的参考时间"""
    return FIXED_NOW


@pytest.fixture
def clock(now: datetime) -> Callable[[], datetime]:
    """返回固定时间的时钟"""
    return lambda: now


@pytest.fixture
def make_task(now: datetime) -> Callable[..., Task]:
    """Task 工厂：默认 created_at/updated_at 为固定时间"""

    def _make(title: str = "测试任务", **kwargs) -> Task:
        kwargs.setdefault("created_at", now)
        kwargs.setdefault("updated_at", now)
        return Task(title=title, **kwargs)

    return _make


@pytest.fixture
def memory_repo() -> InMemoryTaskRepository:
    """空的内存 repository"""
    return InMemoryTaskRepository()


@pytest_asyncio.fixture
async def sqlite_conn(tmp_path: Path) -> AsyncGenerator[aiosqlite.Connection, None]:
    """已初始化的临时 SQLite 连接"""
    conn = await aiosqlite.connect(str(tmp_path / "tasks.db"))
    await init_db(conn)
    yield conn
    await conn.close()


@pytest_asyncio.fixture
async def sqlite_repo(sqlite_conn: aiosqlite.Connection) -> SqliteTaskRepository:
    """基于临时数据库的 SQLite repository"""
    return SqliteTaskRepository(sqlite_conn)


@pytest_asyncio.fixture(params=["memory", "sqlite"])
async def repository(request, tmp_path: Path):
    """两种 repository 实现，用于契约测试"""
    if request.param == "memory":
        yield InMemoryTaskRepository()
        return

    conn = await aiosqlite.connect(str(tmp_path / "contract.db"))
    await init_db(conn)
    yield SqliteTaskRepository(conn)
    await conn.close()


@pytest.fixture
def restore_logging():
    """还原 setup_logging 修改的根 logger 与 structlog 全局配置"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
