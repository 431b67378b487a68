"""TaskMaster Core Store -- TaskRepository 接口与实现

提供工厂函数按后端创建 TaskRepository，并返回可关闭的句柄。
"""

from pathlib import Path

import aiosqlite
import structlog

from .memory_store import InMemoryTaskRepository
from .protocols import TaskRepository
from .sqlite_init import init_db, verify_wal_mode
from .task_store import SqliteTaskRepository

log = structlog.get_logger()


class RepositoryHandle:
    """Repository 句柄 -- 持有 repository 以及需要释放的底层连接"""

    def __init__(
        self,
        repository: TaskRepository,
        conn: aiosqlite.Connection | None = None,
    ) -> None:
        self.repository = repository
        self.conn = conn

    async def close(self) -> None:
        """关闭底层连接（内存后端无需关闭）"""
        if self.conn is not None:
            await self.conn.close()
            self.conn = None


async def create_sqlite_repository(db_path: str) -> RepositoryHandle:
    """创建 SQLite repository

    Args:
        db_path: SQLite 数据库文件路径

    Returns:
        RepositoryHandle 实例
    """
    # 确保数据库目录存在
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(db_path)
    await init_db(conn)
    log.info("task_repository_opened", backend="sqlite", db_path=db_path)
    return RepositoryHandle(SqliteTaskRepository(conn), conn)


async def create_task_repository(
    backend: str = "sqlite",
    db_path: str | None = None,
) -> RepositoryHandle:
    """按后端创建 TaskRepository

    Args:
        backend: "sqlite" 或 "memory"
        db_path: SQLite 数据库路径（仅 sqlite 后端需要）

    Returns:
        RepositoryHandle 实例

    Raises:
        ValueError: 未知后端，或 sqlite 后端未提供 db_path
    """
    if backend == "memory":
        log.info("task_repository_opened", backend="memory")
        return RepositoryHandle(InMemoryTaskRepository())
    if backend == "sqlite":
        if not db_path:
            raise ValueError("sqlite 后端需要 db_path")
        return await create_sqlite_repository(db_path)
    raise ValueError(f"未知存储后端: {backend}")


__all__ = [
    "TaskRepository",
    "InMemoryTaskRepository",
    "SqliteTaskRepository",
    "RepositoryHandle",
    "create_task_repository",
    "create_sqlite_repository",
    "init_db",
    "verify_wal_mode",
]
