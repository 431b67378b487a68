"""TaskRepository SQLite 实现

单连接 + asyncio.Lock 串行化写操作，每次调用独立提交，失败即回滚。
读取时对 status/priority/category 做宽松解码：未知原始值回退默认值而不报错。
"""

import asyncio
from collections.abc import Iterable
from datetime import UTC, datetime

import aiosqlite
import structlog

from ..exceptions import DuplicateTaskIdError, TaskNotFoundError
from ..models.enums import (
    TaskCategory,
    TaskStatus,
    decode_category,
    decode_priority,
    decode_status,
)
from ..models.task import Task, utc_now

log = structlog.get_logger()

_COLUMNS = (
    "task_id, title, description, status, priority, category, "
    "due_date, created_at, updated_at"
)


def _encode_dt(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.astimezone(UTC).isoformat()


def _decode_dt(value: str | None) -> datetime | None:
    if value is None:
        return None
    return datetime.fromisoformat(value)


class SqliteTaskRepository:
    """TaskRepository 的 SQLite 实现"""

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn
        self._write_lock = asyncio.Lock()

    async def fetch_all(self) -> list[Task]:
        cursor = await self._conn.execute(f"SELECT {_COLUMNS} FROM tasks")
        rows = await cursor.fetchall()
        return [self._row_to_task(row) for row in rows]

    async def fetch(self, task_id: str) -> Task | None:
        cursor = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM tasks WHERE task_id = ?",
            (task_id,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_task(row)

    async def create(self, task: Task) -> Task:
        async with self._write_lock:
            try:
                await self._conn.execute(
                    f"INSERT INTO tasks ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                    (
                        task.task_id,
                        task.title,
                        task.description,
                        task.status.value,
                        task.priority.value,
                        task.category.value,
                        _encode_dt(task.due_date),
                        _encode_dt(task.created_at),
                        _encode_dt(task.updated_at),
                    ),
                )
                await self._conn.commit()
            except aiosqlite.IntegrityError as e:
                await self._conn.rollback()
                raise DuplicateTaskIdError(task.task_id) from e
            except Exception:
                await self._conn.rollback()
                raise
        return task

    async def update(self, task: Task) -> Task:
        """以新值替换同 task_id 的任务，created_at 保持存储中的原值"""
        async with self._write_lock:
            try:
                cursor = await self._conn.execute(
                    """
                    UPDATE tasks
                    SET title = ?, description = ?, status = ?, priority = ?,
                        category = ?, due_date = ?, updated_at = ?
                    WHERE task_id = ?
                    """,
                    (
                        task.title,
                        task.description,
                        task.status.value,
                        task.priority.value,
                        task.category.value,
                        _encode_dt(task.due_date),
                        _encode_dt(task.updated_at),
                        task.task_id,
                    ),
                )
                if cursor.rowcount == 0:
                    await self._conn.rollback()
                    raise TaskNotFoundError(task.task_id)
                await self._conn.commit()
            except TaskNotFoundError:
                raise
            except Exception:
                await self._conn.rollback()
                raise

        stored = await self.fetch(task.task_id)
        if stored is None:
            raise TaskNotFoundError(task.task_id)
        return stored

    async def delete(self, task_id: str) -> None:
        async with self._write_lock:
            try:
                cursor = await self._conn.execute(
                    "DELETE FROM tasks WHERE task_id = ?",
                    (task_id,),
                )
                if cursor.rowcount == 0:
                    await self._conn.rollback()
                    raise TaskNotFoundError(task_id)
                await self._conn.commit()
            except TaskNotFoundError:
                raise
            except Exception:
                await self._conn.rollback()
                raise

    async def delete_many(self, task_ids: Iterable[str]) -> None:
        """单事务批量删除，不存在的 task_id 静默跳过"""
        ids = [(task_id,) for task_id in task_ids]
        if not ids:
            return
        async with self._write_lock:
            try:
                await self._conn.executemany(
                    "DELETE FROM tasks WHERE task_id = ?",
                    ids,
                )
                await self._conn.commit()
            except Exception:
                await self._conn.rollback()
                raise

    async def fetch_by_status(self, status: TaskStatus) -> list[Task]:
        cursor = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM tasks WHERE status = ?",
            (status.value,),
        )
        rows = await cursor.fetchall()
        return [self._row_to_task(row) for row in rows]

    async def fetch_by_category(self, category: TaskCategory) -> list[Task]:
        cursor = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM tasks WHERE category = ?",
            (category.value,),
        )
        rows = await cursor.fetchall()
        return [self._row_to_task(row) for row in rows]

    async def fetch_overdue(self, now: datetime | None = None) -> list[Task]:
        # 时间比较在 Python 侧完成，避免 ISO 字符串跨时区比较
        now = now or utc_now()
        cursor = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM tasks WHERE due_date IS NOT NULL"
        )
        rows = await cursor.fetchall()
        tasks = [self._row_to_task(row) for row in rows]
        return [t for t in tasks if t.is_overdue(now)]

    @staticmethod
    def _row_to_task(row) -> Task:
        """将数据库行转换为 Task 模型"""
        return Task(
            task_id=row[0],
            title=row[1],
            description=row[2],
            status=decode_status(row[3]),
            priority=decode_priority(row[4]),
            category=decode_category(row[5]),
            due_date=_decode_dt(row[6]),
            created_at=_decode_dt(row[7]),
            updated_at=_decode_dt(row[8]),
        )
