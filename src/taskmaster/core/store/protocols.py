"""Store Protocol 接口定义

定义 TaskRepository 的抽象接口，使用 Python Protocol 实现结构化子类型（duck typing）。
这是编排层与持久化之间的唯一接缝，内存、文件、数据库实现均可替换注入。
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Protocol

from ..models.enums import TaskCategory, TaskStatus
from ..models.task import Task


class TaskRepository(Protocol):
    """Task 存储接口

    实现方负责并发安全，并保证调用方能读到自己的写入。
    存储中不存在两个相同 task_id 的记录；存储顺序无语义，排序在读取时计算。
    """

    async def fetch_all(self) -> list[Task]:
        """查询全部任务，不保证顺序"""
        ...

    async def fetch(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务，不存在返回 None"""
        ...

    async def create(self, task: Task) -> Task:
        """创建任务，返回存储后的任务"""
        ...

    async def update(self, task: Task) -> Task:
        """以新值替换同 task_id 的任务

        Raises:
            TaskNotFoundError: task_id 不存在
        """
        ...

    async def delete(self, task_id: str) -> None:
        """删除单个任务

        Raises:
            TaskNotFoundError: task_id 不存在
        """
        ...

    async def delete_many(self, task_ids: Iterable[str]) -> None:
        """批量删除，不存在的 task_id 静默跳过"""
        ...

    async def fetch_by_status(self, status: TaskStatus) -> list[Task]:
        """按状态查询"""
        ...

    async def fetch_by_category(self, category: TaskCategory) -> list[Task]:
        """按分类查询"""
        ...

    async def fetch_overdue(self, now: datetime | None = None) -> list[Task]:
        """查询逾期任务"""
        ...
