"""TaskRepository 内存实现

以 task_id 为 key 的 dict 保存任务。每个方法在检查与写入之间没有 await，
因此在同一事件循环上单次调用是原子的。
"""

from collections.abc import Iterable
from datetime import datetime

from ..exceptions import DuplicateTaskIdError, TaskNotFoundError
from ..models.enums import TaskCategory, TaskStatus
from ..models.task import Task


class InMemoryTaskRepository:
    """TaskRepository 的内存实现"""

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: dict[str, Task] = {}
        for task in tasks:
            if task.task_id in self._tasks:
                raise DuplicateTaskIdError(task.task_id)
            self._tasks[task.task_id] = task

    def __len__(self) -> int:
        return len(self._tasks)

    async def fetch_all(self) -> list[Task]:
        return list(self._tasks.values())

    async def fetch(self, task_id: str) -> Task | None:
        return self._tasks.get(task_id)

    async def create(self, task: Task) -> Task:
        if task.task_id in self._tasks:
            raise DuplicateTaskIdError(task.task_id)
        self._tasks[task.task_id] = task
        return task

    async def update(self, task: Task) -> Task:
        existing = self._tasks.get(task.task_id)
        if existing is None:
            raise TaskNotFoundError(task.task_id)
        # created_at 跨更新保持不变
        stored = task.model_copy(update={"created_at": existing.created_at})
        self._tasks[task.task_id] = stored
        return stored

    async def delete(self, task_id: str) -> None:
        if task_id not in self._tasks:
            raise TaskNotFoundError(task_id)
        del self._tasks[task_id]

    async def delete_many(self, task_ids: Iterable[str]) -> None:
        for task_id in task_ids:
            self._tasks.pop(task_id, None)

    async def fetch_by_status(self, status: TaskStatus) -> list[Task]:
        return [t for t in self._tasks.values() if t.status == status]

    async def fetch_by_category(self, category: TaskCategory) -> list[Task]:
        return [t for t in self._tasks.values() if t.category == category]

    async def fetch_overdue(self, now: datetime | None = None) -> list[Task]:
        return [t for t in self._tasks.values() if t.is_overdue(now)]
