"""DeleteTaskUseCase -- 单个删除 / 批量删除"""

from collections.abc import Iterable

import structlog

from .base import TaskUseCase, repository_errors

log = structlog.get_logger()


class DeleteTaskUseCase(TaskUseCase):
    """删除任务用例"""

    async def execute(self, task_id: str) -> None:
        """删除单个任务

        Raises:
            TaskNotFoundError: task_id 不存在
            RepositoryFailureError: 存储故障
        """
        with repository_errors("delete"):
            await self._repository.delete(task_id)
        log.info("task_deleted", task_id=task_id)

    async def execute_many(self, task_ids: Iterable[str]) -> None:
        """批量删除，不存在的 task_id 不视为错误

        Raises:
            RepositoryFailureError: 存储故障
        """
        ids = list(task_ids)
        with repository_errors("delete_many"):
            await self._repository.delete_many(ids)
        log.info("tasks_deleted", requested=len(ids))
