"""CreateTaskUseCase -- 创建任务"""

import structlog

from ..models.task import Task
from .base import TaskUseCase, repository_errors

log = structlog.get_logger()


class CreateTaskUseCase(TaskUseCase):
    """创建任务用例"""

    async def execute(self, task: Task) -> Task:
        """校验标题 -> 刷新 updated_at -> 写入存储

        Args:
            task: 候选任务

        Returns:
            存储后的任务

        Raises:
            InvalidTitleError: 标题为空（不访问存储）
            RepositoryFailureError: 存储故障
        """
        self._ensure_valid_title(task)

        to_create = task.touch(self._clock())
        with repository_errors("create"):
            stored = await self._repository.create(to_create)

        log.info(
            "task_created",
            task_id=stored.task_id,
            status=stored.status.value,
            priority=stored.priority.value,
            category=stored.category.value,
        )
        return stored
