"""UpdateTaskUseCase -- 更新任务"""

import structlog

from ..models.task import Task
from .base import TaskUseCase, repository_errors

log = structlog.get_logger()


class UpdateTaskUseCase(TaskUseCase):
    """更新任务用例

    状态可自由变更（任意状态 -> 任意状态），仅校验标题。
    """

    async def execute(self, task: Task) -> Task:
        """校验标题 -> 刷新 updated_at -> 替换存储中的任务

        Raises:
            InvalidTitleError: 标题为空（不访问存储）
            TaskNotFoundError: task_id 不存在
            RepositoryFailureError: 存储故障
        """
        self._ensure_valid_title(task)

        to_update = task.touch(self._clock())
        with repository_errors("update"):
            stored = await self._repository.update(to_update)

        log.info("task_updated", task_id=stored.task_id, status=stored.status.value)
        return stored
