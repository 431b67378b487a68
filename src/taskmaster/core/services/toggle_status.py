"""ToggleTaskStatusUseCase -- 切换完成状态"""

import structlog

from ..models.enums import next_toggle_status
from ..models.task import Task
from .base import TaskUseCase, repository_errors

log = structlog.get_logger()


class ToggleTaskStatusUseCase(TaskUseCase):
    """切换任务状态用例

    completed -> inProgress；todo / inProgress -> completed。
    连续切换两次不会回到 todo。
    """

    async def execute(self, task: Task) -> Task:
        """
        Raises:
            TaskNotFoundError: task_id 不存在
            RepositoryFailureError: 存储故障
        """
        new_status = next_toggle_status(task.status)
        toggled = task.with_status(new_status, self._clock())

        with repository_errors("update"):
            stored = await self._repository.update(toggled)

        log.info(
            "task_status_toggled",
            task_id=stored.task_id,
            from_status=task.status.value,
            to_status=stored.status.value,
        )
        return stored
