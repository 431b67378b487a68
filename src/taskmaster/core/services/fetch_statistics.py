"""FetchTaskStatisticsUseCase -- 任务统计"""

import structlog

from ..models.statistics import TaskStatistics
from ..query import compute_statistics
from .base import TaskUseCase, repository_errors

log = structlog.get_logger()


class FetchTaskStatisticsUseCase(TaskUseCase):
    """任务统计用例"""

    async def execute(self) -> TaskStatistics:
        """
        Raises:
            RepositoryFailureError: 存储故障
        """
        with repository_errors("fetch_all"):
            tasks = await self._repository.fetch_all()

        stats = compute_statistics(tasks, self._clock())
        log.debug(
            "task_statistics_computed",
            total=stats.total_tasks,
            completed=stats.completed_tasks,
            overdue=stats.overdue_tasks,
        )
        return stats
