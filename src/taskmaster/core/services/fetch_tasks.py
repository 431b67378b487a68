"""FetchTasksUseCase -- 带筛选 / 搜索 / 排序的任务查询"""

import structlog

from ..models.enums import SortDirection, TaskCategory, TaskFilter, TaskSortOption
from ..models.task import Task
from ..query import apply_filter, search_tasks, sort_tasks
from .base import TaskUseCase, repository_errors

log = structlog.get_logger()


class FetchTasksUseCase(TaskUseCase):
    """任务列表查询用例"""

    async def execute(
        self,
        task_filter: TaskFilter = TaskFilter.ALL,
        sort_option: TaskSortOption = TaskSortOption.CREATED_DATE,
        direction: SortDirection = SortDirection.DESCENDING,
        search: str | None = None,
    ) -> list[Task]:
        """查询全部任务，依次 筛选 -> 搜索 -> 排序

        Args:
            task_filter: 筛选条件，默认 all
            sort_option: 排序字段，默认 createdDate
            direction: 排序方向，默认降序
            search: 标题/描述关键字，None 或空串表示不搜索

        Returns:
            处理后的任务列表

        Raises:
            ValueError: 筛选条件、排序字段或方向取值未知
            RepositoryFailureError: 存储故障
        """
        task_filter = TaskFilter(task_filter)
        sort_option = TaskSortOption(sort_option)
        direction = SortDirection(direction)

        with repository_errors("fetch_all"):
            tasks = await self._repository.fetch_all()

        filtered = apply_filter(tasks, task_filter, self._clock())
        matched = search_tasks(filtered, search)
        result = sort_tasks(matched, sort_option, direction)

        log.debug(
            "tasks_fetched",
            filter=task_filter.value,
            sort_option=sort_option.value,
            direction=direction.value,
            total=len(tasks),
            returned=len(result),
        )
        return result

    async def execute_for_category(self, category: TaskCategory) -> list[Task]:
        """按分类直接查询，不经过筛选/排序流水线

        Raises:
            RepositoryFailureError: 存储故障
        """
        category = TaskCategory(category)
        with repository_errors("fetch_by_category"):
            tasks = await self._repository.fetch_by_category(category)
        log.debug("tasks_fetched", category=category.value, returned=len(tasks))
        return tasks
