"""任务筛选 / 搜索 / 排序 / 统计算法 -- 纯函数

读取路径按 筛选 -> 搜索 -> 排序 的顺序组合，见 FetchTasksUseCase。
"""

import unicodedata
from collections import Counter
from collections.abc import Iterable
from datetime import datetime

from .models.enums import SortDirection, TaskFilter, TaskSortOption, TaskStatus
from .models.statistics import TaskStatistics
from .models.task import Task, utc_now


def apply_filter(
    tasks: Iterable[Task],
    task_filter: TaskFilter,
    now: datetime | None = None,
) -> list[Task]:
    """按筛选条件过滤任务

    Args:
        tasks: 待过滤任务
        task_filter: all / active / completed / overdue
        now: 逾期判断的参考时间，默认当前时间

    Returns:
        过滤后的任务列表（保持输入顺序）
    """
    if task_filter == TaskFilter.ALL:
        return list(tasks)
    if task_filter == TaskFilter.ACTIVE:
        return [t for t in tasks if t.status != TaskStatus.COMPLETED]
    if task_filter == TaskFilter.COMPLETED:
        return [t for t in tasks if t.status == TaskStatus.COMPLETED]
    if task_filter == TaskFilter.OVERDUE:
        now = now or utc_now()
        return [t for t in tasks if t.is_overdue(now)]
    raise ValueError(f"未知筛选条件: {task_filter}")


def search_tasks(tasks: Iterable[Task], text: str | None) -> list[Task]:
    """标题或描述包含 text（不区分大小写），text 为 None 或空串时原样返回

    text 不去除空白：仅含空白的 text 匹配包含该空白的任务。
    """
    needle = (text or "").casefold()
    if not needle:
        return list(tasks)
    return [
        t
        for t in tasks
        if needle in t.title.casefold() or needle in t.description.casefold()
    ]


def _fold_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def _title_key(task: Task) -> tuple[str, str, str]:
    """标题排序键：去重音且不区分大小写，相同时依次按 casefold、原始标题决胜

    "Éclair" 排在 "apple" 与 "zebra" 之间，不依赖进程级 locale 设置。
    """
    return (_fold_accents(task.title), task.title.casefold(), task.title)


_SORT_KEYS = {
    TaskSortOption.CREATED_DATE: lambda t: t.created_at,
    TaskSortOption.PRIORITY: lambda t: t.priority.rank,
    TaskSortOption.TITLE: _title_key,
}


def sort_tasks(
    tasks: Iterable[Task],
    sort_option: TaskSortOption,
    direction: SortDirection = SortDirection.DESCENDING,
) -> list[Task]:
    """排序任务

    先按升序排列，降序是对最终序列整体反转，而不是反转比较器。
    dueDate 例外：无截止时间的任务无论方向都排在所有有截止时间的任务之后。

    Args:
        tasks: 待排序任务
        sort_option: createdDate / dueDate / priority / title
        direction: 排序方向，默认降序

    Returns:
        排序后的新列表
    """
    descending = direction == SortDirection.DESCENDING

    if sort_option == TaskSortOption.DUE_DATE:
        tasks = list(tasks)
        dated = sorted(
            (t for t in tasks if t.due_date is not None),
            key=lambda t: t.due_date,
        )
        undated = [t for t in tasks if t.due_date is None]
        if descending:
            dated.reverse()
        return dated + undated

    key = _SORT_KEYS.get(sort_option)
    if key is None:
        raise ValueError(f"未知排序字段: {sort_option}")
    ordered = sorted(tasks, key=key)
    if descending:
        ordered.reverse()
    return ordered


def compute_statistics(
    tasks: Iterable[Task],
    now: datetime | None = None,
) -> TaskStatistics:
    """单次遍历计算统计快照

    Args:
        tasks: 全部任务
        now: 逾期判断的参考时间，默认当前时间

    Returns:
        TaskStatistics
    """
    now = now or utc_now()
    total = completed = overdue = 0
    by_category: Counter = Counter()
    by_priority: Counter = Counter()
    by_status: Counter = Counter()

    for task in tasks:
        total += 1
        if task.status == TaskStatus.COMPLETED:
            completed += 1
        if task.is_overdue(now):
            overdue += 1
        by_category[task.category] += 1
        by_priority[task.priority] += 1
        by_status[task.status] += 1

    return TaskStatistics(
        total_tasks=total,
        completed_tasks=completed,
        active_tasks=total - completed,
        overdue_tasks=overdue,
        tasks_by_category=dict(by_category),
        tasks_by_priority=dict(by_priority),
        tasks_by_status=dict(by_status),
    )
