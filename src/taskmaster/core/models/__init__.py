"""TaskMaster Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import (
    DEFAULT_CATEGORY,
    DEFAULT_PRIORITY,
    DEFAULT_STATUS,
    TOGGLE_TRANSITIONS,
    SortDirection,
    TaskCategory,
    TaskFilter,
    TaskPriority,
    TaskSortOption,
    TaskStatus,
    decode_category,
    decode_priority,
    decode_status,
    next_toggle_status,
)
from .statistics import TaskStatistics
from .task import Task, new_task_id, utc_now

__all__ = [
    # 枚举
    "TaskStatus",
    "TaskPriority",
    "TaskCategory",
    "TaskFilter",
    "TaskSortOption",
    "SortDirection",
    # 状态切换
    "TOGGLE_TRANSITIONS",
    "next_toggle_status",
    # 宽松解码
    "DEFAULT_STATUS",
    "DEFAULT_PRIORITY",
    "DEFAULT_CATEGORY",
    "decode_status",
    "decode_priority",
    "decode_category",
    # Task
    "Task",
    "new_task_id",
    "utc_now",
    # Statistics
    "TaskStatistics",
]
