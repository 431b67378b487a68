"""TaskMaster Core Services -- 用例层

每个用例封装一次存储调用及其校验/派生逻辑，用例之间互不调用。
"""

from .base import Clock, TaskUseCase, repository_errors
from .create_task import CreateTaskUseCase
from .delete_task import DeleteTaskUseCase
from .fetch_statistics import FetchTaskStatisticsUseCase
from .fetch_tasks import FetchTasksUseCase
from .toggle_status import ToggleTaskStatusUseCase
from .update_task import UpdateTaskUseCase

__all__ = [
    "Clock",
    "TaskUseCase",
    "repository_errors",
    "CreateTaskUseCase",
    "UpdateTaskUseCase",
    "ToggleTaskStatusUseCase",
    "DeleteTaskUseCase",
    "FetchTasksUseCase",
    "FetchTaskStatisticsUseCase",
]
