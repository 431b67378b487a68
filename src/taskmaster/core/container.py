"""组合根 -- 显式构造 repository 与全部用例

repository 只创建一次，通过构造函数注入每个用例，不使用全局单例。
"""

import structlog

from .config import TaskMasterConfig, load_config
from .logging_config import setup_logging
from .models.task import utc_now
from .services import (
    Clock,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    FetchTasksUseCase,
    FetchTaskStatisticsUseCase,
    ToggleTaskStatusUseCase,
    UpdateTaskUseCase,
)
from .store import RepositoryHandle, TaskRepository, create_task_repository

log = structlog.get_logger()


class TaskUseCases:
    """用例组 -- 共享同一个 repository"""

    def __init__(
        self,
        repository: TaskRepository,
        clock: Clock = utc_now,
        handle: RepositoryHandle | None = None,
    ) -> None:
        self.repository = repository
        self._handle = handle
        self.create_task = CreateTaskUseCase(repository, clock)
        self.update_task = UpdateTaskUseCase(repository, clock)
        self.toggle_task_status = ToggleTaskStatusUseCase(repository, clock)
        self.delete_task = DeleteTaskUseCase(repository, clock)
        self.fetch_tasks = FetchTasksUseCase(repository, clock)
        self.fetch_statistics = FetchTaskStatisticsUseCase(repository, clock)

    async def aclose(self) -> None:
        """释放底层存储连接"""
        if self._handle is not None:
            await self._handle.close()


async def create_task_use_cases(
    config: TaskMasterConfig | None = None,
    configure_logging: bool = False,
) -> TaskUseCases:
    """根据配置创建用例组

    Args:
        config: 运行配置，None 时从环境变量加载
        configure_logging: 是否按配置初始化 structlog

    Returns:
        TaskUseCases 实例
    """
    config = config or load_config()
    if configure_logging:
        setup_logging(config.log_format, config.log_level)

    handle = await create_task_repository(config.store_backend, config.db_path)
    log.info("task_use_cases_ready", backend=config.store_backend)
    return TaskUseCases(handle.repository, handle=handle)
