"""用例公共基础 -- repository 注入、时钟、标题校验、存储异常转换"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime

import structlog

from ..exceptions import InvalidTitleError, RepositoryFailureError, TaskError
from ..models.task import Task, utc_now
from ..store.protocols import TaskRepository

log = structlog.get_logger()

Clock = Callable[[], datetime]


@contextmanager
def repository_errors(operation: str) -> Iterator[None]:
    """将存储故障包装为 RepositoryFailureError

    领域异常（TaskError 及其子类，如 TaskNotFoundError）原样传递；
    其余异常一律包装，不解释 cause，不重试。

    Args:
        operation: 存储操作名称，写入异常和日志
    """
    try:
        yield
    except TaskError:
        raise
    except Exception as e:
        log.warning(
            "repository_call_failed",
            operation=operation,
            error_type=type(e).__name__,
            error=str(e),
        )
        raise RepositoryFailureError(operation, e) from e


class TaskUseCase:
    """用例基类

    用例对象除 repository 引用外无状态，可在并发调用方之间共享。
    """

    def __init__(self, repository: TaskRepository, clock: Clock = utc_now) -> None:
        """
        Args:
            repository: 任务存储
            clock: 返回当前 UTC 时间的可调用对象
        """
        self._repository = repository
        self._clock = clock

    @staticmethod
    def _ensure_valid_title(task: Task) -> None:
        """标题去除首尾空白后不能为空

        Raises:
            InvalidTitleError: 标题为空
        """
        if task.has_blank_title:
            log.info("invalid_title_rejected", task_id=task.task_id)
            raise InvalidTitleError(task.title)
