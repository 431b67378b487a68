"""TaskMaster 异常体系

领域异常（TaskError）由用例层抛出并原样传递给调用方；
存储层异常（StoreError）以及其它存储故障由用例层统一包装为 RepositoryFailureError。
"""


class TaskError(Exception):
    """任务领域基础异常"""


class InvalidTitleError(TaskError):
    """标题去除首尾空白后为空

    在访问存储之前抛出，不产生任何副作用。
    """

    def __init__(self, title: str = "") -> None:
        super().__init__("Task title cannot be empty")
        self.title = title


class TaskNotFoundError(TaskError):
    """引用的任务标识不存在"""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class RepositoryFailureError(TaskError):
    """存储协作方报告的任意故障（连接、序列化、约束冲突等）

    用例层不解释 cause，仅原样转发。
    """

    def __init__(self, operation: str, cause: BaseException) -> None:
        """
        Args:
            operation: 失败的存储操作名称（如 create / fetch_all）
            cause: 原始异常
        """
        super().__init__(f"Repository operation '{operation}' failed: {cause}")
        self.operation = operation
        self.cause = cause


class StoreError(Exception):
    """存储层基础异常"""


class DuplicateTaskIdError(StoreError):
    """创建任务时标识已存在"""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task id already exists: {task_id}")
        self.task_id = task_id
