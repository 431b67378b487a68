"""枚举定义

包含 TaskStatus、TaskPriority、TaskCategory、TaskFilter、TaskSortOption、SortDirection 枚举，
切换状态流转映射 TOGGLE_TRANSITIONS，以及存储解码用的宽松解析函数。
"""

from enum import StrEnum

import structlog

log = structlog.get_logger()


class TaskStatus(StrEnum):
    """Task 状态

    无终态：completed 可通过切换或直接更新重新进入 inProgress。
    """

    TODO = "todo"
    IN_PROGRESS = "inProgress"
    COMPLETED = "completed"

    @property
    def display_name(self) -> str:
        return _STATUS_DISPLAY_NAMES[self]


_STATUS_DISPLAY_NAMES: dict[TaskStatus, str] = {
    TaskStatus.TODO: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Completed",
}


class TaskPriority(StrEnum):
    """Task 优先级 -- 全序：low < medium < high < urgent

    比较运算按 rank 进行，而不是按字符串值。
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANKS[self]

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    def __lt__(self, other):
        if isinstance(other, TaskPriority):
            return self.rank < other.rank
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, TaskPriority):
            return self.rank <= other.rank
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, TaskPriority):
            return self.rank > other.rank
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, TaskPriority):
            return self.rank >= other.rank
        return NotImplemented


_PRIORITY_RANKS: dict[TaskPriority, int] = {
    TaskPriority.LOW: 0,
    TaskPriority.MEDIUM: 1,
    TaskPriority.HIGH: 2,
    TaskPriority.URGENT: 3,
}


class TaskCategory(StrEnum):
    """Task 分类（封闭集合）"""

    PERSONAL = "personal"
    WORK = "work"
    SHOPPING = "shopping"
    HEALTH = "health"
    FINANCE = "finance"
    HOME = "home"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class TaskFilter(StrEnum):
    """列表筛选条件"""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"
    OVERDUE = "overdue"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class TaskSortOption(StrEnum):
    """列表排序字段"""

    CREATED_DATE = "createdDate"
    DUE_DATE = "dueDate"
    PRIORITY = "priority"
    TITLE = "title"

    @property
    def display_name(self) -> str:
        return _SORT_DISPLAY_NAMES[self]


_SORT_DISPLAY_NAMES: dict[TaskSortOption, str] = {
    TaskSortOption.CREATED_DATE: "Created Date",
    TaskSortOption.DUE_DATE: "Due Date",
    TaskSortOption.PRIORITY: "Priority",
    TaskSortOption.TITLE: "Title",
}


class SortDirection(StrEnum):
    """排序方向"""

    ASCENDING = "ascending"
    DESCENDING = "descending"


# 切换用例的状态流转：todo/inProgress -> completed，completed -> inProgress
TOGGLE_TRANSITIONS: dict[TaskStatus, TaskStatus] = {
    TaskStatus.TODO: TaskStatus.COMPLETED,
    TaskStatus.IN_PROGRESS: TaskStatus.COMPLETED,
    TaskStatus.COMPLETED: TaskStatus.IN_PROGRESS,
}


def next_toggle_status(status: TaskStatus) -> TaskStatus:
    """返回切换后的状态

    Args:
        status: 当前状态

    Returns:
        切换后的状态
    """
    return TOGGLE_TRANSITIONS[status]


# 存储解码默认值：原始值无法识别时不报错，回退到这些成员
DEFAULT_STATUS = TaskStatus.TODO
DEFAULT_PRIORITY = TaskPriority.MEDIUM
DEFAULT_CATEGORY = TaskCategory.PERSONAL


def _decode(enum_cls: type[StrEnum], raw: str | None, default: StrEnum):
    try:
        return enum_cls(raw)
    except ValueError:
        log.warning(
            "unknown_enum_value_fallback",
            enum=enum_cls.__name__,
            raw_value=raw,
            fallback=default.value,
        )
        return default


def decode_status(raw: str | None) -> TaskStatus:
    """宽松解码状态原始值，无法识别时回退 todo"""
    return _decode(TaskStatus, raw, DEFAULT_STATUS)


def decode_priority(raw: str | None) -> TaskPriority:
    """宽松解码优先级原始值，无法识别时回退 medium"""
    return _decode(TaskPriority, raw, DEFAULT_PRIORITY)


def decode_category(raw: str | None) -> TaskCategory:
    """宽松解码分类原始值，无法识别时回退 personal"""
    return _decode(TaskCategory, raw, DEFAULT_CATEGORY)
