"""Task Domain Model

Task 按值替换：每次变更生成新实例，task_id 与 created_at 跨更新保持不变，
updated_at 由变更用例刷新。标题非空约束由用例层校验，实体本身不强制。
"""

from datetime import UTC, datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator
from ulid import ULID

from ..config import DUE_SOON_WINDOW_DAYS
from .enums import TaskCategory, TaskPriority, TaskStatus


def utc_now() -> datetime:
    """当前 UTC 时间（带时区）"""
    return datetime.now(UTC)


def new_task_id() -> str:
    """生成新的任务标识（ULID 格式）"""
    return str(ULID())


class Task(BaseModel):
    """Task 数据模型

    派生谓词（is_overdue / is_due_today / is_due_soon）按需计算，不落盘。
    """

    model_config = ConfigDict(frozen=True)

    task_id: str = Field(default_factory=new_task_id, description="唯一标识，ULID 格式")
    title: str = Field(description="任务标题")
    description: str = Field(default="", description="任务描述，可为空")
    status: TaskStatus = Field(default=TaskStatus.TODO, description="当前状态")
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM, description="优先级")
    category: TaskCategory = Field(default=TaskCategory.PERSONAL, description="分类")
    due_date: datetime | None = Field(default=None, description="截止时间")
    created_at: datetime = Field(default_factory=utc_now, description="创建时间")
    updated_at: datetime = Field(default_factory=utc_now, description="更新时间")

    @field_validator("due_date", "created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        # 无时区的时间按 UTC 解释
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @property
    def has_blank_title(self) -> bool:
        """标题去除首尾空白后是否为空"""
        return not self.title.strip()

    def is_overdue(self, now: datetime | None = None) -> bool:
        """已设置截止时间、截止时间严格早于 now 且未完成"""
        if self.due_date is None:
            return False
        now = now or utc_now()
        return self.due_date < now and self.status != TaskStatus.COMPLETED

    def is_due_today(self, now: datetime | None = None) -> bool:
        """截止时间落在当前日历日（本地时区）"""
        if self.due_date is None:
            return False
        now = now or utc_now()
        return self.due_date.astimezone().date() == now.astimezone().date()

    def is_due_soon(self, now: datetime | None = None) -> bool:
        """截止时间位于 [now, now + 7 天] 区间内"""
        if self.due_date is None:
            return False
        now = now or utc_now()
        return now <= self.due_date <= now + timedelta(days=DUE_SOON_WINDOW_DAYS)

    def touch(self, now: datetime | None = None) -> "Task":
        """返回刷新 updated_at 后的新实例"""
        return self.model_copy(update={"updated_at": now or utc_now()})

    def with_status(self, status: TaskStatus, now: datetime | None = None) -> "Task":
        """返回变更状态并刷新 updated_at 后的新实例"""
        return self.model_copy(
            update={"status": status, "updated_at": now or utc_now()}
        )
