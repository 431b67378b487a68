"""TaskStatistics -- 任务统计快照（派生数据，不持久化）"""

from pydantic import BaseModel, Field, computed_field

from .enums import TaskCategory, TaskPriority, TaskStatus


class TaskStatistics(BaseModel):
    """任务统计快照

    直方图只包含出现过的分组，调用方须将缺失的 key 视为 0。
    active_tasks 定义为 status != completed，与列表筛选的 active 一致。
    """

    total_tasks: int = Field(default=0, ge=0, description="任务总数")
    completed_tasks: int = Field(default=0, ge=0, description="已完成数")
    active_tasks: int = Field(default=0, ge=0, description="未完成数")
    overdue_tasks: int = Field(default=0, ge=0, description="逾期数")
    tasks_by_category: dict[TaskCategory, int] = Field(
        default_factory=dict, description="按分类计数"
    )
    tasks_by_priority: dict[TaskPriority, int] = Field(
        default_factory=dict, description="按优先级计数"
    )
    tasks_by_status: dict[TaskStatus, int] = Field(
        default_factory=dict, description="按状态计数"
    )

    @computed_field
    @property
    def completion_rate(self) -> float:
        """完成率 = completed / total，total 为 0 时返回 0"""
        if self.total_tasks == 0:
            return 0.0
        return self.completed_tasks / self.total_tasks

    def count_for_category(self, category: TaskCategory) -> int:
        return self.tasks_by_category.get(category, 0)

    def count_for_priority(self, priority: TaskPriority) -> int:
        return self.tasks_by_priority.get(priority, 0)

    def count_for_status(self, status: TaskStatus) -> int:
        return self.tasks_by_status.get(status, 0)
