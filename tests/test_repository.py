"""TaskRepository 契约测试 -- 内存与 SQLite 两种实现

测试内容：
1. CRUD 与 NotFound
2. 批量删除跳过不存在的 id
3. 按状态 / 分类 / 逾期查询
4. 标识唯一约束
"""

from datetime import UTC, datetime, timedelta

import pytest
from taskmaster.core.exceptions import DuplicateTaskIdError, TaskNotFoundError
from taskmaster.core.models import TaskCategory, TaskPriority, TaskStatus


class TestRepositoryCrud:
    """基础增删改查"""

    async def test_create_and_fetch(self, repository, make_task, now):
        task = make_task(
            "Buy milk",
            description="2 liters",
            priority=TaskPriority.HIGH,
            category=TaskCategory.SHOPPING,
            due_date=now + timedelta(days=1),
        )
        stored = await repository.create(task)
        assert stored == task

        fetched = await repository.fetch(task.task_id)
        assert fetched == task

    async def test_fetch_missing_returns_none(self, repository):
        assert await repository.fetch("01JMISSING0000000000000000") is None

    async def test_fetch_all(self, repository, make_task):
        a = await repository.create(make_task("a"))
        b = await repository.create(make_task("b"))
        tasks = await repository.fetch_all()
        assert {t.task_id for t in tasks} == {a.task_id, b.task_id}

    async def test_update_replaces_value(self, repository, make_task, now):
        task = await repository.create(make_task("draft"))
        changed = task.model_copy(
            update={
                "title": "final",
                "status": TaskStatus.IN_PROGRESS,
                "updated_at": now + timedelta(hours=1),
            }
        )
        stored = await repository.update(changed)
        assert stored.title == "final"
        assert stored.status == TaskStatus.IN_PROGRESS
        assert (await repository.fetch(task.task_id)).title == "final"

    async def test_update_preserves_created_at(self, repository, make_task, now):
        task = await repository.create(make_task("x", created_at=now - timedelta(days=10)))
        forged = task.model_copy(update={"created_at": now, "title": "y"})
        stored = await repository.update(forged)
        assert stored.created_at == task.created_at

    async def test_update_missing_raises_not_found(self, repository, make_task):
        await repository.create(make_task("keep"))
        with pytest.raises(TaskNotFoundError):
            await repository.update(make_task("ghost"))
        tasks = await repository.fetch_all()
        assert [t.title for t in tasks] == ["keep"]

    async def test_delete(self, repository, make_task):
        task = await repository.create(make_task("x"))
        await repository.delete(task.task_id)
        assert await repository.fetch(task.task_id) is None

    async def test_delete_missing_raises_not_found(self, repository):
        with pytest.raises(TaskNotFoundError) as exc_info:
            await repository.delete("01JMISSING0000000000000000")
        assert exc_info.value.task_id == "01JMISSING0000000000000000"

    async def test_duplicate_id_rejected(self, repository, make_task):
        task = await repository.create(make_task("x"))
        with pytest.raises(DuplicateTaskIdError):
            await repository.create(task)
        assert len(await repository.fetch_all()) == 1


class TestRepositoryDeleteMany:
    """批量删除"""

    async def test_skips_missing_ids(self, repository, make_task):
        a = await repository.create(make_task("a"))
        c = await repository.create(make_task("c"))
        await repository.delete_many([a.task_id, "01JMISSING0000000000000000"])
        remaining = await repository.fetch_all()
        assert [t.task_id for t in remaining] == [c.task_id]

    async def test_empty_list(self, repository, make_task):
        await repository.create(make_task("a"))
        await repository.delete_many([])
        assert len(await repository.fetch_all()) == 1


class TestRepositoryQueries:
    """按状态 / 分类 / 逾期查询"""

    async def test_fetch_by_status(self, repository, make_task):
        done = await repository.create(make_task("done", status=TaskStatus.COMPLETED))
        await repository.create(make_task("open"))
        result = await repository.fetch_by_status(TaskStatus.COMPLETED)
        assert [t.task_id for t in result] == [done.task_id]

    async def test_fetch_by_category(self, repository, make_task):
        work = await repository.create(make_task("w", category=TaskCategory.WORK))
        await repository.create(make_task("h", category=TaskCategory.HOME))
        result = await repository.fetch_by_category(TaskCategory.WORK)
        assert [t.task_id for t in result] == [work.task_id]
        assert await repository.fetch_by_category(TaskCategory.FINANCE) == []

    async def test_fetch_overdue(self, repository, make_task, now):
        late = await repository.create(make_task("late", due_date=now - timedelta(hours=1)))
        await repository.create(
            make_task("done", due_date=now - timedelta(hours=1), status=TaskStatus.COMPLETED)
        )
        await repository.create(make_task("future", due_date=now + timedelta(hours=1)))
        await repository.create(make_task("undated"))
        result = await repository.fetch_overdue(now)
        assert [t.task_id for t in result] == [late.task_id]

    async def test_due_date_round_trips_across_timezones(self, repository, make_task):
        due = datetime(2024, 1, 1, 8, 30, 15, 123456, tzinfo=UTC)
        task = await repository.create(make_task("tz", due_date=due))
        fetched = await repository.fetch(task.task_id)
        assert fetched.due_date == due
