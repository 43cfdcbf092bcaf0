from dataclasses import dataclass, field

from core.domain.models.pagination import Pagination
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskFilters, TaskRepository

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(slots=True)
class ListTasksQuery:
    status: TaskStatus | None = None
    title: str | None = None
    page: int | None = None
    limit: int | None = None


@dataclass(slots=True)
class TaskPage:
    data: list[Task] = field(default_factory=list)
    pagination: Pagination = field(
        default_factory=lambda: Pagination(DEFAULT_PAGE, DEFAULT_LIMIT, 0)
    )

    def to_dict(self) -> dict:
        return {
            "data": [task.to_dict() for task in self.data],
            "pagination": self.pagination.to_dict(),
        }


class ListTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, query: ListTasksQuery | None = None) -> TaskPage:
        query = query or ListTasksQuery()
        page = query.page or DEFAULT_PAGE
        limit = query.limit or DEFAULT_LIMIT

        result = self._repository.find_all(
            TaskFilters(
                status=query.status,
                title=query.title,
                page=page,
                limit=limit,
            )
        )
        return TaskPage(
            data=result.tasks,
            pagination=Pagination(page=page, limit=limit, total=result.total),
        )
