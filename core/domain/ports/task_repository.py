from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from uuid import UUID

from core.domain.models.task import Task, TaskStatus


@dataclass(slots=True)
class TaskFilters:
    status: TaskStatus | None = None
    title: str | None = None
    page: int | None = None
    limit: int | None = None


@dataclass(slots=True)
class TaskQueryResult:
    tasks: list[Task] = field(default_factory=list)
    total: int = 0


class TaskRepository(ABC):
    @abstractmethod
    def save(self, task: Task) -> Task:
        raise NotImplementedError

    @abstractmethod
    def find_all(self, filters: TaskFilters | None = None) -> TaskQueryResult:
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: UUID) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def update(
        self,
        task_id: UUID,
        title: str | None = None,
        description: str | None = None,
        status: TaskStatus | None = None,
    ) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: UUID) -> bool:
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError
