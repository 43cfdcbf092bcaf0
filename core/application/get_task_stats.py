from dataclasses import dataclass

from core.domain.models.task import TaskStatus
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True, frozen=True)
class TaskStats:
    total: int
    pending: int
    in_progress: int
    completed: int

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "pending": self.pending,
            "inProgress": self.in_progress,
            "completed": self.completed,
        }


class GetTaskStatsUseCase:
    """Conteo de tareas por estado sobre la colección completa, sin filtros."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self) -> TaskStats:
        tasks = self._repository.find_all().tasks

        def _count(status: TaskStatus) -> int:
            return sum(1 for t in tasks if t.status == status)

        return TaskStats(
            total=len(tasks),
            pending=_count(TaskStatus.PENDING),
            in_progress=_count(TaskStatus.IN_PROGRESS),
            completed=_count(TaskStatus.COMPLETED),
        )
