import logging
from dataclasses import dataclass
from uuid import UUID

from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateTaskCommand:
    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: UUID, cmd: UpdateTaskCommand) -> Task | None:
        task = self._repository.update(
            task_id,
            title=cmd.title,
            description=cmd.description,
            status=cmd.status,
        )
        if task is None:
            logger.debug(f"Tarea con id {task_id} no encontrada")
            return None

        logger.info(f"Tarea {task_id} actualizada")
        return task
