import logging
from dataclasses import dataclass

from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    title: str
    description: str
    status: TaskStatus | None = None


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        task = Task.create(
            title=cmd.title,
            description=cmd.description,
            status=cmd.status,
        )
        self._repository.save(task)
        logger.info(f"Tarea {task.id} creada ({task.status.value})")
        return task
