import logging
from dataclasses import dataclass
from uuid import UUID

from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeleteTaskCommand:
    id: UUID


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: DeleteTaskCommand) -> bool:
        deleted = self._repository.delete(cmd.id)
        if deleted:
            logger.info(f"Tarea {cmd.id} eliminada")
        else:
            logger.debug(f"Tarea con id {cmd.id} no encontrada")
        return deleted
