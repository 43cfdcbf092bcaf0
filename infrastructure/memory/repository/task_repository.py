import logging
from dataclasses import replace
from uuid import UUID

from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import (
    TaskFilters,
    TaskQueryResult,
    TaskRepository,
)

logger = logging.getLogger(__name__)


class InMemoryTaskRepository(TaskRepository):
    """
    Implementación de TaskRepository en memoria.

    Las tareas viven mientras viva el proceso. Los métodos de lectura
    devuelven copias, de modo que sólo el repositorio muta sus registros.
    No es seguro para escrituras concurrentes desde varios threads.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def save(self, task: Task) -> Task:
        """
        Agrega una tarea a la colección.

        Argumentos:
            task (Task): La tarea a guardar.

        Retorna:
            Task: La misma tarea recibida.
        """
        self._tasks.append(replace(task))
        return task

    def find_all(self, filters: TaskFilters | None = None) -> TaskQueryResult:
        """
        Lista tareas aplicando filtros, orden y paginación.

        El total se calcula después de filtrar y antes de paginar. El orden es
        por fecha de creación, de la más nueva a la más antigua.

        Argumentos:
            filters (TaskFilters | None): status, title, page y limit opcionales.

        Retorna:
            TaskQueryResult: Las tareas de la ventana pedida y el total filtrado.
        """
        filters = filters or TaskFilters()
        tasks = list(self._tasks)

        if filters.status is not None:
            tasks = [t for t in tasks if t.status == filters.status]

        if filters.title:
            search = filters.title.lower()
            tasks = [t for t in tasks if search in t.title.lower()]

        total = len(tasks)
        tasks.sort(key=lambda t: t.created_at, reverse=True)

        if filters.page and filters.limit:
            start = (filters.page - 1) * filters.limit
            tasks = tasks[start : start + filters.limit]

        return TaskQueryResult(tasks=[replace(t) for t in tasks], total=total)

    def get(self, task_id: UUID) -> Task | None:
        task = self._find(task_id)
        return replace(task) if task is not None else None

    def update(
        self,
        task_id: UUID,
        title: str | None = None,
        description: str | None = None,
        status: TaskStatus | None = None,
    ) -> Task | None:
        """
        Actualiza parcialmente una tarea.

        Retorna:
            Task | None: La tarea actualizada o None si no existe.
        """
        task = self._find(task_id)
        if task is None:
            logger.debug(f"Tarea {task_id} no encontrada para actualizar")
            return None

        task.update(title=title, description=description, status=status)
        return replace(task)

    def delete(self, task_id: UUID) -> bool:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[index]
                return True
        return False

    def count(self) -> int:
        return len(self._tasks)

    def _find(self, task_id: UUID) -> Task | None:
        return next((t for t in self._tasks if t.id == task_id), None)
