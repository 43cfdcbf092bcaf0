from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import UUID, uuid4


class TaskStatus(Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"

    @classmethod
    def parse(cls, value: "TaskStatus | str | None") -> "TaskStatus":
        """
        Convierte un valor a TaskStatus. Valores desconocidos caen a PENDING.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.PENDING


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class Task:
    id: UUID
    title: str
    description: str
    status: TaskStatus = TaskStatus.PENDING
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        status: TaskStatus | str | None = None,
    ) -> "Task":
        """
        Crea una tarea nueva con id y timestamps asignados.

        Argumentos:
            title (str): Título, ya validado por la capa HTTP.
            description (str): Descripción, ya validada por la capa HTTP.
            status (TaskStatus | str | None): Estado inicial (por defecto PENDING).

        Retorna:
            Task: La tarea creada.
        """
        now = _now()
        return cls(
            id=uuid4(),
            title=title,
            description=description,
            status=TaskStatus.parse(status),
            created_at=now,
            updated_at=now,
        )

    def update(
        self,
        title: str | None = None,
        description: str | None = None,
        status: TaskStatus | str | None = None,
    ) -> "Task":
        """
        Aplica una actualización parcial. updated_at se refresca siempre,
        aunque no llegue ningún campo.
        """
        if title is not None:
            self.title = title
        if description is not None:
            self.description = description
        if status is not None:
            self.status = TaskStatus(status)
        self.updated_at = _now()
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }
