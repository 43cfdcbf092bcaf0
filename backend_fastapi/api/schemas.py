from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, model_validator

from core.domain.models.task import TaskStatus


class TaskCreateRequest(BaseModel):
    """
    Payload para crear una tarea.
    """

    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1, max_length=500)
    status: TaskStatus | None = None


class TaskUpdateRequest(BaseModel):
    """
    Payload para actualizar una tarea. Todos los campos son opcionales,
    pero debe llegar al menos uno.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, min_length=1, max_length=500)
    status: TaskStatus | None = None

    @model_validator(mode="before")
    @classmethod
    def _reject_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = sorted(key for key, value in data.items() if value is None)
            if nulls:
                raise ValueError(f"Fields must not be null: {', '.join(nulls)}")
        return data

    @model_validator(mode="after")
    def _require_one_field(self) -> "TaskUpdateRequest":
        if self.title is None and self.description is None and self.status is None:
            raise ValueError("At least one field must be provided")
        return self


class ApiResponse(BaseModel):
    success: bool
    message: str
    data: Any | None = None
    error: str | None = None


def api_response(
    success: bool,
    message: str,
    data: Any | None = None,
    error: str | None = None,
    status_code: int = 200,
    **extra: Any,
) -> JSONResponse:
    """
    Arma la respuesta estándar de la API. data y error se omiten si son None.
    """
    body = ApiResponse(success=success, message=message, data=data, error=error)
    content = body.model_dump(exclude_none=True)
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)
