from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_stats_use_case,
    get_task_use_case,
    list_tasks_use_case,
    update_task_use_case,
)
from backend_fastapi.api.schemas import (
    TaskCreateRequest,
    TaskUpdateRequest,
    api_response,
)
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.get_task_stats import GetTaskStatsUseCase
from core.application.list_tasks import ListTasksQuery, ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.models.task import TaskStatus

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _not_found() -> JSONResponse:
    return api_response(False, "Task not found", status_code=status.HTTP_404_NOT_FOUND)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Crear una nueva tarea",
)
def create_task(
    body: TaskCreateRequest,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> JSONResponse:
    """
    Crea una nueva tarea.

    - **title**: Título (1-100 caracteres).
    - **description**: Descripción (1-500 caracteres).
    - **status**: Estado inicial (por defecto PENDING).
    """
    task = use_case.execute(
        CreateTaskCommand(
            title=body.title,
            description=body.description,
            status=body.status,
        )
    )
    return api_response(
        True,
        "Task created successfully",
        task.to_dict(),
        status_code=status.HTTP_201_CREATED,
    )


@router.get(
    "",
    summary="Listar tareas con filtros y paginación",
)
def list_tasks(
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
    status_filter: TaskStatus | None = Query(default=None, alias="status"),
    title: str | None = Query(default=None, min_length=1),
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> JSONResponse:
    """
    Lista las tareas, de la más nueva a la más antigua.

    - **page**: Página (por defecto 1).
    - **limit**: Tareas por página (por defecto 10, máximo 100).
    - **status**: Filtra por estado exacto.
    - **title**: Busca en el título, sin distinguir mayúsculas.
    """
    result = use_case.execute(
        ListTasksQuery(status=status_filter, title=title, page=page, limit=limit)
    )
    return api_response(True, "Tasks retrieved successfully", result.to_dict())


@router.get(
    "/stats",
    summary="Estadísticas de tareas por estado",
)
def get_task_stats(
    use_case: GetTaskStatsUseCase = Depends(get_task_stats_use_case),
) -> JSONResponse:
    stats = use_case.execute()
    return api_response(True, "Statistics retrieved successfully", stats.to_dict())


@router.get(
    "/{task_id}",
    summary="Obtener una tarea por id",
)
def get_task(
    task_id: UUID,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> JSONResponse:
    task = use_case.execute(task_id)
    if task is None:
        return _not_found()
    return api_response(True, "Task retrieved successfully", task.to_dict())


@router.put(
    "/{task_id}",
    summary="Editar una tarea existente",
)
def update_task(
    task_id: UUID,
    body: TaskUpdateRequest,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> JSONResponse:
    """
    Modifica sólo los campos enviados de una tarea existente.

    - **task_id**: UUID de la tarea a modificar.
    """
    task = use_case.execute(
        task_id,
        UpdateTaskCommand(
            title=body.title,
            description=body.description,
            status=body.status,
        ),
    )
    if task is None:
        return _not_found()
    return api_response(True, "Task updated successfully", task.to_dict())


@router.delete(
    "/{task_id}",
    summary="Eliminar una tarea",
)
def delete_task(
    task_id: UUID,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> JSONResponse:
    if not use_case.execute(DeleteTaskCommand(id=task_id)):
        return _not_found()
    return api_response(True, "Task deleted successfully")
