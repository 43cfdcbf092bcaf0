from fastapi import Depends, Request

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.get_task_stats import GetTaskStatsUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from infrastructure.container import Container


def get_container(request: Request) -> Container:
    return request.app.state.container


def create_task_use_case(
    container: Container = Depends(get_container),
) -> CreateTaskUseCase:
    return container.create_task_use_case()


def list_tasks_use_case(
    container: Container = Depends(get_container),
) -> ListTasksUseCase:
    return container.list_tasks_use_case()


def get_task_use_case(
    container: Container = Depends(get_container),
) -> GetTaskUseCase:
    return container.get_task_use_case()


def update_task_use_case(
    container: Container = Depends(get_container),
) -> UpdateTaskUseCase:
    return container.update_task_use_case()


def delete_task_use_case(
    container: Container = Depends(get_container),
) -> DeleteTaskUseCase:
    return container.delete_task_use_case()


def get_task_stats_use_case(
    container: Container = Depends(get_container),
) -> GetTaskStatsUseCase:
    return container.get_task_stats_use_case()
