from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.get_task_stats import GetTaskStatsUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository


class Container:
    """
    Raíz de composición: dueña de la única instancia del repositorio.

    La app FastAPI guarda un Container en app.state; los tests crean el suyo
    para tener un repositorio aislado.
    """

    def __init__(self, repository: TaskRepository | None = None) -> None:
        self.repository = repository or InMemoryTaskRepository()

    def create_task_use_case(self) -> CreateTaskUseCase:
        return CreateTaskUseCase(repository=self.repository)

    def list_tasks_use_case(self) -> ListTasksUseCase:
        return ListTasksUseCase(repository=self.repository)

    def get_task_use_case(self) -> GetTaskUseCase:
        return GetTaskUseCase(repository=self.repository)

    def update_task_use_case(self) -> UpdateTaskUseCase:
        return UpdateTaskUseCase(repository=self.repository)

    def delete_task_use_case(self) -> DeleteTaskUseCase:
        return DeleteTaskUseCase(repository=self.repository)

    def get_task_stats_use_case(self) -> GetTaskStatsUseCase:
        return GetTaskStatsUseCase(repository=self.repository)
