import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch
from uuid import UUID

from core.domain.models.pagination import Pagination
from core.domain.models.task import Task, TaskStatus

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class TaskModelTests(unittest.TestCase):
    def test_create_asigna_id_y_timestamps(self) -> None:
        task = Task.create("Write report", "Quarterly numbers")

        self.assertIsInstance(task.id, UUID)
        self.assertEqual(task.status, TaskStatus.PENDING)
        self.assertEqual(task.created_at, task.updated_at)

    def test_create_genera_ids_unicos(self) -> None:
        ids = {Task.create(f"t{i}", "d").id for i in range(200)}
        self.assertEqual(len(ids), 200)

    def test_create_acepta_estado_como_string(self) -> None:
        task = Task.create("A", "d", "IN_PROGRESS")
        self.assertEqual(task.status, TaskStatus.IN_PROGRESS)

    def test_create_con_estado_invalido_usa_pending(self) -> None:
        task = Task.create("A", "d", "ARCHIVED")
        self.assertEqual(task.status, TaskStatus.PENDING)

    def test_update_parcial_solo_cambia_campos_enviados(self) -> None:
        task = Task.create("A", "d")

        task.update(status=TaskStatus.COMPLETED)

        self.assertEqual(task.title, "A")
        self.assertEqual(task.description, "d")
        self.assertEqual(task.status, TaskStatus.COMPLETED)

    def test_update_vacio_refresca_updated_at(self) -> None:
        later = T0 + timedelta(seconds=5)
        with patch("core.domain.models.task._now", side_effect=[T0, later]):
            task = Task.create("A", "d", TaskStatus.IN_PROGRESS)
            task.update()

        self.assertEqual(task.created_at, T0)
        self.assertEqual(task.updated_at, later)
        self.assertEqual(task.title, "A")
        self.assertEqual(task.description, "d")
        self.assertEqual(task.status, TaskStatus.IN_PROGRESS)

    def test_updated_at_nunca_es_menor_que_created_at(self) -> None:
        task = Task.create("A", "d")
        for i in range(20):
            task.update(title=f"A{i}")
            self.assertGreaterEqual(task.updated_at, task.created_at)

    def test_to_dict(self) -> None:
        with patch("core.domain.models.task._now", return_value=T0):
            task = Task.create("A", "d", TaskStatus.COMPLETED)

        data = task.to_dict()

        self.assertEqual(
            data,
            {
                "id": str(task.id),
                "title": "A",
                "description": "d",
                "status": "COMPLETED",
                "createdAt": "2024-01-01T12:00:00+00:00",
                "updatedAt": "2024-01-01T12:00:00+00:00",
            },
        )


class PaginationTests(unittest.TestCase):
    def test_segunda_pagina_de_quince(self) -> None:
        pagination = Pagination(page=2, limit=10, total=15)

        self.assertEqual(pagination.total_pages, 2)
        self.assertFalse(pagination.has_next)
        self.assertTrue(pagination.has_prev)

    def test_sin_resultados(self) -> None:
        pagination = Pagination(page=1, limit=10, total=0)

        self.assertEqual(
            pagination.to_dict(),
            {
                "page": 1,
                "limit": 10,
                "total": 0,
                "totalPages": 0,
                "hasNext": False,
                "hasPrev": False,
            },
        )


if __name__ == "__main__":
    unittest.main()
