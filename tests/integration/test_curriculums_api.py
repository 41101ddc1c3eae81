# -*- coding: utf-8 -*-
"""
Integration тесты API учебных программ
"""

from datetime import datetime

import pytest
from httpx import AsyncClient

from tests.fixtures import create_test_tree
from tora.domain.enums import ItemStatus
from tora.repository.curriculums import get_curriculum_tree
from tora.service.curriculums import ordered_tree

C = ItemStatus.COMPLETED
P = ItemStatus.IN_PROGRESS
N = ItemStatus.NOT_STARTED


class TestCurriculumsCRUD:
    """Integration тесты CRUD учебных программ"""

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_create_curriculum(self, client: AsyncClient):
        """Создание программы возвращает поля в camelCase"""
        # Act
        response = await client.post(
            "/api/v1/curriculums",
            json={
                "title": "Rust Book",
                "platform": "Online",
                "platformUrl": "https://doc.rust-lang.org/book/",
                "priority": "high",
                "status": "ongoing",
                "endDate": "2025-12-31",
            },
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["title"] == "Rust Book"
        assert data["platformUrl"] == "https://doc.rust-lang.org/book/"
        assert data["priority"] == "high"
        assert data["endDate"] == "2025-12-31"
        assert data["author"] is None
        assert "createdAt" in data and "updatedAt" in data

    @pytest.mark.asyncio
    async def test_create_defaults_and_blank_url(self, client: AsyncClient):
        """Значения по умолчанию; пустой platformUrl сохраняется как null"""
        response = await client.post(
            "/api/v1/curriculums", json={"title": "Minimal", "platformUrl": ""}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["priority"] == "medium"
        assert data["status"] == "planned"
        assert data["platformUrl"] is None

    @pytest.mark.asyncio
    async def test_create_rejects_bad_payload(self, client: AsyncClient):
        """Пустой заголовок или неизвестный статус: 422"""
        empty_title = await client.post("/api/v1/curriculums", json={"title": ""})
        bad_status = await client.post(
            "/api/v1/curriculums", json={"title": "X", "status": "finished"}
        )

        assert empty_title.status_code == 422
        assert bad_status.status_code == 422

    @pytest.mark.asyncio
    async def test_list_with_progress(self, client: AsyncClient, test_session):
        """Список содержит итоги прогресса"""
        await create_test_tree(test_session, [[C, N, N]], title="One")
        await create_test_tree(test_session, [], title="Empty")

        response = await client.get("/api/v1/curriculums")

        assert response.status_code == 200
        one, empty = response.json()
        assert one["title"] == "One"
        assert (one["totalItems"], one["completedItems"], one["progress"]) == (3, 1, 33)
        assert (empty["totalItems"], empty["completedItems"], empty["progress"]) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_detail(self, client: AsyncClient, test_session):
        """Детальная карточка с разделами, заданиями и прогрессом"""
        curriculum = await create_test_tree(test_session, [[C, C], [N]])

        response = await client.get(f"/api/v1/curriculums/{curriculum.id}")

        assert response.status_code == 200
        data = response.json()
        assert [s["title"] for s in data["sections"]] == ["Section 1", "Section 2"]
        assert [s["progress"] for s in data["sections"]] == [100, 0]
        assert data["sections"][0]["items"][0]["sortOrder"] == 0
        assert data["sections"][0]["items"][0]["status"] == "completed"
        assert data["progress"] == 67

    @pytest.mark.asyncio
    async def test_detail_not_found(self, client: AsyncClient):
        response = await client.get("/api/v1/curriculums/999")

        assert response.status_code == 404
        assert "999" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_patch_bumps_updated_at(self, client: AsyncClient):
        """Частичное обновление меняет только переданные поля"""
        created = (
            await client.post(
                "/api/v1/curriculums", json={"title": "Old", "author": "Someone"}
            )
        ).json()

        response = await client.patch(
            f"/api/v1/curriculums/{created['id']}", json={"title": "New"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "New"
        assert data["author"] == "Someone"
        assert datetime.fromisoformat(data["updatedAt"]) > datetime.fromisoformat(
            created["updatedAt"]
        )

    @pytest.mark.asyncio
    async def test_patch_rejects_null_title(self, client: AsyncClient, test_session):
        curriculum = await create_test_tree(test_session, [])

        response = await client.patch(
            f"/api/v1/curriculums/{curriculum.id}", json={"title": None}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient, test_session):
        """Удаление: 204, затем 404"""
        curriculum = await create_test_tree(test_session, [[N]])

        response = await client.delete(f"/api/v1/curriculums/{curriculum.id}")
        again = await client.get(f"/api/v1/curriculums/{curriculum.id}")

        assert response.status_code == 204
        assert again.status_code == 404


class TestDashboardAndCurrentTask:
    """Integration тесты дашборда и текущего задания"""

    @pytest.mark.asyncio
    async def test_current_task(self, client: AsyncClient, test_session):
        curriculum = await create_test_tree(test_session, [[C, N], [P]])

        response = await client.get(f"/api/v1/curriculums/{curriculum.id}/current-task")

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "S2 Item 1"
        assert data["status"] == "in_progress"
        assert data["sectionTitle"] == "Section 2"
        assert "sectionId" in data

    @pytest.mark.asyncio
    async def test_current_task_null_when_done(self, client: AsyncClient, test_session):
        curriculum = await create_test_tree(test_session, [[C]])

        response = await client.get(f"/api/v1/curriculums/{curriculum.id}/current-task")

        assert response.status_code == 200
        assert response.json() is None

    @pytest.mark.asyncio
    async def test_dashboard(self, client: AsyncClient, test_session):
        await create_test_tree(test_session, [[C, N]], title="Card")

        response = await client.get("/api/v1/curriculums/dashboard")

        assert response.status_code == 200
        (card,) = response.json()
        assert card["title"] == "Card"
        assert card["progress"] == 50
        assert card["daysRemaining"] is None
        assert card["currentTask"]["title"] == "S1 Item 2"


class TestReorderAPI:
    """Integration тесты пакетной перестановки"""

    @pytest.mark.asyncio
    async def test_reorder_success(self, client: AsyncClient, test_session):
        """Успешная перестановка возвращает обновленную программу"""
        # Arrange
        curriculum = await create_test_tree(test_session, [[C, N], [N]])
        tree = ordered_tree(await get_curriculum_tree(test_session, curriculum.id))
        (s1, (i1, i2)), (s2, _) = tree

        # Act
        response = await client.patch(
            f"/api/v1/curriculums/{curriculum.id}/reorder",
            json={
                "sections": [
                    {
                        "id": s1.id,
                        "sortOrder": 1,
                        "items": [
                            {"id": i1.id, "sortOrder": 1},
                            {"id": i2.id, "sortOrder": 0},
                        ],
                    },
                    {"id": s2.id, "sortOrder": 0, "items": []},
                ]
            },
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        sections = data["curriculum"]["sections"]
        assert [s["id"] for s in sections] == [s2.id, s1.id]
        assert [s["sortOrder"] for s in sections] == [0, 1]
        assert [i["id"] for i in sections[1]["items"]] == [i2.id, i1.id]
        assert sections[1]["progress"] == 50
        assert data["curriculum"]["progress"] == 33

    @pytest.mark.asyncio
    async def test_reorder_foreign_section(self, client: AsyncClient, test_session):
        """Раздел другой программы: 400, порядок не меняется"""
        curriculum = await create_test_tree(test_session, [[N], [N]], title="Mine")
        other = await create_test_tree(test_session, [[N]], title="Other")
        (s1, _), (s2, _) = ordered_tree(await get_curriculum_tree(test_session, curriculum.id))
        ((foreign, _),) = ordered_tree(await get_curriculum_tree(test_session, other.id))
        s1_id, s2_id, foreign_id = s1.id, s2.id, foreign.id
        cid = curriculum.id

        response = await client.patch(
            f"/api/v1/curriculums/{cid}/reorder",
            json={
                "sections": [
                    {"id": s1_id, "sortOrder": 1, "items": []},
                    {"id": s2_id, "sortOrder": 0, "items": []},
                    {"id": foreign_id, "sortOrder": 2, "items": []},
                ]
            },
        )

        assert response.status_code == 400
        assert str(foreign_id) in response.json()["detail"]

        detail = (await client.get(f"/api/v1/curriculums/{cid}")).json()
        assert [s["id"] for s in detail["sections"]] == [s1_id, s2_id]

    @pytest.mark.asyncio
    async def test_reorder_missing_curriculum(self, client: AsyncClient):
        response = await client.patch(
            "/api/v1/curriculums/31337/reorder", json={"sections": []}
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_reorder_malformed_body(self, client: AsyncClient, test_session):
        """Тело без sections или с нечисловой позицией: 422"""
        curriculum = await create_test_tree(test_session, [[N]])

        missing = await client.patch(
            f"/api/v1/curriculums/{curriculum.id}/reorder", json={}
        )
        not_a_number = await client.patch(
            f"/api/v1/curriculums/{curriculum.id}/reorder",
            json={"sections": [{"id": 1, "sortOrder": "first", "items": []}]},
        )

        assert missing.status_code == 422
        assert not_a_number.status_code == 422

    @pytest.mark.asyncio
    async def test_reorder_out_of_range_values(self, client: AsyncClient, test_session):
        """Позиции и ID вне диапазона INTEGER отклоняются до обращения к БД: 422"""
        # Arrange
        curriculum = await create_test_tree(test_session, [[N, N]])
        ((section, (a, b)),) = ordered_tree(
            await get_curriculum_tree(test_session, curriculum.id)
        )
        cid, s_id, a_id, b_id = curriculum.id, section.id, a.id, b.id
        url = f"/api/v1/curriculums/{cid}/reorder"

        # Act
        huge_position = await client.patch(
            url,
            json={
                "sections": [
                    {
                        "id": s_id,
                        "sortOrder": 0,
                        "items": [
                            {"id": a_id, "sortOrder": 2**63},
                            {"id": b_id, "sortOrder": 0},
                        ],
                    }
                ]
            },
        )
        huge_id = await client.patch(
            url, json={"sections": [{"id": 2**63, "sortOrder": 0, "items": []}]}
        )
        negative_position = await client.patch(
            url, json={"sections": [{"id": s_id, "sortOrder": -1, "items": []}]}
        )

        # Assert
        assert huge_position.status_code == 422
        assert huge_id.status_code == 422
        assert negative_position.status_code == 422
        ((_, items),) = ordered_tree(await get_curriculum_tree(test_session, cid))
        assert [(item.id, item.sort_order) for item in items] == [(a_id, 0), (b_id, 1)]
