"""Unit tests for CosmosService against the in-memory container."""

import logging

import pytest

from cosmos_db_api.app.core.errors import NotFound, StoreFault
from cosmos_db_api.app.schemas.course import Course
from cosmos_db_api.app.schemas.item import Item


def make_item(item_id="a1", partition_key="pk1", name="widget", description="d"):
    return Item(id=item_id, partitionKey=partition_key, name=name, description=description)


class TestItems:
    @pytest.mark.asyncio
    async def test_create_then_read_returns_same_item(self, cosmos_service):
        item = make_item()

        created = await cosmos_service.create_item(item)
        read = await cosmos_service.read_item("a1", "pk1")

        assert created == item
        assert read == item

    @pytest.mark.asyncio
    async def test_system_properties_are_stripped(self, cosmos_service, items_container):
        await cosmos_service.create_item(make_item())

        assert "_etag" in items_container.documents[("pk1", "a1")]
        read = await cosmos_service.read_item("a1", "pk1")
        assert set(read.model_dump()) == {"id", "partitionKey", "name", "description"}

    @pytest.mark.asyncio
    async def test_duplicate_id_is_a_conflict(self, cosmos_service):
        await cosmos_service.create_item(make_item())

        with pytest.raises(StoreFault) as excinfo:
            await cosmos_service.create_item(make_item(name="other"))
        assert excinfo.value.status_code == 409

    @pytest.mark.asyncio
    async def test_read_missing_item_raises_not_found(self, cosmos_service):
        with pytest.raises(NotFound):
            await cosmos_service.read_item("missing", "pk1")

    @pytest.mark.asyncio
    async def test_read_uses_partition_key(self, cosmos_service):
        await cosmos_service.create_item(make_item())

        with pytest.raises(NotFound):
            await cosmos_service.read_item("a1", "other-pk")

    @pytest.mark.asyncio
    async def test_update_creates_missing_item(self, cosmos_service):
        item = make_item(item_id="new")

        updated = await cosmos_service.update_item("new", item, "pk1")

        assert updated == item
        assert await cosmos_service.read_item("new", "pk1") == item

    @pytest.mark.asyncio
    async def test_update_replaces_existing_item(self, cosmos_service):
        await cosmos_service.create_item(make_item())

        await cosmos_service.update_item("a1", make_item(name="gadget"), "pk1")

        assert (await cosmos_service.read_item("a1", "pk1")).name == "gadget"

    @pytest.mark.asyncio
    async def test_update_is_addressed_by_body(self, cosmos_service, caplog):
        with caplog.at_level(logging.WARNING):
            await cosmos_service.update_item("path-id", make_item(item_id="body-id"), "pk1")

        assert (await cosmos_service.read_item("body-id", "pk1")).id == "body-id"
        with pytest.raises(NotFound):
            await cosmos_service.read_item("path-id", "pk1")
        assert "differs from request" in caplog.text

    @pytest.mark.asyncio
    async def test_delete_then_read_raises_not_found(self, cosmos_service):
        await cosmos_service.create_item(make_item())

        await cosmos_service.delete_item("a1", "pk1")

        with pytest.raises(NotFound):
            await cosmos_service.read_item("a1", "pk1")

    @pytest.mark.asyncio
    async def test_delete_missing_item_raises_not_found(self, cosmos_service):
        with pytest.raises(NotFound):
            await cosmos_service.delete_item("missing", "pk1")

    @pytest.mark.asyncio
    async def test_item_without_id_is_rejected_by_store(self, cosmos_service, items_container):
        with pytest.raises(StoreFault) as excinfo:
            await cosmos_service.create_item(Item(partitionKey="pk1", name="no id"))
        assert excinfo.value.status_code == 400
        assert items_container.documents == {}


class TestQuery:
    @pytest.mark.asyncio
    async def test_all_pages_are_concatenated(self, cosmos_service, items_container):
        for index in range(5):
            await cosmos_service.create_item(make_item(item_id=f"i{index}"))
        assert items_container.page_size < 5

        items = await cosmos_service.query_items("SELECT * FROM c")

        assert isinstance(items, list)
        assert sorted(item.id for item in items) == ["i0", "i1", "i2", "i3", "i4"]

    @pytest.mark.asyncio
    async def test_filter(self, cosmos_service):
        await cosmos_service.create_item(make_item(item_id="a1", partition_key="pk1"))
        await cosmos_service.create_item(make_item(item_id="b1", partition_key="pk2"))

        items = await cosmos_service.query_items("SELECT * FROM c WHERE c.partitionKey = 'pk2'")

        assert [item.id for item in items] == ["b1"]

    @pytest.mark.asyncio
    async def test_projection_leaves_unselected_fields_empty(self, cosmos_service):
        await cosmos_service.create_item(make_item(item_id="a1", name="widget"))
        await cosmos_service.create_item(make_item(item_id="b1", name="gadget"))

        items = await cosmos_service.query_items("SELECT c.id, c.name FROM c")

        assert sorted((item.model_dump() for item in items), key=lambda row: row["id"]) == [
            {"id": "a1", "partitionKey": None, "name": "widget", "description": None},
            {"id": "b1", "partitionKey": None, "name": "gadget", "description": None},
        ]

    @pytest.mark.asyncio
    async def test_no_match_returns_empty_list(self, cosmos_service):
        assert await cosmos_service.query_items("SELECT * FROM c WHERE c.name = 'nothing'") == []

    @pytest.mark.asyncio
    async def test_malformed_query_is_a_store_fault(self, cosmos_service):
        with pytest.raises(StoreFault) as excinfo:
            await cosmos_service.query_items("SELECT * FORM c")
        assert excinfo.value.status_code == 400


class TestCourses:
    @pytest.mark.asyncio
    async def test_create_course_keeps_extra_fields(self, cosmos_service, courses_container):
        course = Course(id="c1", category="databases", title="Intro to Cosmos DB", credits=3)

        created = await cosmos_service.create_course(course)

        assert created.model_dump() == {"id": "c1", "category": "databases", "title": "Intro to Cosmos DB", "credits": 3}
        assert ("databases", "c1") in courses_container.documents

    @pytest.mark.asyncio
    async def test_course_without_id_is_rejected_by_store(self, cosmos_service):
        with pytest.raises(StoreFault) as excinfo:
            await cosmos_service.create_course(Course(category="databases"))
        assert excinfo.value.status_code == 400
