"""Test the inventory services."""

import json
from datetime import datetime

import pytest

from zentral.sdk.models import (
    JMESPathCheck,
    JMESPathCheckRequest,
    MetaBusinessUnit,
    MetaBusinessUnitRequest,
    Tag,
    TagRequest,
    TaxonomyRequest,
)

NOW = "2022-07-22T01:02:03.444444"


class TestTags:
    """Test the tags service."""

    @pytest.mark.asyncio
    async def test_list(self, client, server):
        """Test listing tags."""
        server.add(
            "GET",
            "inventory/tags/",
            '[{"id":1,"taxonomy":1,"meta_business_unit":1,"name":"yolo","slug":"yolo","color":"0079bf"}]',
        )
        tags = await client.tags.list()
        assert tags == [
            Tag(id=1, taxonomy=1, meta_business_unit=1, name="yolo", slug="yolo", color="0079bf")
        ]
        assert server.last_request.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_get_by_id(self, client, server):
        """Test getting a tag by id."""
        server.add(
            "GET",
            "inventory/tags/1/",
            '{"id":1,"taxonomy":null,"meta_business_unit":null,"name":"yolo","slug":"yolo","color":"0079bf"}',
        )
        tag = await client.tags.get_by_id(1)
        assert tag == Tag(id=1, name="yolo", slug="yolo", color="0079bf")
        assert tag.taxonomy is None

    @pytest.mark.asyncio
    async def test_get_by_name(self, client, server):
        """Test getting a tag by name."""
        server.add(
            "GET",
            "inventory/tags/",
            '[{"id":1,"taxonomy":1,"meta_business_unit":1,"name":"yolo","slug":"yolo","color":"00ff00"}]',
        )
        tag = await client.tags.get_by_name("yolo")
        assert tag.color == "00ff00"
        assert server.last_request.url.params["name"] == "yolo"

    @pytest.mark.asyncio
    async def test_create(self, client, server):
        """Test creating a tag."""
        server.add(
            "POST",
            "inventory/tags/",
            '{"id":1,"taxonomy":1,"meta_business_unit":null,"name":"yolo","slug":"yolo","color":"ff0000"}',
            status_code=201,
        )
        tag = await client.tags.create(TagRequest(name="yolo", taxonomy=1, color="ff0000"))
        assert tag == Tag(id=1, taxonomy=1, name="yolo", slug="yolo", color="ff0000")
        assert server.last_request.headers["Content-Type"] == "application/json"
        assert server.last_request.content == (
            b'{"name":"yolo","taxonomy":1,"meta_business_unit":null,"color":"ff0000"}'
        )

    @pytest.mark.asyncio
    async def test_update(self, client, server):
        """Test updating a tag."""
        server.add(
            "PUT",
            "inventory/tags/1/",
            '{"id":1,"taxonomy":null,"meta_business_unit":1,"name":"yolo1","slug":"yolo1","color":"0000ff"}',
        )
        tag = await client.tags.update(
            1, TagRequest(name="yolo1", meta_business_unit=1, color="0000ff")
        )
        assert tag.meta_business_unit == 1
        assert server.last_json() == {
            "name": "yolo1",
            "taxonomy": None,
            "meta_business_unit": 1,
            "color": "0000ff",
        }

    @pytest.mark.asyncio
    async def test_delete(self, client, server):
        """Test deleting a tag."""
        server.add("DELETE", "inventory/tags/1/", status_code=204)
        response = await client.tags.delete(1)
        assert response.status_code == 204


class TestMetaBusinessUnits:
    """Test the meta business units service."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, client, server):
        """Test getting a meta business unit by id."""
        server.add(
            "GET",
            "inventory/meta_business_units/1/",
            {
                "id": 1,
                "name": "Default",
                "api_enrollment_enabled": True,
                "created_at": NOW,
                "updated_at": NOW,
            },
        )
        mbu = await client.meta_business_units.get_by_id(1)
        assert mbu == MetaBusinessUnit(
            id=1,
            name="Default",
            api_enrollment_enabled=True,
            created_at=datetime(2022, 7, 22, 1, 2, 3, 444444),
            updated_at=datetime(2022, 7, 22, 1, 2, 3, 444444),
        )

    @pytest.mark.asyncio
    async def test_create(self, client, server):
        """Test creating a meta business unit."""
        server.add("POST", "inventory/meta_business_units/", {"id": 2, "name": "Yolo"})
        await client.meta_business_units.create(MetaBusinessUnitRequest(name="Yolo"))
        assert server.last_json() == {"name": "Yolo", "api_enrollment_enabled": False}


class TestTaxonomies:
    """Test the taxonomies service."""

    @pytest.mark.asyncio
    async def test_get_by_name(self, client, server):
        """Test getting a taxonomy by name."""
        server.add(
            "GET",
            "inventory/taxonomies/",
            [{"id": 3, "meta_business_unit": None, "name": "Yolo", "created_at": NOW, "updated_at": NOW}],
        )
        taxonomy = await client.taxonomies.get_by_name("Yolo")
        assert taxonomy.id == 3
        assert taxonomy.meta_business_unit is None

    @pytest.mark.asyncio
    async def test_update(self, client, server):
        """Test updating a taxonomy."""
        server.add("PUT", "inventory/taxonomies/3/", {"id": 3, "meta_business_unit": 1, "name": "Fomo"})
        taxonomy = await client.taxonomies.update(3, TaxonomyRequest(name="Fomo", meta_business_unit=1))
        assert taxonomy.meta_business_unit == 1
        assert server.last_json() == {"name": "Fomo", "meta_business_unit": 1}


class TestJMESPathChecks:
    """Test the JMESPath compliance checks service."""

    CHECK = {
        "id": 4,
        "name": "Yolo",
        "description": "Fomo",
        "source_name": "Munki",
        "platforms": ["MACOS"],
        "tags": [1],
        "jmespath_expression": "os_version.major > `12`",
        "version": 1,
        "created_at": NOW,
        "updated_at": NOW,
    }

    @pytest.mark.asyncio
    async def test_list(self, client, server):
        """Test listing JMESPath checks."""
        server.add("GET", "inventory/jmespath_checks/", [self.CHECK])
        checks = await client.jmespath_checks.list()
        assert checks[0].jmespath_expression == "os_version.major > `12`"
        assert checks[0].platforms == ["MACOS"]

    @pytest.mark.asyncio
    async def test_create(self, client, server):
        """Test creating a JMESPath check."""
        server.add("POST", "inventory/jmespath_checks/", self.CHECK, status_code=201)
        check = await client.jmespath_checks.create(
            JMESPathCheckRequest(
                name="Yolo",
                description="Fomo",
                source_name="Munki",
                platforms=["MACOS"],
                tags=[1],
                jmespath_expression="os_version.major > `12`",
            )
        )
        assert isinstance(check, JMESPathCheck)
        assert check.version == 1
        body = json.loads(server.last_request.content)
        assert "version" not in body
        assert body["tags"] == [1]
