from unittest.mock import patch

import pytest
from httpx import AsyncClient

from fleet_service.core.exceptions import StorageError
from fleet_service.crud import satellites
from fleet_service.models import Satellite

api_url_prefix = "/api/satellites"


def get_satellite_payload(
    name: str = "GMVSAT",
    slug: str = "GMV Satellite",
    longitude: float = 45,
    **overrides,
) -> dict:
    payload = {
        "name": name,
        "slug": slug,
        "company": "GMV",
        "createdBy": "operator",
        "orbit": {"longitude": longitude},
    }
    payload.update(overrides)
    return payload


async def create_satellite(async_client: AsyncClient, **payload_overrides) -> dict:
    response = await async_client.post(
        api_url_prefix, json=get_satellite_payload(**payload_overrides)
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture()
async def created_satellite(async_client: AsyncClient):
    return await create_satellite(async_client)


@pytest.mark.anyio
async def test_create_satellite(async_client: AsyncClient):
    response = await async_client.post(api_url_prefix, json=get_satellite_payload())
    assert response.status_code == 201
    body = response.json()
    assert {
        "name": "GMVSAT",
        "slug": "GMV Satellite",
        "status": "active",
        "company": "GMV",
        "createdBy": "operator",
        "updatedBy": None,
        "creationOrigin": "inventory",
        "deleted": False,
        "deletedAt": None,
        "deletionOrigin": None,
    }.items() <= body.items()
    assert body["orbit"] == {
        "longitude": 45,
        "latitude": 0,
        "inclination": 0,
        "height": 35786.063,
    }
    assert body["id"]
    assert body["createdAt"] and body["updatedAt"]


@pytest.mark.anyio
async def test_created_satellite_identity_is_stable(
    async_client: AsyncClient, created_satellite: dict
):
    response = await async_client.get(
        f"{api_url_prefix}/id/{created_satellite['id']}", params={"detailed": True}
    )
    assert response.status_code == 200
    fetched = response.json()
    for field in ("id", "name", "slug"):
        assert fetched[field] == created_satellite[field]


@pytest.mark.anyio
async def test_create_satellite_trims_name(async_client: AsyncClient):
    satellite = await create_satellite(async_client, name="  GMVSAT  ")
    assert satellite["name"] == "GMVSAT"


@pytest.mark.anyio
@pytest.mark.parametrize(
    "payload",
    [
        get_satellite_payload(name=""),
        {"slug": "GMV Satellite", "orbit": {"longitude": 45}},
        {"name": "GMVSAT", "slug": "GMV Satellite"},
        get_satellite_payload(orbit={}),
        get_satellite_payload(name=1234),
        get_satellite_payload(orbit="geostationary"),
        get_satellite_payload(longitude="45"),
        get_satellite_payload(name="GMV_SAT!"),
        get_satellite_payload(slug="  a "),
        get_satellite_payload(longitude=181),
        get_satellite_payload(orbit={"longitude": 45, "latitude": -91}),
        get_satellite_payload(orbit={"longitude": 45, "height": 0}),
        get_satellite_payload(status="retired"),
        get_satellite_payload(creationOrigin="unknown"),
    ],
)
async def test_create_satellite_invalid_payload(
    async_client: AsyncClient, payload: dict
):
    response = await async_client.post(api_url_prefix, json=payload)
    assert response.status_code == 400
    assert "error" in response.json()


@pytest.mark.anyio
async def test_create_satellite_duplicate_name(
    async_client: AsyncClient, created_satellite: dict
):
    response = await async_client.post(
        api_url_prefix, json=get_satellite_payload(slug="Another Satellite")
    )
    assert response.status_code == 409
    assert "already exists" in response.json()["error"]


@pytest.mark.anyio
async def test_create_satellite_duplicate_slug(
    async_client: AsyncClient, created_satellite: dict
):
    response = await async_client.post(
        api_url_prefix, json=get_satellite_payload(name="OTHERSAT")
    )
    assert response.status_code == 409


@pytest.mark.anyio
async def test_name_is_reusable_after_soft_delete(
    async_client: AsyncClient, created_satellite: dict
):
    response = await async_client.delete(
        f"{api_url_prefix}/id/{created_satellite['id']}"
    )
    assert response.status_code == 200

    response = await async_client.post(api_url_prefix, json=get_satellite_payload())
    assert response.status_code == 201
    assert response.json()["id"] != created_satellite["id"]


@pytest.mark.anyio
async def test_list_satellites_empty(async_client: AsyncClient):
    response = await async_client.get(api_url_prefix)
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.anyio
async def test_list_satellites_summary(
    async_client: AsyncClient, created_satellite: dict
):
    response = await async_client.get(api_url_prefix, params={"detailed": "false"})
    assert response.status_code == 200
    satellites_out = response.json()
    assert len(satellites_out) == 1
    assert set(satellites_out[0]) == {"id", "name", "slug", "orbit"}


@pytest.mark.anyio
async def test_list_satellites_detailed(
    async_client: AsyncClient, created_satellite: dict
):
    response = await async_client.get(api_url_prefix, params={"detailed": "true"})
    assert response.status_code == 200
    satellite = response.json()[0]
    assert {
        "status",
        "company",
        "createdAt",
        "updatedAt",
        "deleted",
        "deletedAt",
        "deletionOrigin",
    } <= set(satellite)


@pytest.mark.anyio
async def test_list_satellites_hides_soft_deleted(async_client: AsyncClient):
    first = await create_satellite(async_client)
    await create_satellite(async_client, name="SECONDSAT", slug="Second Satellite")
    await async_client.delete(f"{api_url_prefix}/id/{first['id']}")

    response = await async_client.get(api_url_prefix)
    assert [s["name"] for s in response.json()] == ["SECONDSAT"]


@pytest.mark.anyio
async def test_get_satellite_by_name(
    async_client: AsyncClient, created_satellite: dict
):
    response = await async_client.get(f"{api_url_prefix}/name/GMVSAT")
    assert response.status_code == 200
    assert response.json()["id"] == created_satellite["id"]


@pytest.mark.anyio
async def test_get_satellite_id_by_name(
    async_client: AsyncClient, created_satellite: dict
):
    response = await async_client.get(f"{api_url_prefix}/name/GMVSAT/id")
    assert response.status_code == 200
    assert response.json() == {"id": created_satellite["id"]}


@pytest.mark.anyio
async def test_get_satellite_not_exists(async_client: AsyncClient):
    response = await async_client.get(f"{api_url_prefix}/id/12344")
    assert response.status_code == 404
    assert response.json() == {"error": "Satellite not found"}

    response = await async_client.get(f"{api_url_prefix}/name/NOSAT/id")
    assert response.status_code == 404


@pytest.mark.anyio
async def test_update_satellite_latitude_out_of_range(
    async_client: AsyncClient, created_satellite: dict
):
    response = await async_client.put(
        f"{api_url_prefix}/id/{created_satellite['id']}",
        json={"orbit": {"latitude": 95}},
    )
    assert response.status_code == 400


@pytest.mark.anyio
async def test_update_satellite_latitude(
    async_client: AsyncClient, created_satellite: dict
):
    response = await async_client.put(
        f"{api_url_prefix}/id/{created_satellite['id']}",
        json={"orbit": {"latitude": 45}, "updatedBy": "flight dynamics"},
    )
    assert response.status_code == 200
    assert response.json()["orbit"]["latitude"] == 45
    assert response.json()["orbit"]["longitude"] == 45
    assert response.json()["updatedBy"] == "flight dynamics"

    response = await async_client.get(f"{api_url_prefix}/id/{created_satellite['id']}")
    assert response.json()["orbit"] == {
        "longitude": 45,
        "latitude": 45,
        "inclination": 0,
        "height": 35786.063,
    }


@pytest.mark.anyio
async def test_update_satellite_by_name(
    async_client: AsyncClient, created_satellite: dict
):
    response = await async_client.put(
        f"{api_url_prefix}/name/GMVSAT",
        json={"name": "GMVSAT", "status": "inactive"},
    )
    assert response.status_code == 200
    assert response.json()["status"] == "inactive"


@pytest.mark.anyio
@pytest.mark.parametrize(
    "patch_body",
    [
        {"name": "NEWSAT"},
        {"slug": "New Satellite"},
        {"id": "d1b0c7f2-0000-4000-8000-000000000000"},
    ],
)
async def test_update_satellite_immutable_fields(
    async_client: AsyncClient, created_satellite: dict, patch_body: dict
):
    response = await async_client.put(
        f"{api_url_prefix}/id/{created_satellite['id']}", json=patch_body
    )
    assert response.status_code == 409
    assert "immutable" in response.json()["error"]


@pytest.mark.anyio
async def test_update_satellite_null_immutable_fields_are_ignored(
    async_client: AsyncClient, created_satellite: dict
):
    response = await async_client.put(
        f"{api_url_prefix}/id/{created_satellite['id']}",
        json={"id": None, "name": None, "company": "Hispasat"},
    )
    assert response.status_code == 200
    assert response.json()["name"] == created_satellite["name"]
    assert response.json()["company"] == "Hispasat"


@pytest.mark.anyio
async def test_update_satellite_not_exists(async_client: AsyncClient):
    response = await async_client.put(
        f"{api_url_prefix}/id/12344", json={"status": "inactive"}
    )
    assert response.status_code == 404


@pytest.mark.anyio
async def test_delete_satellite(
    async_client: AsyncClient, created_satellite: dict, db_session
):
    response = await async_client.delete(
        f"{api_url_prefix}/id/{created_satellite['id']}"
    )
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Satellite has been soft deleted"
    assert body["satellite"]["deleted"] is True
    assert body["satellite"]["deletionOrigin"] == "manual"
    assert body["satellite"]["deletedAt"] is not None

    response = await async_client.get(f"{api_url_prefix}/id/{created_satellite['id']}")
    assert response.status_code == 404

    # the row is kept for audit
    assert db_session.get(Satellite, created_satellite["id"]) is not None


@pytest.mark.anyio
async def test_delete_satellite_twice(
    async_client: AsyncClient, created_satellite: dict
):
    url = f"{api_url_prefix}/id/{created_satellite['id']}"
    assert (await async_client.delete(url)).status_code == 200
    assert (await async_client.delete(url)).status_code == 404


@pytest.mark.anyio
async def test_update_soft_deleted_satellite(
    async_client: AsyncClient, created_satellite: dict
):
    url = f"{api_url_prefix}/id/{created_satellite['id']}"
    await async_client.delete(url)
    response = await async_client.put(url, json={"status": "inactive"})
    assert response.status_code == 404


@pytest.mark.anyio
async def test_list_satellites_storage_failure(async_client: AsyncClient):
    with patch.object(
        satellites, "find_many", side_effect=StorageError("database is down")
    ):
        response = await async_client.get(api_url_prefix)
    assert response.status_code == 500
    assert response.json() == {"error": "database is down"}


@pytest.mark.anyio
@pytest.mark.parametrize(
    "orbit",
    [
        '{"longitude": 45, "height": Infinity}',
        '{"longitude": NaN}',
        '{"longitude": 45, "inclination": NaN}',
        '{"longitude": 45, "latitude": -Infinity}',
    ],
)
async def test_create_satellite_rejects_non_finite_numbers(
    async_client: AsyncClient, orbit: str
):
    body = f'{{"name": "GMVSAT", "slug": "GMV Satellite", "orbit": {orbit}}}'
    response = await async_client.post(
        api_url_prefix,
        content=body.encode(),
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert "finite number" in response.json()["error"]

    listed = await async_client.get(api_url_prefix)
    assert listed.status_code == 200
    assert listed.json() == []


@pytest.mark.anyio
async def test_update_satellite_rejects_infinite_height(
    async_client: AsyncClient, created_satellite: dict
):
    response = await async_client.put(
        f"{api_url_prefix}/id/{created_satellite['id']}",
        content=b'{"orbit": {"height": Infinity}}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400

    fetched = await async_client.get(
        f"{api_url_prefix}/id/{created_satellite['id']}", params={"detailed": True}
    )
    assert fetched.json()["orbit"]["height"] == 35786.063
