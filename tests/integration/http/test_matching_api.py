from __future__ import annotations

from uuid import uuid4


async def test_matches_for_ewe(client, auth_headers, create_sheep):
    mother = await create_sheep(tagNumber="1", birthDate="2019-01-01", fertility="B+")
    ewe = await create_sheep(
        tagNumber="2", birthDate="2021-01-01", fertility="BB", mother=mother["id"]
    )
    await create_sheep(tagNumber="3", gender="male", birthDate="2020-01-01", fertility="BB")
    await create_sheep(
        tagNumber="4",
        gender="male",
        birthDate="2021-01-01",
        fertility="BB",
        mother=mother["id"],
    )

    response = await client.get(f"/api/v1/matching/{ewe['id']}", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert body["results"] == 2
    best, sibling = body["data"]["matches"]
    assert best["sheep"]["tagNumber"] == "M0003"
    assert best["isCompatible"] is True
    assert best["score"] == 130
    assert best["recommendation"] == "Best choice"
    assert best["expectedLitterSize"] == 2.5
    assert best["fertility1"] == "BB"
    assert best["fertility2"] == "BB"
    assert sibling["sheep"]["tagNumber"] == "M0004"
    assert sibling["isCompatible"] is False
    assert sibling["score"] == 0
    assert "Blocked: siblings (same mother)" in sibling["reasons"]


async def test_matches_for_unknown_sheep(client, auth_headers):
    response = await client.get(f"/api/v1/matching/{uuid4()}", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Sheep not found"


async def test_stats(client, auth_headers, create_sheep):
    empty = await client.get("/api/v1/matching/stats", headers=auth_headers)
    assert empty.status_code == 200
    assert empty.json()["data"]["stats"] == {
        "totalMales": 0,
        "totalFemales": 0,
        "malesWithOffspring": 0,
        "femalesWithOffspring": 0,
        "breedingAgeMales": 0,
        "breedingAgeFemales": 0,
        "totalPairs": 0,
        "growthPotential": 0.0,
    }

    ram = await create_sheep(tagNumber="1", gender="male", fertility="AA")
    ewe = await create_sheep(tagNumber="2", gender="female", fertility="AA")
    await create_sheep(
        tagNumber="3", birthDate="2024-01-01", mother=ewe["id"], father=ram["id"]
    )

    response = await client.get("/api/v1/matching/stats", headers=auth_headers)
    stats = response.json()["data"]["stats"]
    assert stats["totalMales"] == 1
    assert stats["totalFemales"] == 2
    assert stats["malesWithOffspring"] == 1
    assert stats["femalesWithOffspring"] == 1
    assert stats["totalPairs"] == 2
    assert stats["growthPotential"] == 3.2
