from __future__ import annotations


async def test_update_profile(client, auth_headers):
    response = await client.put(
        "/api/v1/users/profile",
        json={"farmName": "Hill Top", "email": "NEW@example.com"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    user = response.json()["data"]["user"]
    assert user["farmName"] == "Hill Top"
    assert user["email"] == "new@example.com"


async def test_update_profile_email_taken(client, auth_headers, signup_user):
    await signup_user("neighbour")

    response = await client.put(
        "/api/v1/users/profile",
        json={"email": "neighbour@example.com"},
        headers=auth_headers,
    )

    assert response.status_code == 409
    assert response.json()["message"] == "Email already in use"


async def test_update_profile_with_own_email_is_a_no_op(client, auth_headers):
    response = await client.put(
        "/api/v1/users/profile",
        json={"email": "shepherd@example.com"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["data"]["user"]["email"] == "shepherd@example.com"
