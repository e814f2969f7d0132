from conftest import login


async def test_get_user_profile(client, make_user):
    user, _ = await make_user("alice@example.com", bio="Developer", availability="Weekends")

    response = await client.get(f"/api/users/{user['id']}")
    assert response.status_code == 200
    body = response.json()
    assert body["bio"] == "Developer"
    assert body["availability"] == "Weekends"
    assert "hashed_password" not in body


async def test_get_unknown_user(client):
    response = await client.get("/api/users/999")
    assert response.status_code == 404


async def test_update_own_profile(client, make_user):
    user, headers = await make_user("alice@example.com")

    response = await client.patch(
        f"/api/users/{user['id']}",
        json={"bio": "Now teaching React", "location": "Berlin"},
        headers=headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["bio"] == "Now teaching React"
    assert body["location"] == "Berlin"
    assert body["name"] == user["name"]


async def test_update_password(client, make_user):
    user, headers = await make_user("alice@example.com")

    response = await client.patch(f"/api/users/{user['id']}", json={"password": "s3cret"}, headers=headers)
    assert response.status_code == 200

    bad = await client.post("/api/login", json={"username": "alice@example.com", "password": "password123"})
    assert bad.status_code == 401
    await login(client, "alice@example.com", password="s3cret")


async def test_update_other_profile_is_forbidden(client, make_user):
    alice, _ = await make_user("alice@example.com")
    _, bob_headers = await make_user("bob@example.com")

    response = await client.patch(f"/api/users/{alice['id']}", json={"bio": "hacked"}, headers=bob_headers)
    assert response.status_code == 403


async def test_update_requires_authentication(client, make_user):
    alice, _ = await make_user("alice@example.com")

    response = await client.patch(f"/api/users/{alice['id']}", json={"bio": "anonymous"})
    assert response.status_code == 401


async def test_update_to_taken_username(client, make_user):
    alice, headers = await make_user("alice@example.com")
    await make_user("bob@example.com")

    response = await client.patch(f"/api/users/{alice['id']}", json={"username": "bob@example.com"}, headers=headers)
    assert response.status_code == 400
