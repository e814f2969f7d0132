async def send(client, headers, receiver_id, content):
    response = await client.post("/api/messages", json={"receiver_id": receiver_id, "content": content}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_conversation_is_symmetric_and_ordered(client, make_user):
    alice, alice_headers = await make_user("alice@example.com")
    bob, bob_headers = await make_user("bob@example.com")
    carol, carol_headers = await make_user("carol@example.com")

    sent = [
        await send(client, alice_headers, bob["id"], "Hey Bob!"),
        await send(client, bob_headers, alice["id"], "Hi Alice"),
        await send(client, alice_headers, bob["id"], "Ready for the lesson?"),
    ]
    await send(client, carol_headers, alice["id"], "Unrelated")
    await send(client, bob_headers, carol["id"], "Also unrelated")

    alice_view = (await client.get(f"/api/messages/{bob['id']}", headers=alice_headers)).json()
    bob_view = (await client.get(f"/api/messages/{alice['id']}", headers=bob_headers)).json()

    assert alice_view == bob_view
    assert [m["id"] for m in alice_view] == [m["id"] for m in sent]
    assert [m["content"] for m in alice_view] == ["Hey Bob!", "Hi Alice", "Ready for the lesson?"]
    timestamps = [m["created_at"] for m in alice_view]
    assert timestamps == sorted(timestamps)


async def test_message_fields(client, make_user):
    alice, alice_headers = await make_user("alice@example.com")
    bob, _ = await make_user("bob@example.com")

    message = await send(client, alice_headers, bob["id"], "Hello")

    assert message["sender_id"] == alice["id"]
    assert message["receiver_id"] == bob["id"]
    assert message["content"] == "Hello"
    assert message["created_at"]


async def test_messaging_does_not_require_a_swap(client, make_user):
    _, alice_headers = await make_user("alice@example.com")
    bob, _ = await make_user("bob@example.com")

    await send(client, alice_headers, bob["id"], "Cold message")


async def test_send_to_unknown_user(client, make_user):
    _, alice_headers = await make_user("alice@example.com")

    response = await client.post("/api/messages", json={"receiver_id": 999, "content": "Hello?"}, headers=alice_headers)
    assert response.status_code == 404


async def test_empty_content_is_rejected(client, make_user):
    _, alice_headers = await make_user("alice@example.com")
    bob, _ = await make_user("bob@example.com")

    response = await client.post("/api/messages", json={"receiver_id": bob["id"], "content": ""}, headers=alice_headers)
    assert response.status_code == 400


async def test_messages_require_authentication(client, make_user):
    bob, _ = await make_user("bob@example.com")

    assert (await client.get(f"/api/messages/{bob['id']}")).status_code == 401
    response = await client.post("/api/messages", json={"receiver_id": bob["id"], "content": "Hi"})
    assert response.status_code == 401
