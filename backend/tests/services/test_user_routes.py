"""User Routes — /api/v1/users has no references, only CRUD and shape checks."""

from uuid import uuid4

from tracker.models import User

ENDPOINT = "/api/v1/users"


async def test_post_creates_user(client, count):
    res = await client.post(ENDPOINT, json={
        "name": "Grace Hopper", "email": "grace@example.com", "phone": "555-0100",
    })

    assert res.status_code == 201
    data = res.json()["data"]
    assert data["name"] == "Grace Hopper"
    assert data["phone"] == "555-0100"
    assert "id" in data
    assert await count(User) == 1


async def test_post_invalid_email_is_400(client):
    res = await client.post(ENDPOINT, json={"name": "x", "email": "not-an-email"})
    assert res.status_code == 400
    fields = [d["field"] for d in res.json()["error"]["details"]]
    assert any("email" in f for f in fields)


async def test_list_users(client, make_user):
    await make_user()
    await make_user()

    res = await client.get(ENDPOINT)

    assert res.status_code == 200
    assert len(res.json()["data"]) == 2


async def test_patch_phone_only(client, make_user, fetch):
    user = await make_user(phone="1")

    res = await client.patch(f"{ENDPOINT}/{user.id}", json={"phone": "2"})

    assert res.status_code == 200
    stored = await fetch(User, user.id)
    assert stored.phone == "2"
    assert stored.email == user.email


async def test_patch_phone_to_null_clears_it(client, make_user, fetch):
    user = await make_user(phone="1")

    res = await client.patch(f"{ENDPOINT}/{user.id}", json={"phone": None})

    assert res.status_code == 200
    assert (await fetch(User, user.id)).phone is None


async def test_put_replaces_user(client, make_user, fetch):
    user = await make_user(phone="1")

    res = await client.put(f"{ENDPOINT}/{user.id}", json={
        "name": "New", "email": "new@example.com",
    })

    assert res.status_code == 200
    stored = await fetch(User, user.id)
    assert stored.name == "New"
    assert stored.phone is None


async def test_delete_user_then_get_is_404(client, make_user):
    user = await make_user()

    res = await client.delete(f"{ENDPOINT}/{user.id}")

    assert res.status_code == 200
    assert res.json()["data"]["email"] == user.email
    assert (await client.get(f"{ENDPOINT}/{user.id}")).status_code == 404


async def test_delete_member_leaves_membership_row(
    client, make_user, make_team, members_of,
):
    user = await make_user()
    team = await make_team(members=[user.id])

    assert (await client.delete(f"{ENDPOINT}/{user.id}")).status_code == 200

    assert await members_of(team.id) == {user.id}


async def test_malformed_id_is_400(client):
    res = await client.get(f"{ENDPOINT}/not-a-uuid")
    assert res.status_code == 400


async def test_missing_user_returns_404(client):
    res = await client.get(f"{ENDPOINT}/{uuid4()}")
    assert res.status_code == 404
    assert res.json()["error"]["category"] == "resource_not_found"


async def test_patch_blank_name_is_400(client, make_user, fetch):
    user = await make_user(name="Ada")

    res = await client.patch(f"{ENDPOINT}/{user.id}", json={"name": "   "})

    assert res.status_code == 400
    assert (await fetch(User, user.id)).name == "Ada"


async def test_patch_name_is_trimmed(client, make_user, fetch):
    user = await make_user(name="Ada")

    res = await client.patch(f"{ENDPOINT}/{user.id}", json={"name": "  Grace "})

    assert res.status_code == 200
    assert (await fetch(User, user.id)).name == "Grace"
