"""Stats API: whole-table counts."""


async def test_empty_database_counts_zero(client):
    res = await client.get("/api/stats")
    assert res.status_code == 200
    assert res.json() == {"computers": 0, "users": 0, "maintenance": 0}


async def test_counts_match_inserted_rows(client, make_user, make_computer, make_log):
    for _ in range(3):
        await make_user()
    computers = [await make_computer() for _ in range(5)]
    for computer in computers[:2]:
        await make_log(computer["id"])

    res = await client.get("/api/stats")

    assert res.json() == {"users": 3, "computers": 5, "maintenance": 2}


async def test_counts_follow_cascade(client, make_computer, make_log):
    computer = await make_computer()
    await make_log(computer["id"])
    await client.delete(f"/api/computers/{computer['id']}")
    assert (await client.get("/api/stats")).json()["maintenance"] == 0
