"""Repositories against a real SQLite pool: None results, cascades, joins, counts."""

import datetime as dt

from inventory.services.computer_repository import ComputerRepository
from inventory.services.maintenance_repository import MaintenanceLogRepository
from inventory.services.stats_reporter import StatsReporter
from inventory.services.user_repository import UserRepository


def _user(email: str) -> dict:
    return {"name": "Pat", "email": email, "department": "IT", "position": "Tech"}


def _computer(hostname: str, **extra) -> dict:
    payload = {
        "hostname": hostname, "brand": "HP", "model": "EliteBook 840",
        "cpu": "Ryzen 7", "ram": 32, "storage": 1024, "os": "Ubuntu 24.04",
    }
    payload.update(extra)
    return payload


def _log(computer_id, day: dt.date, **extra) -> dict:
    payload = {
        "computer_id": computer_id, "date": day, "type": "Software",
        "description": "Patched OS", "technician": "Lee",
    }
    payload.update(extra)
    return payload


async def test_none_identifier_matches_nothing(db_manager):
    repo = UserRepository(db_manager)
    assert await repo.get(None) is None
    assert await repo.update(None, _user("x@example.com")) is None
    assert await repo.delete(None) is False


async def test_delete_missing_row_returns_false(db_manager):
    assert await ComputerRepository(db_manager).delete(12345) is False


async def test_user_delete_nullifies_computer_owner(db_manager):
    users = UserRepository(db_manager)
    computers = ComputerRepository(db_manager)
    owner = await users.create(_user("owner@example.com"))
    computer = await computers.create(_computer("PC-1", user_id=owner["id"]))

    assert await users.delete(owner["id"]) is True

    after = await computers.get(computer["id"])
    assert after is not None
    assert after["user_id"] is None


async def test_create_applies_defaults(db_manager):
    computer = await ComputerRepository(db_manager).create(
        _computer("PC-2", status="", user_id=0),
    )
    assert computer["status"] == "Active"
    assert computer["user_id"] is None

    log = await MaintenanceLogRepository(db_manager).create(
        _log(computer["id"], dt.date(2024, 5, 1)),
    )
    assert log["status"] == "Scheduled"
    assert log["date"] == dt.date(2024, 5, 1)


async def test_maintenance_listing_joins_hostname_and_orders(db_manager):
    computer = await ComputerRepository(db_manager).create(_computer("PC-3"))
    logs = MaintenanceLogRepository(db_manager)
    older = await logs.create(_log(computer["id"], dt.date(2024, 1, 1)))
    newer = await logs.create(_log(computer["id"], dt.date(2024, 2, 1)))
    same_day = await logs.create(_log(computer["id"], dt.date(2024, 2, 1)))

    rows = await logs.list_all()

    assert [r["id"] for r in rows] == [same_day["id"], newer["id"], older["id"]]
    assert {r["computer_hostname"] for r in rows} == {"PC-3"}


async def test_computer_delete_cascades(db_manager):
    computers = ComputerRepository(db_manager)
    logs = MaintenanceLogRepository(db_manager)
    computer = await computers.create(_computer("PC-4"))
    log = await logs.create(_log(computer["id"], dt.date(2024, 3, 3)))

    assert await computers.delete(computer["id"]) is True

    assert await logs.get(log["id"]) is None
    assert await logs.list_all() == []


async def test_stats_reporter_counts_each_table(db_manager):
    users = UserRepository(db_manager)
    computers = ComputerRepository(db_manager)
    await users.create(_user("a@example.com"))
    await users.create(_user("b@example.com"))
    pc = await computers.create(_computer("PC-5"))
    await MaintenanceLogRepository(db_manager).create(_log(pc["id"], dt.date(2024, 1, 9)))

    stats = await StatsReporter(db_manager).collect()

    assert stats == {"computers": 1, "users": 2, "maintenance": 1}
