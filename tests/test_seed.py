"""Tests for the seeding routine."""

import asyncio
import json

import pytest

from personal_finance_api.app.core.config import settings
from personal_finance_api.app.core.db import ACCOUNTS, COLLECTIONS, GOALS, TAGS, TRANSACTIONS, USERS
from personal_finance_api.app.core.security import verify_password
from personal_finance_api.app.seed import SeedingError, load_fixture, seed_database
from personal_finance_api.app.services.goal_service import GoalsService


def run(coro):
    return asyncio.run(coro)


def counts(database):
    return {name: len(database[name].docs) for name in COLLECTIONS}


class TestSeedDatabase:

    def test_seeds_every_empty_collection(self, database):
        inserted = run(seed_database(database, settings.seed_data_dir))
        assert set(inserted) == set(COLLECTIONS)
        for name in COLLECTIONS:
            assert inserted[name] > 0
            assert len(database[name].docs) == inserted[name]

    def test_seeding_twice_leaves_counts_unchanged(self, database):
        run(seed_database(database, settings.seed_data_dir))
        first = counts(database)
        inserted = run(seed_database(database, settings.seed_data_dir))
        assert counts(database) == first
        assert all(n == 0 for n in inserted.values())

    def test_non_empty_collection_is_skipped(self, database):
        run(database[TAGS].insert_one({"name": "Existing"}))
        inserted = run(seed_database(database, settings.seed_data_dir))
        assert inserted[TAGS] == 0
        assert [d["name"] for d in database[TAGS].docs] == ["Existing"]
        assert inserted[GOALS] > 0

    def test_user_passwords_are_hashed(self, database):
        run(seed_database(database, settings.seed_data_dir))
        jane = next(d for d in database[USERS].docs if d["email"] == "jane@example.com")
        assert "password" not in jane
        assert verify_password("janepassword", jane["password_hash"])

    def test_seeded_goals_are_readable_per_user(self, database):
        run(seed_database(database, settings.seed_data_dir))
        goals = run(GoalsService(database).get_for_user("62a3f587102e921da1253d32"))
        assert sorted(g.name for g in goals) == ["House Down Payment", "Tesla Model Y"]

    def test_missing_fixture_raises(self, database, tmp_path):
        with pytest.raises(SeedingError):
            run(seed_database(database, str(tmp_path)))

    def test_failure_stops_before_later_collections(self, database, tmp_path):
        (tmp_path / f"{ACCOUNTS}.json").write_text("[]", encoding="utf-8")
        (tmp_path / f"{GOALS}.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(SeedingError):
            run(seed_database(database, str(tmp_path)))
        assert database[TRANSACTIONS].docs == []


class TestLoadFixture:

    def test_extended_json_is_parsed(self, tmp_path):
        (tmp_path / "Tags.json").write_text(
            json.dumps([{"_id": {"$oid": "62a3f66b102e921da1253d38"}, "name": "Groceries"}]),
            encoding="utf-8",
        )
        docs = load_fixture(tmp_path, TAGS)
        assert str(docs[0]["_id"]) == "62a3f66b102e921da1253d38"

    def test_non_array_is_rejected(self, tmp_path):
        (tmp_path / "Tags.json").write_text('{"name": "Groceries"}', encoding="utf-8")
        with pytest.raises(SeedingError):
            load_fixture(tmp_path, TAGS)

    def test_invalid_utf8_is_rejected(self, tmp_path):
        (tmp_path / "Tags.json").write_bytes(b'[{"name": "\xff\xfe"}]')
        with pytest.raises(SeedingError):
            load_fixture(tmp_path, TAGS)

    def test_non_string_user_password_is_rejected(self, tmp_path):
        (tmp_path / "Users.json").write_text(
            json.dumps([{"name": "Jane", "email": "jane@example.com", "password": 1234}]),
            encoding="utf-8",
        )
        with pytest.raises(SeedingError):
            load_fixture(tmp_path, USERS)
