"""Counting and activity queries, organization-wide and per creator."""

from datetime import datetime, timedelta

import pytest

from crm_backend.domain.models import Account, ActiveDeal, Contact, Lead
from crm_backend.infrastructure.repositories.metrics_repository import SQLAlchemyMetricsRepository

BASE = datetime(2026, 3, 1, 9, 0)


@pytest.fixture
def seeded(db_session):
    """Two owners: alice creates most records, bob a few."""
    db_session.add_all([
        Lead(first_name="Ada", last_name="Lovelace", status="new", created_by="alice", created_at=BASE),
        Lead(first_name="Alan", last_name="Turing", status="qualified", created_by="bob", created_at=BASE + timedelta(hours=1)),
        Account(account_name="Acme", status="active", created_by="alice", created_at=BASE + timedelta(hours=2)),
        ActiveDeal(deal_name="Acme renewal", stage="negotiation", created_by="alice", created_at=BASE + timedelta(hours=3)),
        ActiveDeal(deal_name="Globex pilot", stage="proposal", created_by="bob", created_at=BASE + timedelta(hours=4)),
        Contact(first_name="Grace", last_name="Hopper", created_by="alice", created_at=BASE + timedelta(hours=5)),
        Contact(first_name="Linus", last_name="T", created_by="alice", created_at=BASE + timedelta(hours=6)),
    ])
    db_session.commit()
    return SQLAlchemyMetricsRepository(db_session)


def test_unscoped_counts_cover_every_row(seeded):
    assert seeded.count_leads() == 2
    assert seeded.count_accounts() == 1
    assert seeded.count_deals() == 2
    assert seeded.count_contacts() == 2


def test_scoped_counts_only_include_the_creator(seeded):
    assert seeded.count_leads("bob") == 1
    assert seeded.count_accounts("bob") == 0
    assert seeded.count_deals("bob") == 1
    assert seeded.count_contacts("bob") == 0


def test_counts_on_empty_tables_are_zero(db_session):
    repo = SQLAlchemyMetricsRepository(db_session)

    assert repo.count_leads() == 0
    assert repo.recent_activities() == []


def test_recent_activities_merge_entities_newest_first(seeded):
    rows = seeded.recent_activities()

    assert [r["type"] for r in rows] == ["deal", "deal", "account", "lead", "lead"]
    assert rows[0]["name"] == "Globex pilot"
    assert rows[0]["status"] == "proposal"
    assert rows[-1]["name"] == "Ada Lovelace"
    assert rows[-1]["status"] == "new"


def test_recent_activities_exclude_contacts(seeded):
    assert "contact" not in {r["type"] for r in seeded.recent_activities()}


def test_recent_activities_are_scoped(seeded):
    rows = seeded.recent_activities("bob")

    assert [(r["type"], r["name"]) for r in rows] == [("deal", "Globex pilot"), ("lead", "Alan Turing")]


def test_recent_activities_respect_limit(db_session):
    db_session.add_all(
        Lead(first_name=f"Lead{i}", last_name="X", status="new", created_by="alice", created_at=BASE + timedelta(minutes=i))
        for i in range(15)
    )
    db_session.commit()

    rows = SQLAlchemyMetricsRepository(db_session).recent_activities(limit=10)

    assert len(rows) == 10
    assert rows[0]["name"] == "Lead14 X"
