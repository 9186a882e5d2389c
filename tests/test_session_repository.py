"""Session ledger behaviour."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select

from crm_backend.core.ids import generate_id
from crm_backend.domain.models.session import AuthSession
from crm_backend.infrastructure.repositories.session_repository import (
    SQLAlchemySessionRepository,
    token_digest,
)


@pytest.fixture
def repo(db_session):
    return SQLAlchemySessionRepository(db_session)


@pytest.fixture
def user(make_user):
    return make_user("ledger@x.com", "pw")


def _expiry(hours=24):
    return datetime.now(timezone.utc) + timedelta(hours=hours)


def _active_rows(db_session, user_id):
    db_session.expire_all()
    stmt = select(AuthSession).where(AuthSession.user_id == user_id, AuthSession.is_active.is_(True))
    return list(db_session.scalars(stmt))


def test_create_stores_token_digest_not_token(repo, user):
    session = repo.create(generate_id("sess"), user.id, "raw-token", _expiry(), "10.0.0.1", "pytest")

    assert session.is_active is True
    assert session.token_hash == token_digest("raw-token")
    assert session.token_hash != "raw-token"
    assert session.ip_address == "10.0.0.1"


def test_deactivate_all_active_is_idempotent(repo, user, db_session):
    repo.create(generate_id("sess"), user.id, "t1", _expiry())
    repo.create(generate_id("sess"), user.id, "t2", _expiry())

    assert repo.deactivate_all_active(user.id) == 2
    assert repo.deactivate_all_active(user.id) == 0
    assert _active_rows(db_session, user.id) == []


def test_deactivate_only_touches_the_given_user(repo, user, make_user, db_session):
    other = make_user("other@x.com", "pw")
    repo.create(generate_id("sess"), user.id, "t1", _expiry())
    repo.create(generate_id("sess"), other.id, "t2", _expiry())

    repo.deactivate_all_active(user.id)

    assert len(_active_rows(db_session, other.id)) == 1


def test_replace_active_leaves_exactly_one_active_row(repo, user, db_session):
    for token in ("t1", "t2", "t3"):
        repo.replace_active(generate_id("sess"), user.id, token, _expiry())

    active = _active_rows(db_session, user.id)
    assert len(active) == 1
    assert active[0].token_hash == token_digest("t3")
    assert len(repo.list_for_user(user.id)) == 3


def test_get_active_by_token(repo, user):
    now = datetime.now(timezone.utc)
    repo.replace_active(generate_id("sess"), user.id, "old", _expiry())
    repo.replace_active(generate_id("sess"), user.id, "new", _expiry())

    assert repo.get_active_by_token("new", now).user_id == user.id
    assert repo.get_active_by_token("old", now) is None
    assert repo.get_active_by_token("unknown", now) is None


def test_get_active_by_token_ignores_expired_rows(repo, user):
    repo.create(generate_id("sess"), user.id, "stale", _expiry(hours=-1))

    assert repo.get_active_by_token("stale", datetime.now(timezone.utc)) is None
