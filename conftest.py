import copy
import itertools
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, func, select
from sqlalchemy.pool import StaticPool

from main import app
from mailchimp_proxy.core.dependencies import get_list_repo, get_list_service, get_member_service
from mailchimp_proxy.repositories import ListRepository, MemberRepository, create_schema
from mailchimp_proxy.services.list_service import ListService
from mailchimp_proxy.services.mailchimp_client import MailChimpClient
from mailchimp_proxy.services.member_service import MemberService
from testdata import LIST_DATA, MEMBER_DATA


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False},
    )
    create_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def row_count(engine):
    def count(table):
        with engine.connect() as conn:
            return conn.execute(select(func.count()).select_from(table)).scalar()
    return count


@pytest.fixture
def mailchimp():
    """MailChimp client double: every POST gets a fresh remote id."""
    ids = itertools.count(1)
    client = MagicMock(spec=MailChimpClient)
    client.post.side_effect = lambda path, body: {"id": f"mc-{next(ids)}"}
    client.patch.return_value = {}
    client.delete.return_value = {}
    return client


@pytest.fixture
def list_repo(engine):
    return ListRepository(engine)


@pytest.fixture
def member_repo(engine):
    return MemberRepository(engine)


@pytest.fixture
def list_service(list_repo, mailchimp):
    return ListService(list_repo, mailchimp)


@pytest.fixture
def member_service(member_repo, list_service, mailchimp):
    return MemberService(member_repo, list_service, mailchimp)


@pytest.fixture
def client(list_repo, list_service, member_service):
    app.dependency_overrides[get_list_repo] = lambda: list_repo
    app.dependency_overrides[get_list_service] = lambda: list_service
    app.dependency_overrides[get_member_service] = lambda: member_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def list_data():
    return copy.deepcopy(LIST_DATA)


@pytest.fixture
def member_data():
    return copy.deepcopy(MEMBER_DATA)


@pytest.fixture
def created_list(list_service, list_data):
    """A list saved locally and on (the mocked) MailChimp."""
    return list_service.create(list_data)
