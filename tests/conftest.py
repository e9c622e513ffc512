"""Shared fixtures: an in-memory stand-in for the Supabase query builder."""
from types import SimpleNamespace

import pytest

from report_dashboard.config import DashboardConfig


class FakeQuery:
    def __init__(self, client, name, data):
        self.client = client
        self.name = name
        self.data = data
        self.calls = []

    def _record(self, method, *args, **kwargs):
        self.calls.append((method, args, kwargs))
        return self

    def select(self, *a, **kw):
        return self._record("select", *a, **kw)

    def eq(self, *a, **kw):
        return self._record("eq", *a, **kw)

    def in_(self, *a, **kw):
        return self._record("in_", *a, **kw)

    def order(self, *a, **kw):
        return self._record("order", *a, **kw)

    def limit(self, *a, **kw):
        return self._record("limit", *a, **kw)

    def update(self, *a, **kw):
        return self._record("update", *a, **kw)

    def execute(self):
        if self.client.fail:
            raise RuntimeError(f"boom on {self.name}")
        return SimpleNamespace(data=self.data)


class FakeClient:
    def __init__(self, tables=None, rpcs=None, fail=False):
        self.tables = tables or {}
        self.rpcs = rpcs or {}
        self.fail = fail
        self.queries = []
        self.rpc_calls = []

    def table(self, name):
        query = FakeQuery(self, name, self.tables.get(name, []))
        self.queries.append(query)
        return query

    def rpc(self, name, params):
        self.rpc_calls.append((name, params))
        query = FakeQuery(self, name, self.rpcs.get(name, []))
        self.queries.append(query)
        return query

    def last(self, name):
        return [q for q in self.queries if q.name == name][-1]


@pytest.fixture
def fake_client_factory():
    return FakeClient


@pytest.fixture
def config():
    return DashboardConfig(supabase_url="https://demo.supabase.co", supabase_key="anon",
                           user_id="user-1")


ORGS = [{"id": "o1", "name": "Альфа"}, {"id": "o2", "name": "Бета"}]


@pytest.fixture
def orgs():
    return [dict(o) for o in ORGS]


@pytest.fixture
def membership_rows():
    return [{"organizations": dict(o)} for o in ORGS]
