"""Data access against a fake Supabase client."""
import pytest

import supabase_loader as sl
from report_dashboard.config import DashboardConfig


def test_get_client_requires_credentials():
    with pytest.raises(sl.DataSourceError):
        sl.get_client(DashboardConfig())


def test_user_organizations_unwrap_embedded_relation(fake_client_factory, membership_rows):
    client = fake_client_factory(tables={"organization_members": membership_rows + [{"organizations": None}]})
    orgs = sl.load_user_organizations(client, "user-1")
    assert orgs == [{"id": "o1", "name": "Альфа"}, {"id": "o2", "name": "Бета"}]
    assert ("eq", ("user_id", "user-1"), {}) in client.last("organization_members").calls


def test_no_user_means_no_organizations(fake_client_factory):
    client = fake_client_factory()
    assert sl.load_user_organizations(client, "") == []
    assert client.queries == []


def test_report_items_tagged_with_organization_name(fake_client_factory):
    client = fake_client_factory(tables={
        "report_metadata": [
            {"id": "r1", "organization_id": "o1", "organizations": {"name": "Альфа"}},
            {"id": "r2", "organization_id": "o2", "organizations": None},
        ],
        "debt_reports_items": [
            {"id": "a", "report_id": "r1", "client_name": "Итого"},
            {"id": "b", "report_id": "r2", "client_name": "Итого"},
        ],
    })
    items = sl.load_report_items(client, ["o1", "o2"], "debt", "2025-01-31")
    assert [i["organization_name"] for i in items] == ["Альфа", sl.UNKNOWN_ORG]

    meta_calls = client.last("report_metadata").calls
    assert ("in_", ("organization_id", ["o1", "o2"]), {}) in meta_calls
    assert ("eq", ("report_type", "debt"), {}) in meta_calls
    item_calls = client.last("debt_reports_items").calls
    assert ("in_", ("report_id", ["r1", "r2"]), {}) in item_calls
    assert [c[1][0] for c in item_calls if c[0] == "order"] == ["level", "client_name"]


def test_missing_report_returns_none(fake_client_factory):
    client = fake_client_factory(tables={"report_metadata": []})
    assert sl.load_report_items(client, ["o1"], "cash_bank", "2025-01-31") is None
    assert sl.load_report_items(client, [], "cash_bank", "2025-01-31") is None
    assert sl.load_report_items(client, ["o1"], "cash_bank", "") is None


def test_platform_errors_raise_data_source_error(fake_client_factory):
    client = fake_client_factory(fail=True)
    with pytest.raises(sl.DataSourceError):
        sl.load_report_items(client, ["o1"], "cash_bank", "2025-01-31")


def test_dashboard_summary_and_dynamics_rpcs(fake_client_factory):
    client = fake_client_factory(rpcs={
        "get_cash_bank_dashboard_summary": [{"total_balance_current": 42}],
        "get_cash_flow_dynamics": [{"report_day": "2025-01-30", "total_balance": 1}],
    })
    assert sl.load_dashboard_summary(client, "cash_bank", "2025-01-31") == {"total_balance_current": 42}
    assert sl.load_dashboard_summary(client, "debt", "2025-01-31") is None
    points = sl.load_cash_dynamics(client, ["o1"], "2025-01-01", "2025-01-31")
    assert points == [{"report_day": "2025-01-30", "total_balance": 1}]
    assert client.rpc_calls[-1] == ("get_cash_flow_dynamics", {
        "p_organization_ids": ["o1"], "p_start_date": "2025-01-01", "p_end_date": "2025-01-31",
    })


def test_user_settings_roundtrip_queries(fake_client_factory):
    client = fake_client_factory(tables={"profiles": [{"settings": {"dashboard": {}}}]})
    assert sl.load_user_settings(client, "user-1") == {"dashboard": {}}
    sl.save_user_settings(client, "user-1", {"dashboard": {"widgetOrder": []}})
    update_calls = client.last("profiles").calls
    assert update_calls[0] == ("update", ({"settings": {"dashboard": {"widgetOrder": []}}},), {})
    with pytest.raises(sl.DataSourceError):
        sl.save_user_settings(client, "", {})
