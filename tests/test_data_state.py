"""ReportService: live rows, sample fallback and error handling."""
from dataclasses import replace

import pytest

from report_dashboard.data_state import (
    SOURCE_EMPTY,
    SOURCE_LIVE,
    SOURCE_SAMPLE,
    ReportService,
)
from report_dashboard.hierarchy import CONSOLIDATED_ID
from report_dashboard.state import ReportContext

DATE = "2025-01-31"


def live_tables(membership_rows):
    return {
        "organization_members": membership_rows,
        "report_metadata": [
            {"id": "r1", "organization_id": "o1", "organizations": {"name": "Альфа"}},
            {"id": "r2", "organization_id": "o2", "organizations": {"name": "Бета"}},
        ],
        "cash_bank_report_items": [
            {"id": "t1", "report_id": "r1", "parent_id": None, "account_name": "Итого",
             "balance_current": 100, "balance_start": 90, "income_amount": 20,
             "expense_amount": 10, "level": 0, "is_total_row": True},
            {"id": "b1", "report_id": "r1", "parent_id": "t1", "account_name": "Сбербанк",
             "balance_current": 100, "level": 2},
            {"id": "t2", "report_id": "r2", "parent_id": None, "account_name": "Итого",
             "balance_current": 50, "balance_start": 50, "income_amount": 0,
             "expense_amount": 0, "level": 0, "is_total_row": True},
        ],
    }


@pytest.fixture
def ctx(orgs):
    return ReportContext(report_date=DATE, organizations=orgs)


def test_live_rows_for_all_organizations_are_consolidated(config, fake_client_factory,
                                                          membership_rows, ctx):
    service = ReportService(config, fake_client_factory(tables=live_tables(membership_rows)))
    view = service.report_view(ctx, "cash_bank")
    assert view.source == SOURCE_LIVE
    assert view.error is None
    assert [n["id"] for n in view.nodes] == [CONSOLIDATED_ID]
    total = view.nodes[0]
    assert total["balance_current"] == 150
    assert [c["account_name"] for c in total["children"]] == ["Альфа - Итого", "Бета - Итого"]
    assert view.options == ["Сбербанк"]
    assert CONSOLIDATED_ID in view.expanded


def test_single_organization_is_not_consolidated(config, fake_client_factory,
                                                 membership_rows, ctx):
    service = ReportService(config, fake_client_factory(tables=live_tables(membership_rows)))
    view = service.report_view(ctx.with_org("o1"), "cash_bank")
    assert CONSOLIDATED_ID not in [n["id"] for n in view.nodes]


def test_missing_report_falls_back_to_sample_rows(config, fake_client_factory, ctx):
    service = ReportService(config, fake_client_factory())
    view = service.report_view(ctx, "cash_bank")
    assert view.source == SOURCE_SAMPLE
    assert len(view.rows) == 9
    # sample rows are shown as-is, without the consolidated wrapper
    assert [n["account_name"] for n in view.nodes] == ["Итого"]


def test_fallback_can_be_disabled(config, fake_client_factory, ctx):
    service = ReportService(config, fake_client_factory())
    view = service.report_view(ctx, "cash_bank", allow_sample=False)
    assert view.source == SOURCE_EMPTY
    assert view.nodes == []

    no_samples = ReportService(replace(config, fallback_samples=False), fake_client_factory())
    assert no_samples.report_view(ctx, "debt").source == SOURCE_EMPTY


def test_query_failure_is_reported_on_the_view(config, fake_client_factory, ctx):
    service = ReportService(config, fake_client_factory(fail=True))
    view = service.report_view(ctx, "debt")
    assert view.error and "report_metadata" in view.error
    assert view.source == SOURCE_SAMPLE

    strict = service.report_view(ctx, "cash_bank", allow_sample=False)
    assert strict.error and strict.source == SOURCE_EMPTY


def test_name_filter_is_applied_before_building(config, fake_client_factory, ctx):
    service = ReportService(config, fake_client_factory())
    view = service.report_view(ctx, "cash_bank", name_filter="НБД")
    names = [r["account_name"] for r in view.rows if r["level"] == 2]
    assert names == ["НБД"]
    assert "Сбербанк" in view.options


def test_organizations_error_becomes_message(config, fake_client_factory):
    service = ReportService(config, fake_client_factory(fail=True))
    orgs, err = service.safe_organizations()
    assert orgs == []
    assert err.startswith("Ошибка загрузки организаций")


def test_user_settings_default_on_failure(config, fake_client_factory):
    service = ReportService(config, fake_client_factory(fail=True))
    assert service.user_settings()["dashboard"]["widgetOrder"][0] == "cash_bank"


def test_cash_dynamics_covers_thirty_days(config, fake_client_factory, ctx):
    client = fake_client_factory()
    ReportService(config, client).cash_dynamics(ctx)
    name, params = client.rpc_calls[-1]
    assert name == "get_cash_flow_dynamics"
    assert (params["p_start_date"], params["p_end_date"]) == ("2025-01-01", DATE)
    assert params["p_organization_ids"] == ["o1", "o2"]
