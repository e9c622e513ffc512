"""Chat-bot (Telegram web app) views — compact summary, consolidated cash and turnover."""
from dash import html, dcc
import dash_bootstrap_components as dbc

from report_dashboard.theme import *
from report_dashboard.components.cards import empty_state, source_badge
from report_dashboard.pages.dashboard import SUMMARY_WIDGETS, summary_widget
from report_dashboard.pages.reports import render_report_body, tree_store_data


def summary_layout(service, ctx, org_error=None):
    """Compact summary: one KPI card per report, stacked for a phone screen."""
    if org_error:
        return dbc.Alert(org_error, color="danger")
    cards = [summary_widget(service, w, ctx.report_date) for w in SUMMARY_WIDGETS]
    return html.Div([
        html.H5(f"Сводка на {ctx.report_date}", style={"color": WHITE}),
        html.Div(cards, style={"display": "flex", "flexDirection": "column", "gap": "12px"}),
        dcc.Link("Денежные средства подробно →", href=f"/tg/cash-bank?date={ctx.report_date}",
                 style={"color": CYAN, "display": "block", "marginTop": "16px"}),
        dcc.Link("Оборачиваемость запасов →", href=f"/tg/turnover?date={ctx.report_date}",
                 style={"color": CYAN, "display": "block", "marginTop": "8px"}),
    ], className="tg-view")


def cash_bank_layout(service, ctx, org_error=None):
    """Cash/bank balances over all of the user's organizations, consolidated.

    Unlike the full report this view never substitutes sample rows.
    """
    if org_error:
        return empty_state("Ошибка загрузки организаций", org_error)
    if not ctx.organizations:
        return empty_state("Нет доступных организаций")

    view = service.report_view(ctx, "cash_bank", allow_sample=False)
    data = tree_store_data(view, ctx.report_date)
    title = "Ошибка загрузки отчета" if view.error else ctx.scope_label
    return html.Div([
        html.H5(title, style={"color": RED if view.error else WHITE}),
        html.Small(f"Банковские счета на {ctx.report_date}", style={"color": GRAY}),
        html.Div(render_report_body("cash_bank", data),
                 id={"type": "report-body", "report": "cash_bank"}),
        dcc.Store(id={"type": "report-tree", "report": "cash_bank"}, data=data),
    ], className="tg-view")


def turnover_layout(service, ctx, org_error=None):
    """Compact inventory turnover tree; shows sample rows when there is no report."""
    if org_error:
        return empty_state("Ошибка загрузки организаций", org_error)
    if not ctx.organizations:
        return empty_state("Нет доступных организаций")

    view = service.report_view(ctx, "inventory_turnover")
    data = {**tree_store_data(view, ctx.report_date), "compact": True}
    return html.Div([
        html.H5("Оборачиваемость товарных запасов", style={"color": WHITE}),
        html.Small([f"{ctx.scope_label} на {ctx.report_date}", source_badge(view.source)],
                   style={"color": GRAY}),
        html.Div(render_report_body("inventory_turnover", data),
                 id={"type": "report-body", "report": "inventory_turnover"}),
        dcc.Store(id={"type": "report-tree", "report": "inventory_turnover"}, data=data),
    ], className="tg-view")
