"""Dashboard page — summary widgets and cash dynamics, per user layout settings."""
import logging

from dash import html, dcc
import dash_bootstrap_components as dbc
import pandas as pd
import plotly.graph_objects as go

import supabase_loader as sl
from report_dashboard.theme import *
from report_dashboard.components.kpi import kpi_card, widget_error
from report_dashboard.components.cards import section, make_chart, empty_state
from report_dashboard.formatters import format_currency, execution_color
from report_dashboard.user_settings import WIDGET_NAMES, visible_widgets

logger = logging.getLogger(__name__)


def _cash_bank(summary):
    return kpi_card(WIDGET_NAMES["cash_bank"], format_currency(summary.get("total_balance_current")),
                    WIDGET_COLORS["cash_bank"], subtitle="Общий остаток", icon="₽")


def _debt(summary):
    return kpi_card(WIDGET_NAMES["debt"], format_currency(summary.get("total_debt")),
                    WIDGET_COLORS["debt"], icon="Дт",
                    subtitle=f"Просрочено: {format_currency(summary.get('total_overdue'))}  |  "
                             f"Кт: {format_currency(summary.get('total_credit'))}")


def _plan_fact(summary):
    pct = summary.get("overall_execution_percent")
    return kpi_card(WIDGET_NAMES["plan_fact"], f"{(pct or 0):.1f}%", WIDGET_COLORS["plan_fact"],
                    icon="%", value_color=execution_color(pct),
                    subtitle=f"Факт: {format_currency(summary.get('total_fact'))} / "
                             f"План: {format_currency(summary.get('total_plan'))}")


def _inventory(summary):
    return kpi_card(WIDGET_NAMES["inventory"], format_currency(summary.get("total_balance_rub")),
                    WIDGET_COLORS["inventory"], icon="□",
                    subtitle=f"Оборачиваемость: {summary.get('avg_turnover_days') or 0} дн.")


SUMMARY_WIDGETS = {
    "cash_bank": _cash_bank,
    "debt": _debt,
    "plan_fact": _plan_fact,
    "inventory": _inventory,
}


def summary_widget(service, widget_id, report_date):
    color = WIDGET_COLORS[widget_id]
    try:
        summary = service.summary(widget_id, report_date)
    except sl.DataSourceError as e:
        logger.error("Error fetching dashboard data for %s: %s", widget_id, e)
        return widget_error(WIDGET_NAMES[widget_id], color, "Не удалось загрузить данные")
    return SUMMARY_WIDGETS[widget_id](summary or {})


def cash_dynamics_figure(points):
    fig = go.Figure()
    if points:
        df = pd.DataFrame(points)
        df["report_day"] = pd.to_datetime(df["report_day"])
        df = df.sort_values("report_day")
        fig.add_trace(go.Scatter(
            x=df["report_day"], y=df["total_balance"], mode="lines+markers",
            name="Остаток", line=dict(color=CYAN, width=2),
        ))
    make_chart(fig, 340, legend_h=False)
    fig.update_layout(title="Остаток денежных средств по дням", yaxis=dict(tickformat=",.0f"))
    return fig


def cash_dynamics_widget(service, ctx):
    try:
        points = service.cash_dynamics(ctx)
    except sl.DataSourceError as e:
        logger.error("Error fetching cash dynamics: %s", e)
        return section(WIDGET_NAMES["cash_dynamics_chart"],
                       dbc.Alert("Не удалось загрузить динамику денежных средств.", color="danger"),
                       color=CYAN)
    if not points:
        body = empty_state("Нет данных за выбранный период")
    else:
        body = dcc.Graph(figure=cash_dynamics_figure(points), config={"displayModeBar": False})
    return section(WIDGET_NAMES["cash_dynamics_chart"], body, color=CYAN)


def layout(service, ctx, org_error=None):
    """Build the Dashboard page."""
    if org_error:
        return dbc.Alert(org_error, color="danger")

    settings = service.user_settings()
    widgets = visible_widgets(settings)

    cards = [summary_widget(service, w, ctx.report_date) for w in widgets if w in SUMMARY_WIDGETS]
    children = [
        html.P(f"Данные на {ctx.report_date}  |  {ctx.scope_label}",
               style={"color": GRAY, "fontSize": "13px"}),
    ]
    if cards:
        children.append(html.Div(cards, style={"display": "flex", "gap": "16px",
                                               "flexWrap": "wrap", "marginBottom": "16px"}))
    if "cash_dynamics_chart" in widgets:
        children.append(cash_dynamics_widget(service, ctx))
    if not widgets:
        children.append(empty_state("Все виджеты скрыты", "Включите их в настройках"))
    return html.Div(children)
