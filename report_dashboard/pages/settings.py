"""Settings page — organizations and dashboard widget layout."""
from dash import html, dcc
import dash_bootstrap_components as dbc

from report_dashboard.theme import *
from report_dashboard.components.cards import section, empty_state
from report_dashboard.user_settings import WIDGET_NAMES


def widget_list(settings):
    """One row per widget: visibility switch plus move up / move down."""
    dashboard = settings["dashboard"]
    order = dashboard["widgetOrder"]
    rows = []
    for i, widget_id in enumerate(order):
        rows.append(html.Div([
            dbc.Switch(
                id={"type": "widget-visible", "widget": widget_id},
                value=bool(dashboard["widgetVisibility"].get(widget_id, True)),
                label=WIDGET_NAMES.get(widget_id, widget_id),
                style={"flex": "1"},
            ),
            dbc.ButtonGroup([
                dbc.Button("↑", id={"type": "widget-move", "widget": widget_id, "dir": -1},
                           size="sm", color="secondary", n_clicks=0, disabled=i == 0),
                dbc.Button("↓", id={"type": "widget-move", "widget": widget_id, "dir": 1},
                           size="sm", color="secondary", n_clicks=0,
                           disabled=i == len(order) - 1),
            ]),
        ], style={"display": "flex", "alignItems": "center", "padding": "6px 0",
                  "borderBottom": "1px solid #ffffff10"}))
    return rows


def _organizations(ctx, org_error):
    if org_error:
        return dbc.Alert(org_error, color="danger")
    if not ctx.organizations:
        return empty_state("Вы пока не состоите ни в одной организации")
    return html.Ul([html.Li(o["name"], style={"color": WHITE}) for o in ctx.organizations])


def layout(service, ctx, org_error=None):
    """Build the Settings page."""
    settings = service.user_settings()
    return html.Div([
        dbc.Row([
            dbc.Col(section("Мои организации", _organizations(ctx, org_error), color=BLUE), md=5),
            dbc.Col(section("Настройка виджетов на главной", [
                html.Div(widget_list(settings), id="widget-settings-list"),
                dcc.Store(id="user-settings-store", data=settings),
            ], color=CYAN), md=7),
        ]),
    ])
