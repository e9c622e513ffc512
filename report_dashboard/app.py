"""
Organization Report Dashboard
Run:  python -m report_dashboard.app
Open: http://127.0.0.1:8070
"""

import logging
import os
import sys

# Ensure project root is on the path for supabase_loader
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import dash
from dash import html, dcc
import dash_bootstrap_components as dbc
import flask

from report_dashboard.config import load_config, setup_logging
from report_dashboard.data_state import ReportService
from report_dashboard.filters import ALL_ORGANIZATIONS
from report_dashboard.state import default_report_date

CONFIG = load_config()
setup_logging(CONFIG.log_level)
logger = logging.getLogger(__name__)

SERVICE = ReportService(CONFIG)

# ── Create the Dash app ──────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    suppress_callback_exceptions=True,
    external_stylesheets=[
        dbc.themes.DARKLY,
        "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap",
    ],
    assets_folder=os.path.join(os.path.dirname(__file__), "assets"),
    title="Отчеты организаций",
)
server = app.server  # For deployment (Gunicorn)

# ── Sidebar navigation ──────────────────────────────────────────────────────
NAV_ITEMS = [
    {"label": "Сводка",     "icon": "\U0001f4ca", "value": "/"},
    {"label": "Отчеты",     "icon": "\U0001f4c4", "value": "/reports"},
    "---",
    {"label": "Настройки",  "icon": "⚙️", "value": "/settings"},
    "---",
    {"label": "Telegram",   "icon": "\U0001f4f1", "value": "/tg"},
]


def _build_sidebar():
    nav_links = []
    for item in NAV_ITEMS:
        if item == "---":
            nav_links.append(html.Hr(className="sidebar-divider"))
        else:
            nav_links.append(
                dbc.NavLink(
                    [html.Span(item["icon"], className="nav-icon"), item["label"]],
                    href=item["value"],
                    active="exact",
                )
            )

    return html.Div([
        html.Div([
            html.H4("ОТЧЕТЫ"),
            html.Small("Финансовая панель организаций"),
        ], className="sidebar-brand"),
        dbc.Nav(nav_links, vertical=True, pills=True),
    ], className="sidebar")


def _global_filters(organizations):
    """Report date and organization scope shared by every page."""
    org_options = [{"label": "Все организации", "value": ALL_ORGANIZATIONS}]
    org_options += [{"label": o["name"], "value": o["id"]} for o in organizations]
    return html.Div([
        dcc.DatePickerSingle(
            id="global-report-date",
            date=default_report_date(),
            display_format="DD.MM.YYYY",
            first_day_of_week=1,
        ),
        dcc.Dropdown(
            id="global-org",
            options=org_options,
            value=ALL_ORGANIZATIONS,
            clearable=False,
            style={"minWidth": "260px", "color": "#000"},
        ),
    ], className="global-filters")


# ── App layout ───────────────────────────────────────────────────────────────
def serve_layout():
    organizations, _ = SERVICE.safe_organizations()
    return html.Div([
        dcc.Location(id="url", refresh=False),

        _build_sidebar(),

        html.Div([
            html.Div([
                html.H3("ФИНАНСОВЫЕ ОТЧЕТЫ"),
                _global_filters(organizations),
            ], className="app-header"),

            # Page content (rendered by routing callback)
            html.Div(id="page-content"),

            # Toast notification container
            html.Div(id="toast-container"),
        ], className="main-content"),
    ])


app.layout = serve_layout


@server.route("/api/health")
def api_health():
    """Report whether the data source is reachable, for deploy checks."""
    if not CONFIG.has_supabase:
        return flask.jsonify({"status": "unconfigured"}), 503
    organizations, error = SERVICE.safe_organizations()
    if error:
        return flask.jsonify({"status": "error", "message": error}), 500
    return flask.jsonify({"status": "ok", "organizations": len(organizations)})


# ── Register callbacks ───────────────────────────────────────────────────────
from report_dashboard.callbacks import navigation_cb, report_cb, settings_cb
navigation_cb.register_callbacks(app, SERVICE)
report_cb.register_callbacks(app, SERVICE)
settings_cb.register_callbacks(app, SERVICE)

# ── Run ──────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    logger.info("Report dashboard on http://127.0.0.1:%s", CONFIG.port)
    app.run(debug=False, host="0.0.0.0", port=CONFIG.port)
