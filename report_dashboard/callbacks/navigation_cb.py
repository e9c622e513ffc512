"""Page routing callback — renders the correct page based on URL and global filters."""
from urllib.parse import parse_qs

from dash import html, Input, Output

from report_dashboard.state import ReportContext, default_report_date, telegram_report_date


def build_context(service, report_date, selected_org, telegram=False, date_arg=None):
    """Resolve organizations and wrap the filters into a ReportContext."""
    organizations, org_error = service.safe_organizations()
    if telegram:
        ctx = ReportContext(report_date=telegram_report_date(date_arg),
                            organizations=organizations)
    else:
        ctx = ReportContext(report_date=report_date or default_report_date(),
                            organizations=organizations).with_org(selected_org)
    return ctx, org_error


def render_page(service, pathname, search="", report_date=None, selected_org=""):
    date_arg = parse_qs((search or "").lstrip("?")).get("date", [None])[0]
    if pathname in ("/tg", "/tg/cash-bank", "/tg/turnover"):
        ctx, org_error = build_context(service, None, None, telegram=True, date_arg=date_arg)
        from report_dashboard.pages import telegram
        if pathname == "/tg":
            return telegram.summary_layout(service, ctx, org_error)
        if pathname == "/tg/turnover":
            return telegram.turnover_layout(service, ctx, org_error)
        return telegram.cash_bank_layout(service, ctx, org_error)

    if pathname == "/" or pathname is None:
        from report_dashboard.pages.dashboard import layout
    elif pathname == "/reports":
        from report_dashboard.pages.reports import layout
    elif pathname == "/settings":
        from report_dashboard.pages.settings import layout
    else:
        return html.Div([
            html.H3("404 — Страница не найдена", style={"color": "#e74c3c"}),
            html.P(f"No page at '{pathname}'"),
        ], style={"padding": "40px"})
    ctx, org_error = build_context(service, report_date, selected_org)
    return layout(service, ctx, org_error)


def register_callbacks(app, service):
    @app.callback(
        Output("page-content", "children"),
        Input("url", "pathname"),
        Input("url", "search"),
        Input("global-report-date", "date"),
        Input("global-org", "value"),
    )
    def route_page(pathname, search, report_date, selected_org):
        return render_page(service, pathname, search, report_date, selected_org)
