"""Report callbacks — secondary filter, row expand/collapse, CSV download."""
import logging

from dash import Input, Output, State, ALL, MATCH, callback_context, dcc, no_update

from report_dashboard.export import export_filename, report_to_csv
from report_dashboard.pages.reports import render_report_body, tree_store_data
from report_dashboard.report_types import get_schema
from report_dashboard.state import ReportContext, default_report_date

logger = logging.getLogger(__name__)


def toggle_expanded(expanded, node_id):
    """Return a new expanded-id list with ``node_id`` flipped."""
    expanded = list(expanded or [])
    if node_id in expanded:
        expanded.remove(node_id)
    else:
        expanded.append(node_id)
    return expanded


def register_callbacks(app, service):
    # ── Re-render a report body whenever its stored tree changes ──────────
    @app.callback(
        Output({"type": "report-body", "report": MATCH}, "children"),
        Input({"type": "report-tree", "report": MATCH}, "data"),
        State({"type": "report-tree", "report": MATCH}, "id"),
        prevent_initial_call=True,
    )
    def render_body(data, store_id):
        return render_report_body(store_id["report"], data)

    # ── Expand / collapse ─────────────────────────────────────────────────
    @app.callback(
        Output({"type": "report-tree", "report": MATCH}, "data", allow_duplicate=True),
        Input({"type": "tree-toggle", "report": MATCH, "node": ALL}, "n_clicks"),
        State({"type": "report-tree", "report": MATCH}, "data"),
        prevent_initial_call=True,
    )
    def toggle_row(_clicks, data):
        trigger = callback_context.triggered_id
        if not trigger or not data or not callback_context.triggered[0].get("value"):
            return no_update
        return {**data, "expanded": toggle_expanded(data.get("expanded"), trigger["node"])}

    # ── Secondary filter (account / counterparty) ─────────────────────────
    @app.callback(
        Output({"type": "report-tree", "report": MATCH}, "data", allow_duplicate=True),
        Input({"type": "report-filter", "report": MATCH}, "value"),
        State({"type": "report-filter", "report": MATCH}, "id"),
        State("global-report-date", "date"),
        State("global-org", "value"),
        prevent_initial_call=True,
    )
    def filter_report(selected, filter_id, report_date, selected_org):
        report_type = filter_id["report"]
        organizations, _ = service.safe_organizations()
        ctx = ReportContext(report_date=report_date or default_report_date(),
                            organizations=organizations).with_org(selected_org)
        view = service.report_view(ctx, report_type, name_filter=selected or "")
        return tree_store_data(view, ctx.report_date)

    # ── CSV export ────────────────────────────────────────────────────────
    @app.callback(
        Output({"type": "report-download", "report": MATCH}, "data"),
        Input({"type": "report-export", "report": MATCH}, "n_clicks"),
        State({"type": "report-tree", "report": MATCH}, "data"),
        State({"type": "report-export", "report": MATCH}, "id"),
        prevent_initial_call=True,
    )
    def export_csv(n_clicks, data, button_id):
        if not n_clicks or not data:
            return no_update
        schema = get_schema(button_id["report"])
        filename = export_filename(schema, data.get("report_date"))
        logger.info("Exporting %s", filename)
        return dcc.send_string(report_to_csv(data.get("nodes") or [], schema), filename)
