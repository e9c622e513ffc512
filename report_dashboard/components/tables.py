"""Expandable tree table for hierarchical reports."""
from dash import html
import dash_bootstrap_components as dbc
from report_dashboard.theme import *
from report_dashboard.hierarchy import visible_rows


def _toggle(report_type, node_id, is_open):
    return html.Button(
        "▾" if is_open else "▸",
        id={"type": "tree-toggle", "report": report_type, "node": node_id},
        n_clicks=0,
        title="Свернуть" if is_open else "Развернуть",
        className="tree-toggle",
        style={"background": "none", "border": "none", "color": GRAY,
               "width": "24px", "padding": "0", "cursor": "pointer"},
    )


def _row_style(node):
    if node.get("is_total_row"):
        return {"backgroundColor": TOTAL_ROW_BG, "fontWeight": "bold"}
    if node.get("is_group_row") or node.get("account_type") == "organization":
        return {"backgroundColor": GROUP_ROW_BG}
    return {}


def tree_table(nodes, expanded, columns, report_type, name_key):
    """Render the visible part of a report tree.

    ``columns`` is a list of ``(header, key, formatter)`` for the numeric
    cells; the first column always shows the node name with its toggle.
    """
    expanded = set(expanded or [])
    header = html.Thead(html.Tr(
        [html.Th("Наименование")]
        + [html.Th(h, style={"textAlign": "right"}) for h, _, _ in columns]
    ))

    body = []
    for node, depth in visible_rows(nodes, expanded):
        has_children = bool(node.get("children"))
        node_id = node.get("id")
        name_cell = html.Td(html.Div([
            _toggle(report_type, node_id, node_id in expanded) if has_children
            else html.Span(style={"display": "inline-block", "width": "24px"}),
            html.Span(node.get(name_key) or node.get("organization_name") or ""),
        ], style={"paddingLeft": f"{depth * INDENT_PX}px", "display": "flex",
                  "alignItems": "center"}), style={"whiteSpace": "nowrap"})
        cells = [name_cell]
        for _, key, fmt in columns:
            val = node.get(key)
            cells.append(html.Td(fmt(val) if val is not None else "",
                                 style={"textAlign": "right", "fontFamily": "monospace"}))
        body.append(html.Tr(cells, style=_row_style(node)))

    return dbc.Table([header, html.Tbody(body)], bordered=False, hover=True,
                     responsive=True, size="sm", className="report-tree")
