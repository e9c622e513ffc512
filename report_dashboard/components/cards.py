"""Reusable card/section builders."""
from dash import html
import dash_bootstrap_components as dbc
from report_dashboard.theme import *


def section(title, children, color=ORANGE, actions=None):
    """Titled section card with colored top border and optional header actions."""
    header = [html.Span(title)]
    if actions:
        header.append(html.Div(actions, style={"display": "flex", "gap": "8px", "alignItems": "center"}))
    return dbc.Card([
        dbc.CardHeader(header, style={"color": color, "fontWeight": "bold", "fontSize": "16px",
                                      "borderBottom": f"2px solid {color}",
                                      "backgroundColor": "transparent", "padding": "12px 16px",
                                      "display": "flex", "justifyContent": "space-between",
                                      "alignItems": "center", "flexWrap": "wrap", "gap": "8px"}),
        dbc.CardBody(children, style={"padding": "16px"}),
    ], className="mb-3")


def empty_state(message, hint=""):
    children = [html.P(message, style={"color": GRAY, "margin": "0", "fontSize": "14px"})]
    if hint:
        children.append(html.Small(hint, style={"color": DARKGRAY}))
    return html.Div(children, style={"padding": "24px", "textAlign": "center"})


def source_badge(source):
    """Small badge telling whether a report shows live or sample rows."""
    if source == "sample":
        return dbc.Badge("демо-данные", color="warning", className="ms-2")
    return None


def make_chart(fig, height=360, legend_h=True):
    """Apply consistent styling to a Plotly figure."""
    layout = {**CHART_LAYOUT, "height": height}
    if legend_h:
        layout["legend"] = dict(orientation="h", y=1.12, x=0.5, xanchor="center")
    fig.update_layout(**layout)
    return fig
