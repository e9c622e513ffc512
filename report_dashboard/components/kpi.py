"""KPI card builders for the dashboard widgets."""
from dash import html
import dash_bootstrap_components as dbc
from report_dashboard.theme import *


def icon_badge(text, color):
    """Colored 36px icon circle with gradient bg."""
    return html.Div(text, style={
        "width": "36px", "height": "36px", "borderRadius": "50%",
        "background": f"linear-gradient(135deg, {color}, {color}88)",
        "color": "#ffffff",
        "display": "inline-flex", "alignItems": "center", "justifyContent": "center",
        "fontSize": "15px", "fontWeight": "bold", "flexShrink": "0",
        "boxShadow": f"0 3px 10px {color}44",
    })


def kpi_card(label, value, color, subtitle="", icon="", value_color=WHITE):
    """Widget card: icon, label, big value, optional subtitle."""
    body_children = []
    if icon:
        body_children.append(html.Div(icon_badge(icon, color), style={"marginBottom": "8px",
                                                                      "display": "flex",
                                                                      "justifyContent": "center"}))
    body_children += [
        html.Div(label, className="kpi-label"),
        html.Div(value, className="kpi-value", style={"color": value_color}),
    ]
    if subtitle:
        body_children.append(html.Div(subtitle, className="kpi-subtitle"))
    return dbc.Card(
        dbc.CardBody(body_children, style={"padding": "14px", "textAlign": "center"}),
        style={"borderTop": f"3px solid {color}", "flex": "1", "minWidth": "180px"},
        className="kpi-card-top",
    )


def widget_error(label, color, message):
    return dbc.Card(
        dbc.CardBody([
            html.Div(label, className="kpi-label"),
            html.Div(message, style={"color": RED, "fontSize": "12px", "marginTop": "6px"}),
        ], style={"padding": "14px", "textAlign": "center"}),
        style={"borderTop": f"3px solid {color}", "flex": "1", "minWidth": "180px"},
        className="kpi-card-top",
    )
