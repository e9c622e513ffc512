"""Reports page — expandable report trees with filters and CSV export."""
from dash import html, dcc
import dash_bootstrap_components as dbc

from report_dashboard.theme import *
from report_dashboard.components.cards import section, empty_state, source_badge
from report_dashboard.components.tables import tree_table
from report_dashboard.formatters import format_number, format_percent
from report_dashboard.report_types import REPORT_TYPES, get_schema

REPORT_ORDER = ["cash_bank", "debt", "plan_fact", "inventory_balance", "inventory_turnover"]

REPORT_COLORS = {
    "cash_bank": GREEN,
    "debt": RED,
    "plan_fact": BLUE,
    "inventory_balance": CYAN,
    "inventory_turnover": PURPLE,
}

# Numeric cells per report: (header, key, formatter)
REPORT_COLUMNS = {
    "cash_bank": [
        ("Остаток на начало пред. дня", "balance_start", format_number),
        ("Приход", "income_amount", format_number),
        ("Расход", "expense_amount", format_number),
        ("Остаток на начало дня", "balance_current", format_number),
    ],
    "debt": [
        ("Сумма Дт", "debt_amount", format_number),
        ("в т.ч. просроченная Дт", "overdue_amount", format_number),
        ("Сумма Кт", "credit_amount", format_number),
    ],
    "plan_fact": [
        ("План, ₽", "plan_amount", format_number),
        ("Факт, ₽", "fact_amount", format_number),
        ("% выполнения", "execution_percent", lambda v: f"{v:.1f}%"),
    ],
    "inventory_balance": [
        ("Количество, пар", "quantity_pairs", format_number),
        ("Остатки, руб", "balance_rub", format_number),
        ("С нач. месяца, руб", "dynamics_start_month_rub", format_number),
        ("С нач. месяца, %", "dynamics_start_month_percent", format_percent),
        ("С нач. года, руб", "dynamics_start_year_rub", format_number),
        ("С нач. года, %", "dynamics_start_year_percent", format_percent),
    ],
    "inventory_turnover": [
        ("Количество, пар", "quantity_pairs", format_number),
        ("Остатки, руб", "balance_rub", format_number),
        ("С нач. месяца, руб", "dynamics_start_month_rub", format_number),
        ("С нач. месяца, %", "dynamics_start_month_percent", format_percent),
        ("С нач. года, руб", "dynamics_start_year_rub", format_number),
        ("С нач. года, %", "dynamics_start_year_percent", format_percent),
        ("Оборачиваемость, дн.", "turnover_days", format_number),
    ],
}


# Narrow column sets for the phone-sized chat-bot views
COMPACT_COLUMNS = {
    "inventory_turnover": [
        ("Кол-во, пар", "quantity_pairs", format_number),
        ("Остатки, руб", "balance_rub", format_number),
        ("Оборачиваемость, дн.", "turnover_days", format_number),
    ],
}


def tree_store_data(view, report_date):
    """Serializable payload kept in the per-report dcc.Store."""
    return {
        "nodes": view.nodes,
        "expanded": view.expanded,
        "report_date": report_date,
        "source": view.source,
    }


def render_report_body(report_type, data):
    """Table (or empty state) for a report's stored tree."""
    schema = get_schema(report_type)
    if not data or not data.get("nodes"):
        return empty_state("Нет данных за выбранную дату",
                           "Выберите другую дату или организацию")
    columns = REPORT_COLUMNS[report_type]
    if data.get("compact"):
        columns = COMPACT_COLUMNS.get(report_type, columns)
    return tree_table(data["nodes"], data.get("expanded"), columns, report_type, schema.name_key)


def report_section(view, report_date):
    """One report card: filter, export button, tree and hidden stores."""
    schema = REPORT_TYPES[view.report_type]
    rt = view.report_type
    data = tree_store_data(view, report_date)

    actions = []
    if schema.filter_level is not None:
        actions.append(dcc.Dropdown(
            id={"type": "report-filter", "report": rt},
            options=[{"label": schema.filter_label, "value": ""}]
                    + [{"label": o, "value": o} for o in view.options],
            value="", clearable=False, style={"minWidth": "220px", "color": "#000"},
        ))
    actions.append(dbc.Button("⬇ CSV", id={"type": "report-export", "report": rt},
                              size="sm", color="secondary", n_clicks=0))

    children = []
    if view.error and view.source != "live":
        children.append(dbc.Alert(f"Ошибка загрузки отчета: {view.error}", color="danger",
                                  className="py-2"))
    children += [
        html.Div(render_report_body(rt, data), id={"type": "report-body", "report": rt}),
        dcc.Store(id={"type": "report-tree", "report": rt}, data=data),
        dcc.Download(id={"type": "report-download", "report": rt}),
    ]

    title = html.Span([f"{schema.title} на {report_date}", source_badge(view.source)])
    return section(title, children, color=REPORT_COLORS[rt], actions=actions)


def layout(service, ctx, org_error=None):
    """Build the Reports page."""
    if org_error:
        return dbc.Alert(org_error, color="danger")
    if not ctx.organizations:
        return empty_state("Вы пока не состоите ни в одной организации",
                           "Попросите администратора добавить вас в организацию")

    sections = [report_section(service.report_view(ctx, rt), ctx.report_date)
                for rt in REPORT_ORDER]
    return html.Div([
        html.P(f"Организации: {ctx.scope_label}. Нажмите на стрелки для "
               f"сворачивания/разворачивания строк.",
               style={"color": GRAY, "fontSize": "13px"}),
        *sections,
    ])
