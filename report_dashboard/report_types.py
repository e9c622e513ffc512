"""
Report type definitions — table names, column roles, CSV layout.

Every report shares the same structural columns (id / parent / level /
organization) but names them differently and carries its own measures.
"""
from dataclasses import dataclass, field
from typing import Callable, Optional

from report_dashboard.hierarchy import CONSOLIDATED_LABEL


@dataclass(frozen=True)
class ReportSchema:
    report_type: str
    title: str
    items_table: str
    summary_rpc: str
    parent_key: str
    name_key: str
    measures: tuple
    csv_columns: tuple
    csv_headers: tuple
    file_prefix: str
    filter_label: str = ""
    filter_level: Optional[int] = None     # level whose names feed the secondary filter
    filter_min_level: bool = False          # True: names at filter_level and deeper
    filter_keep_level: int = 0              # rows at or above this level survive filtering
    filter_keeps_children: bool = False     # also keep direct children of the selected row
    fallback_to_sample: bool = True
    consolidated_label: str = CONSOLIDATED_LABEL
    finalize: Optional[Callable] = field(default=None, compare=False)

    @property
    def order_columns(self):
        return ("level", self.name_key)


def _finalize_plan_fact(node):
    plan = node.get("plan_amount") or 0
    node["execution_percent"] = round(node.get("fact_amount", 0) / plan * 100, 1) if plan else 0.0


CASH_BANK = ReportSchema(
    report_type="cash_bank",
    title="Банковские счета рублевые",
    items_table="cash_bank_report_items",
    summary_rpc="get_cash_bank_dashboard_summary",
    parent_key="parent_id",
    name_key="account_name",
    measures=("balance_start", "income_amount", "expense_amount", "balance_current"),
    csv_columns=("organization_name", "account_name", "balance_start",
                 "income_amount", "expense_amount", "balance_current"),
    csv_headers=(
        "Организация",
        "Банковский счет",
        "Остаток на начало предыдущего рабочего дня",
        "Движение за предыдущий рабочий день Приход",
        "Движение за предыдущий рабочий день Расход",
        "Остаток на начало СЕГОДНЯШНЕГО дня",
    ),
    file_prefix="cash_bank_report",
    filter_label="Все счета",
    filter_level=2,
    filter_keep_level=1,
)

DEBT = ReportSchema(
    report_type="debt",
    title="Дебиторская и кредиторская задолженность",
    items_table="debt_reports_items",
    summary_rpc="get_debt_dashboard_summary",
    parent_key="parent_client_id",
    name_key="client_name",
    measures=("debt_amount", "overdue_amount", "credit_amount"),
    csv_columns=("client_name", "debt_amount", "overdue_amount", "credit_amount"),
    csv_headers=("Организация", "Сумма Дт", "в т.ч. просроченная Дт", "Сумма Кт"),
    file_prefix="debt_report",
    filter_label="Все контрагенты",
    filter_level=3,
    filter_min_level=True,
    filter_keep_level=2,
)

INVENTORY_TURNOVER = ReportSchema(
    report_type="inventory_turnover",
    title="Оборачиваемость товарных запасов",
    items_table="inventory_turnover_report_items",
    summary_rpc="get_inventory_dashboard_summary",
    parent_key="parent_category_id",
    name_key="category_name",
    measures=("quantity_pairs", "balance_rub", "dynamics_start_month_rub",
              "dynamics_start_year_rub"),
    csv_columns=("category_name", "quantity_pairs", "balance_rub",
                 "dynamics_start_month_rub", "dynamics_start_month_percent",
                 "dynamics_start_year_rub", "dynamics_start_year_percent",
                 "turnover_days"),
    csv_headers=(
        "Организация",
        "Количество, пар",
        "Остатки, руб",
        "Динамика с нач. месяца, руб",
        "Динамика с нач. месяца, %",
        "Динамика с нач. года, руб",
        "Динамика с нач. года, %",
        "Оборачиваемость, дн.",
    ),
    file_prefix="inventory_turnover",
)

INVENTORY_BALANCE = ReportSchema(
    report_type="inventory_balance",
    title="Остатки товарных запасов",
    items_table="inventory_balance_reports",
    summary_rpc="",
    parent_key="parent_category_id",
    name_key="category_name",
    measures=("quantity_pairs", "balance_rub", "dynamics_start_month_rub",
              "dynamics_start_year_rub"),
    csv_columns=("category_name", "quantity_pairs", "balance_rub",
                 "dynamics_start_month_rub", "dynamics_start_month_percent",
                 "dynamics_start_year_rub", "dynamics_start_year_percent"),
    csv_headers=(
        "Организация",
        "Количество, пар",
        "Остатки, руб",
        "Динамика с нач. месяца, руб",
        "Динамика с нач. месяца, %",
        "Динамика с нач. года, руб",
        "Динамика с нач. года, %",
    ),
    file_prefix="inventory_balance",
    filter_label="Все организации",
    filter_level=1,
    filter_keeps_children=True,
)

PLAN_FACT = ReportSchema(
    report_type="plan_fact",
    title="План-факт выручки",
    items_table="plan_fact_reports_items",
    summary_rpc="get_plan_fact_dashboard_summary",
    parent_key="parent_id",
    name_key="category_name",
    measures=("plan_amount", "fact_amount"),
    csv_columns=("category_name", "plan_amount", "fact_amount", "execution_percent"),
    csv_headers=("Организация", "План, ₽", "Факт, ₽", "% выполнения плана"),
    file_prefix="plan_fact_revenue",
    finalize=_finalize_plan_fact,
)

REPORT_TYPES = {s.report_type: s for s in (CASH_BANK, DEBT, INVENTORY_TURNOVER,
                                           INVENTORY_BALANCE, PLAN_FACT)}

# Dashboard widgets keyed by widget id; "inventory" reads the turnover summary
SUMMARY_RPCS = {
    "cash_bank": CASH_BANK.summary_rpc,
    "debt": DEBT.summary_rpc,
    "plan_fact": PLAN_FACT.summary_rpc,
    "inventory": INVENTORY_TURNOVER.summary_rpc,
}


def get_schema(report_type):
    try:
        return REPORT_TYPES[report_type]
    except KeyError:
        raise ValueError(f"Unknown report type: {report_type!r}") from None
