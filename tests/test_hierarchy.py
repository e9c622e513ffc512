"""Flat rows -> report tree."""
import copy

from report_dashboard.hierarchy import (
    CONSOLIDATED_ID,
    build_hierarchy,
    flatten_hierarchy,
    initial_expanded,
    visible_rows,
    walk_hierarchy,
)
from report_dashboard.report_types import CASH_BANK, DEBT, PLAN_FACT


def ids(nodes):
    return [n["id"] for n in nodes]


def test_children_nest_under_parent_in_input_order():
    rows = [
        {"id": "A", "parent_id": None, "is_total_row": True, "balance": 100},
        {"id": "B", "parent_id": "A", "balance": 40},
        {"id": "C", "parent_id": "A", "balance": 60},
    ]
    roots = build_hierarchy(rows, consolidate=False)
    assert ids(roots) == ["A"]
    assert ids(roots[0]["children"]) == ["B", "C"]


def test_child_listed_before_parent_still_nests():
    rows = [
        {"id": "C", "parent_id": "A"},
        {"id": "A", "parent_id": None},
        {"id": "B", "parent_id": "A"},
    ]
    roots = build_hierarchy(rows)
    assert ids(roots) == ["A"]
    assert ids(roots[0]["children"]) == ["C", "B"]


def test_consolidation_wraps_org_roots_and_sums_totals():
    rows = [
        {"id": "O1", "parent_id": None, "is_total_row": True, "balance": 100,
         "organization_name": "X", "account_name": "Итого"},
        {"id": "O2", "parent_id": None, "is_total_row": True, "balance": 50,
         "organization_name": "Y", "account_name": "Итого"},
    ]
    result = build_hierarchy(rows, consolidate=True)
    assert len(result) == 1
    total = result[0]
    assert total["id"] == CONSOLIDATED_ID
    assert total["balance"] == 150
    assert ids(total["children"]) == ["O1", "O2"]
    assert [c["account_name"] for c in total["children"]] == ["X - Итого", "Y - Итого"]


def test_consolidation_sums_only_total_roots():
    rows = [
        {"id": "O1", "parent_id": None, "is_total_row": True, "balance_current": 100,
         "organization_name": "X", "account_name": "Итого"},
        {"id": "O2", "parent_id": None, "is_total_row": False, "balance_current": 999,
         "organization_name": "Y", "account_name": "Касса"},
        {"id": "B1", "parent_id": "O1", "is_total_row": False, "balance_current": 70,
         "organization_name": "X", "account_name": "Банк"},
    ]
    total = build_hierarchy(rows, consolidate=True, schema=CASH_BANK)[0]
    assert total["balance_current"] == 100
    assert total["balance_start"] == 0
    assert ids(total["children"]) == ["O1", "O2"]
    # sub-tree inside an organization is preserved and not renamed
    assert ids(total["children"][0]["children"]) == ["B1"]
    assert total["children"][0]["children"][0]["account_name"] == "Банк"


def test_no_synthetic_node_without_consolidation():
    rows = [
        {"id": "O1", "parent_id": None, "is_total_row": True},
        {"id": "O2", "parent_id": None, "is_total_row": True},
        {"id": "O3", "parent_id": None, "is_total_row": True},
    ]
    roots = build_hierarchy(rows, consolidate=False)
    assert ids(roots) == ["O1", "O2", "O3"]
    assert CONSOLIDATED_ID not in ids(flatten_hierarchy(roots))


def test_orphan_becomes_root():
    rows = [{"id": "Z", "parent_id": "missing", "balance": 10}]
    assert ids(build_hierarchy(rows, consolidate=False)) == ["Z"]

    consolidated = build_hierarchy(rows, consolidate=True)
    assert ids(consolidated) == [CONSOLIDATED_ID]
    assert ids(consolidated[0]["children"]) == ["Z"]


def test_empty_input_gives_empty_forest():
    assert build_hierarchy([], consolidate=False) == []
    assert build_hierarchy([], consolidate=True) == []


def test_every_row_appears_exactly_once():
    rows = [{"id": "root", "parent_id": None, "level": 0}]
    for i in range(5):
        rows.append({"id": f"g{i}", "parent_id": "root", "level": 1})
        for j in range(3):
            rows.append({"id": f"g{i}-{j}", "parent_id": f"g{i}", "level": 2})
    rows.append({"id": "stray", "parent_id": "nowhere", "level": 2})

    for consolidate in (False, True):
        flat = [n for n in flatten_hierarchy(build_hierarchy(rows, consolidate))
                if n["id"] != CONSOLIDATED_ID]
        assert sorted(ids(flat)) == sorted(r["id"] for r in rows)


def test_input_rows_are_not_mutated():
    rows = [
        {"id": "O1", "parent_id": None, "is_total_row": True, "balance": 1,
         "organization_name": "X", "account_name": "Итого"},
        {"id": "B", "parent_id": "O1", "balance": 1, "account_name": "Банк"},
    ]
    before = copy.deepcopy(rows)
    build_hierarchy(rows, consolidate=True)
    assert rows == before


def test_debt_schema_uses_its_own_parent_and_name_columns():
    rows = [
        {"id": "t1", "parent_client_id": None, "client_name": "Итого", "is_total_row": True,
         "organization_name": "X", "debt_amount": 10, "overdue_amount": 1, "credit_amount": 5},
        {"id": "c1", "parent_client_id": "t1", "client_name": "ПОКУПАТЕЛИ", "debt_amount": 10},
        {"id": "t2", "parent_client_id": None, "client_name": "Итого", "is_total_row": True,
         "organization_name": "Y", "debt_amount": 20, "overdue_amount": 2, "credit_amount": 7},
    ]
    total = build_hierarchy(rows, consolidate=True, schema=DEBT)[0]
    assert total["client_name"] == DEBT.consolidated_label
    assert (total["debt_amount"], total["overdue_amount"], total["credit_amount"]) == (30, 3, 12)
    assert [c["client_name"] for c in total["children"]] == ["X - Итого", "Y - Итого"]
    assert ids(total["children"][0]["children"]) == ["c1"]


def test_plan_fact_consolidation_recomputes_execution():
    rows = [
        {"id": "a", "parent_id": None, "category_name": "Итого", "is_total_row": True,
         "organization_name": "X", "plan_amount": 100, "fact_amount": 50, "execution_percent": 50.0},
        {"id": "b", "parent_id": None, "category_name": "Итого", "is_total_row": True,
         "organization_name": "Y", "plan_amount": 300, "fact_amount": 250, "execution_percent": 83.3},
    ]
    total = build_hierarchy(rows, consolidate=True, schema=PLAN_FACT)[0]
    assert total["plan_amount"] == 400
    assert total["fact_amount"] == 300
    assert total["execution_percent"] == 75.0


def test_walk_reports_depth_in_preorder():
    rows = [
        {"id": "A", "parent_id": None},
        {"id": "B", "parent_id": "A"},
        {"id": "C", "parent_id": "B"},
        {"id": "D", "parent_id": "A"},
    ]
    walked = [(n["id"], d) for n, d in walk_hierarchy(build_hierarchy(rows))]
    assert walked == [("A", 0), ("B", 1), ("C", 2), ("D", 1)]


def test_visible_rows_skip_collapsed_branches():
    rows = [
        {"id": "A", "parent_id": None},
        {"id": "B", "parent_id": "A"},
        {"id": "C", "parent_id": "B"},
    ]
    tree = build_hierarchy(rows)
    assert [n["id"] for n, _ in visible_rows(tree, {"A"})] == ["A", "B"]
    assert [n["id"] for n, _ in visible_rows(tree, {"A", "B"})] == ["A", "B", "C"]
    assert [n["id"] for n, _ in visible_rows(tree, set())] == ["A"]


def test_initial_expanded_covers_shallow_levels():
    rows = [{"id": str(lvl), "level": lvl} for lvl in range(5)]
    assert initial_expanded(rows) == [CONSOLIDATED_ID, "0", "1", "2"]


def test_parent_column_is_not_summed_without_schema():
    rows = [
        {"id": 1, "parent_id": None, "is_total_row": True, "balance": 10,
         "organization_name": "X", "account_name": "Итого"},
        {"id": 2, "parent_id": 1, "balance": 4, "account_name": "Банк"},
        {"id": 3, "parent_id": None, "is_total_row": True, "balance": 5,
         "organization_name": "Y", "account_name": "Итого"},
    ]
    total = build_hierarchy(rows, consolidate=True)[0]
    assert "parent_id" not in total
    assert total["balance"] == 15
