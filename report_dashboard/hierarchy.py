"""
hierarchy.py — Flat report rows -> nested report tree.

Every report view receives a flat list of rows (one dict per row, linked by a
parent id column) and renders it as an expandable tree.  The construction is
a pure function of its inputs; rendering and export walk the result with the
traversal helpers at the bottom of this module.
"""

CONSOLIDATED_ID = "consolidated-total"
CONSOLIDATED_LABEL = "Консолидированный итог"

# Structural columns never summed into the consolidated node
_STRUCTURAL = {"id", "level", "is_total_row", "is_group_row", "is_expandable",
               "parent_id", "parent_client_id", "parent_category_id",
               "organization_id", "report_id"}


def _measure_keys(rows, schema, parent_key="parent_id"):
    """Numeric columns to sum into the consolidated node."""
    if schema is not None and schema.measures:
        return list(schema.measures)
    keys = []
    for row in rows:
        for key, val in row.items():
            if key in _STRUCTURAL or key == parent_key or key in keys:
                continue
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                continue
            keys.append(key)
    return keys


def _make_consolidated(schema, name_key, measures):
    node = {
        "id": CONSOLIDATED_ID,
        name_key: schema.consolidated_label if schema is not None else CONSOLIDATED_LABEL,
        "level": 0,
        "is_total_row": True,
        "children": [],
    }
    for key in measures:
        node[key] = 0
    return node


def build_hierarchy(rows, consolidate=False, schema=None):
    """Build a forest of report nodes from flat rows.

    Each row is copied and given an empty ``children`` list.  A row whose
    parent id resolves inside ``rows`` is appended to that parent; a row with
    no parent id, or with a parent id that is not present, is a root.  Child
    order follows input order.

    With ``consolidate`` the roots (one per organization) are renamed to
    ``"{organization_name} - {name}"`` and hung under one synthetic node with
    id ``"consolidated-total"``; measures of roots flagged ``is_total_row``
    are summed onto it.  Returns ``[consolidated]`` in that case, the plain
    list of roots otherwise.  Empty input gives ``[]`` in both modes.
    """
    if not rows:
        return []

    parent_key = schema.parent_key if schema is not None else "parent_id"
    name_key = schema.name_key if schema is not None else "account_name"

    nodes = {}
    for row in rows:
        node = dict(row)
        node["children"] = []
        nodes[row.get("id")] = node

    roots = []
    consolidated = None
    measures = []
    if consolidate:
        measures = _measure_keys(rows, schema, parent_key)
        consolidated = _make_consolidated(schema, name_key, measures)

    for row in rows:
        node = nodes[row.get("id")]
        parent_id = row.get(parent_key)
        parent = nodes.get(parent_id) if parent_id else None
        if parent is not None and parent is not node:
            parent["children"].append(node)
            continue

        if consolidated is None:
            roots.append(node)
            continue

        node[name_key] = f"{row.get('organization_name')} - {row.get(name_key)}"
        consolidated["children"].append(node)
        if row.get("is_total_row"):
            for key in measures:
                consolidated[key] += row.get(key) or 0

    if consolidated is not None:
        if schema is not None and schema.finalize is not None:
            schema.finalize(consolidated)
        return [consolidated]
    return roots


# ── Traversal ────────────────────────────────────────────────────────────────

def walk_hierarchy(nodes, depth=0):
    """Yield ``(node, depth)`` in depth-first pre-order."""
    for node in nodes:
        yield node, depth
        yield from walk_hierarchy(node.get("children") or [], depth + 1)


def flatten_hierarchy(nodes):
    """Pre-order list of every node in the forest."""
    return [node for node, _ in walk_hierarchy(nodes)]


def visible_rows(nodes, expanded, depth=0):
    """Pre-order ``(node, depth)`` pairs, descending only into expanded nodes."""
    result = []
    for node in nodes:
        result.append((node, depth))
        children = node.get("children") or []
        if children and node.get("id") in expanded:
            result.extend(visible_rows(children, expanded, depth + 1))
    return result


def initial_expanded(rows, max_level=2):
    """Ids expanded on first render: shallow rows plus the consolidated node."""
    ids = [CONSOLIDATED_ID]
    for row in rows:
        if (row.get("level") or 0) <= max_level:
            ids.append(row.get("id"))
    return ids
