"""Organization scope and secondary (account / counterparty) filters."""

ALL_ORGANIZATIONS = ""


def target_org_ids(selected_org, organizations):
    """Org ids to query: every organization when "all" is selected."""
    if organizations is None:
        return None
    if selected_org == ALL_ORGANIZATIONS or selected_org is None:
        return [o["id"] for o in organizations]
    return [selected_org]


def is_consolidated_view(selected_org, organizations):
    return (selected_org in (ALL_ORGANIZATIONS, None)) and len(organizations or []) > 1


def filter_options(rows, schema):
    """Distinct names offered by the secondary filter, first-seen order."""
    if schema.filter_level is None:
        return []
    seen = []
    for row in rows:
        level = row.get("level") or 0
        matches = level >= schema.filter_level if schema.filter_min_level else level == schema.filter_level
        name = row.get(schema.name_key)
        if matches and name and name not in seen:
            seen.append(name)
    return seen


def apply_name_filter(rows, schema, selected):
    """Keep the selected name, total rows and everything above the keep level.

    With ``filter_keeps_children`` the direct children of a selected row are
    kept as well (inventory balance: pick an organization, see its groups).
    """
    if not selected or schema.filter_level is None:
        return list(rows)
    selected_ids = set()
    if schema.filter_keeps_children:
        selected_ids = {row.get("id") for row in rows if row.get(schema.name_key) == selected}
    return [
        row for row in rows
        if row.get(schema.name_key) == selected
        or row.get("is_total_row")
        or (row.get("level") or 0) <= schema.filter_keep_level
        or ((row.get("level") or 0) > 1 and row.get(schema.parent_key) in selected_ids)
    ]
