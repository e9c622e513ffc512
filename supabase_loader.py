"""
supabase_loader.py — Report data access over Supabase (PostgREST + RPC).

Tables / functions used:
  organization_members  — user_id -> organizations(id, name)
  report_metadata       — one row per (organization, report_type, report_date)
  *_report_items        — flat report rows keyed by report_id
  profiles              — per-user settings JSON
  get_*_dashboard_summary, get_cash_flow_dynamics — RPCs

Every function raises DataSourceError on platform failures; callers decide
whether to show an error or fall back to sample rows.
"""

import logging

from report_dashboard.report_types import SUMMARY_RPCS, get_schema

logger = logging.getLogger(__name__)

UNKNOWN_ORG = "Unknown Org"


class DataSourceError(Exception):
    """Supabase is unreachable, misconfigured, or rejected a query."""


# ── Supabase helpers ────────────────────────────────────────────────────────

def get_client(config):
    """Return a Supabase client for the given DashboardConfig."""
    if not config.has_supabase:
        raise DataSourceError("SUPABASE_URL / SUPABASE_KEY are not configured")
    from supabase import create_client
    try:
        return create_client(config.supabase_url, config.supabase_key)
    except Exception as e:
        raise DataSourceError(f"Could not create Supabase client: {e}") from e


def _execute(query, what):
    try:
        return query.execute().data
    except Exception as e:
        logger.error("Supabase query failed (%s): %s", what, e)
        raise DataSourceError(f"{what}: {e}") from e


def _embedded(value):
    """PostgREST embeds a to-one relation as a dict, occasionally as a list."""
    if isinstance(value, list):
        return [v for v in value if v]
    return [value] if value else []


# ── Organizations ───────────────────────────────────────────────────────────

def load_user_organizations(client, user_id) -> list[dict]:
    """Organizations the user is a member of, as [{"id", "name"}]."""
    if not user_id:
        return []
    rows = _execute(
        client.table("organization_members")
        .select("organizations(id, name)")
        .eq("user_id", user_id),
        "organization_members",
    ) or []
    orgs = []
    for member in rows:
        for org in _embedded(member.get("organizations")):
            orgs.append({"id": org["id"], "name": org["name"]})
    return orgs


# ── Report rows ─────────────────────────────────────────────────────────────

def load_report_items(client, org_ids, report_type, report_date):
    """Flat rows of one report type for the given organizations and date.

    Returns None when no report exists for that scope (or nothing to query).
    Each row gains ``organization_name`` from its report's organization.
    """
    if not org_ids or not report_date:
        return None
    schema = get_schema(report_type)

    meta = _execute(
        client.table("report_metadata")
        .select("id, organization_id, organizations(name)")
        .in_("organization_id", list(org_ids))
        .eq("report_type", report_type)
        .eq("report_date", report_date),
        "report_metadata",
    ) or []
    if not meta:
        logger.info("No %s report for %d org(s) on %s", report_type, len(org_ids), report_date)
        return None

    org_names = {}
    for m in meta:
        orgs = _embedded(m.get("organizations"))
        org_names[m["id"]] = orgs[0].get("name") if orgs else UNKNOWN_ORG

    query = client.table(schema.items_table).select("*").in_("report_id", list(org_names))
    for col in schema.order_columns:
        query = query.order(col)
    items = _execute(query, schema.items_table) or []

    return [
        {**item, "organization_name": org_names.get(item.get("report_id"), UNKNOWN_ORG) or UNKNOWN_ORG}
        for item in items
    ]


# ── Dashboard RPCs ──────────────────────────────────────────────────────────

def load_dashboard_summary(client, widget_id, report_date):
    """First row of the widget's summary RPC, or None."""
    if not report_date:
        return None
    rpc_name = SUMMARY_RPCS[widget_id]
    data = _execute(client.rpc(rpc_name, {"p_report_date": report_date}), rpc_name)
    return data[0] if data else None


def load_cash_dynamics(client, org_ids, start_date, end_date) -> list[dict]:
    """Daily total balance points: [{"report_day", "total_balance"}]."""
    if not org_ids or not start_date or not end_date:
        return []
    return _execute(
        client.rpc("get_cash_flow_dynamics", {
            "p_organization_ids": list(org_ids),
            "p_start_date": start_date,
            "p_end_date": end_date,
        }),
        "get_cash_flow_dynamics",
    ) or []


# ── User settings ───────────────────────────────────────────────────────────

def load_user_settings(client, user_id):
    """Raw saved settings JSON for the user ({} when no profile row)."""
    if not user_id:
        return {}
    rows = _execute(
        client.table("profiles").select("settings").eq("id", user_id).limit(1),
        "profiles",
    ) or []
    return (rows[0].get("settings") or {}) if rows else {}


def save_user_settings(client, user_id, settings):
    if not user_id:
        raise DataSourceError("No user configured; settings cannot be saved")
    _execute(
        client.table("profiles").update({"settings": settings}).eq("id", user_id),
        "profiles update",
    )
