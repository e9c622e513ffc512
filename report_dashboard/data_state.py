"""
data_state.py — Report fetching, fallback policy and tree assembly.

Pages and callbacks go through a single ReportService built from the
DashboardConfig; it owns the Supabase client and turns query results into
ready-to-render report views.
"""
import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional

import supabase_loader as sl
from report_dashboard import sample_data
from report_dashboard.filters import apply_name_filter, filter_options
from report_dashboard.hierarchy import build_hierarchy, initial_expanded
from report_dashboard.report_types import get_schema
from report_dashboard.user_settings import default_settings, merge_dashboard_settings

logger = logging.getLogger(__name__)

SOURCE_LIVE = "live"
SOURCE_SAMPLE = "sample"
SOURCE_EMPTY = "empty"


@dataclass
class ReportView:
    """Everything a report page needs to render one report."""
    report_type: str
    nodes: list = field(default_factory=list)
    rows: list = field(default_factory=list)
    options: list = field(default_factory=list)
    expanded: list = field(default_factory=list)
    source: str = SOURCE_EMPTY
    error: Optional[str] = None


class ReportService:
    def __init__(self, config, client=None):
        self.config = config
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = sl.get_client(self.config)
        return self._client

    # ── Organizations ───────────────────────────────────────────────────
    def organizations(self):
        return sl.load_user_organizations(self.client, self.config.user_id)

    def safe_organizations(self):
        """Organizations, or ([], message) style failure for layouts."""
        try:
            return self.organizations(), None
        except sl.DataSourceError as e:
            logger.error("Error loading organizations: %s", e)
            return [], f"Ошибка загрузки организаций: {e}"

    # ── Reports ─────────────────────────────────────────────────────────
    def report_view(self, ctx, report_type, name_filter="", allow_sample=True):
        """Fetch, filter and build the tree for one report in the given scope."""
        schema = get_schema(report_type)
        view = ReportView(report_type=report_type)

        rows = None
        try:
            rows = sl.load_report_items(self.client, ctx.org_ids, report_type, ctx.report_date)
        except sl.DataSourceError as e:
            view.error = str(e)

        if rows:
            view.source = SOURCE_LIVE
        elif allow_sample and schema.fallback_to_sample and self.config.fallback_samples:
            logger.warning("No %s report for selected orgs on %s. Falling back to sample data.",
                           report_type, ctx.report_date)
            rows = sample_data.sample_rows(report_type)
            view.source = SOURCE_SAMPLE
        else:
            rows = []

        view.options = filter_options(rows, schema)
        view.rows = apply_name_filter(rows, schema, name_filter)
        consolidate = ctx.consolidated and view.source == SOURCE_LIVE
        view.nodes = build_hierarchy(view.rows, consolidate, schema)
        view.expanded = initial_expanded(view.rows)
        return view

    # ── Dashboard widgets ───────────────────────────────────────────────
    def summary(self, widget_id, report_date):
        return sl.load_dashboard_summary(self.client, widget_id, report_date)

    def cash_dynamics(self, ctx, days=30):
        end = date.fromisoformat(ctx.report_date)
        start = end - timedelta(days=days)
        return sl.load_cash_dynamics(self.client, ctx.org_ids, start.isoformat(), end.isoformat())

    # ── Settings ────────────────────────────────────────────────────────
    def user_settings(self):
        try:
            saved = sl.load_user_settings(self.client, self.config.user_id)
        except sl.DataSourceError as e:
            logger.error("Error loading user settings: %s", e)
            return default_settings()
        return merge_dashboard_settings(saved)

    def save_user_settings(self, settings):
        sl.save_user_settings(self.client, self.config.user_id, settings)
