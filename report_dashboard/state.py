"""View state shared by the pages: report date and organization scope."""
from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from typing import Optional

from report_dashboard.filters import ALL_ORGANIZATIONS, is_consolidated_view, target_org_ids


def default_report_date(today=None):
    return (today or date.today()).isoformat()


def telegram_report_date(date_arg=None, today=None):
    """Chat-bot views default to yesterday unless ``?date=`` is given."""
    if date_arg:
        return date_arg
    return ((today or date.today()) - timedelta(days=1)).isoformat()


@dataclass(frozen=True)
class ReportContext:
    report_date: str
    organizations: list = field(default_factory=list)
    selected_org: Optional[str] = ALL_ORGANIZATIONS

    @property
    def org_ids(self):
        return target_org_ids(self.selected_org, self.organizations)

    @property
    def consolidated(self):
        return is_consolidated_view(self.selected_org, self.organizations)

    @property
    def scope_label(self):
        if not self.organizations:
            return "Нет доступных организаций"
        if self.consolidated:
            return "Все организации"
        if self.selected_org:
            for org in self.organizations:
                if org["id"] == self.selected_org:
                    return org["name"]
        return self.organizations[0]["name"]

    def with_date(self, report_date):
        return replace(self, report_date=report_date)

    def with_org(self, selected_org):
        return replace(self, selected_org=selected_org or ALL_ORGANIZATIONS)
