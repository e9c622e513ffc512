"""
Runtime configuration — read once from the environment (and .env).

The resulting ``DashboardConfig`` is passed explicitly to the data loader, the
page builders and the callback registrars.
"""
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# BASE_DIR points to the project root (parent of report_dashboard/)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class DashboardConfig:
    supabase_url: str = ""
    supabase_key: str = ""
    user_id: str = ""
    port: int = 8070
    log_level: str = "INFO"
    fallback_samples: bool = True

    @property
    def has_supabase(self):
        return bool(self.supabase_url and self.supabase_key and "YOUR_PROJECT" not in self.supabase_url)


def load_config(env_file=None) -> DashboardConfig:
    load_dotenv(env_file or os.path.join(BASE_DIR, ".env"))
    return DashboardConfig(
        supabase_url=os.environ.get("SUPABASE_URL", "").strip().rstrip("/"),
        supabase_key=os.environ.get("SUPABASE_KEY", "").strip(),
        user_id=os.environ.get("DASHBOARD_USER_ID", "").strip(),
        port=int(os.environ.get("PORT", 8070)),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        fallback_samples=os.environ.get("REPORT_FALLBACK_SAMPLES", "1").strip().lower() in _TRUE,
    )


def setup_logging(level="INFO"):
    """Configure root logging once for the app process."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    return logging.getLogger("report_dashboard")
