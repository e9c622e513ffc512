"""Gunicorn config for deployment."""
import os
import threading
import time
import urllib.error
import urllib.request

bind = f"0.0.0.0:{os.environ.get('PORT', '8070')}"


def post_worker_init(worker):
    """After a worker starts, check in background that Supabase is reachable.

    Logs the outcome so a misconfigured deploy shows up in the worker log
    instead of as empty reports.
    """
    def _check():
        time.sleep(3)  # wait for server to be ready
        try:
            port = worker.cfg.bind[0].split(":")[-1] if worker.cfg.bind else "8070"
            url = f"http://127.0.0.1:{port}/api/health"
            urllib.request.urlopen(url, timeout=30)
            worker.log.info("Health check passed: Supabase reachable")
        except urllib.error.HTTPError as e:
            worker.log.warning(f"Health check failed: HTTP {e.code}")
        except Exception as e:
            worker.log.warning(f"Health check failed: {e}")

    t = threading.Thread(target=_check, daemon=True)
    t.start()
