"""
WSGI entry point for deployment (Gunicorn).
Run:  gunicorn wsgi:server -c gunicorn.conf.py
"""
from report_dashboard.app import server  # noqa: F401
