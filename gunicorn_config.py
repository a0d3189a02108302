"""
Gunicorn configuration for the VehicleAnalytics Dashboard.

The record store lives in process memory, so a single worker serves every
request and threads provide the concurrency.
"""

import os

# Server socket
bind = f"0.0.0.0:{os.getenv('DASH_PORT', '8050')}"
backlog = 2048

# One worker keeps a single record store; /api/data/init in one worker
# would not be visible to another
workers = 1
worker_class = 'gthread'
threads = 8

# Worker timeout
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logging
accesslog = '-'  # Log to stdout
errorlog = '-'   # Log to stderr
loglevel = 'info'
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s %(D)s'

# Process naming
proc_name = 'vehicle-analytics-dashboard'

# Server mechanics
daemon = False
preload_app = True
reload = False


def on_starting(server):
    """Called just before the master process is initialized."""
    server.log.info("[GUNICORN] Starting VehicleAnalytics Dashboard")


def worker_int(worker):
    """Called when a worker receives SIGINT or SIGQUIT."""
    worker.log.info(f"[GUNICORN] Worker {worker.pid} interrupted")
