# Gunicorn configuration for the tracker API
import multiprocessing
import os

wsgi_app = "wsgi:app"
bind = os.environ.get("TRACKER_BIND", "127.0.0.1:5000")
# SQLite serialises writes, so keep the pool small unless overridden
workers = int(os.environ.get("WEB_CONCURRENCY", min(4, multiprocessing.cpu_count() + 1)))
worker_class = "sync"
timeout = 30
keepalive = 5
raw_env = ["FLASK_ENV=production"]
errorlog = "/var/log/interview-tracker/gunicorn-error.log"
accesslog = "/var/log/interview-tracker/gunicorn-access.log"
loglevel = os.environ.get("TRACKER_LOG_LEVEL", "info")
