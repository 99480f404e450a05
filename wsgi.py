"""WSGI entry point: ``gunicorn -c deploy/gunicorn.conf.py``."""
import os

from tracker import create_app

app = create_app(os.environ.get('FLASK_ENV', 'production'))
