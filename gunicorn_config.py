# Gunicorn settings: gunicorn -c gunicorn_config.py
import os

wsgi_app = "app:create_app()"
bind = os.environ.get('GUNICORN_BIND', '0.0.0.0:5000')
workers = int(os.environ.get('GUNICORN_WORKERS', '1'))
worker_class = "sync"
accesslog = "-"
errorlog = "-"
timeout = 120
preload_app = True
