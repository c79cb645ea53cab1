# gunicorn.conf.py
import multiprocessing as mp
import os

# ASGI application served by every worker
wsgi_app = os.getenv("APP_MODULE", "easywine.app:app")

# Bind to address and port
bind = os.getenv("BIND", "0.0.0.0:8076")

# Uvicorn worker for the FastAPI app
worker_class = "uvicorn.workers.UvicornWorker"

# Pairing calls are I/O bound; one worker per core is enough
workers = int(os.getenv("WEB_CONCURRENCY", mp.cpu_count() + 1))

# Upstream model calls can take a while with photos attached
timeout = int(os.getenv("TIMEOUT", "120"))
graceful_timeout = int(os.getenv("GRACEFUL_TIMEOUT", "30"))
keepalive = int(os.getenv("KEEPALIVE", "5"))

preload_app = True

# Recycle workers periodically
max_requests = int(os.getenv("MAX_REQUESTS", "1000"))
max_requests_jitter = int(os.getenv("MAX_REQUESTS_JITTER", "100"))

# Whitelisted IPs for X-Forwarded-For header
forwarded_allow_ips = os.getenv("FORWARDED_ALLOW_IPS", "127.0.0.1")

# Logs
accesslog = "-" if os.getenv("ACCESS_LOG", "1") == "1" else None
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
capture_output = True
