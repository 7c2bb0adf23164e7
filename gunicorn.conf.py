import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# The result cache is per process; more workers means more cold caches.
workers = int(os.environ.get('GUNICORN_WORKERS', '1'))
threads = int(os.environ.get('GUNICORN_THREADS', '2'))
worker_class = "gthread"
worker_tmp_dir = "/dev/shm"

preload_app = False
accesslog = "-"
errorlog = "-"
loglevel = "info"
# Covers a slow LLM rerank call on top of scoring.
timeout = 60
