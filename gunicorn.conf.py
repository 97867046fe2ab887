import multiprocessing
import os
# Gunicorn config for the portfolio Flask app (gunicorn portfolio:app)

bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")
workers = int(os.getenv("GUNICORN_WORKERS", multiprocessing.cpu_count() * 2 + 1))
worker_class = "sync"
accesslog = "-"  # log to stdout
errorlog = "-"   # log to stdout
loglevel = os.getenv("GUNICORN_LOGLEVEL", "info")
proc_name = "portfolio_gunicorn"

logger_class = "gunicorn.glogging.Logger"


def post_fork(server, worker):
    # picked up by GunicornWorkerFilter in the app's log records
    os.environ["GUNICORN_WORKER_ID"] = str(worker.age)
    server.log.info(f"Worker spawned (pid: {worker.pid})")

access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(L)s "%({X-Forwarded-For}i)s" "%({X-Request-ID}i)s"'
