# gunicorn -c gunicorn.conf.py main:app
bind = "127.0.0.1:8003"
workers = 4
worker_class = "uvicorn.workers.UvicornWorker"
timeout = 120
accesslog = "-"
