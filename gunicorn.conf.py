"""Gunicorn configuration for production deployment."""

# Server socket
bind = '0.0.0.0:8000'

# Worker processes: a single worker with 4 threads.
# The document store serializes writers with an in-process lock, so every
# request must be served by the same process.
workers = 1
threads = 4
worker_class = 'gthread'

# Timeout
timeout = 30
graceful_timeout = 30
keepalive = 5

# Logging
accesslog = '/app/logs/gunicorn-access.log'
errorlog = '/app/logs/gunicorn-error.log'
loglevel = 'info'
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process naming
proc_name = 'hotelclub'

# Preload app for faster worker startups
preload_app = True

# Restart the worker after 1000 requests
max_requests = 1000
max_requests_jitter = 50

# Security
limit_request_line = 8190
limit_request_fields = 100
limit_request_field_size = 8190
