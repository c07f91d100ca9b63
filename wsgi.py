"""WSGI entrypoint for Gunicorn.

Streamed reveals hold a worker for the whole animation, so use threads:
  gunicorn -w 2 --threads 8 -b 0.0.0.0:8000 wsgi:app
"""

from drawbox import create_app

app = create_app()
