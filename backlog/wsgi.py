"""
WSGI compatibility layer.

Wraps the ASGI FastAPI application for WSGI servers such as Gunicorn
or Waitress. Prefer ASGI deployment when possible.
"""

from asgiref.wsgi import AsgiToWsgi

from backlog.main import app

application = AsgiToWsgi(app)
