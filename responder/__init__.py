"""
responder: status-code echo service

GET /code/{code} answers with {code} as its HTTP status. Requests are logged
through tintlog.
"""

from responder.api import create_app

__all__ = ['create_app']
__version__ = '1.0.0'
