"""Request building and response decoding."""
from .request_builder import RequestBuilder, RequestUris
from .response_handler import ResponseHandler

__all__ = [
    'RequestBuilder',
    'RequestUris',
    'ResponseHandler',
]
