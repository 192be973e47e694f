"""
Decorators Module - Request guards for route handlers
"""

from functools import wraps
from flask import make_response
from .security import get_client_ip, rate_limit_response, apply_rate_limit_headers


def rate_limited(limiter):
    """Decorator to reject callers that exceed the limiter's window"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            result = limiter.hit(get_client_ip())
            if not result.allowed:
                return rate_limit_response(limiter, result)
            response = make_response(f(*args, **kwargs))
            return apply_rate_limit_headers(response, result)
        return decorated_function
    return decorator
