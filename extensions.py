"""
Extensions Module - Centralized initialization of shared request guards
Decouples the rate limiters from the main app.py to avoid circular imports
and enable better testing.
"""

from utils.security import RateLimiter

# Initialize limiters without binding to app
global_limiter = RateLimiter(
    max_requests=50,
    window_seconds=15 * 60,
    message='Too many requests. Please try again later.',
    config_key='GLOBAL_RATE_LIMIT'
)
contact_limiter = RateLimiter(
    max_requests=5,
    window_seconds=15 * 60,
    message='Too many submissions. Please try again later.',
    config_key='CONTACT_RATE_LIMIT'
)

__all__ = ['global_limiter', 'contact_limiter']
