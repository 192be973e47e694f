"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import rate_limited
from .notifications import (
    load_smtp_config,
    smtp_configured,
    send_email
)
from .security import (
    RateLimiter,
    RateLimitResult,
    get_client_ip,
    apply_rate_limit_headers,
    rate_limit_response,
    sanitize_input
)
from .helpers import (
    NO_PHONE,
    format_phone,
    utc_today,
    build_contact_email
)

__all__ = [
    # Decorators
    'rate_limited',

    # Notifications
    'load_smtp_config',
    'smtp_configured',
    'send_email',

    # Security
    'RateLimiter',
    'RateLimitResult',
    'get_client_ip',
    'apply_rate_limit_headers',
    'rate_limit_response',
    'sanitize_input',

    # Helpers
    'NO_PHONE',
    'format_phone',
    'utc_today',
    'build_contact_email'
]
