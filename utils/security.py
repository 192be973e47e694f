"""
Security Module - Client address lookup, rate limiting, and input sanitization
"""

import math
import re
import threading
import time
from collections import namedtuple
from flask import request, jsonify, current_app


RateLimitResult = namedtuple('RateLimitResult', ['allowed', 'limit', 'remaining', 'reset_after'])


class RateLimiter:
    """Sliding-window request counter keyed by client address.

    Only accepted requests are recorded, so a rejected caller regains a slot
    as soon as its oldest accepted request leaves the window.
    """

    def __init__(self, max_requests, window_seconds, message, config_key=None, clock=time.monotonic):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.message = message
        self.config_key = config_key
        self.clock = clock
        self._requests = {}  # {key: [timestamp, ...]}
        self._lock = threading.Lock()

    def init_app(self, app):
        """Bind limits from app config and start from a clean slate"""
        if self.config_key:
            self.max_requests = app.config.get(self.config_key, self.max_requests)
        self.window_seconds = app.config.get('RATE_LIMIT_WINDOW', self.window_seconds)
        self.reset()

    def reset(self):
        with self._lock:
            self._requests.clear()

    def hit(self, key):
        """Record a request for key if it fits in the window"""
        now = self.clock()
        with self._lock:
            # Clean old requests outside the window
            timestamps = [ts for ts in self._requests.get(key, [])
                          if now - ts < self.window_seconds]

            if len(timestamps) >= self.max_requests:
                self._requests[key] = timestamps
                reset_after = self.window_seconds - (now - timestamps[0])
                return RateLimitResult(False, self.max_requests, 0, _ceil_seconds(reset_after))

            timestamps.append(now)
            self._requests[key] = timestamps
            reset_after = self.window_seconds - (now - timestamps[0])
            return RateLimitResult(True, self.max_requests,
                                   self.max_requests - len(timestamps),
                                   _ceil_seconds(reset_after))


def _ceil_seconds(value):
    return max(math.ceil(value), 0)


def get_client_ip():
    """Get client network address.

    Forwarded headers are only honoured when TRUST_PROXY is enabled, in which
    case ProxyFix has already rewritten remote_addr.
    """
    return request.remote_addr or 'unknown'


def apply_rate_limit_headers(response, result):
    response.headers['RateLimit-Limit'] = str(result.limit)
    response.headers['RateLimit-Remaining'] = str(result.remaining)
    response.headers['RateLimit-Reset'] = str(result.reset_after)
    return response


def rate_limit_response(limiter, result):
    """Build the 429 response for a rejected request"""
    current_app.logger.warning(
        f"Rate limit exceeded for {get_client_ip()} on {request.path} "
        f"({limiter.max_requests} per {limiter.window_seconds}s)")
    response = jsonify({'error': limiter.message})
    response.status_code = 429
    response.headers['Retry-After'] = str(result.reset_after)
    return apply_rate_limit_headers(response, result)


_BLOCK_RE = re.compile(r'<(script|style)\b[^>]*>.*?</\1\s*>', re.I | re.S)
_OPEN_BLOCK_RE = re.compile(r'<(script|style)\b.*$|<!--(?!.*?-->).*$', re.I | re.S)
_TAG_RE = re.compile(r'<!--.*?-->|</?[a-zA-Z!][^>]*>', re.S)
_TAG_START_RE = re.compile(r'<(?=[a-zA-Z!/])')


def sanitize_input(text):
    """Strip markup from user-supplied text.

    - Removes <script> and <style> blocks together with their content
    - Drops an unterminated <script>/<style> block or <!-- comment through end of input
    - Removes every other tag, keeping its inner text
    - Escapes the "<" of any unterminated tag left over (e.g. "<img src=x onerror=...")
    - Leaves ampersands and bare angle brackets (e.g. "a < b") untouched
    """
    if not text:
        return ''

    txt = text
    while True:
        cleaned = _BLOCK_RE.sub('', txt)
        cleaned = _OPEN_BLOCK_RE.sub('', cleaned)
        cleaned = _TAG_RE.sub('', cleaned)
        # Stripping can splice fragments into a new tag, so repeat until stable
        if cleaned == txt:
            return _TAG_START_RE.sub('&lt;', cleaned)
        txt = cleaned


__all__ = [
    'RateLimiter',
    'RateLimitResult',
    'get_client_ip',
    'apply_rate_limit_headers',
    'rate_limit_response',
    'sanitize_input'
]
