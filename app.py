"""
Portfolio Contact Relay - Main Application Entry Point
Built using the Application Factory Pattern

This module initializes the Flask application with configuration, rate
limiting, logging and security headers. Route handling is delegated to
blueprints.
"""

import logging
import os
from flask import Flask, request, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.proxy_fix import ProxyFix
from config import get_config
from extensions import global_limiter, contact_limiter
from utils.notifications import smtp_configured
from utils.security import get_client_ip, rate_limit_response, apply_rate_limit_headers

# Import all blueprints
from blueprints.contact import contact_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)

    configure_logging(app)

    # Honour X-Forwarded-For only behind a known proxy
    if app.config.get('TRUST_PROXY'):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok'}, 200

    with app.app_context():
        if not smtp_configured():
            app.logger.warning("Mail account or destination not configured; submissions will fail")

    return app


def configure_logging(app):
    """Set log verbosity from the runtime mode"""
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    app.logger.setLevel(level)


def initialize_extensions(app):
    """Initialize CORS and rate limiters with the app instance"""
    # Cross-origin access is restricted to the configured site origin
    if app.config.get('CORS_ORIGIN'):
        CORS(app, origins=app.config['CORS_ORIGIN'], methods=['POST'])
    else:
        app.logger.warning("CORS_ORIGIN not configured; cross-origin requests will be refused")

    global_limiter.init_app(app)
    contact_limiter.init_app(app)
    app.logger.debug(
        f"Rate limits: {global_limiter.max_requests} global, "
        f"{contact_limiter.max_requests} contact per {global_limiter.window_seconds}s")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(contact_bp)


def register_error_handlers(app):
    """Register JSON error handlers so no internals reach the client"""

    @app.errorhandler(404)
    def page_not_found(e):
        return jsonify({'error': 'Not found.'}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'error': 'Method not allowed.'}), 405

    @app.errorhandler(413)
    def payload_too_large(e):
        return jsonify({'error': 'Request body too large.'}), 413

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return jsonify({'error': 'Internal server error.'}), 500

    @app.errorhandler(Exception)
    def unhandled_exception(e):
        if isinstance(e, HTTPException):
            return jsonify({'error': e.description}), e.code
        app.logger.exception(f"Unhandled error: {str(e)}")
        return jsonify({'error': 'Internal server error.'}), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.before_request
    def apply_global_rate_limit():
        """Global limiter applied ahead of every route"""
        if request.method == 'OPTIONS':
            return None
        result = global_limiter.hit(get_client_ip())
        if not result.allowed:
            return rate_limit_response(global_limiter, result)
        request.environ['relay.global_rate_limit'] = result
        return None

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "base-uri 'self'; "
            "frame-ancestors 'self'; "
            "object-src 'none'"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        response.headers['Referrer-Policy'] = 'no-referrer'
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response

    @app.after_request
    def add_global_rate_limit_headers(response):
        result = request.environ.get('relay.global_rate_limit')
        if result is not None and 'RateLimit-Limit' not in response.headers:
            apply_rate_limit_headers(response, result)
        return response

    @app.after_request
    def log_request(response):
        """Access log line per request, with user agent in production"""
        line = f"{get_client_ip()} {request.method} {request.path} {response.status_code}"
        if not app.debug and not app.testing:
            line += f" \"{request.headers.get('User-Agent', '-')[:100]}\""
        app.logger.info(line)
        return response


# Create app instance for WSGI servers
app = create_app()

if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=app.config.get('PORT', 2000),
        debug=(env == 'development')
    )
