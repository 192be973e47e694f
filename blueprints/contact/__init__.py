"""
Contact Blueprint - Public contact form relay
Handles: Contact form submissions forwarded to the site owner by email
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__, url_prefix='')

from . import routes
