"""
Contact Routes - Public contact form relay
Handles: Validation, sanitization and email dispatch of contact submissions
"""

from flask import request, jsonify, current_app
from extensions import contact_limiter
from models import ContactSubmission, ValidationError
from utils.decorators import rate_limited
from utils.helpers import build_contact_email, utc_today
from utils.notifications import send_email
from . import contact_bp


def _request_payload():
    """Contact fields from a JSON or form-encoded body"""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


@contact_bp.route('/personaldata', methods=['POST'])
@rate_limited(contact_limiter)
def submit_contact():
    """Validate a contact submission and forward it to the site owner"""
    try:
        submission = ContactSubmission.from_payload(_request_payload())
    except ValidationError as e:
        current_app.logger.info(f"Contact form rejected: {str(e)}")
        return jsonify({'success': False, 'errors': e.errors}), 400

    submission = submission.sanitized()
    html_body = build_contact_email(submission, sent_on=utc_today())

    sent = send_email(
        recipient=current_app.config.get('EMAIL_TO'),
        subject=submission.subject,
        body=html_body,
        html=True
    )
    if not sent:
        return jsonify({'success': False, 'message': 'Failed to send message.'}), 500

    return jsonify({'success': True, 'message': 'Message sent successfully.'}), 200
