"""
Helpers Module - Utility functions for composing contact emails
"""

import re
from datetime import datetime, timezone


NO_PHONE = 'None Provided'


def format_phone(phone):
    """Format a raw phone string as XXX-XXX-XXXX.

    Returns "None Provided" unless exactly 10 digits remain after
    stripping every non-digit character.
    """
    digits = re.sub(r'\D', '', phone or '')
    if len(digits) == 10:
        return f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"
    return NO_PHONE


def utc_today():
    """Current calendar date (UTC) in ISO format"""
    return datetime.now(timezone.utc).date().isoformat()


def build_contact_email(submission, sent_on=None):
    """Build the HTML body forwarded to the site owner.

    Args:
        submission (ContactSubmission): Already sanitized submission
        sent_on (str, optional): ISO date stamped on the email, defaults to today

    Returns:
        str: HTML document
    """
    sent_on = sent_on or utc_today()
    return (
        f"<p><strong>From:</strong> {submission.name}</p>\n"
        f"<p><strong>Email:</strong> {submission.email}</p>\n"
        f"<p><strong>Phone:</strong> {submission.formatted_phone}</p>\n"
        f"<p><strong>Date:</strong> {sent_on}</p>\n"
        f"<hr>\n"
        f"<p>{submission.message}</p>\n"
    )
