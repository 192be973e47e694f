"""
Notifications Module - Email delivery through the configured SMTP relay
"""

import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from flask import current_app


def load_smtp_config():
    """Load SMTP relay settings from app config"""
    return {
        'host': current_app.config.get('SMTP_HOST', ''),
        'port': current_app.config.get('SMTP_PORT', '587'),
        'email': current_app.config.get('GMAIL_USER', ''),
        'password': current_app.config.get('GMAIL_APP_PASSWORD', ''),
        'recipient': current_app.config.get('EMAIL_TO', '')
    }


def smtp_configured():
    smtp_config = load_smtp_config()
    return all([
        smtp_config.get('host'),
        smtp_config.get('port'),
        smtp_config.get('email'),
        smtp_config.get('password'),
        smtp_config.get('recipient')
    ])


def send_email(recipient, subject, body, html=False):
    """
    Send email using the configured SMTP account

    A single delivery attempt is made. Transport errors (authentication,
    connectivity, relay rejection) are logged here and never raised.

    Args:
        recipient (str): Email recipient
        subject (str): Email subject
        body (str): Email body
        html (bool): Whether body is HTML

    Returns:
        bool: Success status
    """
    try:
        smtp_config = load_smtp_config()
        if not all([
            smtp_config.get('host'),
            smtp_config.get('port'),
            smtp_config.get('email'),
            smtp_config.get('password')
        ]) or not recipient:
            current_app.logger.error("Email error: SMTP config incomplete")
            return False

        msg = MIMEMultipart('alternative')
        msg['Subject'] = subject
        msg['From'] = smtp_config.get('email')
        msg['To'] = recipient

        if html:
            msg.attach(MIMEText(body, 'html'))
        else:
            msg.attach(MIMEText(body, 'plain'))

        with smtplib.SMTP(smtp_config.get('host'),
                          int(smtp_config.get('port'))) as server:
            server.starttls()
            server.login(smtp_config.get('email'), smtp_config.get('password'))
            server.send_message(msg)

        current_app.logger.info(f"Email sent to {recipient}")
        return True
    except (smtplib.SMTPException, OSError, ValueError) as e:
        current_app.logger.error(f"Email error: {str(e)}")
        return False


__all__ = ['load_smtp_config', 'smtp_configured', 'send_email']
