"""Unit tests for utils.helpers"""
import re

import pytest

from models import ContactSubmission
from utils.helpers import format_phone, build_contact_email, utc_today, NO_PHONE


@pytest.mark.parametrize('raw, expected', [
    ('4045551234', '404-555-1234'),
    ('(404) 555-1234', '404-555-1234'),
    ('404.555.1234', '404-555-1234'),
    (' 404 555 1234 ', '404-555-1234'),
])
def test_format_phone_ten_digits(raw, expected):
    assert format_phone(raw) == expected


@pytest.mark.parametrize('raw', [
    '',
    None,
    '404555123',
    '14045551234',
    'call me maybe',
    '+1 (404) 555-1234',
])
def test_format_phone_anything_else(raw):
    assert format_phone(raw) == NO_PHONE == 'None Provided'


def test_utc_today_is_iso_date():
    assert re.fullmatch(r'\d{4}-\d{2}-\d{2}', utc_today())


def test_build_contact_email_embeds_fields():
    submission = ContactSubmission(
        name='Jane Doe', email='jane@example.com', subject='Hello',
        message='Hi there', phone='4045551234')

    body = build_contact_email(submission, sent_on='2026-10-19')

    assert '<strong>From:</strong> Jane Doe' in body
    assert '<strong>Email:</strong> jane@example.com' in body
    assert '<strong>Phone:</strong> 404-555-1234' in body
    assert '<strong>Date:</strong> 2026-10-19' in body
    assert '<p>Hi there</p>' in body


def test_build_contact_email_without_phone():
    submission = ContactSubmission(
        name='Jane', email='jane@example.com', subject='Hello', message='Hi')

    body = build_contact_email(submission)

    assert '<strong>Phone:</strong> None Provided' in body
    assert utc_today() in body
