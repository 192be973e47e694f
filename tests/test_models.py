"""Unit tests for the ContactSubmission model"""
import pytest

from models import ContactSubmission, ValidationError


def fields_of(excinfo):
    return {e['field'] for e in excinfo.value.errors}


def test_from_payload_trims_and_normalizes(valid_payload):
    valid_payload.update(name='  Jane Doe ', email=' Jane.Doe@Example.COM ', subject=' Hello ')

    submission = ContactSubmission.from_payload(valid_payload)

    assert submission.name == 'Jane Doe'
    assert submission.email == 'jane.doe@example.com'
    assert submission.subject == 'Hello'
    assert submission.formatted_phone == '404-555-1234'


def test_phone_is_optional(valid_payload):
    del valid_payload['phone']

    submission = ContactSubmission.from_payload(valid_payload)

    assert submission.phone == ''
    assert submission.formatted_phone == 'None Provided'


@pytest.mark.parametrize('field, message', [
    ('name', 'Name is required.'),
    ('email', 'A valid email is required.'),
    ('subject', 'Subject is required.'),
    ('message', 'Message is required.'),
])
def test_missing_required_field(valid_payload, field, message):
    valid_payload[field] = '   '

    with pytest.raises(ValidationError) as excinfo:
        ContactSubmission.from_payload(valid_payload)

    assert excinfo.value.errors == [{'field': field, 'message': message}]


def test_every_failing_field_is_reported():
    with pytest.raises(ValidationError) as excinfo:
        ContactSubmission.from_payload({})

    assert fields_of(excinfo) == {'name', 'email', 'subject', 'message'}


@pytest.mark.parametrize('email', [
    'not-an-email',
    'jane@',
    '@example.com',
    'jane@example',
    'jane doe@example.com',
])
def test_invalid_email_rejected(valid_payload, email):
    valid_payload['email'] = email

    with pytest.raises(ValidationError) as excinfo:
        ContactSubmission.from_payload(valid_payload)

    assert fields_of(excinfo) == {'email'}


@pytest.mark.parametrize('field, limit', [
    ('name', 100),
    ('phone', 30),
    ('subject', 200),
    ('message', 5000),
])
def test_length_ceilings(valid_payload, field, limit):
    valid_payload[field] = 'x' * limit
    ContactSubmission.from_payload(valid_payload)

    valid_payload[field] = 'x' * (limit + 1)
    with pytest.raises(ValidationError) as excinfo:
        ContactSubmission.from_payload(valid_payload)

    assert excinfo.value.errors[0]['field'] == field
    assert f'at most {limit} characters' in excinfo.value.errors[0]['message']


def test_non_string_values(valid_payload):
    valid_payload.update(phone=4045551234, name=['Jane'])

    with pytest.raises(ValidationError) as excinfo:
        ContactSubmission.from_payload(valid_payload)

    assert fields_of(excinfo) == {'name'}


def test_sanitized_strips_markup_from_every_field(valid_payload):
    valid_payload.update(name='<b>Jane</b>', message='Hi <script>alert(1)</script>there')

    submission = ContactSubmission.from_payload(valid_payload).sanitized()

    assert submission.name == 'Jane'
    assert submission.message == 'Hi there'
    assert submission.email == 'jane@example.com'
