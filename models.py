from dataclasses import dataclass, replace

from email_validator import validate_email, EmailNotValidError

from utils.helpers import format_phone
from utils.security import sanitize_input


class ValidationError(Exception):
    """Raised when a submission breaks one or more field rules"""

    def __init__(self, errors):
        super().__init__('; '.join(e['message'] for e in errors))
        self.errors = errors


# field -> (label, required, max length, message when empty)
FIELD_RULES = {
    'name': ('Name', True, 100, 'Name is required.'),
    'email': ('Email', True, None, 'A valid email is required.'),
    'phone': ('Phone', False, 30, None),
    'subject': ('Subject', True, 200, 'Subject is required.'),
    'message': ('Message', True, 5000, 'Message is required.'),
}


def _text(value):
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ''


def normalize_email(address):
    """Validate syntax and return the canonical, lower-cased address.

    Raises EmailNotValidError for anything that is not local@domain.tld.
    """
    validated = validate_email(address, check_deliverability=False)
    return validated.normalized.lower()


@dataclass(frozen=True)
class ContactSubmission:
    """Transient contact form submission, never persisted"""
    name: str
    email: str
    subject: str
    message: str
    phone: str = ''

    @classmethod
    def from_payload(cls, payload):
        payload = payload or {}
        values = {}
        errors = []

        for field, (label, required, max_length, empty_message) in FIELD_RULES.items():
            value = _text(payload.get(field))
            values[field] = value

            if field == 'email':
                try:
                    values[field] = normalize_email(value)
                except EmailNotValidError:
                    errors.append({'field': field, 'message': empty_message})
                continue

            if required and not value:
                errors.append({'field': field, 'message': empty_message})
            elif max_length and len(value) > max_length:
                errors.append({
                    'field': field,
                    'message': f"{label} must be at most {max_length} characters."
                })

        if errors:
            raise ValidationError(errors)
        return cls(**values)

    def sanitized(self):
        return replace(
            self,
            name=sanitize_input(self.name),
            email=sanitize_input(self.email),
            phone=sanitize_input(self.phone),
            subject=sanitize_input(self.subject),
            message=sanitize_input(self.message),
        )

    @property
    def formatted_phone(self):
        return format_phone(self.phone)
