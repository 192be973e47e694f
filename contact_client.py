"""
Contact Client - Form controller for the portfolio contact relay

Collects the contact fields through a pluggable form, validates them
locally, posts them once to the relay and remembers a successful
submission for the rest of the session.
"""

import argparse
import re
import sys
from dataclasses import dataclass
from urllib.parse import urlsplit

import requests


CONTACT_PATH = '/personaldata'
EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
FORM_FIELDS = ('name', 'email', 'subject', 'message')

GENERIC_FAILURE = 'Failed to send message.'
NETWORK_FAILURE = 'Network error. Please check your connection.'


@dataclass
class ContactSession:
    """Per-session state: set once a submission succeeds"""
    contact_sent: bool = False


@dataclass(frozen=True)
class AlreadySent:
    message: str = 'You have already submitted a message this session.'


@dataclass(frozen=True)
class Success:
    message: str = 'Message sent successfully.'


@dataclass(frozen=True)
class ValidationFailure:
    message: str


@dataclass(frozen=True)
class NetworkFailure:
    """Submission failed in transit.

    server_reported is False when no response arrived at all and True when
    the relay answered with an error.
    """
    message: str
    server_reported: bool = False


@dataclass(frozen=True)
class Cancelled:
    pass


def endpoint_from_origin(origin):
    """Contact endpoint on the page's own scheme and hostname"""
    parts = urlsplit(origin)
    if not parts.scheme or not parts.hostname:
        raise ValueError(f"Invalid origin: {origin!r}")
    return f"{parts.scheme}://{parts.hostname}{CONTACT_PATH}"


def validate_fields(fields):
    """Return a failure message, or None when the fields can be sent"""
    if not all(fields.get(field) for field in FORM_FIELDS):
        return 'All fields are required.'
    if not EMAIL_RE.match(fields['email']):
        return 'Please enter a valid email address.'
    return None


def _clean_fields(values):
    return {field: str(values.get(field) or '').strip() for field in FORM_FIELDS}


class ContactFormController:
    """Drives one browser-session's worth of contact submissions"""

    def __init__(self, endpoint, session=None, http=None, timeout=None):
        self.endpoint = endpoint
        self.session = session if session is not None else ContactSession()
        self.http = http if http is not None else requests.Session()
        self.timeout = timeout

    def submit(self, values):
        """Validate and post the fields once, returning the outcome"""
        if self.session.contact_sent:
            return AlreadySent()

        fields = _clean_fields(values)
        error = validate_fields(fields)
        if error:
            return ValidationFailure(error)

        try:
            response = self.http.post(self.endpoint, json=fields, timeout=self.timeout)
        except (requests.ConnectionError, requests.Timeout):
            return NetworkFailure(NETWORK_FAILURE)
        except requests.RequestException:
            return NetworkFailure(GENERIC_FAILURE)

        try:
            data = response.json()
        except ValueError:
            return NetworkFailure(GENERIC_FAILURE, server_reported=True)

        if not isinstance(data, dict):
            data = {}
        if not response.ok or not data.get('success'):
            return NetworkFailure(data.get('message') or GENERIC_FAILURE, server_reported=True)

        self.session.contact_sent = True
        return Success(data.get('message') or Success.message)

    def open(self, form):
        """Run the dialog until a submission succeeds or the user cancels.

        Failures are shown inline and the form stays open.
        """
        if self.session.contact_sent:
            outcome = AlreadySent()
            form.notify('Already Sent', outcome.message)
            return outcome

        error = None
        while True:
            values = form.ask(error)
            if values is None:
                return Cancelled()

            outcome = self.submit(values)
            if isinstance(outcome, Success):
                form.notify('Message Sent!',
                            'Thank you for reaching out. I will get back to you soon.')
                return outcome
            error = outcome.message


class ConsoleForm:
    """Terminal rendition of the contact dialog"""

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _prompt(self, label):
        self.stdout.write(f"{label}: ")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip('\n')

    def ask(self, error=None):
        """Prompt for each field; EOF or an empty confirmation cancels"""
        if error:
            self.stdout.write(f"! {error}\n")
        self.stdout.write("Contact Me\n")
        try:
            values = {field: self._prompt(field.capitalize()) for field in FORM_FIELDS}
            confirm = self._prompt("Submit? [y/N]")
        except EOFError:
            return None
        if confirm.strip().lower() not in ('y', 'yes'):
            return None
        return values

    def notify(self, title, text):
        self.stdout.write(f"{title}\n{text}\n")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Send a message through the portfolio contact relay')
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument('--endpoint', help='Full URL of the contact endpoint')
    target.add_argument('--origin', help='Site origin the endpoint is derived from')
    parser.add_argument('--timeout', type=float, default=None, help='Request timeout in seconds')
    args = parser.parse_args(argv)

    endpoint = args.endpoint or endpoint_from_origin(args.origin)
    controller = ContactFormController(endpoint, timeout=args.timeout)
    outcome = controller.open(ConsoleForm())
    return 0 if isinstance(outcome, (Success, AlreadySent)) else 1


if __name__ == '__main__':
    sys.exit(main())
