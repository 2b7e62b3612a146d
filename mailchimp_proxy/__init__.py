"""MailChimp proxy service: local copies of MailChimp lists and members, mirrored to the API."""

__version__ = "1.0.0"
