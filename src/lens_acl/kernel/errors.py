"""
Custom exceptions for lens-acl

A small error hierarchy so callers can catch every library error at once
or react to a single failure precisely.
"""


class LensAclError(Exception):
    """Base exception for all lens-acl errors"""

    pass


class TemplateError(LensAclError):
    """Base class for ACL template construction errors"""

    pass


class IncompleteTemplateError(TemplateError):
    """
    Raised when a template builder is asked to build before every required
    field is present

    The message does not list the missing fields; use
    GenericAclTemplateBuilder.missing_fields() for diagnostics.
    """

    def __init__(self, template: str = "generic_acl", message: str = "") -> None:
        self.template = template
        super().__init__(message or "GenericAclTemplate is missing required fields")


class InvalidTemplateError(TemplateError):
    """Raised when a serialized ACL template cannot be parsed"""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid ACL template: {reason}")
