"""
Tests for the error hierarchy and builder policy
"""

import pytest
from pydantic import ValidationError

from lens_acl.kernel.errors import (
    IncompleteTemplateError,
    InvalidTemplateError,
    LensAclError,
    TemplateError,
)
from lens_acl.kernel.policy import DEFAULT_POLICY, BuilderPolicy


def test_template_errors_share_base_class():
    """Test every template error derives from LensAclError"""
    assert issubclass(IncompleteTemplateError, TemplateError)
    assert issubclass(InvalidTemplateError, TemplateError)
    assert issubclass(TemplateError, LensAclError)


def test_incomplete_template_error_defaults():
    """Test default message and template attribute"""
    err = IncompleteTemplateError()

    assert err.template == "generic_acl"
    assert str(err) == "GenericAclTemplate is missing required fields"


def test_invalid_template_error_keeps_reason():
    """Test the reason is stored and included in the message"""
    err = InvalidTemplateError("unknown template 'everyone'")

    assert err.reason == "unknown template 'everyone'"
    assert "everyone" in str(err)


def test_default_policy_rejects_empty_params():
    """Test the default policy keeps empty params invalid"""
    assert DEFAULT_POLICY.allow_empty_params is False
    assert DEFAULT_POLICY.policy_version == "1.0"


def test_policy_is_frozen():
    """Test policies cannot be changed after creation"""
    policy = BuilderPolicy()

    with pytest.raises(ValidationError):
        policy.allow_empty_params = True
