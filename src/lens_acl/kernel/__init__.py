"""
Kernel - Shared infrastructure for ACL template construction

Errors, builder policy and structured logging used by every template module.
"""

from lens_acl.kernel.errors import (
    IncompleteTemplateError,
    InvalidTemplateError,
    LensAclError,
    TemplateError,
)
from lens_acl.kernel.policy import DEFAULT_POLICY, BuilderPolicy

__all__ = [
    # Policy
    "BuilderPolicy",
    "DEFAULT_POLICY",
    # Errors
    "LensAclError",
    "TemplateError",
    "IncompleteTemplateError",
    "InvalidTemplateError",
]
