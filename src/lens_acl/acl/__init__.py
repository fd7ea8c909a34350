"""
ACL - Access control list templates

Template models and the constructors that produce them.
"""

from lens_acl.acl.builders import (
    GenericAclTemplateBuilder,
    generic_acl,
    immutable,
    lens_account_only,
    wallet_only,
)
from lens_acl.acl.models import (
    AclTemplate,
    EvmAddress,
    GenericAclTemplate,
    ImmutableAclTemplate,
    LensAccountAclTemplate,
    WalletAddressAclTemplate,
    parse_acl_template,
    to_payload,
)

__all__ = [
    # Models
    "AclTemplate",
    "EvmAddress",
    "WalletAddressAclTemplate",
    "LensAccountAclTemplate",
    "ImmutableAclTemplate",
    "GenericAclTemplate",
    "parse_acl_template",
    "to_payload",
    # Builders
    "wallet_only",
    "lens_account_only",
    "immutable",
    "generic_acl",
    "GenericAclTemplateBuilder",
]
