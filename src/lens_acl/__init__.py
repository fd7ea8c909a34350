"""
lens-acl - Access control list templates for on-chain resources

Builds the descriptors that say who may modify or delete a resource bound to
a chain: a single wallet, a single Lens Account, nobody (immutable), or any
address that passes a contract call.
"""

from lens_acl.acl import (
    AclTemplate,
    EvmAddress,
    GenericAclTemplate,
    GenericAclTemplateBuilder,
    ImmutableAclTemplate,
    LensAccountAclTemplate,
    WalletAddressAclTemplate,
    generic_acl,
    immutable,
    lens_account_only,
    parse_acl_template,
    to_payload,
    wallet_only,
)
from lens_acl.kernel import (
    BuilderPolicy,
    IncompleteTemplateError,
    InvalidTemplateError,
    LensAclError,
)

__version__ = "0.1.0"
__all__ = [
    "AclTemplate",
    "EvmAddress",
    "WalletAddressAclTemplate",
    "LensAccountAclTemplate",
    "ImmutableAclTemplate",
    "GenericAclTemplate",
    "GenericAclTemplateBuilder",
    "wallet_only",
    "lens_account_only",
    "immutable",
    "generic_acl",
    "parse_acl_template",
    "to_payload",
    "BuilderPolicy",
    "LensAclError",
    "IncompleteTemplateError",
    "InvalidTemplateError",
    "__version__",
]
