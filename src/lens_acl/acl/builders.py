"""
ACL Template Builders - Convenience constructors for every template kind

Three one-shot constructors return finished templates. The generic
contract-call template has more moving parts, so generic_acl() hands out a
builder that accumulates fields and validates them in build().

Example:
    >>> from lens_acl import generic_acl
    >>> acl = (
    ...     generic_acl(1)
    ...     .with_contract_address("0xabc")
    ...     .with_function_sig("transfer(address,uint256)")
    ...     .with_params(["0xdef", "100"])
    ...     .build()
    ... )
"""

from typing import Any, Sequence

from pydantic import ValidationError

from lens_acl.acl.models import (
    EvmAddress,
    GenericAclTemplate,
    ImmutableAclTemplate,
    LensAccountAclTemplate,
    WalletAddressAclTemplate,
)
from lens_acl.kernel.errors import IncompleteTemplateError, InvalidTemplateError
from lens_acl.kernel.logging import get_logger, redact_context
from lens_acl.kernel.policy import DEFAULT_POLICY, BuilderPolicy

logger = get_logger(__name__)

GENERIC_ACL = "generic_acl"

# Checked in this order by missing_fields()
REQUIRED_FIELDS = ("contract_address", "function_sig", "params", "chain_id")


def wallet_only(address: EvmAddress, chain_id: int) -> WalletAddressAclTemplate:
    """
    Restrict access to a single wallet address.

    Args:
        address: The wallet address that can edit/delete the resource
        chain_id: The chain the resource is bound to
    """
    return WalletAddressAclTemplate(wallet_address=address, chain_id=chain_id)


def lens_account_only(account: EvmAddress, chain_id: int) -> LensAccountAclTemplate:
    """
    Restrict access to a single Lens Account.

    Args:
        account: The Lens Account that can edit/delete the resource
        chain_id: The Lens chain the resource is bound to
    """
    return LensAccountAclTemplate(lens_account=account, chain_id=chain_id)


def immutable(chain_id: int) -> ImmutableAclTemplate:
    """Declare the resource as immutable on the given chain."""
    return ImmutableAclTemplate(chain_id=chain_id)


def generic_acl(
    chain_id: int, *, policy: BuilderPolicy | None = None
) -> "GenericAclTemplateBuilder":
    """
    Start a generic contract-call template bound to `chain_id`.

    Access is granted to any address that satisfies the contract call
    evaluation described by the fields set on the returned builder.

    Args:
        chain_id: The chain the resource is bound to
        policy: Validation policy (defaults to BuilderPolicy())

    Returns:
        A fresh GenericAclTemplateBuilder
    """
    return GenericAclTemplateBuilder(chain_id, policy=policy)


class GenericAclTemplateBuilder:
    """
    Mutable accumulator for GenericAclTemplate

    Setters overwrite the previous value and return the builder itself, so
    calls chain in any order. build() validates without freezing anything:
    the builder can keep being mutated and built again, and each build
    returns an independent snapshot.
    """

    def __init__(self, chain_id: int, *, policy: BuilderPolicy | None = None) -> None:
        self.policy = policy if policy is not None else DEFAULT_POLICY
        self._acl: dict[str, Any] = {"template": GENERIC_ACL}
        self._acl["chain_id"] = chain_id

    def reset(self) -> None:
        """
        Discard every accumulated field, keeping only the discriminant.

        The chain id given to the constructor is discarded as well, so a
        reset builder cannot build until with_chain_id() is called again.
        """
        self._acl = {"template": GENERIC_ACL}

    def with_chain_id(self, chain_id: int) -> "GenericAclTemplateBuilder":
        """Replace the chain id (the only way to rebind a reset builder)."""
        self._acl["chain_id"] = chain_id
        return self

    def with_contract_address(self, contract_address: str) -> "GenericAclTemplateBuilder":
        self._acl["contract_address"] = contract_address
        return self

    def with_function_sig(self, function_sig: str) -> "GenericAclTemplateBuilder":
        self._acl["function_sig"] = function_sig
        return self

    def with_params(self, params: Sequence[str]) -> "GenericAclTemplateBuilder":
        """
        Replace the positional call parameters (not appended).

        Raises:
            TypeError: `params` is a single string rather than a sequence of strings
        """
        if isinstance(params, str):
            raise TypeError("params must be a sequence of strings, not a str")
        self._acl["params"] = list(params)
        return self

    def missing_fields(self) -> list[str]:
        """Names of required fields that are absent or empty."""
        missing = []
        for name in REQUIRED_FIELDS:
            value = self._acl.get(name)
            if name == "params" and self.policy.allow_empty_params:
                if value is None:
                    missing.append(name)
            elif not value:
                missing.append(name)
        return missing

    def is_complete(self) -> bool:
        """True when build() would pass the required-field check."""
        return not self.missing_fields()

    def build(self) -> GenericAclTemplate:
        """
        Validate the accumulated fields and return an immutable template.

        Raises:
            IncompleteTemplateError: A required field is absent or empty
            InvalidTemplateError: A field has the wrong type
        """
        missing = self.missing_fields()
        if missing:
            context = {k: v for k, v in self._acl.items() if k != "template"}
            logger.warning(
                "generic_acl_incomplete",
                template=GENERIC_ACL,
                missing_fields=missing,
                **redact_context(context),
            )
            raise IncompleteTemplateError(GENERIC_ACL)

        try:
            acl = GenericAclTemplate.model_validate(
                self._acl,
                context={"allow_empty_params": self.policy.allow_empty_params},
            )
        except ValidationError as exc:
            raise InvalidTemplateError(str(exc)) from exc

        logger.debug(
            "generic_acl_built",
            chain_id=acl.chain_id,
            function_sig=acl.function_sig,
            param_count=len(acl.params),
        )
        return acl
