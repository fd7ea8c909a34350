"""
ACL Template Models - Descriptors of who may modify a resource

Each template kind is an immutable Pydantic model tagged by its `template`
field. Python attributes are snake_case; the serialized (wire) form uses the
camelCase aliases expected by downstream consumers.

Address format is not checked here. EvmAddress is a plain string and callers
validate checksums before or after construction.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from lens_acl.kernel.errors import InvalidTemplateError

EvmAddress = str


class WalletAddressAclTemplate(BaseModel):
    """
    Restricts edit/delete access to a single wallet address

    Attributes:
        template: Always "wallet_address"
        wallet_address: The wallet allowed to modify the resource
        chain_id: Chain the resource is bound to
    """

    template: Literal["wallet_address"] = "wallet_address"
    wallet_address: EvmAddress = Field(alias="walletAddress")
    chain_id: int = Field(alias="chainId")

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "template": "wallet_address",
                    "walletAddress": "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
                    "chainId": 37111,
                }
            ]
        },
    }


class LensAccountAclTemplate(BaseModel):
    """
    Restricts edit/delete access to a single Lens Account

    Same representation as the wallet template; the address names a platform
    account rather than a raw wallet.
    """

    template: Literal["lens_account"] = "lens_account"
    lens_account: EvmAddress = Field(alias="lensAccount")
    chain_id: int = Field(alias="chainId")

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "populate_by_name": True,
    }


class ImmutableAclTemplate(BaseModel):
    """Declares the resource as immutable: nobody may ever modify it"""

    template: Literal["immutable"] = "immutable"
    chain_id: int = Field(alias="chainId")

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "populate_by_name": True,
    }


class GenericAclTemplate(BaseModel):
    """
    Grants access to any address for which a contract call succeeds

    The call is described by the contract address, the function signature
    and the positional parameters, in order. Usually produced through
    generic_acl() rather than instantiated directly.

    Attributes:
        template: Always "generic_acl"
        contract_address: Contract to call
        function_sig: Solidity function signature, e.g. "transfer(address,uint256)"
        params: Positional call arguments (order is significant)
        chain_id: Chain the resource is bound to
    """

    template: Literal["generic_acl"] = "generic_acl"
    contract_address: str = Field(alias="contractAddress", min_length=1)
    function_sig: str = Field(alias="functionSig", min_length=1)
    params: tuple[str, ...] = Field(alias="params")
    chain_id: int = Field(alias="chainId")

    @field_validator("params")
    @classmethod
    def params_not_empty(
        cls, value: tuple[str, ...], info: ValidationInfo
    ) -> tuple[str, ...]:
        """Reject an empty call unless the context sets allow_empty_params"""
        context = info.context or {}
        if not value and not context.get("allow_empty_params", False):
            raise ValueError("params must contain at least one argument")
        return value

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "template": "generic_acl",
                    "contractAddress": "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984",
                    "functionSig": "balanceOf(address)",
                    "params": ["0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"],
                    "chainId": 1,
                }
            ]
        },
    }


AclTemplate = Annotated[
    Union[
        WalletAddressAclTemplate,
        LensAccountAclTemplate,
        ImmutableAclTemplate,
        GenericAclTemplate,
    ],
    Field(discriminator="template"),
]

_acl_template_adapter: TypeAdapter[AclTemplate] = TypeAdapter(AclTemplate)


def parse_acl_template(data: dict[str, Any]) -> AclTemplate:
    """
    Validate a serialized ACL template into its concrete model

    Accepts both the camelCase wire keys and the snake_case field names.
    The `template` key selects the variant.

    Raises:
        InvalidTemplateError: Unknown template kind or malformed fields
    """
    try:
        return _acl_template_adapter.validate_python(data)
    except ValidationError as exc:
        raise InvalidTemplateError(str(exc)) from exc


def to_payload(template: AclTemplate) -> dict[str, Any]:
    """Serialize a template to a JSON-ready dict using the wire keys"""
    return template.model_dump(mode="json", by_alias=True)
