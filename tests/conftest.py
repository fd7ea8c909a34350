"""
Pytest configuration and shared fixtures
"""

import pytest

from lens_acl.acl.builders import GenericAclTemplateBuilder, generic_acl
from lens_acl.kernel.policy import BuilderPolicy


@pytest.fixture
def chain_id() -> int:
    """Lens Chain mainnet id"""
    return 232


@pytest.fixture
def wallet_address() -> str:
    """Checksummed EIP-55 address"""
    return "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


@pytest.fixture
def contract_address() -> str:
    return "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984"


@pytest.fixture
def policy() -> BuilderPolicy:
    """Provide the default builder policy for tests"""
    return BuilderPolicy()


@pytest.fixture
def complete_builder(
    chain_id: int, contract_address: str, wallet_address: str
) -> GenericAclTemplateBuilder:
    """
    Provide a builder with every required field set

    Tests mutate it further to check overwrite and reset behaviour.
    """
    return (
        generic_acl(chain_id)
        .with_contract_address(contract_address)
        .with_function_sig("balanceOf(address)")
        .with_params([wallet_address])
    )
