#!/usr/bin/env python3
"""
ACL Templates Demonstration - Building access descriptors

Builds one template of each kind, serializes them to their wire form and
parses them back.

Run:
    python examples/acl_templates_demo.py
"""

import json

from lens_acl import (
    IncompleteTemplateError,
    generic_acl,
    immutable,
    lens_account_only,
    parse_acl_template,
    to_payload,
    wallet_only,
)
from lens_acl.kernel.logging import configure_logging

LENS_CHAIN_ID = 232
WALLET = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
TOKEN = "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984"


def print_section(title: str) -> None:
    """Print section header"""
    print(f"\n{'='*70}")
    print(f"  {title}")
    print(f"{'='*70}\n")


def main() -> None:
    configure_logging(json_output=False, log_level="DEBUG")

    print_section("Direct constructors")
    templates = [
        wallet_only(WALLET, LENS_CHAIN_ID),
        lens_account_only(WALLET, LENS_CHAIN_ID),
        immutable(LENS_CHAIN_ID),
    ]
    for template in templates:
        print(json.dumps(to_payload(template)))

    print_section("Generic contract-call template")
    builder = (
        generic_acl(LENS_CHAIN_ID)
        .with_contract_address(TOKEN)
        .with_function_sig("balanceOf(address)")
    )
    try:
        builder.build()
    except IncompleteTemplateError as exc:
        print(f"Not yet: {exc} (missing {builder.missing_fields()})")

    token_gate = builder.with_params([WALLET]).build()
    payload = to_payload(token_gate)
    print(json.dumps(payload, indent=2))

    print_section("Round trip")
    assert parse_acl_template(payload) == token_gate
    print("Parsed payload matches the built template")


if __name__ == "__main__":
    main()
