"""
Builder Policy - Tunable parameters for ACL template builders

The defaults reproduce the established builder behaviour. Deviations are
opt-in and explicit at the call site.
"""

from pydantic import BaseModel, Field


class BuilderPolicy(BaseModel):
    """
    Parameters controlling how builders validate accumulated fields

    The default instance is what generic_acl() uses when no policy is given.
    """

    policy_version: str = Field(
        default="1.0",
        description="Policy version for tracking changes over time",
    )

    allow_empty_params: bool = Field(
        default=False,
        description=(
            "Accept an empty parameter sequence as valid for no-argument "
            "contract calls (by default an empty sequence counts as missing)"
        ),
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "policy_version": "1.0",
                    "allow_empty_params": False,
                }
            ]
        },
    }


DEFAULT_POLICY = BuilderPolicy()
