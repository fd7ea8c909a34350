"""
Test structured logging configuration and builder log events.
"""

import pytest
import structlog
from structlog.testing import capture_logs

from lens_acl.acl.builders import generic_acl
from lens_acl.kernel.errors import IncompleteTemplateError
from lens_acl.kernel.logging import (
    configure_logging,
    get_logger,
    redact_context,
)


class TestLoggingFramework:
    """Test structured logging framework."""

    def teardown_method(self) -> None:
        structlog.reset_defaults()

    def test_configure_logging_console(self) -> None:
        """Test logging configuration for console output."""
        configure_logging(json_output=False, log_level="INFO")
        logger = get_logger(__name__)
        assert logger is not None

    def test_configure_logging_json(self) -> None:
        """Test logging configuration for JSON output."""
        configure_logging(json_output=True, log_level="DEBUG")
        logger = get_logger(__name__)
        assert logger is not None

    def test_redact_context(self) -> None:
        """Test on-chain identifiers are redacted."""
        redacted = redact_context(
            {"contract_address": "0xabc", "params": ["1"], "chain_id": 1}
        )
        assert redacted == {
            "contract_address": "***REDACTED***",
            "params": "***REDACTED***",
            "chain_id": 1,
        }


class TestBuilderLogging:
    """Test log events emitted by the generic builder."""

    def test_incomplete_build_logs_missing_fields(self) -> None:
        """Test a failed build logs which fields were missing."""
        with capture_logs() as logs:
            with pytest.raises(IncompleteTemplateError):
                generic_acl(1).with_contract_address("0xabc").build()

        assert logs[-1]["event"] == "generic_acl_incomplete"
        assert logs[-1]["log_level"] == "warning"
        assert logs[-1]["missing_fields"] == ["function_sig", "params"]
        assert logs[-1]["contract_address"] == "***REDACTED***"
        assert logs[-1]["chain_id"] == 1

    def test_successful_build_logs_without_addresses(self) -> None:
        """Test a successful build logs call shape but no addresses."""
        with capture_logs() as logs:
            generic_acl(1).with_contract_address("0xabc").with_function_sig(
                "f(uint256)"
            ).with_params(["1"]).build()

        entry = logs[-1]
        assert entry["event"] == "generic_acl_built"
        assert entry["chain_id"] == 1
        assert entry["param_count"] == 1
        assert "contract_address" not in entry
