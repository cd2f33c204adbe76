"""Tests for pathwise.config — GeneratorConfig frozen dataclass."""

import pytest

from pathwise.config import GeneratorConfig, UpdateAction


class TestGeneratorConfig:
    def test_defaults(self) -> None:
        cfg = GeneratorConfig()

        assert cfg.error_url == "/error"
        assert cfg.error_message == "Error generating URL"
        assert cfg.update_delay == 0.0
        assert cfg.update_action is UpdateAction.NAVIGATE

    def test_override(self) -> None:
        cfg = GeneratorConfig(
            error_url="/oops",
            update_delay=0.25,
            update_action=UpdateAction.STATE_ONLY,
        )

        assert cfg.error_url == "/oops"
        assert cfg.update_delay == 0.25
        assert cfg.update_action is UpdateAction.STATE_ONLY

    def test_frozen(self) -> None:
        cfg = GeneratorConfig()

        with pytest.raises(AttributeError):
            cfg.error_url = "/elsewhere"  # type: ignore[misc]

    def test_negative_delay(self) -> None:
        with pytest.raises(ValueError, match="update_delay"):
            GeneratorConfig(update_delay=-0.1)


class TestUpdateAction:
    def test_values(self) -> None:
        assert UpdateAction.NAVIGATE.value == "navigate"
        assert UpdateAction("state-only") is UpdateAction.STATE_ONLY
