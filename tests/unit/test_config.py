import pytest

from ratelimit_headers.config import HeaderParsingConfig, InvalidDurationPolicy
from ratelimit_headers.exceptions import ConfigurationError


class TestInvalidDurationPolicy:
    def test_enum_values(self):
        """Test InvalidDurationPolicy enum values."""
        assert InvalidDurationPolicy.RAISE.value == "raise"
        assert InvalidDurationPolicy.IGNORE.value == "ignore"


class TestHeaderParsingConfig:
    def test_default_values(self):
        """Test default configuration values."""
        config = HeaderParsingConfig()

        assert config.strict_durations is False
        assert config.on_invalid_duration is InvalidDurationPolicy.RAISE
        assert config.log_invalid_headers is True

    def test_policy_from_string(self):
        """String policies are converted to the enum."""
        config = HeaderParsingConfig(on_invalid_duration="ignore")
        assert config.on_invalid_duration is InvalidDurationPolicy.IGNORE

    def test_policy_from_enum(self):
        """Enum policies are kept as given."""
        config = HeaderParsingConfig(on_invalid_duration=InvalidDurationPolicy.IGNORE)
        assert config.on_invalid_duration is InvalidDurationPolicy.IGNORE

    def test_invalid_policy(self):
        """Unknown policies are rejected."""
        with pytest.raises(ConfigurationError, match="on_invalid_duration"):
            HeaderParsingConfig(on_invalid_duration="skip")
