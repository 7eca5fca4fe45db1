"""Tests for ValidationConfig loading."""

import pytest

from fieldcheck import ConfigurationError, ValidationConfig


class TestValidationConfig:
    """Test config construction and loaders."""

    def test_defaults(self):
        """Test default settings."""
        config = ValidationConfig()
        assert config.uuid_versions == (1, 4)
        assert config.email_allow_smtputf8 is True
        assert config.email_allow_quoted_local is False
        assert config.email_check_deliverability is False

    def test_from_dict(self):
        """Test building from a mapping."""
        config = ValidationConfig.from_dict(
            {"uuid_versions": [4, 7], "email_allow_smtputf8": "no"}
        )
        assert config.uuid_versions == (4, 7)
        assert config.email_allow_smtputf8 is False

    def test_unknown_keys(self):
        """Test that unknown keys are rejected with context."""
        with pytest.raises(ConfigurationError) as exc_info:
            ValidationConfig.from_dict({"uuid_version": 4})
        assert exc_info.value.context["keys"] == ["uuid_version"]

    @pytest.mark.parametrize("versions", [[], [2], [9], "a,b", {"v": 1}])
    def test_bad_versions(self, versions):
        """Test invalid UUID version lists."""
        with pytest.raises(ConfigurationError):
            ValidationConfig.from_dict({"uuid_versions": versions})

    def test_bad_boolean(self):
        """Test that unparseable booleans are rejected."""
        with pytest.raises(ConfigurationError):
            ValidationConfig.from_dict({"email_check_deliverability": "maybe"})

    def test_from_yaml_section(self, tmp_path):
        """Test loading from a fieldcheck section."""
        path = tmp_path / "fieldcheck.yaml"
        path.write_text(
            "fieldcheck:\n"
            "  uuid_versions: [1, 4, 7]\n"
            "  email_allow_quoted_local: true\n"
        )
        config = ValidationConfig.from_yaml(path)
        assert config.uuid_versions == (1, 4, 7)
        assert config.email_allow_quoted_local is True

    def test_from_yaml_top_level(self, tmp_path):
        """Test loading settings at the top level."""
        path = tmp_path / "config.yaml"
        path.write_text("uuid_versions: 4\n")
        assert ValidationConfig.from_yaml(str(path)).uuid_versions == (4,)

    def test_from_yaml_empty(self, tmp_path):
        """Test that an empty file yields defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert ValidationConfig.from_yaml(path) == ValidationConfig()

    def test_from_yaml_errors(self, tmp_path):
        """Test missing, malformed and non-mapping files."""
        with pytest.raises(ConfigurationError):
            ValidationConfig.from_yaml(tmp_path / "missing.yaml")

        bad = tmp_path / "bad.yaml"
        bad.write_text("fieldcheck: [unclosed\n")
        with pytest.raises(ConfigurationError):
            ValidationConfig.from_yaml(bad)

        listing = tmp_path / "list.yaml"
        listing.write_text("- 1\n- 4\n")
        with pytest.raises(ConfigurationError):
            ValidationConfig.from_yaml(listing)

    def test_from_env(self, monkeypatch):
        """Test loading from environment variables."""
        monkeypatch.setenv("FIELDCHECK_UUID_VERSIONS", "1, 4,7")
        monkeypatch.setenv("FIELDCHECK_EMAIL_CHECK_DELIVERABILITY", "TRUE")
        config = ValidationConfig.from_env()
        assert config.uuid_versions == (1, 4, 7)
        assert config.email_check_deliverability is True
        assert config.email_allow_smtputf8 is True

    def test_from_env_custom_prefix(self, monkeypatch):
        """Test a custom environment prefix."""
        monkeypatch.setenv("APP_VALIDATION_EMAIL_ALLOW_SMTPUTF8", "0")
        config = ValidationConfig.from_env(prefix="APP_VALIDATION_")
        assert config.email_allow_smtputf8 is False
