"""Unit tests for config_manager module."""

import os
import textwrap
from unittest.mock import patch

import pytest

from ubuntu_headers.config_manager import (
    DEFAULT_PORTS_MIRROR,
    DEFAULT_PRIMARY_MIRROR,
    DEFAULT_SECURITY_MIRROR,
    MirrorConfig,
)


FULL_YAML = textwrap.dedent("""\
    mirrors:
      primary: "https://mirror.example.com/ubuntu/pool/main/l/"
      security: "https://security.example.com/ubuntu/pool/main/l"
      ports: "https://ports.example.com/ubuntu-ports/pool/main/l"
""")

PARTIAL_YAML = textwrap.dedent("""\
    primary: "https://mirror.example.com/ubuntu/pool/main/l"
""")


@pytest.fixture
def config_dir(tmp_path):
    """Create a temporary config directory with sample YAML files."""
    (tmp_path / "full.yaml").write_text(FULL_YAML)
    (tmp_path / "partial.yaml").write_text(PARTIAL_YAML)
    return tmp_path


class TestMirrorConfigDefaults:
    def test_defaults_are_public_ubuntu_mirrors(self):
        config = MirrorConfig()
        assert config.primary == "https://mirrors.edge.kernel.org/ubuntu/pool/main/l"
        assert config.security == "http://security.ubuntu.com/ubuntu/pool/main/l"
        assert config.ports == "http://ports.ubuntu.com/ubuntu-ports/pool/main/l"


class TestMirrorConfigFromYaml:
    def test_loads_all_mirrors(self, config_dir):
        config = MirrorConfig.from_yaml(config_dir / "full.yaml")
        assert config.primary == "https://mirror.example.com/ubuntu/pool/main/l"
        assert config.security == "https://security.example.com/ubuntu/pool/main/l"
        assert config.ports == "https://ports.example.com/ubuntu-ports/pool/main/l"

    def test_strips_trailing_slash(self, config_dir):
        config = MirrorConfig.from_yaml(config_dir / "full.yaml")
        assert not config.primary.endswith("/")

    def test_missing_keys_keep_defaults(self, config_dir):
        config = MirrorConfig.from_yaml(config_dir / "partial.yaml")
        assert config.primary == "https://mirror.example.com/ubuntu/pool/main/l"
        assert config.security == DEFAULT_SECURITY_MIRROR
        assert config.ports == DEFAULT_PORTS_MIRROR

    def test_empty_file_uses_defaults(self, tmp_path):
        (tmp_path / "empty.yaml").write_text("")
        assert MirrorConfig.from_yaml(tmp_path / "empty.yaml") == MirrorConfig()

    def test_non_mapping_raises(self, tmp_path):
        (tmp_path / "list.yaml").write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="must be a mapping"):
            MirrorConfig.from_yaml(tmp_path / "list.yaml")

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            MirrorConfig.from_yaml(tmp_path / "nonexistent.yaml")


class TestMirrorConfigFromEnv:
    def test_no_env_var_uses_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = MirrorConfig.from_env()
        assert config.primary == DEFAULT_PRIMARY_MIRROR

    def test_env_var_points_to_yaml(self, config_dir):
        path = str(config_dir / "full.yaml")
        with patch.dict(os.environ, {"HEADERS_MIRROR_CONFIG": path}):
            config = MirrorConfig.from_env()
        assert config.ports == "https://ports.example.com/ubuntu-ports/pool/main/l"


class TestMirrorConfigValidation:
    def test_mirrors_entry_not_mapping_raises(self, tmp_path):
        (tmp_path / "bad.yaml").write_text("mirrors:\n  - https://a.example.com\n")
        with pytest.raises(ValueError, match="must be a mapping"):
            MirrorConfig.from_yaml(tmp_path / "bad.yaml")

    def test_null_mirror_raises(self, tmp_path):
        (tmp_path / "bad.yaml").write_text("mirrors:\n  primary:\n")
        with pytest.raises(ValueError, match="primary"):
            MirrorConfig.from_yaml(tmp_path / "bad.yaml")

    def test_non_string_mirror_raises(self, tmp_path):
        (tmp_path / "bad.yaml").write_text("mirrors:\n  ports: 8080\n")
        with pytest.raises(ValueError, match="ports"):
            MirrorConfig.from_yaml(tmp_path / "bad.yaml")

    def test_empty_mirror_raises(self, tmp_path):
        (tmp_path / "bad.yaml").write_text('mirrors:\n  security: "/"\n')
        with pytest.raises(ValueError, match="security"):
            MirrorConfig.from_yaml(tmp_path / "bad.yaml")
