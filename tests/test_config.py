"""Tests for configuration loading."""

import os
import tempfile
from pathlib import Path

from mdhtml.config import load_config
from mdhtml.runtime import build_runtime


def test_load_config_defaults():
    """Test loading config with defaults when no file exists."""
    with tempfile.TemporaryDirectory() as tmpdir:
        orig_cwd = os.getcwd()
        try:
            os.chdir(tmpdir)
            config = load_config()
        finally:
            os.chdir(orig_cwd)

    assert config.server.host == "127.0.0.1"
    assert config.server.port == 8765
    assert config.server.cors is False
    assert config.watch.debounce_ms == 150
    assert config.output.final_eol is True
    assert config.path is None


def test_load_config_from_file():
    """Test loading config from a file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "mdhtml.toml"
        config_path.write_text("""
[server]
host = "0.0.0.0"
port = 9000
cors = true

[watch]
debounce_ms = 400

[output]
final_eol = false
""")

        config = load_config(config_path=config_path)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 9000
        assert config.server.cors is True
        assert config.watch.debounce_ms == 400
        assert config.output.final_eol is False
        assert config.path == config_path


def test_load_config_search_cwd():
    """Test config search in current working directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        orig_cwd = os.getcwd()
        try:
            os.chdir(tmpdir)
            Path(tmpdir, "mdhtml.toml").write_text("""
[watch]
debounce_ms = 50
""")

            config = load_config()
            assert config.watch.debounce_ms == 50
            assert config.server.port == 8765
        finally:
            os.chdir(orig_cwd)


def test_build_runtime():
    """Test runtime wiring."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "mdhtml.toml"
        config_path.write_text("[server]\nport = 1234\n")

        rt = build_runtime(config_path=config_path)

        assert rt.config.server.port == 1234
        assert rt.converter.convert("# A") == "<h1>A</h1>"
