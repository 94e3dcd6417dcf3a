"""Configuration loader for mdhtml.toml."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

CONFIG_FILENAME = "mdhtml.toml"


@dataclass
class ServerConfig:
    """Local form server configuration."""
    host: str = "127.0.0.1"
    port: int = 8765
    cors: bool = False


@dataclass
class WatchConfig:
    """Watch mode configuration."""
    debounce_ms: int = 150


@dataclass
class OutputConfig:
    """Output configuration."""
    final_eol: bool = True


@dataclass
class MdhtmlConfig:
    """Complete mdhtml configuration."""
    server: ServerConfig = field(default_factory=ServerConfig)
    watch: WatchConfig = field(default_factory=WatchConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    path: Path | None = None


def load_config(config_path: Path | None = None) -> MdhtmlConfig:
    """
    Load configuration from mdhtml.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/mdhtml.toml

    Args:
        config_path: Explicit path to config file

    Returns:
        MdhtmlConfig with resolved settings
    """
    toml_data: dict[str, Any] = {}
    found: Path | None = None

    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / CONFIG_FILENAME)

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            found = path
            break

    server_data = toml_data.get("server", {})
    server_config = ServerConfig(
        host=server_data.get("host", "127.0.0.1"),
        port=int(server_data.get("port", 8765)),
        cors=bool(server_data.get("cors", False)),
    )

    watch_data = toml_data.get("watch", {})
    watch_config = WatchConfig(
        debounce_ms=int(watch_data.get("debounce_ms", 150))
    )

    output_data = toml_data.get("output", {})
    output_config = OutputConfig(
        final_eol=bool(output_data.get("final_eol", True))
    )

    return MdhtmlConfig(
        server=server_config,
        watch=watch_config,
        output=output_config,
        path=found,
    )
