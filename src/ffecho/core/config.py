"""Per-app configuration loaded from ffecho.toml in the context directory.

All keys are optional; a missing file means every default applies. The
defaults match the echo example app that ships inside the framework
repository, two levels below the framework root.
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ffecho.core.errors import ConfigurationError
from ffecho.core.vendor import DEFAULT_VENDOR_DIR, VendorSources

CONFIG_FILENAME = "ffecho.toml"


@dataclass(frozen=True)
class EchoConfig:
    """Immutable app configuration.

    Loaded once at CLI entry point and stored in EchoContext.
    """

    framework_root: Path
    vendor_dir: str = DEFAULT_VENDOR_DIR
    package_name: str = "functions_framework"
    entry_point_dir: str = "bin"
    library_dir: str = "lib"
    manifest_file: str = "functions_framework.gemspec"
    install_command: tuple[str, ...] = ("bundle", "install")
    test_command: tuple[str, ...] = ("bundle", "exec", "ruby", "test/test_app.rb")
    exec_prefix: tuple[str, ...] = ("bundle", "exec")
    server_executable: str = "functions-framework-ruby"
    image: str = "functions-framework-echo-test"
    app_name: str = "echo"
    region: str = "us-central1"

    @property
    def vendor_sources(self) -> VendorSources:
        return VendorSources(
            framework_root=self.framework_root,
            entry_point_dir=self.entry_point_dir,
            library_dir=self.library_dir,
            manifest_file=self.manifest_file,
            package_name=self.package_name,
        )

    def server_binary(self, use_release: bool) -> str:
        """Path of the framework server executable, relative to the app directory."""
        if use_release:
            return self.server_executable
        return "/".join(
            [self.vendor_dir, self.package_name, self.entry_point_dir, self.server_executable]
        )

    @staticmethod
    def defaults(context_dir: Path) -> "EchoConfig":
        return EchoConfig(framework_root=(context_dir / ".." / "..").resolve())


_STRING_KEYS = (
    "vendor_dir",
    "package_name",
    "entry_point_dir",
    "library_dir",
    "manifest_file",
    "server_executable",
    "image",
    "app_name",
    "region",
)
_COMMAND_KEYS = ("install_command", "test_command", "exec_prefix")
_SOURCE_PATH_KEYS = ("entry_point_dir", "library_dir", "manifest_file")


def _require_str(data: dict[str, Any], key: str, config_path: Path) -> str:
    value = data[key]
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"'{key}' in {config_path} must be a non-empty string")
    return value


def _require_command(data: dict[str, Any], key: str, config_path: Path) -> tuple[str, ...]:
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(part, str) for part in value):
        raise ConfigurationError(f"'{key}' in {config_path} must be a list of strings")
    return tuple(value)


def _require_relative_path(value: str, key: str, config_path: Path) -> None:
    path = Path(value)
    if path.is_absolute() or ".." in path.parts:
        raise ConfigurationError(
            f"'{key}' in {config_path} must be a path inside the framework root"
        )


def load_config(context_dir: Path) -> EchoConfig:
    """Load ffecho.toml from context_dir, falling back to defaults.

    Relative framework_root values are resolved against context_dir.

    Raises:
        ConfigurationError: If the file is not valid TOML or a key has the wrong type
    """
    config_path = context_dir / CONFIG_FILENAME
    if not config_path.exists():
        return EchoConfig.defaults(context_dir)

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {config_path}: {e}") from e

    overrides: dict[str, Any] = {}
    for key in _STRING_KEYS:
        if key in data:
            overrides[key] = _require_str(data, key, config_path)
    for key in _COMMAND_KEYS:
        if key in data:
            overrides[key] = _require_command(data, key, config_path)
    for key in _SOURCE_PATH_KEYS:
        if key in overrides:
            _require_relative_path(overrides[key], key, config_path)

    if "framework_root" in data:
        root = Path(_require_str(data, "framework_root", config_path)).expanduser()
        framework_root = root if root.is_absolute() else context_dir / root
    else:
        framework_root = context_dir / ".." / ".."

    return EchoConfig(framework_root=framework_root.resolve(), **overrides)
