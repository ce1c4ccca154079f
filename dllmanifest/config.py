"""Configuration loading for dllmanifest (.dllmanifest.yml and command-line overrides)."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

CONFIG_FILENAME = ".dllmanifest.yml"


class ConfigError(RuntimeError):
    """Raised when the run configuration is missing or cannot be parsed."""


@dataclass(frozen=True)
class ManifestConfig:
    """Policy switches that control candidate selection and identity resolution."""

    target_framework: str = ""
    allow_non_dll_files: bool = False
    use_basename: bool = False
    allow_empty_versions: bool = False
    numeric_version: bool = False
    ignore_build: bool = False
    ignore_empty_build: bool = False
    remove_duplicates: bool = False
    recurse: bool = False


_POLICY_FIELDS = tuple(f.name for f in fields(ManifestConfig))
_SWITCHES = tuple(name for name in _POLICY_FIELDS if name != "target_framework")


@dataclass
class RunConfig:
    """Everything a single manifest run needs."""

    targets: List[str] = field(default_factory=list)
    output_path: Optional[str] = None
    log_file: Optional[str] = None
    policy: ManifestConfig = field(default_factory=ManifestConfig)

    def validate(self) -> None:
        """Fail before any output is produced when the targets are unusable."""
        if not self.targets:
            raise ConfigError("At least one target path is required")
        missing = [target for target in self.targets if not Path(target).expanduser().exists()]
        if missing:
            raise ConfigError(f"Target path not found: {', '.join(missing)}")


def load_config(config_path: Path | None = None) -> RunConfig:
    """Load configuration from disk, returning defaults when no file exists."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        if config_path is not None and not config_path.expanduser().is_dir():
            raise ConfigError(f"Configuration file not found: {config_path}")
        return RunConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    root = config_file.parent
    targets = [_resolve_relative(root, target) for target in _as_str_list(data.get("targets"))]
    output = _as_str(data.get("output_path"))
    log_file = _as_str(data.get("log_file"))

    policy_values: Dict[str, Any] = {}
    framework = _as_str(data.get("target_framework"))
    if framework is not None:
        policy_values["target_framework"] = framework
    for name in _SWITCHES:
        value = _as_bool(data.get(name))
        if value is not None:
            policy_values[name] = value

    return RunConfig(
        targets=targets,
        output_path=_resolve_relative(root, output) if output else None,
        log_file=_resolve_relative(root, log_file) if log_file else None,
        policy=ManifestConfig(**policy_values),
    )


def apply_overrides(
    config: RunConfig,
    *,
    targets: Sequence[str] | None = None,
    output_path: str | None = None,
    log_file: str | None = None,
    switches: Mapping[str, Any] | None = None,
) -> RunConfig:
    """Layer command-line values over a loaded configuration.

    ``None`` values mean "not given" and keep whatever the file provided.
    """
    policy_updates = {
        name: value
        for name, value in (switches or {}).items()
        if value is not None and name in _POLICY_FIELDS
    }
    return RunConfig(
        targets=list(targets) if targets else list(config.targets),
        output_path=output_path if output_path is not None else config.output_path,
        log_file=log_file if log_file is not None else config.log_file,
        policy=replace(config.policy, **policy_updates),
    )


def _resolve_config_path(config_path: Path | None) -> Path:
    if config_path is None:
        return Path.cwd() / CONFIG_FILENAME
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return config_path / CONFIG_FILENAME
    return config_path


def _resolve_relative(root: Path, value: str) -> str:
    path = Path(value).expanduser()
    if path.is_absolute():
        return str(path)
    return str(root / path)


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ManifestConfig",
    "RunConfig",
    "apply_overrides",
    "load_config",
]
