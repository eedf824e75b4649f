"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_form_bridge.schema_management.schema_projection import load_schema_document
from schema_form_bridge.schema_management.schema_resolution import SchemaError

from .runtime_settings import BridgeOptions, Configuration, RemoveAdditional, SchemaConfig

_OPTION_ALIASES: dict[str, tuple[str, ...]] = {
    "all_errors": ("all_errors", "allErrors"),
    "use_defaults": ("use_defaults", "useDefaults"),
    "remove_additional": ("remove_additional", "removeAdditional"),
}


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema = _parse_schema_section(parsed.get("schema"), path.parent)
    try:
        load_schema_document(schema)
    except SchemaError as exc:
        raise ConfigurationError(str(exc)) from exc

    options = parse_bridge_options(parsed.get("options"))
    return Configuration(path=path, schema=schema, options=options)


def parse_bridge_options(value: Any) -> BridgeOptions:
    """Normalize an options mapping; snake_case and camelCase keys are accepted."""
    if value is None:
        return BridgeOptions()
    if isinstance(value, BridgeOptions):
        return value
    section = _require_mapping(value, "options")

    known_keys = {alias for aliases in _OPTION_ALIASES.values() for alias in aliases}
    unknown = sorted(str(key) for key in section if key not in known_keys)
    if unknown:
        raise ConfigurationError(f"Unknown option(s): {', '.join(unknown)}")

    defaults = BridgeOptions()
    all_errors = _pick_option(section, "all_errors", defaults.all_errors)
    use_defaults = _pick_option(section, "use_defaults", defaults.use_defaults)
    remove_additional = _pick_option(section, "remove_additional", defaults.remove_additional)
    return BridgeOptions(
        all_errors=_require_bool(all_errors, "options.all_errors"),
        use_defaults=_require_bool(use_defaults, "options.use_defaults"),
        remove_additional=_require_remove_additional(remove_additional),
    )


def _parse_schema_section(value: Any, base_path: Path) -> SchemaConfig:
    if isinstance(value, str):
        text, source_path = value, None
    else:
        section = _require_mapping(value, "schema")
        text, source_path = _load_schema_definition(section, base_path)
    if not text.strip():
        raise ConfigurationError("Schema text cannot be empty.")
    return SchemaConfig(text=text, source_path=source_path)


def _load_schema_definition(
    definition: Mapping[str, Any], base_path: Path
) -> tuple[str, Path | None]:
    inline = definition.get("inline")
    path_value = definition.get("path")
    if inline and path_value:
        raise ConfigurationError("Schema definition must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("Schema inline value must be a string.")
        return inline, None
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("Schema path must be a string.")
        schema_path = _resolve_path(base_path, path_value)
        if not schema_path.exists():
            raise ConfigurationError(f"Schema file not found: {schema_path}")
        text = schema_path.read_text(encoding="utf-8")
        return text, schema_path
    raise ConfigurationError("Schema definition requires either inline or path.")


def _pick_option(section: Mapping[str, Any], name: str, default: Any) -> Any:
    present = [alias for alias in _OPTION_ALIASES[name] if alias in section]
    if len(present) > 1:
        raise ConfigurationError(f"Option {name} is set more than once: {', '.join(present)}")
    if not present:
        return default
    return section[present[0]]


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_remove_additional(value: Any) -> RemoveAdditional:
    if isinstance(value, bool):
        return value
    if value == "all":
        return "all"
    raise ConfigurationError("options.remove_additional must be true, false or 'all'.")
