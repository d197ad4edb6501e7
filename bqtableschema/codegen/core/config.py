"""
Configuration management for code generation.

Every setting resolves from, in order: command-line option, environment
variable, JSON configuration file, built-in default. The result is an
immutable GeneratorConfig built once and passed into the run.
"""

import json
from pathlib import Path
from typing import Dict, Any, List, Mapping, Optional, Union
from dataclasses import dataclass, fields


DEFAULT_OUTPUT_FILE = "bqtableschema/bqtableschema.generated.go"
DEFAULT_PACKAGE_NAME = "bqtableschema"
DEFAULT_GENERATOR_INVOCATION = "python -m bqtableschema"

ENV_CREDENTIALS = "GOOGLE_APPLICATION_CREDENTIALS"
ENV_DATASET = "BIGQUERY_DATASET"
ENV_OUTPUT_FILE = "OUTPUT_FILE"


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


@dataclass(frozen=True)
class GeneratorConfig:
    """Resolved settings for one generator run."""

    key_file: str
    dataset: str
    output_file: str = DEFAULT_OUTPUT_FILE

    # Falls back to the key file's project_id when unset
    project_id: Optional[str] = None

    # Generated file settings
    package_name: str = DEFAULT_PACKAGE_NAME
    generator_invocation: str = DEFAULT_GENERATOR_INVOCATION


@dataclass(frozen=True)
class _Setting:
    field_name: str
    option: Optional[str] = None
    env: Optional[str] = None
    default: Optional[str] = None
    required: bool = False


_SETTINGS = (
    _Setting("key_file", option="keyfile", env=ENV_CREDENTIALS, required=True),
    _Setting("dataset", option="dataset", env=ENV_DATASET, required=True),
    _Setting("output_file", option="output", env=ENV_OUTPUT_FILE, default=DEFAULT_OUTPUT_FILE),
    _Setting("project_id", option="project"),
    _Setting("package_name", option="package_name", default=DEFAULT_PACKAGE_NAME),
    _Setting("generator_invocation", default=DEFAULT_GENERATOR_INVOCATION),
)


def resolve_config(
    options: Optional[Mapping[str, Optional[str]]] = None,
    environ: Optional[Mapping[str, str]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Resolve a complete configuration.

    Empty strings count as unset at every level.

    Args:
        options: Command-line option values keyed by option name
        environ: Environment mapping (the caller passes os.environ)
        config_file: Path to JSON configuration file

    Returns:
        Resolved, immutable configuration

    Raises:
        ConfigError: If a required setting is missing or the file is invalid
    """
    options = options or {}
    environ = environ or {}
    file_config = load_config_file(config_file) if config_file else {}

    values: Dict[str, Any] = {}
    for setting in _SETTINGS:
        value = _resolve_setting(setting, options, environ, file_config)
        if value:
            values[setting.field_name] = value
        elif setting.required:
            raise ConfigError(_missing_message(setting))

    return GeneratorConfig(**values)


def _resolve_setting(
    setting: _Setting,
    options: Mapping[str, Optional[str]],
    environ: Mapping[str, str],
    file_config: Mapping[str, Any],
) -> Optional[str]:
    """Return the first non-empty value for a setting, or None."""
    candidates = []
    if setting.option:
        candidates.append(options.get(setting.option))
    if setting.env:
        candidates.append(environ.get(setting.env))
    candidates.append(file_config.get(setting.field_name))
    candidates.append(setting.default)

    for candidate in candidates:
        if candidate:
            return str(candidate)
    return None


def _missing_message(setting: _Setting) -> str:
    option = "--" + setting.option.replace("_", "-")
    if setting.env:
        return f"set option {option}, or set environment variable {setting.env}"
    return f"set option {option}"


def load_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration from JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    if not path.suffix.lower() == '.json':
        raise ConfigError(f"Configuration file must be JSON: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}")
    except OSError as e:
        raise ConfigError(f"Failed to load configuration file {path}: {str(e)}")

    if not isinstance(config, dict):
        raise ConfigError(f"Configuration file must contain a JSON object: {path}")

    known_fields = {f.name for f in fields(GeneratorConfig)}
    unknown = sorted(set(config) - known_fields)
    if unknown:
        raise ConfigError(f"Unknown settings in configuration file {path}: {', '.join(unknown)}")

    return config


def validate_config(config: GeneratorConfig) -> List[str]:
    """
    Validate configuration.

    Returns:
        List of validation warnings
    """
    from ..languages.go.naming import validate_go_package_name

    warnings = []

    for error in validate_go_package_name(config.package_name):
        warnings.append(f"package_name: {error}")

    if not config.output_file.endswith(".go"):
        warnings.append(f"Output file does not have .go extension: {config.output_file}")

    return warnings
