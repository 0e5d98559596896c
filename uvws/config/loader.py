# uvws/config/loader.py
"""
Handles loading and merging of uvws settings from TOML files and profiles.
"""
import toml
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import fields as dataclass_fields, MISSING
import structlog

from uvws.exceptions import ConfigError

from .settings import ResolveConfig, OutputFormat

log = structlog.get_logger(__name__)

PROJECT_CONFIG_FILENAMES = [".uvws.toml", "uvws.toml", "pyproject.toml"]
USER_CONFIG_DIR = Path.home() / ".config" / "uvws"
USER_CONFIG_FILE = USER_CONFIG_DIR / "config.toml"

CONFIG_KEY_TO_RESOLVECONFIG_ATTR_MAP: Dict[str, str] = {
    "config_filename": "config_filename",
    "marker": "marker",
    "apply_excludes": "apply_excludes",
    "absolute_paths": "absolute_paths",
    "existing_extra_paths": "existing_extra_paths",
    "output_format": "output_format",
    "output_file": "output_file",
    "console_show_summary": "console_show_summary",
}

# expected python types of raw toml values, keyed by ResolveConfig attribute.
_EXPECTED_TOML_TYPES: Dict[str, type] = {
    "config_filename": str,
    "marker": str,
    "apply_excludes": bool,
    "absolute_paths": bool,
    "existing_extra_paths": list,
    "output_format": str,
    "output_file": str,
    "console_show_summary": bool,
}

def _load_toml_file_data(file_path: Path) -> Dict[str, Any]:
    if not file_path.is_file(): return {}
    log.debug("loading_toml_config_file", path=str(file_path))
    try:
        data = toml.load(file_path)
        return data.get("tool", {}).get("uvws", {}) if file_path.name == "pyproject.toml" else data
    except Exception as e:
        # pyproject.toml belongs to the project; a parse failure there is not a uvws problem.
        if file_path.name == "pyproject.toml":
            log.debug("pyproject_parse_failed_skipped", path=str(file_path), error=str(e))
        else:
            log.warning("config_file_load_error", path=str(file_path), error=str(e))
        return {}

def load_and_merge_configs(project_dir: Optional[Path] = None) -> Dict[str, Any]:
    # user-global settings first, then the first project-local file found.
    merged_toml_data: Dict[str, Any] = {}
    if USER_CONFIG_FILE.is_file():
        log.info("loading_user_global_config", path=str(USER_CONFIG_FILE))
        merged_toml_data.update(_load_toml_file_data(USER_CONFIG_FILE))

    search_dir = project_dir if project_dir is not None else Path.cwd()
    for filename in PROJECT_CONFIG_FILENAMES:
        candidate = search_dir / filename
        if candidate.is_file():
            project_settings = _load_toml_file_data(candidate)
            if project_settings:
                log.info("loading_project_local_config", path=str(candidate))
                user_profiles = merged_toml_data.get("profiles", {})
                project_profiles = project_settings.pop("profiles", {})
                if project_profiles and isinstance(project_profiles, dict):
                    if isinstance(user_profiles, dict):
                        user_profiles.update(project_profiles)
                        project_profiles = user_profiles
                    merged_toml_data["profiles"] = project_profiles
                merged_toml_data.update(project_settings)
                break
    if not merged_toml_data: log.debug("no_configuration_files_loaded")
    return merged_toml_data

def _default_for(attr_name: str) -> Any:
    fd = next(f for f in dataclass_fields(ResolveConfig) if f.name == attr_name)
    return fd.default_factory() if fd.default_factory is not MISSING else fd.default

def _coerce_toml_value(attr_name: str, value: Any, source: str) -> Any:
    expected = _EXPECTED_TOML_TYPES[attr_name]
    if not isinstance(value, expected):
        raise ConfigError(
            f"setting '{attr_name}' in {source} must be of type {expected.__name__}, got {type(value).__name__}"
        )
    if attr_name == "existing_extra_paths":
        if not all(isinstance(p, str) for p in value):
            raise ConfigError(f"setting 'existing_extra_paths' in {source} must be a list of strings")
        return list(value)
    if attr_name == "output_format":
        parsed = OutputFormat.from_string(value)
        return parsed if parsed else _default_for(attr_name)
    if attr_name == "output_file":
        return Path(value) if value else None
    return value

def _apply_toml_section(effective_options: Dict[str, Any], section: Dict[str, Any], source: str):
    for toml_k, rc_attr in CONFIG_KEY_TO_RESOLVECONFIG_ATTR_MAP.items():
        if toml_k in section:
            effective_options[rc_attr] = _coerce_toml_value(rc_attr, section[toml_k], source)

def build_effective_options(
    raw_toml_data: Dict[str, Any],
    profile_name: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Layers dataclass defaults, top-level TOML settings and an optional profile
    into a dict of ResolveConfig keyword arguments. CLI values are layered on
    top of this by the caller.
    """
    effective_options: Dict[str, Any] = {}
    for fd_init in dataclass_fields(ResolveConfig):
        if fd_init.init and fd_init.name != "member_root":
            effective_options[fd_init.name] = _default_for(fd_init.name)

    _apply_toml_section(effective_options, raw_toml_data, "settings file")

    if profile_name:
        profiles = raw_toml_data.get("profiles", {})
        profile_values = profiles.get(profile_name, {}) if isinstance(profiles, dict) else {}
        if profile_values:
            log.info("applying_profile_settings", profile=profile_name)
            _apply_toml_section(effective_options, profile_values, f"profile '{profile_name}'")
        else:
            log.warning("profile_not_found_in_config_files", profile_name=profile_name)

    return effective_options
