import logging
from typing import Any, Dict, Mapping, Optional

import yaml

from kometa_studio.config.secrets import mask_secret
from kometa_studio.config.sections import LIBRARY_SPEC, SECTION_SPECS, SectionSpec
from kometa_studio.config.types import Extras, KometaConfig, LibraryConfig, ProfileSecrets, YamlMode

logger = logging.getLogger(__name__)

__all__ = ["generate_yaml", "YAML_MODES", "BANNERS"]

YAML_MODES = ("template", "masked", "full")

BANNERS: Dict[str, str] = {
    "template": "# Kometa Configuration Template (no secrets)\n# Generated by Kometa Studio\n\n",
    "masked": "# Kometa Configuration (secrets masked)\n# Generated by Kometa Studio\n\n",
    "full": (
        "# Kometa Configuration\n"
        "# Generated by Kometa Studio\n"
        "# WARNING: This file contains secrets!\n\n"
    ),
}

# Keys the editor attaches to a section that are not part of Kometa's format
_INTERNAL_KEYS = ("enabled", "extras")


def _merge_extras(obj: Dict[str, Any], extras: Optional[Extras]) -> Dict[str, Any]:
    if not extras:
        return obj
    return {**obj, **extras}


def _reveal(value: Any, mode: YamlMode) -> Any:
    return mask_secret(value) if mode == "masked" else value


def _overlay_secrets(
    working: Dict[str, Any], spec: SectionSpec, service_secrets: Mapping[str, Any], mode: YamlMode
) -> None:
    for key in spec.secret_keys:
        value = service_secrets.get(key)
        if not value:
            continue

        nested_keys = spec.nested_secret_keys.get(key)
        if nested_keys is not None:
            if not isinstance(value, Mapping):
                continue
            nested: Dict[str, Any] = {}
            for nested_key in nested_keys:
                revealed = _reveal(value.get(nested_key), mode)
                if revealed is not None:
                    nested[nested_key] = revealed
            if nested:
                working[key] = nested
        elif key in spec.credential_keys:
            working[key] = _reveal(value, mode)
        else:
            # Companion fields such as the service URL are never masked
            working[key] = value


def _render_section(
    section: Mapping[str, Any],
    spec: SectionSpec,
    secrets: Optional[ProfileSecrets],
    mode: YamlMode,
) -> Dict[str, Any]:
    working = {key: value for key, value in section.items() if key not in _INTERNAL_KEYS}

    if mode != "template" and secrets:
        service_secrets = secrets.get(spec.name)
        if service_secrets:
            _overlay_secrets(working, spec, service_secrets, mode)

    return _merge_extras(working, section.get("extras"))


def _render_library(library: LibraryConfig) -> Dict[str, Any]:
    rendered = {key: library[key] for key in LIBRARY_SPEC.known_keys if key in library}
    return _merge_extras(rendered, library.get("extras"))


def generate_yaml(
    config: KometaConfig,
    secrets: Optional[ProfileSecrets] = None,
    mode: YamlMode = "template",
    include_comment: bool = True,
) -> str:
    """Generate Kometa YAML from a config and, optionally, profile secrets.

    Sections are written in a fixed order (settings, plex, tmdb, tautulli,
    mdblist, radarr, sonarr, trakt, libraries) and top-level extras are merged
    last. Extras of each section and library are merged back after their
    known fields.

    Plex and TMDB are written unless explicitly disabled, the other services
    only when enabled.

    Modes:
        template: no secrets at all
        masked: profile secrets added, credentials masked, URLs shown
        full: profile secrets added verbatim

    Args:
        config: The config to render
        secrets: Secrets of the active profile
        mode: One of "template", "masked" or "full"
        include_comment: Whether to prepend the banner comment for the mode

    Returns:
        The YAML document text

    Raises:
        ValueError: If mode is not a known mode
    """
    if mode not in YAML_MODES:
        raise ValueError(f"Unknown YAML mode '{mode}', expected one of: {', '.join(YAML_MODES)}")

    output: Dict[str, Any] = {}

    for name, spec in SECTION_SPECS.items():
        section = config.get(name)
        if section is None:
            continue
        if not spec.is_rendered(section.get("enabled")):
            logger.debug(f"Skipping disabled section '{name}'")
            continue
        output[name] = _render_section(section, spec, secrets, mode)

    libraries = config.get("libraries")
    if libraries is not None:
        output["libraries"] = {
            library_name: _render_library(library) for library_name, library in libraries.items()
        }

    output = _merge_extras(output, config.get("extras"))
    logger.debug(f"Generating {mode} YAML with top-level keys: {list(output)}")

    yaml_str = yaml.safe_dump(
        output,
        indent=2,
        width=float("inf"),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )

    if include_comment:
        yaml_str = BANNERS[mode] + yaml_str

    return yaml_str
