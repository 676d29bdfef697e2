import logging
from typing import Any, Dict, cast

from kometa_studio.config.errors import ValidationError
from kometa_studio.config.loader import load_document
from kometa_studio.config.partition import partition_fields
from kometa_studio.config.sections import (
    LIBRARY_SPEC,
    SECTION_SPECS,
    TOP_LEVEL_KEYS,
    SectionSpec,
)
from kometa_studio.config.types import KometaConfig, LibraryConfig
from kometa_studio.config.validation import validate_config_schema

logger = logging.getLogger(__name__)

__all__ = ["parse_kometa_yaml"]


def _parse_section(
    raw: Dict[str, Any], spec: SectionSpec, preserve_extras: bool
) -> Dict[str, Any]:
    """Partition one top-level block and mark integrations enabled by presence.

    A document-level ``enabled`` key is not one of the known fields, so it
    stays in extras and is written back unchanged.
    """
    data, extras = partition_fields(raw, spec.known_keys, spec.secret_keys)

    section: Dict[str, Any] = {}
    if spec.has_enabled_flag:
        section["enabled"] = True
    section.update(data)
    if preserve_extras and extras:
        section["extras"] = extras
    return section


def _parse_libraries(raw: Dict[str, Any], preserve_extras: bool) -> Dict[str, LibraryConfig]:
    libraries: Dict[str, LibraryConfig] = {}
    for library_name, library_raw in raw.items():
        if not isinstance(library_raw, dict):
            logger.debug(f"Skipping library '{library_name}': not a mapping")
            continue

        data, extras = partition_fields(library_raw, LIBRARY_SPEC.known_keys)
        library = cast(LibraryConfig, data)
        if preserve_extras and extras:
            library["extras"] = extras
        libraries[library_name] = library
    return libraries


def parse_kometa_yaml(text: str, preserve_extras: bool = True) -> KometaConfig:
    """Parse Kometa YAML into a config, keeping unknown keys in extras.

    Each known section is split into the fields the editor understands, the
    credentials (dropped here, see extract_secrets_from_yaml) and everything
    else, which is kept under an ``extras`` key at the level it was found:
    top level, per section and per library.

    Integration sections are enabled by their presence in the document; an
    ``enabled`` key written in a block stays in that block's extras. Libraries
    whose value is not a mapping (e.g. ``Movies:`` with nothing under it) are
    dropped.

    Args:
        text: YAML document text
        preserve_extras: Whether to keep unknown keys. If False they are
            discarded and the result only holds known fields.

    Returns:
        The assembled and schema-validated config

    Raises:
        FormatError: If the text is not valid YAML or not a mapping
        ValidationError: If a section has the wrong shape or the assembled
            config does not match the config schema
    """
    document = load_document(text)
    config: Dict[str, Any] = {}

    for name, spec in SECTION_SPECS.items():
        raw = document.get(name)
        if raw is None:
            continue
        if not isinstance(raw, dict):
            raise ValidationError(
                f"Invalid configuration: {name}: expected a mapping, got {type(raw).__name__}"
            )
        config[name] = _parse_section(raw, spec, preserve_extras)
        logger.debug(f"Parsed section '{name}' with fields: {sorted(config[name])}")

    libraries_raw = document.get("libraries")
    if libraries_raw is not None:
        if not isinstance(libraries_raw, dict):
            raise ValidationError(
                f"Invalid configuration: libraries: expected a mapping, got {type(libraries_raw).__name__}"
            )
        config["libraries"] = _parse_libraries(libraries_raw, preserve_extras)
        logger.debug(f"Parsed libraries: {list(config['libraries'])}")

    if preserve_extras:
        _, extras = partition_fields(document, TOP_LEVEL_KEYS)
        if extras:
            config["extras"] = extras

    validate_config_schema(cast(KometaConfig, config))
    return cast(KometaConfig, config)
