import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

from jsonschema import ValidationError as SchemaValidationError
from jsonschema import validate

from kometa_studio.config.errors import ValidationError
from kometa_studio.config.types import (
    KometaConfig,
    ProfileSecrets,
    ValidationIssue,
    ValidationResult,
)

logger = logging.getLogger(__name__)

__all__ = ["load_schema", "validate_config_schema", "validate_config"]

SCHEMA_DIR = Path(__file__).parent / "schemas"
CONFIG_SCHEMA = "kometa-config-schema-1.json"
PROFILE_SCHEMA = "kometa-profile-schema-1.json"


@lru_cache(maxsize=None)
def load_schema(name: str) -> Dict[str, Any]:
    """Load one of the bundled JSON Schemas by file name.

    The result is cached and shared between callers, who must not modify it.
    """
    schema_path = SCHEMA_DIR / name
    with open(schema_path) as schema_file:
        return json.load(schema_file)


def validate_config_schema(config: KometaConfig) -> None:
    """Validate an assembled config against the config JSON Schema.

    Raises:
        ValidationError: If the config does not match, with the schema message
    """
    schema = load_schema(CONFIG_SCHEMA)
    try:
        validate(instance=config, schema=schema)
    except SchemaValidationError as e:
        location = ".".join(str(part) for part in e.absolute_path)
        logger.debug(f"Config schema violation at '{location}': {e.message}")
        if location:
            raise ValidationError(f"Invalid configuration: {location}: {e.message}") from e
        raise ValidationError(f"Invalid configuration: {e.message}") from e


def _warning(path: List[str], message: str) -> ValidationIssue:
    return {"type": "warning", "path": path, "message": message}


def _check_service(
    warnings: List[ValidationIssue],
    secrets: ProfileSecrets,
    service: str,
    label: str,
    fields: Dict[str, str],
) -> None:
    service_secrets = secrets.get(service) or {}
    for field_name, description in fields.items():
        if not service_secrets.get(field_name):
            warnings.append(
                _warning(
                    [service, field_name],
                    f"{label} is enabled but no {description} is configured in the active profile",
                )
            )


def validate_config(
    config: KometaConfig, secrets: Optional[ProfileSecrets] = None
) -> ValidationResult:
    """Check a config for problems that would break or weaken a Kometa run.

    Unlike the schema check this never raises: everything found is reported as
    an issue. Enabled services are checked against the active profile secrets,
    and libraries are checked for having something to process.

    Args:
        config: The parsed config
        secrets: Secrets of the active profile, if any

    Returns:
        A validation result with errors and warnings
    """
    errors: List[ValidationIssue] = []
    warnings: List[ValidationIssue] = []
    secrets = secrets or {}

    plex = config.get("plex")
    if plex and plex.get("enabled"):
        _check_service(warnings, secrets, "plex", "Plex", {"url": "URL", "token": "token"})

    tmdb = config.get("tmdb")
    if tmdb and tmdb.get("enabled"):
        _check_service(warnings, secrets, "tmdb", "TMDB", {"apikey": "API key"})

    tautulli = config.get("tautulli")
    if tautulli and tautulli.get("enabled"):
        _check_service(
            warnings, secrets, "tautulli", "Tautulli", {"url": "URL", "apikey": "API key"}
        )

    mdblist = config.get("mdblist")
    if mdblist and mdblist.get("enabled"):
        _check_service(warnings, secrets, "mdblist", "MDBList", {"apikey": "API key"})

    for service, label in (("radarr", "Radarr"), ("sonarr", "Sonarr")):
        arr = config.get(service)
        if not (arr and arr.get("enabled")):
            continue
        _check_service(warnings, secrets, service, label, {"url": "URL", "token": "token"})
        if arr.get("add_missing") and not arr.get("root_folder_path"):
            warnings.append(
                _warning(
                    [service, "root_folder_path"],
                    f"{label} add_missing is enabled but no root_folder_path is specified",
                )
            )

    trakt = config.get("trakt")
    if trakt and trakt.get("enabled"):
        if not trakt.get("client_id"):
            warnings.append(
                _warning(["trakt", "client_id"], "Trakt is enabled but no client_id is specified")
            )
        _check_service(
            warnings, secrets, "trakt", "Trakt", {"client_secret": "client_secret"}
        )

    libraries = config.get("libraries") or {}
    for library_name, library in libraries.items():
        has_files = any(
            library.get(key) for key in ("collection_files", "overlay_files", "metadata_files")
        )
        if not has_files:
            warnings.append(
                _warning(
                    ["libraries", library_name],
                    f'Library "{library_name}" has no collection_files, overlay_files, or metadata_files',
                )
            )

    if not libraries:
        warnings.append(_warning(["libraries"], "No libraries are configured"))

    return {"valid": not errors, "errors": errors, "warnings": warnings}
