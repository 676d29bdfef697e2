"""
Credential handling for Kometa configs.

Secrets are read straight from the document text, independently of the
parsed config, so a gap in a section's secret-key list can never turn the
config into a source of credentials. Masking is a display obfuscation for
previews and listings; it is not encryption.
"""
import copy
import logging
from typing import Any, Dict, Optional, cast

from kometa_studio.config.loader import load_document
from kometa_studio.config.sections import SECTION_SPECS, SERVICE_NAMES
from kometa_studio.config.types import ProfileSecrets

logger = logging.getLogger(__name__)

__all__ = ["extract_secrets_from_yaml", "mask_secret", "mask_profile_secrets", "MASK"]

MASK = "****"
_MIN_PARTIAL_LENGTH = 8
_VISIBLE_CHARS = 4


def mask_secret(secret: Optional[str]) -> Optional[str]:
    """Redact a secret for display.

    Returns None when there is nothing to mask, ``****`` for values shorter
    than 8 characters, and the first and last four characters around
    ``****`` otherwise.
    """
    if not secret:
        return None
    # YAML may decode a numeric token as an int
    secret = str(secret)
    if len(secret) < _MIN_PARTIAL_LENGTH:
        return MASK
    return f"{secret[:_VISIBLE_CHARS]}{MASK}{secret[-_VISIBLE_CHARS:]}"


def _has_value(value: Any) -> bool:
    return value is not None and value != ""


def _as_secret(value: Any) -> str:
    # Profiles store secrets as strings; YAML may decode an all-digit apikey as an int
    return str(value)


def _extract_service(raw: Dict[str, Any], service: str) -> Dict[str, Any]:
    spec = SECTION_SPECS[service]
    record: Dict[str, Any] = {}

    for key in spec.secret_keys:
        value = raw.get(key)
        nested_keys = spec.nested_secret_keys.get(key)
        if nested_keys is None:
            if _has_value(value):
                record[key] = _as_secret(value)
        elif isinstance(value, dict):
            nested = {
                nested_key: _as_secret(value[nested_key])
                for nested_key in nested_keys
                if _has_value(value.get(nested_key))
            }
            if nested:
                record[key] = nested

    return record


def extract_secrets_from_yaml(text: str) -> ProfileSecrets:
    """Read the credential fields of every service from Kometa YAML.

    Only the fields declared secret for a service are copied (for example
    plex url and token, or the trakt authorization token pair). A service
    without any secret value in the document has no entry in the result.

    Args:
        text: YAML document text

    Returns:
        The secrets found, keyed by service

    Raises:
        FormatError: If the text is not valid YAML or not a mapping
    """
    document = load_document(text)
    secrets: Dict[str, Any] = {}

    for service in SERVICE_NAMES:
        raw = document.get(service)
        if not isinstance(raw, dict):
            continue
        record = _extract_service(raw, service)
        if record:
            secrets[service] = record

    logger.debug(f"Extracted secrets for services: {list(secrets)}")
    return cast(ProfileSecrets, secrets)


def mask_profile_secrets(secrets: ProfileSecrets) -> ProfileSecrets:
    """Return a copy of a secrets record with every credential masked.

    Companion fields such as service URLs are kept as they are.
    """
    masked = cast(Dict[str, Any], copy.deepcopy(secrets))

    for service, record in masked.items():
        spec = SECTION_SPECS.get(service)
        if spec is None or not isinstance(record, dict):
            continue
        for key in spec.credential_keys:
            if key in record:
                record[key] = mask_secret(record[key])
        for key, nested_keys in spec.nested_secret_keys.items():
            nested = record.get(key)
            if isinstance(nested, dict):
                for nested_key in nested_keys:
                    if nested_key in nested:
                        nested[nested_key] = mask_secret(nested[nested_key])

    return cast(ProfileSecrets, masked)
