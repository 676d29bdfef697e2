from typing import Any, Collection, Dict, Mapping, Optional, Tuple

from kometa_studio.config.types import Extras

__all__ = ["partition_fields"]


def partition_fields(
    raw: Mapping[str, Any],
    known_keys: Collection[str],
    secret_keys: Collection[str] = (),
) -> Tuple[Dict[str, Any], Optional[Extras]]:
    """Split a decoded block into known fields and extras.

    Keys listed in known_keys are copied to the known mapping, keys listed in
    secret_keys are dropped (they are read separately into the profile), and
    every other key goes to extras. Values are copied as-is, without type
    checks, and the input key order is kept.

    Args:
        raw: Decoded mapping of one block
        known_keys: Keys the editor understands for this block
        secret_keys: Credential keys that must not stay in the config

    Returns:
        Tuple of (known fields, extras), where extras is None if no key qualified
    """
    known: Dict[str, Any] = {}
    extras: Extras = {}

    for key, value in raw.items():
        if key in known_keys:
            known[key] = value
        elif key in secret_keys:
            continue
        else:
            extras[key] = value

    return known, (extras or None)
