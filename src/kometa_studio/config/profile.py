import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union, cast

import yaml
from jsonschema import ValidationError, validate

from kometa_studio.config.types import Profile, ProfileSecrets
from kometa_studio.config.validation import PROFILE_SCHEMA, load_schema

logger = logging.getLogger(__name__)

__all__ = ["load_profile", "build_profile", "dump_profile"]


def load_profile(path: Union[str, Path]) -> Profile:
    """Load a profile (name, description and service secrets) from a YAML file.

    The profile store is the owner of credentials; this only reads the
    files it exports so that a config can be rendered with them.

    Args:
        path: Path to the profile YAML file

    Returns:
        The validated profile

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a valid profile
    """
    path = Path(path)
    logger.debug(f"Loading profile from: {path}")
    if not path.exists():
        raise FileNotFoundError(f"Profile not found at {path}")

    with open(path) as f:
        try:
            profile = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid profile YAML in {path}: {e}") from e

    if profile is None:
        profile = {}

    try:
        validate(instance=profile, schema=load_schema(PROFILE_SCHEMA))
    except ValidationError as e:
        raise ValueError(f"Invalid profile {path}: {e.message}") from e

    return cast(Profile, profile)


def build_profile(
    name: str, secrets: ProfileSecrets, description: Optional[str] = None
) -> Profile:
    profile: Dict[str, Any] = {"name": name}
    if description:
        profile["description"] = description
    profile["secrets"] = secrets
    return cast(Profile, profile)


def dump_profile(profile: Profile, path: Union[str, Path]) -> None:
    """Write a profile to a YAML file readable by load_profile."""
    with open(path, "w") as f:
        yaml.safe_dump(dict(profile), f, default_flow_style=False, sort_keys=False)
