# -*- coding: utf-8 -*-
"""Kometa Studio config core - round-trip editing of Kometa config.yml files.

Turns Kometa YAML into a partially typed config and back without losing the
keys the editor does not understand, and keeps service credentials out of
the config.

## Quick Start

```python
from kometa_studio.config import (
    extract_secrets_from_yaml,
    generate_yaml,
    parse_kometa_yaml,
)

config = parse_kometa_yaml(text)          # no credentials, unknown keys in extras
secrets = extract_secrets_from_yaml(text)  # credentials only, for the profile

config["plex"]["timeout"] = 120

template = generate_yaml(config, mode="template")        # shareable, no secrets
preview = generate_yaml(config, secrets, mode="masked")  # tokens shown as abcd****wxyz
runnable = generate_yaml(config, secrets, mode="full")   # ready for Kometa
```
"""

from kometa_studio.config.errors import FormatError, ValidationError
from kometa_studio.config.generator import generate_yaml
from kometa_studio.config.parser import parse_kometa_yaml
from kometa_studio.config.partition import partition_fields
from kometa_studio.config.secrets import (
    extract_secrets_from_yaml,
    mask_profile_secrets,
    mask_secret,
)
from kometa_studio.config.validation import validate_config

__all__ = [
    "FormatError",
    "ValidationError",
    "generate_yaml",
    "parse_kometa_yaml",
    "partition_fields",
    "extract_secrets_from_yaml",
    "mask_profile_secrets",
    "mask_secret",
    "validate_config",
]
