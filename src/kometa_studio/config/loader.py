import logging
from typing import Any, Dict

import yaml

from kometa_studio.config.errors import FormatError

logger = logging.getLogger(__name__)

__all__ = ["load_document"]


def load_document(text: str) -> Dict[str, Any]:
    """Decode Kometa YAML text into its raw root mapping.

    Uses yaml.safe_load, so only plain mappings, sequences and scalars are
    produced.

    Args:
        text: YAML document text

    Returns:
        The decoded root mapping

    Raises:
        FormatError: If the text is not valid YAML or its root is not a mapping
    """
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise FormatError(f"Invalid YAML: {e}") from e

    if not isinstance(document, dict):
        kind = "empty document" if document is None else type(document).__name__
        raise FormatError(f"Invalid YAML: expected a mapping at the root, got {kind}")

    logger.debug(f"Decoded document with top-level keys: {list(document)}")
    return document
