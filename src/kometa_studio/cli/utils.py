import json
import logging
import os
import traceback
from pathlib import Path
from typing import Any, Dict, Optional

import click


def get_env_flag(env_var: str, default: bool = False) -> bool:
    """Read a boolean flag such as KOMETA_STUDIO_DEBUG; "1", "true" and "yes" count as set."""
    value = os.environ.get(env_var, "").lower()
    return value in ("1", "true", "yes") if value else default


def get_env_profile() -> Optional[str]:
    """Get the profile file path from the KOMETA_STUDIO_PROFILE environment variable."""
    return os.environ.get("KOMETA_STUDIO_PROFILE")


def read_config_text(path: str) -> str:
    """Read a config document, "-" meaning standard input."""
    if path == "-":
        return click.get_text_stream("stdin").read()
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found at {config_path}")
    return config_path.read_text(encoding="utf-8")


def configure_logging(debug: bool = False) -> None:
    """Configure logging for all modules.

    Args:
        debug: Whether to enable debug logging
    """
    # Check environment variable if debug flag is not set
    if not debug:
        debug = get_env_flag("KOMETA_STUDIO_DEBUG")

    log_level = logging.DEBUG if debug else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers to avoid duplicate messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger("kometa_studio").setLevel(log_level)


def format_error(error: Exception, debug: bool = False) -> Dict[str, Any]:
    """Describe a failed command, adding the exception type and traceback in debug mode."""
    error_info = {"error": str(error)}

    if debug:
        error_info["traceback"] = traceback.format_exc()
        error_info["type"] = error.__class__.__name__

    return error_info


def output_result(result: Any) -> None:
    """Write a successful command result as the JSON status payload."""
    click.echo(json.dumps({"status": "ok", "result": result}, indent=2, default=str))


def output_error(error: Exception, json_output: bool = False, debug: bool = False) -> None:
    """Output an error in either JSON or human-readable format.

    Args:
        error: The exception that occurred
        json_output: Whether to output in JSON format
        debug: Whether to include debug information
    """
    error_info = format_error(error, debug)

    if json_output:
        click.echo(json.dumps({"status": "error", **error_info}, indent=2))
    else:
        click.echo(f"Error: {error_info['error']}", err=True)
        if debug and "traceback" in error_info:
            click.echo("\nTraceback:", err=True)
            click.echo(error_info["traceback"], err=True)

    raise click.Abort()
