from typing import Optional

import click

from kometa_studio.cli.utils import (
    configure_logging,
    get_env_profile,
    output_error,
    output_result,
    read_config_text,
)
from kometa_studio.config.parser import parse_kometa_yaml
from kometa_studio.config.profile import load_profile
from kometa_studio.config.types import ValidationResult
from kometa_studio.config.validation import validate_config


def format_validation_results(results: ValidationResult) -> str:
    """Format validation results for human-readable output"""
    output = []

    errors = results["errors"]
    warnings = results["warnings"]

    status = "ok" if results["valid"] else "error"
    output.append(f"Status: {status.upper()} ({len(errors)} errors, {len(warnings)} warnings)")

    if errors:
        output.append("")
        output.append("Errors:")
        for issue in errors:
            output.append(f"  ✗ {'.'.join(issue['path'])}: {issue['message']}")

    if warnings:
        output.append("")
        output.append("Warnings:")
        for issue in warnings:
            output.append(f"  ! {'.'.join(issue['path'])}: {issue['message']}")

    return "\n".join(output)


@click.command(name="validate")
@click.argument("config", type=click.Path(allow_dash=True))
@click.option("--profile", "profile_path", help="Profile YAML file holding the service secrets")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def validate(config: str, profile_path: Optional[str], json_output: bool, debug: bool):
    """Validate a Kometa config.

    Structural problems (bad YAML, values of the wrong type) fail the
    command. Configuration gaps, such as an enabled service without
    credentials in the profile or a library without files, are reported as
    warnings.

    Examples:
        kometa-studio validate config.yml
        kometa-studio validate config.yml --profile home.yml
        kometa-studio validate config.yml --json-output
    """
    if not profile_path:
        profile_path = get_env_profile()

    configure_logging(debug)

    try:
        parsed = parse_kometa_yaml(read_config_text(config))
        secrets = load_profile(profile_path).get("secrets") if profile_path else None
        result = validate_config(parsed, secrets)

        if json_output:
            output_result(result)
        else:
            click.echo(format_validation_results(result))
    except Exception as e:
        output_error(e, json_output, debug)
