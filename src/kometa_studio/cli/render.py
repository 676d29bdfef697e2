from typing import Optional

import click

from kometa_studio.cli.utils import (
    configure_logging,
    get_env_profile,
    output_error,
    read_config_text,
)
from kometa_studio.config.generator import YAML_MODES, generate_yaml
from kometa_studio.config.parser import parse_kometa_yaml
from kometa_studio.config.profile import load_profile


@click.command(name="render")
@click.argument("config", type=click.Path(allow_dash=True))
@click.option("--profile", "profile_path", help="Profile YAML file holding the service secrets")
@click.option(
    "--mode",
    type=click.Choice(YAML_MODES),
    default="template",
    show_default=True,
    help="How secrets are rendered",
)
@click.option("--no-comment", is_flag=True, help="Do not prepend the banner comment")
@click.option("--no-extras", is_flag=True, help="Drop keys the editor does not understand")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def render(
    config: str,
    profile_path: Optional[str],
    mode: str,
    no_comment: bool,
    no_extras: bool,
    debug: bool,
):
    """Parse a Kometa config and write it back out in canonical form.

    The template mode never contains secrets. The masked and full modes take
    the secrets from the profile file, masking credentials or showing them
    verbatim.

    Examples:
        kometa-studio render config.yml                                # Shareable template
        kometa-studio render config.yml --profile home.yml --mode masked
        kometa-studio render config.yml --profile home.yml --mode full > kometa.yml
    """
    if not profile_path:
        profile_path = get_env_profile()

    configure_logging(debug)

    try:
        parsed = parse_kometa_yaml(read_config_text(config), preserve_extras=not no_extras)

        secrets = None
        if mode != "template":
            if not profile_path:
                raise click.UsageError(f"--profile is required for {mode} mode")
            secrets = load_profile(profile_path).get("secrets")

        click.echo(
            generate_yaml(parsed, secrets, mode=mode, include_comment=not no_comment),
            nl=False,
        )
    except click.UsageError:
        raise
    except Exception as e:
        output_error(e, debug=debug)
