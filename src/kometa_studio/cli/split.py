from typing import Optional

import click

from kometa_studio.cli.utils import configure_logging, output_error, read_config_text
from kometa_studio.config.generator import generate_yaml
from kometa_studio.config.parser import parse_kometa_yaml
from kometa_studio.config.profile import build_profile, dump_profile
from kometa_studio.config.secrets import extract_secrets_from_yaml


@click.command(name="split")
@click.argument("config", type=click.Path(allow_dash=True))
@click.option("--profile-out", help="Write the extracted secrets to this profile YAML file")
@click.option("--profile-name", default="imported", show_default=True, help="Name of the written profile")
@click.option("--no-comment", is_flag=True, help="Do not prepend the banner comment")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def split(
    config: str,
    profile_out: Optional[str],
    profile_name: str,
    no_comment: bool,
    debug: bool,
):
    """Split a Kometa config into a secret-free template and a profile.

    The template is printed to standard output. The service credentials
    (URLs, tokens, API keys, Trakt authorization) are written to the profile
    file when --profile-out is given.

    Examples:
        kometa-studio split config.yml > template.yml
        kometa-studio split config.yml --profile-out home.yml --profile-name home
    """
    configure_logging(debug)

    try:
        text = read_config_text(config)
        parsed = parse_kometa_yaml(text)

        if profile_out:
            secrets = extract_secrets_from_yaml(text)
            dump_profile(build_profile(profile_name, secrets), profile_out)
            click.echo(f"Wrote secrets for {len(secrets)} service(s) to {profile_out}", err=True)

        click.echo(generate_yaml(parsed, mode="template", include_comment=not no_comment), nl=False)
    except Exception as e:
        output_error(e, debug=debug)
