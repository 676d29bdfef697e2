import click

from kometa_studio.cli.render import render
from kometa_studio.cli.split import split
from kometa_studio.cli.validate import validate


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Kometa Studio CLI"""
    # Show help when no subcommand is provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(render)
cli.add_command(split)
cli.add_command(validate)


if __name__ == "__main__":
    cli()
