"""Main CLI entry point."""

import logging

import click

# Import and register all commands at module level
from payme.cli.commands import link


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log builder steps to stderr",
    envvar="PAYME_VERBOSE",
)
@click.pass_context
def cli(ctx, verbose: bool):
    """PayMe - payment link builder.

    Build https://payme.sk payment request links from an IBAN, an amount
    and optional payment details.
    """
    ctx.ensure_object(dict)

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register all commands
link.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
