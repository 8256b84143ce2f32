"""Link building commands."""

import re

import click
from payme.cli.error_handling import handle_domain_error
from payme.domain.link_builder import LinkBuilder, SUPPORTED_VERSION, is_iban_valid
from payme.utils.date_parser import parse_due_date

VERSION_RE = re.compile(r"[+-]?[0-9]+")
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def parse_link_version(text: str | None) -> int:
    """Parse a link version typed by the user, falling back to version 1.

    Only a plain signed 32-bit integer counts; padded or underscored
    input such as " 2 " or "1_0" falls back too.
    """
    if text is None or not VERSION_RE.fullmatch(text):
        return SUPPORTED_VERSION
    version = int(text)
    if not INT32_MIN <= version <= INT32_MAX:
        return SUPPORTED_VERSION
    return version


@click.command("link")
@click.argument("iban")
@click.argument("amount")
@click.option(
    "--currency",
    default="EUR",
    show_default=True,
    envvar="PAYME_CURRENCY_CODE",
    help="ISO 4217 currency code",
)
@click.option(
    "--link-version",
    default=str(SUPPORTED_VERSION),
    envvar="PAYME_LINK_VERSION",
    help="Link protocol version (non-numeric values fall back to 1)",
)
@click.option(
    "--no-validate",
    is_flag=True,
    envvar="PAYME_NO_VALIDATE",
    help="Skip field validation and serialize values as given",
)
@click.option("--message", help="Payment note (max 140 characters)")
@click.option("--pi", "payment_identification", help="Payment identification (max 35 characters)")
@click.option("--vs", "variable_symbol", help="Variable symbol (max 10 characters)")
@click.option("--ss", "specific_symbol", help="Specific symbol (max 10 characters)")
@click.option("--ks", "constant_symbol", help="Constant symbol (max 4 characters)")
@click.option("--creditor-name", help="Creditor's name (max 70 characters)")
@click.option(
    "--due-date",
    help="Due date (YYYY-MM-DD, YYYYMMDD or relative like 'tomorrow', 'in 14 days')",
)
@click.pass_context
def build_link(
    ctx,
    iban: str,
    amount: str,
    currency: str,
    link_version: str,
    no_validate: bool,
    message: str | None,
    payment_identification: str | None,
    variable_symbol: str | None,
    specific_symbol: str | None,
    constant_symbol: str | None,
    creditor_name: str | None,
    due_date: str | None,
):
    """Build a PayMe payment link.

    IBAN is the creditor's account, AMOUNT the amount to pay
    (e.g. 25 or 25.50). When --pi is given the symbols are ignored.

    Examples:
        payme link SK3112000000198742637541 25
        payme link SK3112000000198742637541 25.50 --message "Invoice 42" --due-date 2024-01-15
        payme link SK3112000000198742637541 10 --vs 1234567890 --ks 0308
    """
    # Parse due date
    parsed_due_date = None
    if due_date:
        try:
            parsed_due_date = parse_due_date(due_date)
        except ValueError as e:
            click.echo(f"Error: Invalid due date: {e}", err=True)
            ctx.exit(1)

    try:
        builder = LinkBuilder(
            iban,
            amount,
            currency,
            parse_link_version(link_version),
            validate=not no_validate,
        )
        if message is not None:
            builder.set_message(message)
        if payment_identification is not None:
            builder.set_payment_identification(payment_identification)
        if variable_symbol is not None:
            builder.set_variable_symbol(variable_symbol)
        if specific_symbol is not None:
            builder.set_specific_symbol(specific_symbol)
        if constant_symbol is not None:
            builder.set_constant_symbol(constant_symbol)
        if creditor_name is not None:
            builder.set_creditors_name(creditor_name)
        if parsed_due_date is not None:
            builder.set_due_date(parsed_due_date)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(builder.build())


@click.command("check-iban")
@click.argument("iban")
@click.pass_context
def check_iban(ctx, iban: str):
    """Check whether IBAN has the format PayMe links accept.

    Examples:
        payme check-iban SK3112000000198742637541
    """
    if is_iban_valid(iban):
        click.echo("valid")
    else:
        click.echo("invalid")
        ctx.exit(1)


def register_commands(cli):
    """Register link commands with main CLI."""
    cli.add_command(build_link)
    cli.add_command(check_iban)
