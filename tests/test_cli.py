"""Tests for payme CLI commands."""

import pytest
from payme.cli.main import cli
from payme.cli.commands.link import parse_link_version


def test_link_minimal(cli_runner, sample_iban):
    """Test building a link with only IBAN and amount."""
    result = cli_runner.invoke(cli, ["link", sample_iban, "25"])

    assert result.exit_code == 0
    assert result.output.strip() == (
        "https://payme.sk?V=1&AM=25&CC=EUR&IBAN=SK1234567890123456789012"
    )


def test_link_all_options(cli_runner, sample_iban):
    """Test building a link with every optional field."""
    result = cli_runner.invoke(
        cli,
        [
            "link",
            sample_iban,
            "25.50",
            "--message",
            "Invoice 42",
            "--pi",
            "INV42",
            "--creditor-name",
            "ACME",
            "--due-date",
            "2024-01-15",
        ],
    )

    assert result.exit_code == 0
    assert result.output.strip() == (
        "https://payme.sk?V=1&AM=25.50&CC=EUR&IBAN=SK1234567890123456789012"
        "&PI=INV42&MSG=Invoice%2042&CN=ACME&DD=20240115"
    )


def test_link_symbols(cli_runner, sample_iban):
    """Test that symbols are composed into the PI parameter."""
    result = cli_runner.invoke(
        cli, ["link", sample_iban, "10", "--vs", "123", "--ks", "0308"]
    )

    assert result.exit_code == 0
    assert "&PI=%2FVS123%2FSS%2FKS0308" in result.output


def test_link_invalid_iban(cli_runner):
    """Test that an invalid IBAN is reported as an error."""
    result = cli_runner.invoke(cli, ["link", "sk00", "25"])

    assert result.exit_code == 1
    assert "IBAN incorrect format" in result.output
    assert "https://payme.sk" not in result.output


def test_link_message_too_long(cli_runner, sample_iban):
    """Test that an oversized message is rejected."""
    result = cli_runner.invoke(
        cli, ["link", sample_iban, "25", "--message", "m" * 141]
    )

    assert result.exit_code == 1
    assert "Message can be maximum 140 characters long" in result.output


def test_link_non_eur_currency(cli_runner, sample_iban):
    """Test that version 1 links reject other currencies."""
    result = cli_runner.invoke(cli, ["link", sample_iban, "25", "--currency", "CZK"])

    assert result.exit_code == 1
    assert "only EUR" in result.output


def test_link_no_validate(cli_runner):
    """Test that --no-validate serializes values as given."""
    result = cli_runner.invoke(
        cli,
        ["link", "bad", "25", "--currency", "CZK", "--link-version", "2", "--no-validate"],
    )

    assert result.exit_code == 0
    assert result.output.strip() == "https://payme.sk?V=2&AM=25&CC=CZK&IBAN=bad"


def test_link_version_two_rejected(cli_runner, sample_iban):
    """Test that version 2 fails while validating."""
    result = cli_runner.invoke(cli, ["link", sample_iban, "25", "--link-version", "2"])

    assert result.exit_code == 1
    assert "Only version 1 is supported" in result.output


def test_link_currency_from_environment(cli_runner, sample_iban):
    """Test that the default currency can come from PAYME_CURRENCY_CODE."""
    result = cli_runner.invoke(
        cli, ["link", sample_iban, "25"], env={"PAYME_CURRENCY_CODE": "USD"}
    )

    assert result.exit_code == 1
    assert "only EUR" in result.output


def test_link_invalid_due_date(cli_runner, sample_iban):
    """Test that an unparseable due date is reported."""
    result = cli_runner.invoke(
        cli, ["link", sample_iban, "25", "--due-date", "someday maybe"]
    )

    assert result.exit_code == 1
    assert "Invalid due date" in result.output


def test_check_iban_valid(cli_runner, sample_iban):
    """Test checking a well-formed IBAN."""
    result = cli_runner.invoke(cli, ["check-iban", sample_iban])

    assert result.exit_code == 0
    assert "valid" in result.output


def test_check_iban_invalid(cli_runner):
    """Test checking a malformed IBAN."""
    result = cli_runner.invoke(cli, ["check-iban", "SK"])

    assert result.exit_code == 1
    assert "invalid" in result.output


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1", 1),
        ("2", 2),
        ("+2", 2),
        ("-1", -1),
        ("", 1),
        ("abc", 1),
        (None, 1),
        (" 2 ", 1),
        ("1_0", 1),
        ("2\n", 1),
        ("99999999999", 1),
    ],
)
def test_parse_link_version(text, expected):
    """Test that non-numeric versions fall back to 1."""
    assert parse_link_version(text) == expected


def test_verbose_flag(cli_runner, sample_iban):
    """Test that --verbose does not change the printed link."""
    result = cli_runner.invoke(cli, ["--verbose", "link", sample_iban, "25"])

    assert result.exit_code == 0
    assert "https://payme.sk?V=1&AM=25&CC=EUR&IBAN=SK1234567890123456789012" in result.output


def test_link_due_date_out_of_range(cli_runner, sample_iban):
    """Test that a relative due date past the calendar is reported, not raised."""
    result = cli_runner.invoke(
        cli, ["link", sample_iban, "25", "--due-date", "in 99999999 days"]
    )

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Invalid due date" in result.output


def test_link_error_format(cli_runner):
    """Test that validation errors are printed as 'Error: <message>'."""
    result = cli_runner.invoke(cli, ["link", "sk00", "25"])

    assert result.exit_code == 1
    assert "Error: IBAN incorrect format" in result.output
