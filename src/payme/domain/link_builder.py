"""PayMe link builder.

Accumulates the fields of a payment request, validates each one as it is
set and serializes the result into a ``https://payme.sk`` link. Query
parameters are always emitted in the same order (V, AM, CC, IBAN, PI, MSG,
CN, DD); PayMe clients depend on it.
"""

import logging
import re
from datetime import date
from decimal import Decimal
from typing import Optional
from urllib.parse import quote

from payme.domain import errors
from payme.domain.errors import ValidationError
from payme.utils.amount_format import format_amount

logger = logging.getLogger(__name__)

PAYMENT_LINK_SCHEME = "https"
PAYMENT_LINK_DOMAIN = "payme.sk"

ATTR_VERSION = "V"
ATTR_IBAN = "IBAN"
ATTR_AMOUNT = "AM"
ATTR_CURRENCY_CODE = "CC"
ATTR_DUE_DATE = "DD"
ATTR_PAYMENT_IDENTIFICATION = "PI"
ATTR_MESSAGE = "MSG"
ATTR_CREDITORS_NAME = "CN"

IBAN_PATTERN = re.compile(r"^[A-Z]{2}[0-9]{2}[A-Za-z0-9]{1,30}$")
DUE_DATE_FORMAT = "%Y%m%d"

SUPPORTED_VERSION = 1
VERSION_1_CURRENCY = "EUR"

MAX_AMOUNT_LENGTH = 9
MAX_PAYMENT_IDENTIFICATION_LENGTH = 35
MAX_CREDITORS_NAME_LENGTH = 70
MAX_SPECIFIC_SYMBOL_LENGTH = 10
MAX_VARIABLE_SYMBOL_LENGTH = 10
MAX_CONSTANT_SYMBOL_LENGTH = 4
MAX_MESSAGE_LENGTH = 140

# Characters left unescaped in query values, on top of A-Za-z0-9 and "_.-~"
QUERY_SAFE_CHARS = "!'()*"


def is_iban_valid(iban: str) -> bool:
    """Check whether an IBAN has the shape PayMe accepts."""
    return IBAN_PATTERN.fullmatch(iban) is not None


class LinkBuilder:
    """Fluent builder for PayMe payment links.

    Every setter validates its input (unless validation is disabled), stores
    it and returns the builder, so calls can be chained::

        link = (
            LinkBuilder("SK3112000000198742637541", "25.50")
            .set_message("Invoice 42")
            .set_due_date(date(2024, 1, 15))
            .build()
        )

    A rejected value raises ValidationError and leaves the previous value
    in place. build() only reads state, so it can be called any number of
    times, including after further changes.
    """

    def __init__(
        self,
        iban: str,
        amount: str | int | float | Decimal,
        currency_code: str = VERSION_1_CURRENCY,
        version: int = SUPPORTED_VERSION,
        validate: bool = True,
    ):
        """Initialize builder with the mandatory link fields.

        Args:
            iban: Creditor's IBAN
            amount: Amount as text, or a number formatted to two decimals
            currency_code: ISO 4217 currency code
            version: Link protocol version
            validate: Whether to enforce field constraints

        Raises:
            ValidationError: If validation is enabled and a field is invalid
        """
        self._validate = validate

        self._payment_identification: Optional[str] = None
        self._variable_symbol: Optional[str] = None
        self._specific_symbol: Optional[str] = None
        self._constant_symbol: Optional[str] = None
        self._message: Optional[str] = None
        self._creditors_name: Optional[str] = None
        self._due_date: Optional[date] = None

        # Order matters: the currency check reads the version
        self._set_version(version)
        self.set_iban(iban)
        self.set_amount(amount)
        self.set_currency_code(currency_code)

    @property
    def version(self) -> int:
        return self._version

    @property
    def validate(self) -> bool:
        return self._validate

    @property
    def iban(self) -> str:
        return self._iban

    @property
    def amount(self) -> str:
        return self._amount

    @property
    def currency_code(self) -> str:
        return self._currency_code

    @property
    def payment_identification(self) -> Optional[str]:
        return self._payment_identification

    @property
    def variable_symbol(self) -> Optional[str]:
        return self._variable_symbol

    @property
    def specific_symbol(self) -> Optional[str]:
        return self._specific_symbol

    @property
    def constant_symbol(self) -> Optional[str]:
        return self._constant_symbol

    @property
    def message(self) -> Optional[str]:
        return self._message

    @property
    def creditors_name(self) -> Optional[str]:
        return self._creditors_name

    @property
    def due_date(self) -> Optional[date]:
        return self._due_date

    def _set_version(self, version: int) -> None:
        if self._validate and version != SUPPORTED_VERSION:
            raise ValidationError(errors.unsupported_version(version), field="version")
        self._version = version

    def _check_length(
        self, field: str, label: str, value: str, max_length: int
    ) -> None:
        if self._validate and len(value) > max_length:
            raise ValidationError(errors.field_too_long(label, max_length), field=field)

    def set_iban(self, iban: str) -> "LinkBuilder":
        """Set the creditor's IBAN.

        Raises:
            ValidationError: If the IBAN does not match the expected format
        """
        if self._validate and not is_iban_valid(iban):
            raise ValidationError(errors.invalid_iban(), field="iban")
        self._iban = iban
        logger.debug("IBAN set to %s", iban)
        return self

    def set_currency_code(self, currency_code: str) -> "LinkBuilder":
        """Set the currency code (version 1 links only allow EUR).

        Raises:
            ValidationError: If the currency is not allowed for the link version
        """
        if (
            self._validate
            and self._version == SUPPORTED_VERSION
            and currency_code != VERSION_1_CURRENCY
        ):
            raise ValidationError(
                errors.unsupported_currency(self._version), field="currency_code"
            )
        self._currency_code = currency_code
        logger.debug("Currency code set to %s", currency_code)
        return self

    def set_amount(self, amount: str | int | float | Decimal) -> "LinkBuilder":
        """Set the amount.

        Numbers are formatted with at most two fraction digits first
        (3.0 -> "3", 3.14159 -> "3.14"); strings are stored as given.

        Raises:
            ValidationError: If the amount text is longer than 9 characters
        """
        if not isinstance(amount, str):
            amount = format_amount(amount)
        self._check_length("amount", "Amount", amount, MAX_AMOUNT_LENGTH)
        self._amount = amount
        logger.debug("Amount set to %s", amount)
        return self

    def set_payment_identification(self, payment_identification: str) -> "LinkBuilder":
        """Set the payment identification, overriding any symbols."""
        self._check_length(
            "payment_identification",
            "Payment identification",
            payment_identification,
            MAX_PAYMENT_IDENTIFICATION_LENGTH,
        )
        self._payment_identification = payment_identification
        return self

    def set_creditors_name(self, creditors_name: str) -> "LinkBuilder":
        self._check_length(
            "creditors_name", "Creditor's name", creditors_name, MAX_CREDITORS_NAME_LENGTH
        )
        self._creditors_name = creditors_name
        return self

    def set_specific_symbol(self, specific_symbol: str) -> "LinkBuilder":
        self._check_length(
            "specific_symbol", "Specific symbol", specific_symbol, MAX_SPECIFIC_SYMBOL_LENGTH
        )
        self._specific_symbol = specific_symbol
        return self

    def set_variable_symbol(self, variable_symbol: str) -> "LinkBuilder":
        self._check_length(
            "variable_symbol", "Variable symbol", variable_symbol, MAX_VARIABLE_SYMBOL_LENGTH
        )
        self._variable_symbol = variable_symbol
        return self

    def set_constant_symbol(self, constant_symbol: str) -> "LinkBuilder":
        self._check_length(
            "constant_symbol", "Constant symbol", constant_symbol, MAX_CONSTANT_SYMBOL_LENGTH
        )
        self._constant_symbol = constant_symbol
        return self

    def set_message(self, message: str) -> "LinkBuilder":
        """Set the free-text payment note.

        Raises:
            ValidationError: If the message is longer than 140 characters
        """
        if self._validate and len(message) > MAX_MESSAGE_LENGTH:
            raise ValidationError(errors.message_too_long(MAX_MESSAGE_LENGTH), field="message")
        self._message = message
        return self

    def set_due_date(self, due_date: date) -> "LinkBuilder":
        self._due_date = due_date
        return self

    def _resolve_payment_identification(self) -> Optional[str]:
        """Return the identification to put in the PI parameter.

        A direct payment identification wins. Otherwise the symbols are
        composed as "/VS<variable>/SS<specific>/KS<constant>", with unset
        symbols left empty.
        """
        if self._payment_identification:
            return self._payment_identification
        if self._variable_symbol or self._specific_symbol or self._constant_symbol:
            return "/VS{}/SS{}/KS{}".format(
                self._variable_symbol or "",
                self._specific_symbol or "",
                self._constant_symbol or "",
            )
        return None

    def query_params(self) -> list[tuple[str, str]]:
        """Return the link's query parameters in protocol order."""
        params = [
            (ATTR_VERSION, str(self._version)),
            (ATTR_AMOUNT, self._amount),
            (ATTR_CURRENCY_CODE, self._currency_code),
        ]

        if self._iban:
            params.append((ATTR_IBAN, self._iban))

        payment_identification = self._resolve_payment_identification()
        if payment_identification:
            params.append((ATTR_PAYMENT_IDENTIFICATION, payment_identification))

        if self._message:
            params.append((ATTR_MESSAGE, self._message))
        if self._creditors_name:
            params.append((ATTR_CREDITORS_NAME, self._creditors_name))
        if self._due_date is not None:
            params.append((ATTR_DUE_DATE, self._due_date.strftime(DUE_DATE_FORMAT)))

        return params

    def build(self) -> str:
        """Build the PayMe link from the current state.

        Returns:
            Absolute link, e.g. "https://payme.sk?V=1&AM=25&CC=EUR&IBAN=SK..."
        """
        query = "&".join(
            f"{key}={quote(value, safe=QUERY_SAFE_CHARS)}"
            for key, value in self.query_params()
        )
        link = f"{PAYMENT_LINK_SCHEME}://{PAYMENT_LINK_DOMAIN}?{query}"
        logger.debug("Built PayMe link %s", link)
        return link
