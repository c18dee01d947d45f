"""Entry point for parsing uncertain dates from text."""

import logging

from uncertain_date.errors import FormatError, NullArgumentError
from uncertain_date.parsing.factory import UncertainDateParserFactory, UncertainDateParsers
from uncertain_date.uncertain_date import UncertainDate


logger = logging.getLogger(__name__)


class UncertainDateParser:
    """Parses the dotted and ISO text forms of an uncertain date."""

    # Families are tried in this order; the first whose layout matches decides
    PARSER_STEPS = (
        UncertainDateParsers.DOTTED,
        UncertainDateParsers.ISO,
    )

    @staticmethod
    def parse(text: str) -> UncertainDate:
        """Parse an uncertain date.

        Supported forms:

            Case                   with 0       with x       ISO          range
            day unknown            00.05.1966   xx.05.1966   1966-05-xx   1.5.-31.5.1966
            day and month unknown  00.00.1966   xx.xx.1966   1966-xx-xx   1.1.-31.12.1966
            nothing known          00.00.0000   xx.xx.xxxx   xxxx-xx-xx   none

        Args:
            text: The text to parse, without surrounding whitespace

        Returns:
            The parsed UncertainDate

        Raises:
            NullArgumentError: If text is None
            FormatError: If text is empty or matches neither form
        """
        if text is None:
            raise NullArgumentError("text must not be None")
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")
        if not text:
            raise FormatError("The string was empty.", text, 0)

        for step in UncertainDateParser.PARSER_STEPS:
            parser = UncertainDateParserFactory.get_parser(step)
            value = parser.parse(text)
            if value is not None:
                return value

        logger.debug(f"Rejected {text!r}: matches no date layout")
        raise FormatError("Text matches neither the dotted nor the ISO date format", text, 0)
