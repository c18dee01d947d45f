"""Factory for creating uncertain date parser strategies."""

from enum import Enum, auto

from uncertain_date.parsing.strategy import UncertainDateParserStrategy


class UncertainDateParsers(Enum):
    """Enumeration of available parsing strategies, one per delimiter family."""
    DOTTED = auto()
    ISO = auto()


class UncertainDateParserFactory:
    """Factory for creating UncertainDateParserStrategy instances."""

    @staticmethod
    def get_parser(strategy: UncertainDateParsers) -> UncertainDateParserStrategy:
        """Get a parser instance for the specified strategy.

        Raises:
            ValueError: If the strategy is unknown
        """
        from uncertain_date.parsing.dotted_date_parser import DottedDateParser
        from uncertain_date.parsing.iso_date_parser import IsoDateParser

        if strategy == UncertainDateParsers.DOTTED:
            return DottedDateParser()
        elif strategy == UncertainDateParsers.ISO:
            return IsoDateParser()
        else:
            raise ValueError(f"Unknown strategy: {strategy}")
