"""Error types raised by the service layer and mapped to HTTP by handlers."""


class PokemonApiError(Exception):
    """Base class for errors raised by this package."""


class InvalidPaginationError(PokemonApiError, ValueError):
    """A pagination query parameter is not a positive integer.

    Attributes:
        parameter: Name of the offending query parameter ("page" or "limit").
        value: The raw value as received.
    """

    def __init__(self, parameter: str, value: str | None = None) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__(f'Invalid "{parameter}" parameter.')


class PokemonCreateError(PokemonApiError):
    """The store refused to persist a new Pokemon."""
