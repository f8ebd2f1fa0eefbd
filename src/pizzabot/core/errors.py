"""Core bot errors."""


class PizzaBotError(Exception):
    """Base class for all pizzabot errors."""

    pass


class ConfigError(PizzaBotError):
    """Raised when configuration is invalid or incomplete."""


class StateError(PizzaBotError):
    """Raised when state cannot be read from or written to the store."""

    pass


class DialogStackError(PizzaBotError):
    """Raised when dialog stack operations fail."""

    pass


class UnknownDialogStatusError(PizzaBotError):
    """Raised when a dialog turn ends in a status the dispatcher cannot route."""

    pass


class NLUError(PizzaBotError):
    """Raised when intent classification fails."""

    pass


class NLUParsingError(NLUError):
    """Failed to parse the classifier response."""

    pass


class NLUTimeoutError(NLUError):
    """Classifier request timed out."""

    pass


class NLUProviderError(NLUError):
    """Error from the underlying NLU provider."""

    pass
