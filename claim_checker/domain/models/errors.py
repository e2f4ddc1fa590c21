"""Errors raised by the fact checking pipeline."""


class FactCheckError(Exception):
    """Base class for expected fact checking failures."""


class EmptyInputError(FactCheckError, ValueError):
    """The text to check is blank."""

    def __init__(self, message: str = "Bitte fügen Sie einen Text ein, der überprüft werden soll."):
        super().__init__(message)


class NoCandidatesFoundError(FactCheckError):
    """The text contains no checkable claims."""

    def __init__(self, message: str = "Keine überprüfbaren Fakten gefunden"):
        super().__init__(message)
