"""Exceptions raised by WordleFilter."""


class WordleError(RuntimeError):
    """Base class for module errors."""
    pass


class VocabularyError(WordleError):
    """Word list could not be read or written."""
    pass


class InvalidInputError(WordleError):
    """Key has no meaning in the current input mode."""
    pass
