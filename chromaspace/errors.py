"""Exceptions and warning categories raised by chromaspace."""


class ChromaspaceError(Exception):
    """Base class for chromaspace errors."""


class UnsupportedConversionError(ChromaspaceError, NotImplementedError):
    """A recognised color space that has no conversion implemented."""

    def __init__(self, space: str):
        self.space = space
        super().__init__(f"conversion to/from color space {space!r} is not implemented")


class UnknownNameWarning(UserWarning):
    """An RGB working space or white point name was not found and a default was used."""


class ContextDefaultWarning(UserWarning):
    """A color had no working space / white point set and a global default was used."""
