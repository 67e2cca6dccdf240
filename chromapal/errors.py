"""Exceptions raised by chromapal."""


class ChromapalError(Exception):
    """Base class for all chromapal errors."""


class HexParseError(ChromapalError, ValueError):
    """Raised when a string is not a ``#rgb`` or ``#rrggbb`` hex color."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"color: {value!r} is not a hex-color")


class PaletteGenerationError(ChromapalError, ValueError):
    """Raised when a soft palette cannot be built from the available samples."""

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"palettegen: more colors requested ({requested}) than samples available ({available}). "
            "Your requested color count may be wrong, you might want to use many samples "
            "or your constraint function makes the valid color space too small"
        )
