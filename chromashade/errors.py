"""Exception hierarchy for chromashade."""


class ChromashadeError(Exception):
    """Base class for errors raised by chromashade."""


class ColorParseError(ChromashadeError, ValueError):
    """Textual color input could not be decoded (hex or CSS syntax, channel range)."""


class EmptyCatalogError(ChromashadeError, LookupError):
    """Palette matching was requested against a catalog with no palettes."""


class UnknownGradeError(ChromashadeError, KeyError):
    """A shade grade label has no target lightness."""

    def __init__(self, grade: str):
        super().__init__(grade)
        self.grade = grade

    def __str__(self) -> str:
        return f"Unknown shade grade: {self.grade!r}"
