"""Errors raised while loading and running scripts."""


class EngineError(Exception):
    """Base class for every error the engine reports."""


class ParserError(EngineError):
    """A script could not be parsed."""


class _LineError(ParserError):
    """A parser error tied to one line of the script."""

    _what = "parse error"

    def __init__(self, line: int, content: str) -> None:
        self.line = line
        self.content = content
        super().__init__(f"{self._what} at line {line}: {content!r}")


class InvalidCommand(_LineError):
    """A command line is missing its argument or names no known command."""

    _what = "invalid command"


class MalformedDialogue(_LineError):
    """A dialogue line opens a quotation that it never closes."""

    _what = "malformed dialogue"


class UnknownLine(_LineError):
    """A line matches none of the known line kinds."""

    _what = "unknown line"


class EmptyBlock(ParserError):
    """A block held no command at all."""

    def __init__(self, line: int) -> None:
        self.line = line
        super().__init__(f"empty block starting at line {line}")


class UnsupportedVersion(ParserError):
    """The script declares a format version this engine does not read."""

    def __init__(self, need: int, indeed: str) -> None:
        self.need = need
        self.indeed = indeed
        super().__init__(f"unsupported script version {indeed!r}, need {need}")


class FigureTooShort(ParserError):
    """A figure command has fewer than five fields."""

    def __init__(self) -> None:
        super().__init__("figure command needs name|distance|body|face|position")