"""Errors raised while declaring and assembling a castle."""


class CastleError(Exception):
    """Base class for castle declaration and assembly errors."""


class DuplicateSymbolError(CastleError):
    """An entity name was registered twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Symbol already registered: {name!r}")


class UnknownSymbolError(CastleError):
    """A name was looked up that was never registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Cannot find a symbol {name!r}")


class IncompleteWallError(CastleError):
    """A wall was declared without a destination."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Wall from {source!r} needs an end")


class CastleDeclarationError(CastleError):
    """Declarations contradict each other (e.g. two keeps)."""


class CastleAlreadyBuiltError(CastleError):
    """The builder has already produced its castle."""
