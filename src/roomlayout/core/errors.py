"""Domain errors raised by the placement core.

Every failure surfaces synchronously at the offending call. Nothing in the
core catches these; callers (the CLI, the layout loader) decide what to do.
"""


class PlacementError(Exception):
    """Base class for every room layout error."""

    pass


class InvalidDimensionError(PlacementError, ValueError):
    """Raised when an extent is not positive or a gap/bottom height is negative."""

    pass


class IllegalWallError(PlacementError, ValueError):
    """Raised when a wall item or wall placement targets the floor or ceiling."""

    pass


class DoesNotFitError(PlacementError):
    """Raised when an item falls outside the room's floor area."""

    pass


class DoesNotFitVerticallyError(DoesNotFitError):
    """Raised when an item is taller than the room allows."""

    pass


class DoesNotFitOnWallError(DoesNotFitError):
    """Raised when a wall item runs past either end of its wall."""

    pass


class IncompleteBuilderError(PlacementError):
    """Raised when ``build()`` is called before a mandatory option was set."""

    pass
