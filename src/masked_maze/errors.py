class MazeError(Exception):
    """Base class for everything the maze core raises."""


class MazeConfigurationError(MazeError, ValueError):
    """The requested maze cannot be built as configured.

    Raised before generation starts: bad dimensions, cells outside the grid,
    or a mask that cuts the start off from the finish.
    """


class MaskSizeError(MazeConfigurationError):
    """A mask image does not match the requested maze dimensions."""


class IterationLimitError(MazeError):
    """Generation ran past its iteration bound without joining start and finish."""
