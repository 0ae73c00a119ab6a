class RoutePlannerError(Exception):
    """Base class for errors raised by the route planner."""


class GraphConsistencyError(RoutePlannerError):
    """
    The shortest-path frontier reached a node the graph has no record of.
    Signals a broken graph invariant, aborts the whole batch.
    """


class InputFileError(RoutePlannerError):
    """An input file (roads or routes) could not be opened."""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = f"Cannot open file {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
