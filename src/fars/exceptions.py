"""
FARS error hierarchy.

Package Location: src/fars/exceptions.py

Missing data files are reported with the built-in ``FileNotFoundError``;
everything else raised by the package derives from ``FarsError``.
"""


class FarsError(Exception):
    """Base class for all package-specific errors."""
    pass


class CoercionError(FarsError, TypeError):
    """
    Raised when a year or state id cannot be converted to an integer.
    """
    pass


class SchemaError(FarsError, ValueError):
    """
    Raised when a table is missing a column the pipeline consumes.
    """
    pass


class InvalidStateError(FarsError, ValueError):
    """
    Raised when a state id does not occur in the loaded year's data.
    """

    def __init__(self, state_id: int) -> None:
        self.state_id = state_id
        super().__init__(f"invalid STATE number: {state_id}")


class EmptyInputError(FarsError, ValueError):
    """
    Raised when a multi-year summary has no loadable year to aggregate.
    """
    pass
