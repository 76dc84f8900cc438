class BirthChartError(Exception):
    """
    Base exception for all birth chart domain errors.
    """
    pass


class InvalidBirthDataError(BirthChartError):
    """
    Raised when birth inputs are missing or malformed.
    """
    pass


class EphemerisComputationError(BirthChartError):
    """
    Raised when the ephemeris provider cannot produce placements.
    """
    pass


class UnresolvedPlacementError(EphemerisComputationError):
    """
    Raised when sun, moon or rising has no usable sign label.
    """
    pass


class RemoteChartError(BirthChartError):
    """
    Raised when the chart API cannot be reached or answers with an error.
    """
    pass
