"""Exceptions raised by the grading engine"""


class GradingError(Exception):
    """Base class for every failure raised while loading or grading"""
    pass


class ConfigError(GradingError):
    """Raised when the grading configuration cannot be read or is malformed"""
    pass


class UnsupportedLocationFormat(ConfigError):
    """Raised when a location string does not follow <file>:<line>[-<line>]"""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Unsupported location '{location}': {reason}")


class InvalidBreakpointOrdering(ConfigError):
    """Raised when a graded unit's break points are not strictly ascending"""

    def __init__(self, unit_name: str, message: str = None):
        self.unit_name = unit_name
        if message is None:
            message = (
                f"Error in config for gradedUnit {unit_name}, break points should be sorted "
                f"in ascending order by minimumMutantsDetected, without duplicates"
            )
        super().__init__(message)


class ReportError(GradingError):
    """Raised when the mutation report cannot be read or is malformed"""
    pass
