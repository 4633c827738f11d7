"""Exceptions raised while loading difficulty, enemy and encounter definitions."""


class DataError(Exception):
    """Base exception for definition loading problems."""


class DataLoadError(DataError):
    """A definitions file is missing, unreadable or not valid JSON."""


class DataValidationError(DataError):
    """A definition has missing, unknown or badly typed fields."""


class DataReferenceError(DataError):
    """An encounter points at an enemy id that is not defined."""
