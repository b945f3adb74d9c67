"""Utilities shared across the node test suites."""

from .api import (
    API_KEY,
    BASE_URL,
    NATAL_BIRTH_DATA,
    NATAL_PARAMS,
    SECOND_SUBJECT_PARAMS,
    RecordingApi,
)

__all__ = [
    "API_KEY",
    "BASE_URL",
    "NATAL_BIRTH_DATA",
    "NATAL_PARAMS",
    "SECOND_SUBJECT_PARAMS",
    "RecordingApi",
]
