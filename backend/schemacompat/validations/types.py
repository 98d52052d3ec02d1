"""Enforcement levels for property compatibility rules."""

from enum import Enum


class EnumAdditionEnforcement(str, Enum):
    """How strictly the Enum rule treats newly allowed values."""

    NONE = "None"
    IF_PREVIOUSLY_CONSTRAINED = "IfPreviouslyConstrained"
    STRICT = "Strict"


class EnumRemovalEnforcement(str, Enum):
    """How strictly the Enum rule treats values that are no longer allowed."""

    NONE = "None"
    STRICT = "Strict"


class RequiredNewEnforcement(str, Enum):
    """How strictly the Required rule treats newly required fields."""

    NONE = "None"
    STRICT = "Strict"
