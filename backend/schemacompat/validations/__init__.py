"""Property-level compatibility rules.

Every rule implements :class:`PropertyValidation` and judges one facet of
a :class:`PropertyDiff`, reporting whether that judgment explains the
whole diff.
"""

from .bounds import (
    BoundValidation,
    MaximumValidation,
    MaxItemsValidation,
    MaxLengthValidation,
    MaxPropertiesValidation,
    MinimumValidation,
    MinItemsValidation,
    MinLengthValidation,
    MinPropertiesValidation,
)
from .default import DefaultValidation
from .description import DescriptionValidation
from .diff import (
    CompatibilityError,
    PropertyDiff,
    PropertyValidation,
    Verdict,
    is_handled,
    reset_fields,
)
from .enumeration import EnumValidation
from .required import RequiredValidation
from .type import TypeValidation
from .types import (
    EnumAdditionEnforcement,
    EnumRemovalEnforcement,
    RequiredNewEnforcement,
)

__all__ = [
    "BoundValidation",
    "CompatibilityError",
    "DefaultValidation",
    "DescriptionValidation",
    "EnumAdditionEnforcement",
    "EnumRemovalEnforcement",
    "EnumValidation",
    "MaxItemsValidation",
    "MaxLengthValidation",
    "MaxPropertiesValidation",
    "MaximumValidation",
    "MinItemsValidation",
    "MinLengthValidation",
    "MinPropertiesValidation",
    "MinimumValidation",
    "PropertyDiff",
    "PropertyValidation",
    "RequiredNewEnforcement",
    "RequiredValidation",
    "TypeValidation",
    "Verdict",
    "is_handled",
    "reset_fields",
]
