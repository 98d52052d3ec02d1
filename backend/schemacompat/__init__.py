"""schemacompat - backward-compatibility rules for JSON Schema properties."""

__version__ = "0.1.0"

# Re-export main components for easy access
from .core import JSONValue, Property, PropertyLoadError
from .validations import CompatibilityError, PropertyDiff, PropertyValidation

__all__ = [
    "CompatibilityError",
    "JSONValue",
    "Property",
    "PropertyDiff",
    "PropertyLoadError",
    "PropertyValidation",
    "__version__",
]
