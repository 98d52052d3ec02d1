"""Compatibility rules for inclusive numeric bounds.

Each rule governs one bound facet. Introducing a bound on a previously
unbounded field, or tightening an existing one, rejects values that used
to be valid. Loosening or dropping a bound is always accepted.
"""

from dataclasses import dataclass
from typing import ClassVar

from ..core.logging import get_logger
from .diff import CompatibilityError, PropertyDiff, Verdict, is_handled, reset_fields

logger = get_logger(__name__)


@dataclass(frozen=True)
class BoundValidation:
    """Shared logic for upper and lower bound rules."""

    rule_name: ClassVar[str]
    facet: ClassVar[str]
    label: ClassVar[str]
    upper: ClassVar[bool]

    def name(self) -> str:
        return self.rule_name

    def validate(self, diff: PropertyDiff) -> Verdict:
        old_bound = getattr(diff.old, self.facet)
        new_bound = getattr(diff.new, self.facet)
        message = None

        if old_bound is None and new_bound is not None:
            message = (
                f"{self.label} constraint {new_bound} added when there were no "
                "restrictions previously"
            )
        elif old_bound is not None and new_bound is not None:
            if self.upper and new_bound < old_bound:
                message = f"{self.label} decreased from {old_bound} to {new_bound}"
            elif not self.upper and new_bound > old_bound:
                message = f"{self.label} increased from {old_bound} to {new_bound}"

        error = None
        if message is not None:
            logger.debug(
                "Incompatible bound change",
                validation=self.name(),
                old=old_bound,
                new=new_bound,
            )
            error = CompatibilityError(validation=self.name(), message=message)

        return is_handled(diff, reset_fields(self.facet)), error


@dataclass(frozen=True)
class MaximumValidation(BoundValidation):
    rule_name: ClassVar[str] = "Maximum"
    facet: ClassVar[str] = "maximum"
    label: ClassVar[str] = "maximum"
    upper: ClassVar[bool] = True


@dataclass(frozen=True)
class MinimumValidation(BoundValidation):
    rule_name: ClassVar[str] = "Minimum"
    facet: ClassVar[str] = "minimum"
    label: ClassVar[str] = "minimum"
    upper: ClassVar[bool] = False


@dataclass(frozen=True)
class MaxLengthValidation(BoundValidation):
    rule_name: ClassVar[str] = "MaxLength"
    facet: ClassVar[str] = "max_length"
    label: ClassVar[str] = "maxLength"
    upper: ClassVar[bool] = True


@dataclass(frozen=True)
class MinLengthValidation(BoundValidation):
    rule_name: ClassVar[str] = "MinLength"
    facet: ClassVar[str] = "min_length"
    label: ClassVar[str] = "minLength"
    upper: ClassVar[bool] = False


@dataclass(frozen=True)
class MaxItemsValidation(BoundValidation):
    rule_name: ClassVar[str] = "MaxItems"
    facet: ClassVar[str] = "max_items"
    label: ClassVar[str] = "maxItems"
    upper: ClassVar[bool] = True


@dataclass(frozen=True)
class MinItemsValidation(BoundValidation):
    rule_name: ClassVar[str] = "MinItems"
    facet: ClassVar[str] = "min_items"
    label: ClassVar[str] = "minItems"
    upper: ClassVar[bool] = False


@dataclass(frozen=True)
class MaxPropertiesValidation(BoundValidation):
    rule_name: ClassVar[str] = "MaxProperties"
    facet: ClassVar[str] = "max_properties"
    label: ClassVar[str] = "maxProperties"
    upper: ClassVar[bool] = True


@dataclass(frozen=True)
class MinPropertiesValidation(BoundValidation):
    rule_name: ClassVar[str] = "MinProperties"
    facet: ClassVar[str] = "min_properties"
    label: ClassVar[str] = "minProperties"
    upper: ClassVar[bool] = False
