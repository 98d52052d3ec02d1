"""Compatibility rule for the ``required`` facet."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..core.logging import get_logger
from .diff import (
    CompatibilityError,
    PropertyDiff,
    Verdict,
    format_values,
    is_handled,
    reset_fields,
)
from .types import RequiredNewEnforcement

if TYPE_CHECKING:
    from ..config import RequiredValidationConfig

logger = get_logger(__name__)

_reset = reset_fields("required")


@dataclass(frozen=True)
class RequiredValidation:
    """Checks for sub-fields that became required.

    Dropping a name from ``required`` only relaxes the schema and is
    always accepted.
    """

    new_enforcement: RequiredNewEnforcement = RequiredNewEnforcement.STRICT

    @classmethod
    def from_config(cls, config: "RequiredValidationConfig") -> "RequiredValidation":
        """Create a rule instance from its configuration section."""
        return cls(new_enforcement=config.new_enforcement)

    def name(self) -> str:
        return "Required"

    def validate(self, diff: PropertyDiff) -> Verdict:
        newly_required = sorted(set(diff.new.required) - set(diff.old.required))

        error = None
        if newly_required and self.new_enforcement != RequiredNewEnforcement.NONE:
            logger.debug(
                "Incompatible required change",
                validation=self.name(),
                added=newly_required,
            )
            error = CompatibilityError(
                validation=self.name(),
                message=f"new required fields {format_values(newly_required)} added",
            )

        return is_handled(diff, _reset), error
