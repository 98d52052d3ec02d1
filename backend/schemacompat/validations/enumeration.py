"""Compatibility rule for the ``enum`` facet.

Enum values are compared as sets of serialized literals; their order in
the schema is not significant. What counts as incompatible is controlled
by two enforcement levels:

* addition enforcement governs newly allowed values. Introducing an enum
  on a previously unconstrained field is rejected unless the level is
  ``None``; growing an existing enum is rejected only under ``Strict``.
* removal enforcement governs values that are no longer allowed and
  rejects them unless the level is ``None``.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..core.logging import get_logger
from .diff import (
    CompatibilityError,
    PropertyDiff,
    Verdict,
    format_values,
    is_handled,
    join_messages,
    reset_fields,
)
from .types import EnumAdditionEnforcement, EnumRemovalEnforcement

if TYPE_CHECKING:
    from ..config import EnumValidationConfig

logger = get_logger(__name__)

_reset = reset_fields("enum")


@dataclass(frozen=True)
class EnumValidation:
    """Checks additions to and removals from the set of allowed values."""

    addition_enforcement: EnumAdditionEnforcement = (
        EnumAdditionEnforcement.IF_PREVIOUSLY_CONSTRAINED
    )
    removal_enforcement: EnumRemovalEnforcement = EnumRemovalEnforcement.STRICT

    @classmethod
    def from_config(cls, config: "EnumValidationConfig") -> "EnumValidation":
        """Create a rule instance from its configuration section."""
        return cls(
            addition_enforcement=config.addition_enforcement,
            removal_enforcement=config.removal_enforcement,
        )

    def name(self) -> str:
        return "Enum"

    def validate(self, diff: PropertyDiff) -> Verdict:
        old_values = {value.raw for value in diff.old.enum}
        new_values = {value.raw for value in diff.new.enum}

        added = _sorted_literals(new_values - old_values)
        removed = _sorted_literals(old_values - new_values)

        messages: list[str] = []

        if not old_values and added:
            if self.addition_enforcement != EnumAdditionEnforcement.NONE:
                messages.append(
                    f"enum constraints {format_values(added)} added when there "
                    "were no restrictions previously"
                )
        elif added and self.addition_enforcement == EnumAdditionEnforcement.STRICT:
            messages.append(
                f"enums {format_values(added)} added to the set of allowed values"
            )

        if removed and self.removal_enforcement != EnumRemovalEnforcement.NONE:
            messages.append(
                f"enums {format_values(removed)} removed from the set of "
                "previously allowed values"
            )

        error = None
        message = join_messages(messages)
        if message is not None:
            logger.debug(
                "Incompatible enum change",
                validation=self.name(),
                added=added,
                removed=removed,
            )
            error = CompatibilityError(validation=self.name(), message=message)

        return is_handled(diff, _reset), error


def _sorted_literals(values: set[bytes]) -> list[str]:
    return sorted(
        value.decode("utf-8", errors="backslashreplace") for value in values
    )
