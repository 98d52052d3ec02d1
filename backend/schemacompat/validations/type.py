"""Compatibility rule for the ``type`` facet."""

from dataclasses import dataclass

from ..core.logging import get_logger
from .diff import (
    CompatibilityError,
    PropertyDiff,
    Verdict,
    is_handled,
    quote,
    reset_fields,
)

logger = get_logger(__name__)

_reset = reset_fields("type")


@dataclass(frozen=True)
class TypeValidation:
    """Rejects any change of a field's type."""

    def name(self) -> str:
        return "Type"

    def validate(self, diff: PropertyDiff) -> Verdict:
        error = None
        if diff.old.type != diff.new.type:
            logger.debug(
                "Incompatible type change",
                validation=self.name(),
                old=diff.old.type,
                new=diff.new.type,
            )
            error = CompatibilityError(
                validation=self.name(),
                message=f"type changed from {quote(diff.old.type)} to {quote(diff.new.type)}",
            )

        return is_handled(diff, _reset), error
