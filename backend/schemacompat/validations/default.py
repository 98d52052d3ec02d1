"""Compatibility rule for the ``default`` facet."""

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

_reset = reset_fields("default")


@dataclass(frozen=True)
class DefaultValidation:
    """Rejects any addition, removal or change of a default value.

    Defaults are compared byte for byte in their serialized form.
    """

    def name(self) -> str:
        return "Default"

    def validate(self, diff: PropertyDiff) -> Verdict:
        old_default = diff.old.default
        new_default = diff.new.default
        message = None

        if old_default is None and new_default is not None:
            message = (
                f"default value {quote(new_default)} added when there was no "
                "default previously"
            )
        elif old_default is not None and new_default is None:
            message = f"default value {quote(old_default)} removed"
        elif (
            old_default is not None
            and new_default is not None
            and old_default.raw != new_default.raw
        ):
            message = (
                f"default value changed from {quote(old_default)} "
                f"to {quote(new_default)}"
            )

        error = None
        if message is not None:
            logger.debug(
                "Incompatible default change",
                validation=self.name(),
                old=str(old_default) if old_default is not None else None,
                new=str(new_default) if new_default is not None else None,
            )
            error = CompatibilityError(validation=self.name(), message=message)

        return is_handled(diff, _reset), error
