"""Per-chain assertion metadata."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from affirm.representation import STANDARD_REPRESENTATION, Representation


@dataclass(frozen=True)
class AssertionInfo:
    """Immutable context shared by every check of one fluent chain.

    Attributes:
        description: Optional text prefixed to failure messages as ``[text] ``.
        representation: Strategy used to format values in failure messages.
        overriding_error_message: When set, replaces the generated message.
    """

    description: str | None = None
    representation: Representation = field(default=STANDARD_REPRESENTATION)
    overriding_error_message: str | None = None

    def with_description(self, description: str | None) -> AssertionInfo:
        return replace(self, description=description)

    def with_representation(self, representation: Representation) -> AssertionInfo:
        return replace(self, representation=representation)

    def with_overriding_error_message(self, message: str | None) -> AssertionInfo:
        return replace(self, overriding_error_message=message)

    def description_prefix(self) -> str:
        return f"[{self.description}] " if self.description else ""
