"""Outcome of a policy evaluation."""

from dataclasses import dataclass

from crewline.domain.value_objects.access_level import AccessLevel


@dataclass(frozen=True)
class AccessDecision:
    """Allow/deny with the rule that produced it."""

    allowed: bool
    reason: str
    level: AccessLevel | None = None

    @classmethod
    def allow(cls, reason: str, level: AccessLevel | None = None) -> "AccessDecision":
        return cls(allowed=True, reason=reason, level=level)

    @classmethod
    def deny(cls, reason: str) -> "AccessDecision":
        return cls(allowed=False, reason=reason)

    def __bool__(self) -> bool:
        return self.allowed
