"""API member entity and security levels value object."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SecurityLevels:
    """Read/Write security pair.

    Each axis is a single string or an OR-set of strings, both as
    member security and as a filter argument.

    Attributes:
        read: Read security, None = unspecified
        write: Write security, None = unspecified
    """

    read: str | frozenset[str] | None = None
    write: str | frozenset[str] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for axis in ("read", "write"):
            value = getattr(self, axis)
            if value is None or isinstance(value, str):
                continue
            if not isinstance(value, frozenset):
                raise TypeError(f"{axis} must be str, frozenset or None, got {type(value).__name__}")
            if not all(isinstance(v, str) for v in value):
                raise TypeError(f"{axis} must contain only strings")


@dataclass(frozen=True, slots=True)
class Member:
    """Documented API member: function, property, event or callback.

    Flags are taken as given; nothing here derives them from tags.

    Attributes:
        name: Member name
        member_type: "Property", "Function", "Event", "Callback", ...
        tags: Arbitrary labels attached to the member
        security: Single security string or Read/Write pair
        value_type: Declared value type name, None if the member has none
        deprecated: Member is deprecated
        read_only: Member cannot be written
        replicated: Member replicates
        scriptable: Member is accessible from scripts
        yields: Member yields the calling thread
        thread_safe: Member is safe to use from parallel code
        readable: Member can be read
        writable: Member can be written
        service: Member belongs to a service
    """

    name: str
    member_type: str
    tags: frozenset[str] = field(default_factory=frozenset)
    security: str | SecurityLevels | None = None
    value_type: str | None = None
    deprecated: bool = False
    read_only: bool = False
    replicated: bool = False
    scriptable: bool = False
    yields: bool = False
    thread_safe: bool = False
    readable: bool = False
    writable: bool = False
    service: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("member name must not be empty")

        if not self.member_type:
            raise ValueError("member_type must not be empty")

        if not isinstance(self.tags, frozenset):
            raise TypeError(f"tags must be frozenset, got {type(self.tags).__name__}")

        if not all(isinstance(tag, str) for tag in self.tags):
            raise TypeError("tags must contain only strings")

    def __str__(self) -> str:
        """Format as MemberType Name."""
        return f"{self.member_type} {self.name}"
