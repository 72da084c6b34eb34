"""Core datatypes shared by the builder, config loader, and CLI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class BuilderConfig:
    """Per-builder settings read by every URL and srcset call."""

    domain: str
    use_https: bool = True
    sign_key: str = ""
    include_library_param: bool = True

    @property
    def scheme(self) -> str:
        return "https" if self.use_https else "http"


@dataclass(slots=True)
class SrcSetOptions:
    """Options steering srcset generation; ``None`` fields use defaults."""

    widths: list[int] | None = None
    start: int | None = None
    stop: int | None = None
    tol: float | None = None
    disable_variable_quality: bool = False


@dataclass(frozen=True, slots=True)
class Candidate:
    """One srcset entry: a URL and its ``w``/``x`` descriptor."""

    url: str
    descriptor: str

    def render(self) -> str:
        return f"{self.url} {self.descriptor}"


@dataclass(slots=True)
class ShardState:
    """Caller-owned round-robin counter for domain sharding."""

    index: int = 0

    def advance(self, size: int) -> int:
        """Return the current slot for ``size`` domains and move forward."""
        slot = self.index % size
        self.index = (slot + 1) % size
        return slot
