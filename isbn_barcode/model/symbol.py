"""Module patterns produced by the symbology encoder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .enums import ModuleRole, Symbology

__all__ = ["ModuleRun", "ModulePattern"]


@dataclass(frozen=True, slots=True)
class ModuleRun:
    """
    Run of same-coloured modules.

    Attributes:
        dark: True for a bar, False for a space.
        width: Width in modules (>= 1).
        role: Guard, digit or add-on separator.
        digit_index: Position of the encoded digit in the input, None for
            guards and separators.
    """

    dark: bool
    width: int
    role: ModuleRole
    digit_index: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError(f"Module run width must be >= 1, got {self.width}")


@dataclass(frozen=True, slots=True)
class ModulePattern:
    """Ordered, colour-alternating module runs of one symbol."""

    symbology: Symbology
    runs: Tuple[ModuleRun, ...]

    @property
    def module_count(self) -> int:
        return sum(run.width for run in self.runs)

    @property
    def dark_module_count(self) -> int:
        return sum(run.width for run in self.runs if run.dark)

    @property
    def bar_count(self) -> int:
        return sum(1 for run in self.runs if run.dark)

    def modules(self) -> Tuple[Tuple[bool, ModuleRole], ...]:
        """Expand runs into one ``(dark, role)`` entry per module."""
        expanded: list[Tuple[bool, ModuleRole]] = []
        for run in self.runs:
            expanded.extend([(run.dark, run.role)] * run.width)
        return tuple(expanded)

    def to_bitstring(self) -> str:
        return "".join("1" if dark else "0" for dark, _ in self.modules())

    def __str__(self) -> str:
        return f"ModulePattern({self.symbology.value}, modules={self.module_count})"
