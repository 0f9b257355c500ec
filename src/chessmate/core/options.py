"""Rule configuration shared by the geometry, generator and game layers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class RuleOptions:
    """Switches for rule variations.

    Args:
        pawn_double_step_checks_path: Require the square a pawn passes over
            on its two-square advance to be empty.  Off by default, which
            lets a pawn jump an occupied square on its first move.
    """

    pawn_double_step_checks_path: bool = False


DEFAULT_OPTIONS = RuleOptions()
