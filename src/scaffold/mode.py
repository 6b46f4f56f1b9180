# src/scaffold/mode.py
"""Build mode resolution from the two global flags."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .constants import (
    DEFAULT_DEBUG_ONLY,
    DEFAULT_ENABLE_IOS,
    PROP_DEBUG_ONLY,
    PROP_ENABLE_IOS,
)
from .logs import getAppLogger


if TYPE_CHECKING:
    from .properties import FlagSource


@dataclass(frozen=True)
class BuildMode:
    """Effective mode for one configuration pass.

    ``ios_enabled`` is always ``enable_ios or not debug_only``: a full build
    keeps iOS tasks, a debug-only build keeps them only on request.
    """

    debug_only: bool
    ios_enabled: bool


def resolve_build_mode(debug_only: bool, enable_ios: bool) -> BuildMode:  # noqa: FBT001
    mode = BuildMode(
        debug_only=debug_only,
        ios_enabled=enable_ios or not debug_only,
    )
    getAppLogger().trace(
        f"[resolve_build_mode] debug_only={debug_only}, enable_ios={enable_ios}"
        f" → {mode}"
    )
    return mode


def resolve_build_mode_from(flags: "FlagSource") -> BuildMode:
    """Read ``app.debugOnly`` / ``app.enableIos`` and resolve the mode."""
    return resolve_build_mode(
        flags.boolean_property(PROP_DEBUG_ONLY, DEFAULT_DEBUG_ONLY),
        flags.boolean_property(PROP_ENABLE_IOS, DEFAULT_ENABLE_IOS),
    )
