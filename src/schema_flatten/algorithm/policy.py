"""CompressionPolicy StrEnum and the legacy flag translator.

Three dimensions are folded into one closed enumeration (compress or not,
prefer config or state, exclude derived state or not).  No dimension spans
every option of the others, so a single enum avoids invalid combinations
instead of rejecting them at runtime.
"""

from __future__ import annotations

from enum import StrEnum, auto

__all__ = ["CompressionPolicy", "translate_policy"]


class CompressionPolicy(StrEnum):
    """How the direct children of a schema node are determined.

    - UNCOMPRESSED:                Structural children only; wrappers skipped.
    - UNCOMPRESSED_STATE_EXCLUDED: As UNCOMPRESSED, read-only subtrees dropped.
    - COMPRESSED_PREFER_CONFIG:    Compressed; "config" leaves win over "state".
    - COMPRESSED_PREFER_STATE:     Compressed; "state" leaves win over "config".
    - COMPRESSED_STATE_EXCLUDED:   Compressed preferring "config", read-only
                                   subtrees dropped.
    """

    UNCOMPRESSED = auto()
    UNCOMPRESSED_STATE_EXCLUDED = auto()
    COMPRESSED_PREFER_CONFIG = auto()
    COMPRESSED_PREFER_STATE = auto()
    COMPRESSED_STATE_EXCLUDED = auto()

    @property
    def compression_enabled(self) -> bool:
        return self not in (
            CompressionPolicy.UNCOMPRESSED,
            CompressionPolicy.UNCOMPRESSED_STATE_EXCLUDED,
        )

    @property
    def state_excluded(self) -> bool:
        return self in (
            CompressionPolicy.UNCOMPRESSED_STATE_EXCLUDED,
            CompressionPolicy.COMPRESSED_STATE_EXCLUDED,
        )

    @property
    def priority_names(self) -> tuple[str, str] | None:
        """Return ``(priority, deprioritized)`` container names.

        None when compression is disabled, since config/state containers are
        then kept as ordinary children.
        """
        if not self.compression_enabled:
            return None
        if self is CompressionPolicy.COMPRESSED_PREFER_STATE:
            return ("state", "config")
        return ("config", "state")


def translate_policy(compress_paths: bool, exclude_state: bool) -> CompressionPolicy:
    """Translate the legacy ``(compress_paths, exclude_state)`` flags.

    Only four of the five policies are reachable this way;
    COMPRESSED_PREFER_STATE must be requested explicitly.

    Args:
        compress_paths: Whether config/state and list-wrapper containers are elided.
        exclude_state:  Whether read-only subtrees are dropped.

    Returns:
        The matching CompressionPolicy.
    """
    if compress_paths and exclude_state:
        return CompressionPolicy.COMPRESSED_STATE_EXCLUDED
    if compress_paths:
        return CompressionPolicy.COMPRESSED_PREFER_CONFIG
    if exclude_state:
        return CompressionPolicy.UNCOMPRESSED_STATE_EXCLUDED
    return CompressionPolicy.UNCOMPRESSED
