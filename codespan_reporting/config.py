from __future__ import annotations

"""
Serialization settings for diagnostics.

The model itself has nothing to configure; these settings only shape the
JSON produced by codespan_reporting.serialization. Loading accepts every
shape any of these settings can produce.
"""

from dataclasses import dataclass


@dataclass
class Config:
    """
    Serialization configuration.

    indent: JSON indentation passed through to the encoder (None = compact).
    omit_missing_code: drop the "code" key instead of writing null when a
        diagnostic has no code.
    """

    indent: int | None = None
    omit_missing_code: bool = False


def get_default_config() -> Config:
    """
    Return the default configuration: compact JSON, "code" always present.

    Every serialization entry point falls back to this when passed config=None.
    """
    return Config()
