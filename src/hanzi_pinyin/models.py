"""Shared types for the conversion pipeline."""

from __future__ import annotations

from enum import Enum


class OutputForm(Enum):
    """Spelling used for each converted syllable.

    The values double as the CLI ``--form`` choices.
    """

    NUMBERED_TONE = "number"
    MARKED_TONE = "mark"
    TONE_FREE = "none"
