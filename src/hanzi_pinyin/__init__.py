"""Chinese text to pinyin conversion with rule-based polyphone resolution."""

from .models import OutputForm
from .pipeline import (
    PinyinConverter,
    build_converter,
    convert,
    default_converter,
    to_pinyin_with_tone_mark,
    to_pinyin_with_tone_number,
    to_pinyin_without_tone,
)

__all__ = [
    "OutputForm",
    "PinyinConverter",
    "build_converter",
    "convert",
    "default_converter",
    "to_pinyin_with_tone_number",
    "to_pinyin_with_tone_mark",
    "to_pinyin_without_tone",
]
