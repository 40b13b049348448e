"""Hangul decomposition primitives.

Pure functions over strings: classification into Unicode blocks, syllable
decomposition, compatibility jamo mapping and keystroke splitting.
"""

from hangul_drill.hangul.char_class import HangulCharClass, classify, split_by_class
from hangul_drill.hangul.compat import jamo_to_compat, jamo_to_compat_with_fallback
from hangul_drill.hangul.keystrokes import split_into_keystrokes
from hangul_drill.hangul.syllables import (
    compose_syllable,
    decompose_all_syllables,
    decompose_syllable,
)

__all__ = [
    "HangulCharClass",
    "classify",
    "compose_syllable",
    "decompose_all_syllables",
    "decompose_syllable",
    "jamo_to_compat",
    "jamo_to_compat_with_fallback",
    "split_by_class",
    "split_into_keystrokes",
]
