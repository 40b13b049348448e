"""Compatibility jamo to keyboard keystroke splitting.

두벌식 자판 기준으로 겹자음, 겹받침, 이중모음을 입력 순서대로 분해:
- ㄲ → ㄱ ㄱ
- ㄵ → ㄴ ㅈ
- ㅘ → ㅗ ㅏ
"""

from __future__ import annotations

# =============================================================================
# Keystroke Table
# =============================================================================

COMPOUND_KEYSTROKES: dict[str, tuple[str, str]] = {
    # Double consonants (쌍자음)
    "ㄲ": ("ㄱ", "ㄱ"),
    "ㄸ": ("ㄷ", "ㄷ"),
    "ㅃ": ("ㅂ", "ㅂ"),
    "ㅆ": ("ㅅ", "ㅅ"),
    "ㅉ": ("ㅈ", "ㅈ"),
    # Compound finals (겹받침)
    "ㄳ": ("ㄱ", "ㅅ"),
    "ㄵ": ("ㄴ", "ㅈ"),
    "ㄶ": ("ㄴ", "ㅎ"),
    "ㄺ": ("ㄹ", "ㄱ"),
    "ㄻ": ("ㄹ", "ㅁ"),
    "ㄼ": ("ㄹ", "ㅂ"),
    "ㄽ": ("ㄹ", "ㅅ"),
    "ㄾ": ("ㄹ", "ㅌ"),
    "ㄿ": ("ㄹ", "ㅍ"),
    "ㅀ": ("ㄹ", "ㅎ"),
    "ㅄ": ("ㅂ", "ㅅ"),
    # Compound vowels (이중모음)
    "ㅘ": ("ㅗ", "ㅏ"),
    "ㅙ": ("ㅗ", "ㅐ"),
    "ㅚ": ("ㅗ", "ㅣ"),
    "ㅝ": ("ㅜ", "ㅓ"),
    "ㅞ": ("ㅜ", "ㅔ"),
    "ㅟ": ("ㅜ", "ㅣ"),
    "ㅢ": ("ㅡ", "ㅣ"),
}


def split_into_keystrokes(char: str) -> tuple[str, ...]:
    """Split a compatibility jamo into the keys typed to produce it.

    Anything not in the compound table is a single keystroke of itself.

    Example: ㅘ → (ㅗ, ㅏ), ㄱ → (ㄱ,)
    """
    return COMPOUND_KEYSTROKES.get(char, (char,))
