"""Conjoining jamo to compatibility jamo mapping.

Compatibility jamo (U+3130..U+318F) are the standalone forms an input method
shows while a syllable is still being composed, so they are the common
ground for comparing decomposed answers with half-typed input.
"""

from __future__ import annotations

# =============================================================================
# Mapping Table
# =============================================================================

JAMO_TO_COMPAT: dict[str, str] = {
    # Initial consonants (Choseong)
    "ᄀ": "ㄱ", "ᄁ": "ㄲ", "ᄂ": "ㄴ", "ᄃ": "ㄷ", "ᄄ": "ㄸ",
    "ᄅ": "ㄹ", "ᄆ": "ㅁ", "ᄇ": "ㅂ", "ᄈ": "ㅃ", "ᄉ": "ㅅ",
    "ᄊ": "ㅆ", "ᄋ": "ㅇ", "ᄌ": "ㅈ", "ᄍ": "ㅉ", "ᄎ": "ㅊ",
    "ᄏ": "ㅋ", "ᄐ": "ㅌ", "ᄑ": "ㅍ", "ᄒ": "ㅎ",
    # Medial vowels (Jungseong)
    "ᅡ": "ㅏ", "ᅢ": "ㅐ", "ᅣ": "ㅑ", "ᅤ": "ㅒ", "ᅥ": "ㅓ",
    "ᅦ": "ㅔ", "ᅧ": "ㅕ", "ᅨ": "ㅖ", "ᅩ": "ㅗ", "ᅪ": "ㅘ",
    "ᅫ": "ㅙ", "ᅬ": "ㅚ", "ᅭ": "ㅛ", "ᅮ": "ㅜ", "ᅯ": "ㅝ",
    "ᅰ": "ㅞ", "ᅱ": "ㅟ", "ᅲ": "ㅠ", "ᅳ": "ㅡ", "ᅴ": "ㅢ",
    "ᅵ": "ㅣ",
    # Final consonants (Jongseong)
    "ᆨ": "ㄱ", "ᆩ": "ㄲ", "ᆪ": "ㄳ", "ᆫ": "ㄴ", "ᆬ": "ㄵ",
    "ᆭ": "ㄶ", "ᆮ": "ㄷ", "ᆯ": "ㄹ", "ᆰ": "ㄺ", "ᆱ": "ㄻ",
    "ᆲ": "ㄼ", "ᆳ": "ㄽ", "ᆴ": "ㄾ", "ᆵ": "ㄿ", "ᆶ": "ㅀ",
    "ᆷ": "ㅁ", "ᆸ": "ㅂ", "ᆹ": "ㅄ", "ᆺ": "ㅅ", "ᆻ": "ㅆ",
    "ᆼ": "ㅇ", "ᆽ": "ㅈ", "ᆾ": "ㅊ", "ᆿ": "ㅋ", "ᇀ": "ㅌ",
    "ᇁ": "ㅍ", "ᇂ": "ㅎ",
}


def jamo_to_compat(char: str) -> str | None:
    """Convert a conjoining jamo to its compatibility jamo.

    Returns ``None`` when there is no equivalent (archaic jamo,
    syllables, anything that is not Hangul).

    Example: ᆫ (U+11AB) → ㄴ
    """
    return JAMO_TO_COMPAT.get(char)


def jamo_to_compat_with_fallback(char: str) -> str:
    """Convert a conjoining jamo to compatibility jamo, or return it unchanged."""
    return JAMO_TO_COMPAT.get(char, char)
