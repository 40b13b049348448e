"""Hangul syllable decomposition and composition.

완성형 음절 ↔ 첫가끝 자모 변환:
- 음절 → (초성, 중성, 종성) 분해
- (초성, 중성, 종성) → 음절 조합
- 문자열 전체의 음절 분해
"""

from __future__ import annotations

from hangul_drill.hangul.char_class import HangulCharClass, classify

# =============================================================================
# Korean Unicode Constants
# =============================================================================

SYLLABLE_BASE = 0xAC00

# Conjoining jamo bases; the final base is one below ᆨ so index 0 means "no final"
CHOSEONG_BASE = 0x1100
JUNGSEONG_BASE = 0x1161
JONGSEONG_BASE = 0x11A7

CHOSEONG_COUNT = 19
JUNGSEONG_COUNT = 21
JONGSEONG_COUNT = 28  # including "no final"

SYLLABLES_PER_CHOSEONG = JUNGSEONG_COUNT * JONGSEONG_COUNT  # 588


def decompose_syllable(char: str) -> tuple[str, str, str | None] | None:
    """Decompose a syllable into conjoining (초성, 중성, 종성).

    The final consonant is ``None`` for open syllables. Returns ``None``
    when the character is not classified as a syllable.

    Example: 는 → (ᄂ, ᅳ, ᆫ), 이 → (ᄋ, ᅵ, None)
    """
    if classify(char) != HangulCharClass.SYLLABLES:
        return None

    offset = ord(char[0]) - SYLLABLE_BASE
    cho_idx = offset // SYLLABLES_PER_CHOSEONG
    jung_idx = (offset % SYLLABLES_PER_CHOSEONG) // JONGSEONG_COUNT
    jong_idx = offset % JONGSEONG_COUNT

    cho = chr(CHOSEONG_BASE + cho_idx)
    jung = chr(JUNGSEONG_BASE + jung_idx)
    jong = chr(JONGSEONG_BASE + jong_idx) if jong_idx else None
    return (cho, jung, jong)


def compose_syllable(cho: str, jung: str, jong: str | None = None) -> str | None:
    """Compose a syllable from conjoining (초성, 중성, 종성).

    Returns ``None`` if any part lies outside its conjoining jamo range.

    Example: (ᄒ, ᅡ, ᆫ) → 한
    """
    if len(cho) != 1 or len(jung) != 1:
        return None

    cho_idx = ord(cho) - CHOSEONG_BASE
    jung_idx = ord(jung) - JUNGSEONG_BASE
    if not (0 <= cho_idx < CHOSEONG_COUNT and 0 <= jung_idx < JUNGSEONG_COUNT):
        return None

    jong_idx = 0
    if jong:
        if len(jong) != 1:
            return None
        jong_idx = ord(jong) - JONGSEONG_BASE
        if not 1 <= jong_idx < JONGSEONG_COUNT:
            return None

    return chr(SYLLABLE_BASE + cho_idx * SYLLABLES_PER_CHOSEONG + jung_idx * JONGSEONG_COUNT + jong_idx)


def decompose_all_syllables(text: str) -> str:
    """Replace every syllable in text with its conjoining jamo.

    Characters that are not syllables are kept as they are.

    Example: "hi 이" → "hi 이"
    """
    result = []
    for char in text:
        decomposed = decompose_syllable(char)
        if decomposed:
            result.extend(part for part in decomposed if part)
        else:
            result.append(char)
    return "".join(result)
