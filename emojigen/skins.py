from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from emojigen.dataset import EmojiRecord

EMOJI_DEFAULT_SKIN = "default"

SKIN_CODES = {
    "1F3FB": "light_skin_tone",
    "1F3FC": "medium_light_skin_tone",
    "1F3FD": "medium_skin_tone",
    "1F3FE": "medium_dark_skin_tone",
    "1F3FF": "dark_skin_tone",
    EMOJI_DEFAULT_SKIN: EMOJI_DEFAULT_SKIN,
}

SKIN_NAMES = {
    "1F3FB": "LIGHT SKIN TONE",
    "1F3FC": "MEDIUM LIGHT SKIN TONE",
    "1F3FD": "MEDIUM SKIN TONE",
    "1F3FE": "MEDIUM DARK SKIN TONE",
    "1F3FF": "DARK SKIN TONE",
}

# Fields of a skin variation entry that replace the ones of the base emoji
_VARIATION_FIELDS = ("unified", "image", "sheet_x", "sheet_y", "obsoletes", "obsoleted_by")


def skin_short_name(skins: list[str]) -> str:
    # Unknown skin codes become empty strings, e.g. "1F3FB-XXXX" -> "light_skin_tone_"
    return "_".join(SKIN_CODES.get(code, "") for code in skins)


def skin_name(skins: list[str]) -> str:
    return ", ".join(SKIN_NAMES.get(code, "") for code in skins)


def gen_skin_variations(emoji: EmojiRecord) -> list[EmojiRecord]:
    if not emoji.skin_variations:
        return []

    result = []
    for skin_code, variation in emoji.skin_variations.items():
        skins = skin_code.split("-")
        suffix = skin_short_name(skins)

        overrides = {key: variation[key] for key in _VARIATION_FIELDS if key in variation}
        result.append(replace(
            emoji,
            **overrides,
            short_name=f"{emoji.short_name}_{suffix}",
            short_names=[f"{alias}_{suffix}" for alias in emoji.short_names],
            name=f"{emoji.name}: {skin_name(skins)}",
            category=emoji.category,
            skins=skins,
            skin_variations=None,
        ))

    return result


def expand_skin_variations(emojis: Iterable[EmojiRecord]) -> list[EmojiRecord]:
    """Returns base emojis followed by every skin tone variation, as separate emojis."""

    emojis = list(emojis)
    full = emojis.copy()
    for emoji in emojis:
        full.extend(gen_skin_variations(emoji))

    return full
