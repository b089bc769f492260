from typing import Any

from emojigen.dataset import EmojiRecord
from emojigen.skins import gen_skin_variations, expand_skin_variations, skin_short_name, skin_name


def _record(emojis: list[dict[str, Any]], short_name: str) -> EmojiRecord:
    return next(EmojiRecord.from_dict(emoji) for emoji in emojis if emoji["short_name"] == short_name)


def test_skin_short_name() -> None:
    assert skin_short_name(["1F3FB"]) == "light_skin_tone"
    assert skin_short_name(["1F3FB", "1F3FC"]) == "light_skin_tone_medium_light_skin_tone"
    assert skin_name(["1F3FE", "1F3FF"]) == "MEDIUM DARK SKIN TONE, DARK SKIN TONE"


def test_skin_short_name_unknown_code() -> None:
    assert skin_short_name(["1F3FB", "ABCDE"]) == "light_skin_tone_"
    assert skin_short_name(["ABCDE"]) == ""


def test_no_variations(emojis: list[dict[str, Any]]) -> None:
    assert gen_skin_variations(_record(emojis, "grinning")) == []


def test_single_skin_variations(emojis: list[dict[str, Any]]) -> None:
    base = _record(emojis, "+1")
    variations = gen_skin_variations(base)

    assert len(variations) == 2
    light, dark = variations

    assert light.short_name == "+1_light_skin_tone"
    assert light.short_names == ["+1_light_skin_tone", "thumbsup_light_skin_tone"]
    assert light.name == "THUMBS UP SIGN: LIGHT SKIN TONE"
    assert light.category == base.category
    assert light.skins == ["1F3FB"]
    assert light.unified == "1F44D-1F3FB"
    assert light.image == "1f44d-1f3fb.png"
    assert (light.sheet_x, light.sheet_y) == (12, 4)
    assert light.skin_variations is None
    assert light.sort_order == base.sort_order

    assert dark.short_name == "+1_dark_skin_tone"
    assert dark.name == "THUMBS UP SIGN: DARK SKIN TONE"

    assert base.short_names == ["+1", "thumbsup"]
    assert base.skins is None


def test_two_tone_variation(emojis: list[dict[str, Any]]) -> None:
    variation, = gen_skin_variations(_record(emojis, "handshake"))

    assert variation.short_name == "handshake_light_skin_tone_medium_light_skin_tone"
    assert variation.name == "HANDSHAKE: LIGHT SKIN TONE, MEDIUM LIGHT SKIN TONE"
    assert variation.skins == ["1F3FB", "1F3FC"]


def test_expand_skin_variations_count(emojis: list[dict[str, Any]]) -> None:
    records = [EmojiRecord.from_dict(emoji) for emoji in emojis]
    full = expand_skin_variations(records)

    expected = sum(len(emoji.get("skin_variations") or {}) for emoji in emojis)
    assert len(full) == len(records) + expected
    assert full[:len(records)] == records
    assert [record.short_name for record in full[len(records):]] == [
        "+1_light_skin_tone", "+1_dark_skin_tone", "handshake_light_skin_tone_medium_light_skin_tone",
    ]
