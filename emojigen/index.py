from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from emojigen.config import GenConfig
from emojigen.dataset import EmojiRecord, convert_category, dataset_category_names, CUSTOM_CATEGORY, \
    SYNTHETIC_CATEGORIES
from emojigen.skins import EMOJI_DEFAULT_SKIN


def sort_emojis(emojis: Iterable[EmojiRecord]) -> list[EmojiRecord]:
    # Emojis without sort order (custom ones) are compared as 0
    return sorted(emojis, key=lambda emoji: emoji.sort_order or 0)


def sprite_offset(sheet_x: int | None, sheet_y: int | None, emoji_size: int = GenConfig.EMOJI_SIZE) -> str:
    padded = emoji_size + 2
    return f"-{(sheet_x or 0) * padded}px -{(sheet_y or 0) * padded}px;"


def _add_index(indices: dict[str, list[int]], key: str, index: int) -> None:
    indices.setdefault(key, []).append(index)


@dataclass(frozen=True, eq=False)
class EmojiIndex:
    """
    Lookup structures built once from sorted emoji list.
    Every position stored here is an index into `emojis`, nothing is modified after `build_index` returns it.
    """

    emojis: tuple[EmojiRecord, ...]
    categories: tuple[str, ...]
    indices_by_alias: tuple[tuple[str, int], ...]
    indices_by_unicode: tuple[tuple[str, int], ...]
    indices_by_category: dict[str, list[int]]
    indices_by_category_and_skin: dict[str, dict[str, list[int]]]
    indices_by_category_no_skin: dict[str, list[int]]
    category_names: tuple[str, ...]
    category_default_translation: dict[str, str]
    file_positions: dict[str, str]
    _skinned_categories: dict[str, dict[str, list[int]]] = field(default_factory=dict, init=False, repr=False)

    def alias_map(self) -> dict[str, int]:
        return dict(self.indices_by_alias)

    def unicode_map(self) -> dict[str, int]:
        return dict(self.indices_by_unicode)

    def category_of(self, index: int) -> str:
        return self.categories[index]

    def skinned_categories(self, skin: str) -> dict[str, list[int]]:
        if skin in self._skinned_categories:
            return self._skinned_categories[skin]

        skin_categories = self.indices_by_category_and_skin.get(skin, {})
        self._skinned_categories[skin] = result = {
            category: [*self.indices_by_category_no_skin.get(category, []), *skin_categories.get(category, [])]
            for category in self.category_names
        }
        return result


def build_index(
        emojis: Iterable[EmojiRecord], dataset_categories: dict[str, Any], emoji_size: int = GenConfig.EMOJI_SIZE,
) -> EmojiIndex:
    emojis = tuple(sort_emojis(emojis))

    categories: list[str] = []
    by_alias: list[tuple[str, int]] = []
    by_unicode: list[tuple[str, int]] = []
    by_category: dict[str, list[int]] = {}
    by_category_and_skin: dict[str, dict[str, list[int]]] = {}
    by_category_no_skin: dict[str, list[int]] = {}
    default_translation: dict[str, str] = {}
    file_positions: dict[str, str] = {}

    for index, emoji in enumerate(emojis):
        if emoji.unified:
            by_unicode.append((emoji.unified.lower(), index))

        category = convert_category(emoji.category)
        categories.append(category)
        default_translation[category] = emoji.category
        _add_index(by_category, category, index)

        if emoji.skins or emoji.skin_variations:
            skin = (emoji.skins[0] if emoji.skins else None) or EMOJI_DEFAULT_SKIN
            _add_index(by_category_and_skin.setdefault(skin, {}), category, index)
        else:
            _add_index(by_category_no_skin, category, index)

        by_alias.extend((alias, index) for alias in emoji.short_names)

        if category != CUSTOM_CATEGORY:
            file_positions[emoji.file_name] = sprite_offset(emoji.sheet_x, emoji.sheet_y, emoji_size)

    default_translation.update(SYNTHETIC_CATEGORIES)

    return EmojiIndex(
        emojis=emojis,
        categories=tuple(categories),
        indices_by_alias=tuple(by_alias),
        indices_by_unicode=tuple(by_unicode),
        indices_by_category=by_category,
        indices_by_category_and_skin=by_category_and_skin,
        indices_by_category_no_skin=by_category_no_skin,
        category_names=("recent", *dataset_category_names(dataset_categories), CUSTOM_CATEGORY),
        category_default_translation=default_translation,
        file_positions=file_positions,
    )
