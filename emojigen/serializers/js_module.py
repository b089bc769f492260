import json
from typing import Any

from emojigen.dataset import COMPONENT_CATEGORY
from emojigen.index import EmojiIndex
from emojigen.skins import SKIN_CODES, EMOJI_DEFAULT_SKIN

MODULE_TEMPLATE = """\
// This file is automatically generated via `make emojis`. Do not modify it manually.

/* eslint-disable */

import {{t}} from 'utils/i18n';

import memoize from 'memoize-one';

import emojis from 'utils/emoji.json';

import spriteSheet from '{sheet_file}';

export const Emojis = emojis;

export const EmojiIndicesByAlias = new Map({by_alias});

export const EmojiIndicesByUnicode = new Map({by_unicode});

export const CategoryNames = {category_names};

export const CategoryMessage = new Map({category_message});

export const CategoryTranslations = new Map([{category_translations}]);

export const SkinTranslations = new Map([{skin_translations}]);

export const ComponentCategory = '{component_category}';

export const AllEmojiIndicesByCategory = new Map({by_category});

export const EmojiIndicesByCategoryAndSkin = new Map([{by_category_and_skin}]);
export const EmojiIndicesByCategoryNoSkin = new Map({by_category_no_skin});

export const skinCodes = {skin_codes};
export const EMOJI_DEFAULT_SKIN = '{default_skin}';

// Generate the list of indices that belong to each category by an specified skin
function genSkinnedCategories(skin) {{
    const result = new Map();
    for (const cat of CategoryNames) {{
        const indices = [];
        const skinCat = (EmojiIndicesByCategoryAndSkin.get(skin) || new Map()).get(cat) || [];
        indices.push(...(EmojiIndicesByCategoryNoSkin.get(cat) || []));
        indices.push(...skinCat);

        result.set(cat, indices);
    }}
    return result;
}}

export const getSkinnedCategories = memoize(genSkinnedCategories);
export const EmojiIndicesByCategory = new Map([{skinned_categories}]);
"""


def _js(value: Any) -> str:
    """Same output as JSON.stringify(value)."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _pairs(mapping: dict[str, Any]) -> list[list[Any]]:
    return [[key, value] for key, value in mapping.items()]


def serialize_emoji_module(index: EmojiIndex, sheet_file: str) -> str:
    category_translations = [
        f"['{category}', t('emoji_picker.{category}')]"
        for category in ("recent", "searchResults", *index.category_names)
    ]

    by_category_and_skin = []
    skin_translations = []
    skinned_categories = []
    for skin, categories in index.indices_by_category_and_skin.items():
        by_category_and_skin.append(f"['{skin}', new Map({_js(_pairs(categories))})]")
        skin_translations.append(f"['{skin}', t('emoji_skin.{SKIN_CODES.get(skin, 'undefined')}')]")
        skinned_categories.append(f"['{skin}', genSkinnedCategories('{skin}')]")

    return MODULE_TEMPLATE.format(
        sheet_file=sheet_file,
        by_alias=_js(index.indices_by_alias),
        by_unicode=_js(index.indices_by_unicode),
        category_names=_js(index.category_names),
        category_message=_js(_pairs(index.category_default_translation)),
        category_translations=",".join(category_translations),
        skin_translations=", ".join(skin_translations),
        component_category=COMPONENT_CATEGORY,
        by_category=_js(_pairs(index.indices_by_category)),
        by_category_and_skin=", ".join(by_category_and_skin),
        by_category_no_skin=_js(_pairs(index.indices_by_category_no_skin)),
        skin_codes=_js(SKIN_CODES),
        default_skin=EMOJI_DEFAULT_SKIN,
        skinned_categories=", ".join(skinned_categories),
    )
