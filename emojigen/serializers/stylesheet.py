from emojigen.config import GenConfig
from emojigen.dataset import CUSTOM_CATEGORY
from emojigen.index import EmojiIndex

STYLESHEET_TEMPLATE = """
@charset "UTF-8";

.emojisprite-preview {{
    width: {padded}px;
    max-width: none;
    height: {padded}px;
    background-repeat: no-repeat;
    cursor: pointer;
    -moz-transform: scale(0.5);
    transform-origin: 0 0;
    // Using zoom for now as it results in less blurry emojis on Chrome - MM-34178
    zoom: 0.5;
}}

.emojisprite {{
    width: {padded}px;
    max-width: none;
    height: {padded}px;
    background-repeat: no-repeat;
    border-radius: 18px;
    cursor: pointer;
    -moz-transform: scale(0.35);
    zoom: 0.35;
}}

.emojisprite-loading {{
    width: {padded}px;
    max-width: none;
    height: {padded}px;
    background-image: none !important;
    background-repeat: no-repeat;
    border-radius: 18px;
    cursor: pointer;
    -moz-transform: scale(0.35);
    zoom: 0.35;
}}

{category_rules};
{emoji_rules};
"""


def serialize_stylesheet(index: EmojiIndex, sheet_file: str, emoji_size: int = GenConfig.EMOJI_SIZE) -> str:
    category_rules = [
        f".emoji-category-{category} {{ background-image: url('{sheet_file}'); }}"
        for category in index.category_names
        if category != CUSTOM_CATEGORY
    ]
    emoji_rules = [
        f".emoji-{file_name} {{ background-position: {position} }}"
        for file_name, position in index.file_positions.items()
    ]

    return STYLESHEET_TEMPLATE.format(
        padded=emoji_size + 2,
        category_rules="\n".join(category_rules),
        emoji_rules="\n".join(emoji_rules),
    )
