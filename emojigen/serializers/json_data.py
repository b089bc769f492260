import json
from typing import Any

from emojigen.dataset import EmojiRecord
from emojigen.index import EmojiIndex

# Fields that are copied to the webapp only when dataset has them
_OPTIONAL_FIELDS = ("text", "texts", "obsoletes", "obsoleted_by", "skins", "skin_variations")


def project_emoji(emoji: EmojiRecord, category: str) -> dict[str, Any]:
    result: dict[str, Any] = {
        "name": emoji.name,
        "unified": emoji.unified or "",
        "image": emoji.file_name,
        "fileName": emoji.image,
        "short_name": emoji.short_name,
        "short_names": emoji.short_names,
        "category": category,
    }

    for name in _OPTIONAL_FIELDS:
        value = getattr(emoji, name)
        if value is not None:
            result[name] = value

    return result


def serialize_emoji_json(index: EmojiIndex) -> str:
    return json.dumps(
        [project_emoji(emoji, index.category_of(idx)) for idx, emoji in enumerate(index.emojis)],
        indent=4, ensure_ascii=False,
    )
