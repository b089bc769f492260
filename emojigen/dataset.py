from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from loguru import logger

from emojigen.exceptions import ExcludedEmojiFileError

ADDITIONAL_SHORTNAMES_FILE = Path(__file__).parent / "data" / "additional_shortnames.json"
COMPONENT_CATEGORY = "Component"
CUSTOM_CATEGORY = "custom"
SYNTHETIC_CATEGORIES = {
    "recent": "Recently Used",
    "searchResults": "Search Results",
    "custom": "Custom",
}

_NEWLINE_RE = re.compile(r"\r?\n")


@dataclass(slots=True)
class EmojiRecord:
    name: str
    short_name: str
    short_names: list[str]
    category: str
    image: str
    unified: str | None = None
    sort_order: int | None = None
    sheet_x: int | None = None
    sheet_y: int | None = None
    text: str | None = None
    texts: list[str] | None = None
    obsoletes: str | None = None
    obsoleted_by: str | None = None
    skins: list[str] | None = None
    skin_variations: dict[str, dict[str, Any]] | None = field(default=None, repr=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmojiRecord:
        short_names = list(data.get("short_names") or [])
        short_name = data.get("short_name") or (short_names[0] if short_names else None)
        if not short_name:
            raise ValueError(f"Emoji {data.get('name')!r} does not have any short names")
        if not short_names:
            short_names = [short_name]

        return cls(
            name=data.get("name") or "",
            short_name=short_name,
            short_names=short_names,
            category=data.get("category") or "",
            image=data["image"],
            unified=data.get("unified"),
            sort_order=data.get("sort_order"),
            sheet_x=data.get("sheet_x"),
            sheet_y=data.get("sheet_y"),
            text=data.get("text"),
            texts=data.get("texts"),
            obsoletes=data.get("obsoletes"),
            obsoleted_by=data.get("obsoleted_by"),
            skins=data.get("skins"),
            skin_variations=data.get("skin_variations"),
        )

    @property
    def file_name(self) -> str:
        return self.image.split(".")[0]


def convert_category(category: str) -> str:
    return category.lower().replace(" & ", "-", 1)


def load_emoji_data(path: Path) -> list[EmojiRecord]:
    with open(path, encoding="utf8") as f:
        data: list[dict[str, Any]] = json.load(f)

    logger.info(f"Loaded {len(data)} emojis from {path}")
    return [EmojiRecord.from_dict(emoji) for emoji in data]


def load_categories(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf8") as f:
        return json.load(f)


def dataset_category_names(categories: dict[str, Any]) -> list[str]:
    return [convert_category(category) for category in categories if category != COMPONENT_CATEGORY]


def load_additional_shortnames(path: Path = ADDITIONAL_SHORTNAMES_FILE) -> dict[str, list[str]]:
    with open(path, encoding="utf8") as f:
        return json.load(f)


def load_excluded_emoji(path: Path | None) -> list[str]:
    if path is None:
        return []

    try:
        content = path.read_text(encoding="utf8")
    except (OSError, UnicodeDecodeError) as e:
        raise ExcludedEmojiFileError(path, str(e)) from e

    excluded = [line for line in _NEWLINE_RE.split(content) if line]
    logger.warning(f"[WARNING] The following emoji will be excluded from the webapp: {','.join(excluded)}")
    return excluded


def filter_excluded(records: Iterable[EmojiRecord], excluded: Iterable[str]) -> list[EmojiRecord]:
    excluded = set(excluded)
    if not excluded:
        return list(records)

    return [record for record in records if excluded.isdisjoint(record.short_names)]


def augment_short_names(records: Iterable[EmojiRecord], additional: dict[str, list[str]]) -> None:
    """Adds old short names to keep backwards compatibility with gemoji."""

    for record in records:
        if record.short_name in additional:
            record.short_names.extend(additional[record.short_name])


def custom_emoji() -> EmojiRecord:
    return EmojiRecord(
        name="Mattermost",
        unified="",
        image="mattermost.png",
        short_name="mattermost",
        short_names=["mattermost"],
        category=CUSTOM_CATEGORY,
    )
