from __future__ import annotations

import json
from copy import deepcopy
from pathlib import Path
from typing import Any, Iterator

import pytest
from loguru import logger

from emojigen.config import GenPaths

EMOJIS: list[dict[str, Any]] = [
    {
        "name": "GRINNING FACE",
        "unified": "1F600",
        "non_qualified": None,
        "docomo": None,
        "au": "E471",
        "softbank": None,
        "google": "FEB33",
        "image": "1f600.png",
        "sheet_x": 30,
        "sheet_y": 35,
        "short_name": "grinning",
        "short_names": ["grinning"],
        "text": ":D",
        "texts": None,
        "category": "Smileys & Emotion",
        "subcategory": "face-smiling",
        "sort_order": 1,
        "added_in": "6.1",
        "has_img_apple": True,
        "has_img_google": True,
        "has_img_twitter": True,
        "has_img_facebook": True,
    },
    {
        "name": "THUMBS UP SIGN",
        "unified": "1F44D",
        "non_qualified": None,
        "image": "1f44d.png",
        "sheet_x": 12,
        "sheet_y": 3,
        "short_name": "+1",
        "short_names": ["+1", "thumbsup"],
        "text": None,
        "texts": None,
        "category": "People & Body",
        "subcategory": "hand-fingers-closed",
        "sort_order": 5,
        "added_in": "0.6",
        "has_img_apple": True,
        "skin_variations": {
            "1F3FB": {
                "unified": "1F44D-1F3FB",
                "non_qualified": None,
                "image": "1f44d-1f3fb.png",
                "sheet_x": 12,
                "sheet_y": 4,
                "added_in": "1.0",
                "has_img_apple": True,
            },
            "1F3FF": {
                "unified": "1F44D-1F3FF",
                "non_qualified": None,
                "image": "1f44d-1f3ff.png",
                "sheet_x": 12,
                "sheet_y": 8,
                "added_in": "1.0",
                "has_img_apple": True,
            },
        },
    },
    {
        "name": "HANDSHAKE",
        "unified": "1F91D",
        "image": "1f91d.png",
        "sheet_x": 40,
        "sheet_y": 1,
        "short_name": "handshake",
        "short_names": ["handshake"],
        "category": "People & Body",
        "sort_order": 3,
        "skin_variations": {
            "1F3FB-1F3FC": {
                "unified": "1FAF1-1F3FB-200D-1FAF2-1F3FC",
                "image": "1faf1-1f3fb-200d-1faf2-1f3fc.png",
                "sheet_x": 41,
                "sheet_y": 2,
            },
        },
    },
    {
        "name": "THINKING FACE",
        "unified": "1F914",
        "image": "1f914.png",
        "sheet_x": 3,
        "sheet_y": 0,
        "short_name": "thinking_face",
        "short_names": ["thinking_face"],
        "category": "Smileys & Emotion",
        "sort_order": 2,
    },
    {
        "name": "EMOJI MODIFIER FITZPATRICK TYPE-1-2",
        "unified": "1F3FB",
        "image": "1f3fb.png",
        "sheet_x": 10,
        "sheet_y": 5,
        "short_name": "skin-tone-2",
        "short_names": ["skin-tone-2"],
        "category": "Component",
        "sort_order": 10,
    },
]

CATEGORIES: dict[str, list[str]] = {
    "Smileys & Emotion": ["face-smiling"],
    "People & Body": ["hand-fingers-closed"],
    "Component": ["skin-tone"],
    "Flags": ["flag"],
}

ADDITIONAL_SHORTNAMES: dict[str, list[str]] = {
    "thinking_face": ["thinking"],
    "+1_light_skin_tone": ["thumbsup_light"],
    "not_in_dataset": ["nothing"],
}


@pytest.fixture
def emojis() -> list[dict[str, Any]]:
    return deepcopy(EMOJIS)


@pytest.fixture
def categories() -> dict[str, list[str]]:
    return deepcopy(CATEGORIES)


@pytest.fixture
def additional_shortnames_file(tmp_path: Path) -> Path:
    path = tmp_path / "additional_shortnames.json"
    path.write_text(json.dumps(ADDITIONAL_SHORTNAMES))
    return path


def _image_names(emojis: list[dict[str, Any]]) -> list[str]:
    names = []
    for emoji in emojis:
        names.append(emoji["image"])
        names.extend(variation["image"] for variation in (emoji.get("skin_variations") or {}).values())
    return names


@pytest.fixture
def webapp_root(tmp_path: Path, emojis: list[dict[str, Any]], categories: dict[str, list[str]]) -> Path:
    root = tmp_path / "webapp"
    datasource = root / "node_modules" / "emoji-datasource"
    datasource.mkdir(parents=True)
    (datasource / "emoji.json").write_text(json.dumps(emojis))
    (datasource / "categories.json").write_text(json.dumps(categories))

    images_source = root / "node_modules" / "emoji-datasource-apple" / "img" / "apple"
    (images_source / "64").mkdir(parents=True)
    (images_source / "sheets").mkdir(parents=True)
    for image in _image_names(emojis):
        (images_source / "64" / image).write_bytes(f"png:{image}".encode("utf8"))
    (images_source / "sheets" / "64.png").write_bytes(b"sheet")

    (root / "images").mkdir()
    (root / "images" / "icon64x64.png").write_bytes(b"icon")

    return root


@pytest.fixture
def paths(webapp_root: Path) -> GenPaths:
    return GenPaths.from_root(webapp_root, image_set="apple", emoji_size=64, server_dir=None)


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="TRACE")
    yield messages
    logger.remove(handler_id)
