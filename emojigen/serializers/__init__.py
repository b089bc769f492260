from emojigen.serializers.go_source import serialize_go_source
from emojigen.serializers.js_module import serialize_emoji_module
from emojigen.serializers.json_data import serialize_emoji_json
from emojigen.serializers.stylesheet import serialize_stylesheet

__all__ = [
    "serialize_emoji_json",
    "serialize_emoji_module",
    "serialize_go_source",
    "serialize_stylesheet",
]
