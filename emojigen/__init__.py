from emojigen.generator import EmojiGenerator
from emojigen.index import EmojiIndex, build_index

__all__ = [
    "EmojiGenerator",
    "EmojiIndex",
    "build_index",
]
