from __future__ import annotations

import asyncio
from pathlib import Path

from loguru import logger

from emojigen.assets import copy_emoji_images, copy_sprite_sheet, copy_custom_image
from emojigen.config import GenConfig, GenPaths
from emojigen.dataset import load_emoji_data, load_categories, load_additional_shortnames, load_excluded_emoji, \
    filter_excluded, augment_short_names, custom_emoji, ADDITIONAL_SHORTNAMES_FILE
from emojigen.index import EmojiIndex, build_index
from emojigen.serializers import serialize_emoji_json, serialize_emoji_module, serialize_go_source, \
    serialize_stylesheet
from emojigen.skins import expand_skin_variations
from emojigen.writer import FileWriter, relocate


class EmojiGenerator:
    def __init__(
            self, paths: GenPaths, excluded_emoji_file: Path | None = None, emoji_size: int = GenConfig.EMOJI_SIZE,
            additional_shortnames_file: Path = ADDITIONAL_SHORTNAMES_FILE,
    ) -> None:
        self._paths = paths
        self._emoji_size = emoji_size
        self._additional_shortnames_file = additional_shortnames_file
        # Read right away: explicitly requested exclusion file that can not be read is fatal
        self._excluded = load_excluded_emoji(excluded_emoji_file)

    def build(self) -> EmojiIndex:
        emojis = filter_excluded(load_emoji_data(self._paths.emoji_data_file), self._excluded)
        categories = load_categories(self._paths.categories_file)

        full = expand_skin_variations(emojis)
        augment_short_names(full, load_additional_shortnames(self._additional_shortnames_file))
        full.append(custom_emoji())

        logger.info(f"Generated {len(full) - len(emojis) - 1} skin tone variations")
        return build_index(full, categories, self._emoji_size)

    def render(self, index: EmojiIndex) -> dict[Path, str]:
        sheet_file = self._paths.sheet_import_path()
        return {
            self._paths.emoji_json_file: serialize_emoji_json(index),
            self._paths.emoji_module_file: serialize_emoji_module(index, sheet_file),
            self._paths.go_file: serialize_go_source(index),
            self._paths.stylesheet_file: serialize_stylesheet(index, sheet_file, self._emoji_size),
        }

    async def run(self) -> bool:
        index = self.build()
        paths = self._paths

        writer = FileWriter()
        writer.track(copy_emoji_images(paths.images_source_dir, paths.images_dir), cancellable=False)
        copies = [
            copy_custom_image(paths.custom_image_source_file, paths.images_dir / custom_emoji().image),
            copy_sprite_sheet(paths.sheet_source_file, paths.sheet_file),
        ]

        write_tasks = {path: writer.write(path, content) for path, content in self.render(index).items()}

        relocation = []
        if (destination := paths.go_destination()) is not None:
            relocation.append(relocate(write_tasks[paths.go_file], destination))

        await asyncio.gather(*copies, *relocation)
        if (error := await writer.wait()) is not None:
            logger.error(f"[ERROR] There was an error writing emojis: {error}")
            return False

        logger.warning("Remember to run `make i18n-extract` as categories might have changed.")
        return True
