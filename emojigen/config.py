from __future__ import annotations

from dataclasses import dataclass
from os import environ
from pathlib import Path

from loguru import logger


class GenConfig:
    # Directory of the server repository, generated go file is moved to <SERVER_DIR>/model
    SERVER_DIR: Path | None = Path(environ["SERVER_DIR"]) if environ.get("SERVER_DIR") else None
    EMOJI_SIZE = int(environ.get("EMOJI_SIZE", 64))
    EMOJI_SIZE_PADDED = EMOJI_SIZE + 2  # 1px per side
    IMAGE_SET: str = environ.get("EMOJI_IMAGE_SET", "apple")


if GenConfig.EMOJI_SIZE <= 0:
    raise ValueError(f"\"EMOJI_SIZE\" must be positive, got {GenConfig.EMOJI_SIZE}!")


@dataclass(slots=True)
class GenPaths:
    root: Path
    emoji_data_file: Path
    categories_file: Path
    images_source_dir: Path
    sheet_source_file: Path
    custom_image_source_file: Path
    images_dir: Path
    sheet_file: Path
    emoji_json_file: Path
    emoji_module_file: Path
    go_file: Path
    stylesheet_file: Path
    server_dir: Path | None = None

    @classmethod
    def from_root(
            cls, root: Path, image_set: str = GenConfig.IMAGE_SET, emoji_size: int = GenConfig.EMOJI_SIZE,
            server_dir: Path | None = GenConfig.SERVER_DIR,
    ) -> GenPaths:
        datasource = root / "node_modules" / "emoji-datasource"
        images_source = root / "node_modules" / f"emoji-datasource-{image_set}" / "img" / image_set

        return cls(
            root=root,
            emoji_data_file=datasource / "emoji.json",
            categories_file=datasource / "categories.json",
            images_source_dir=images_source / str(emoji_size),
            sheet_source_file=images_source / "sheets" / f"{emoji_size}.png",
            custom_image_source_file=root / "images" / "icon64x64.png",
            images_dir=root / "images" / "emoji",
            sheet_file=root / "images" / "emoji-sheets" / f"{image_set}-sheet.png",
            emoji_json_file=root / "utils" / "emoji.json",
            emoji_module_file=root / "utils" / "emoji.jsx",
            go_file=root / "emoji_data.go",
            stylesheet_file=root / "sass" / "components" / "_emojisprite.scss",
            server_dir=server_dir,
        )

    def sheet_import_path(self) -> str:
        """Path of the sprite sheet as it is referenced from generated webapp files (relative to root)."""
        return self.sheet_file.relative_to(self.root).as_posix()

    def go_destination(self) -> Path | None:
        if self.server_dir is None:
            logger.warning(
                "[WARNING] $SERVER_DIR environment variable is not set, `emoji_data.go` will be located in the root "
                "of the project, remember to move it to the server"
            )
            return None

        return self.server_dir / "model" / self.go_file.name
