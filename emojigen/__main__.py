import argparse
from pathlib import Path
from types import SimpleNamespace

import uvloop

from emojigen.config import GenPaths
from emojigen.generator import EmojiGenerator


class ArgsNamespace(SimpleNamespace):
    excluded_emoji_file: Path | None
    root_dir: Path


def main() -> None:
    parser = argparse.ArgumentParser(prog="emojigen")
    parser.add_argument("--excluded-emoji-file", type=Path, default=None,
                        help="Path to a file containing emoji short names to exclude")
    parser.add_argument("--root-dir", type=Path, default=Path("."), help=(
        "Path to webapp root directory, containing node_modules with emoji-datasource. "
        "All files are generated relative to it."
    ))
    args = parser.parse_args(namespace=ArgsNamespace())

    generator = EmojiGenerator(GenPaths.from_root(args.root_dir), args.excluded_emoji_file)

    uvloop.run(generator.run())


if __name__ == "__main__":
    main()
