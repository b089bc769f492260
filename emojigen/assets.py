import asyncio
from pathlib import Path

import aiofiles
import aiofiles.os
from loguru import logger
from tqdm.asyncio import tqdm_asyncio

# Every copy keeps two files open
MAX_CONCURRENT_COPIES = 64


async def copy_file(src: Path, dst: Path) -> None:
    async with aiofiles.open(src, "rb") as f_in:
        async with aiofiles.open(dst, "wb") as f_out:
            await f_out.write(await f_in.read())


async def copy_file_logged(src: Path, dst: Path, what: str | None = None) -> bool:
    try:
        await copy_file(src, dst)
    except OSError as e:
        logger.error(f"[ERROR] Failed to copy {what or src.name}: {e}")
        return False

    return True


async def copy_emoji_images(src_dir: Path, dst_dir: Path, max_concurrency: int = MAX_CONCURRENT_COPIES) -> int:
    """
    Copies every emoji image from src_dir to dst_dir.
    Failure to copy single image is only logged, failure to list src_dir is propagated.

    :return: Number of successfully copied images.
    """

    images = sorted(await aiofiles.os.listdir(src_dir))
    dst_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Copying {len(images)} emoji images, this might take a while")

    semaphore = asyncio.Semaphore(max_concurrency)

    async def _copy(image: str) -> bool:
        async with semaphore:
            return await copy_file_logged(src_dir / image, dst_dir / image)

    results = await tqdm_asyncio.gather(
        *(_copy(image) for image in images), desc="Copying emoji images", total=len(images), leave=False,
    )
    return sum(results)


async def copy_sprite_sheet(src: Path, dst: Path) -> bool:
    logger.info("Copying sprite sheet")
    dst.parent.mkdir(parents=True, exist_ok=True)
    return await copy_file_logged(src, dst, "sheet file")


async def copy_custom_image(src: Path, dst: Path) -> bool:
    dst.parent.mkdir(parents=True, exist_ok=True)
    return await copy_file_logged(src, dst, f"custom emoji image {src.name}")
