from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Coroutine, Any, TypeVar

import aiofiles
import aiofiles.os
from loguru import logger

from emojigen.exceptions import WriteAborted

T = TypeVar("T")


class FileWriter:
    """
    Runs generated file writes (and any other job that must not fail silently) concurrently.
    First failed job sets shared abort event and cancels every other pending cancellable job,
    already written files are left as is.
    """

    def __init__(self) -> None:
        self._abort = asyncio.Event()
        self._tasks: set[asyncio.Task] = set()
        self._all_tasks: list[asyncio.Task] = []
        self.error: BaseException | None = None

    @property
    def aborted(self) -> bool:
        return self._abort.is_set()

    def track(self, coro: Coroutine[Any, Any, T], cancellable: bool = True) -> asyncio.Task[T]:
        """Failure of tracked job aborts pending writes, only cancellable jobs are cancelled by abort."""
        task = asyncio.get_running_loop().create_task(coro)
        if cancellable:
            self._tasks.add(task)
        self._all_tasks.append(task)
        task.add_done_callback(self._on_done)
        return task

    def write(self, path: Path, data: str) -> asyncio.Task[Path]:
        return self.track(self._write(path, data))

    def abort(self, error: BaseException) -> None:
        if self._abort.is_set():
            return

        self.error = error
        self._abort.set()
        for task in self._tasks:
            if not task.done():
                task.cancel()

    async def wait(self) -> BaseException | None:
        await asyncio.gather(*self._all_tasks, return_exceptions=True)
        return self.error

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return

        error = task.exception()
        if error is not None and not isinstance(error, WriteAborted):
            self.abort(error)

    async def _write(self, path: Path, data: str) -> Path:
        if self._abort.is_set():
            raise WriteAborted(path.name)

        path.parent.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(path, "w", encoding="utf8") as f:
            await f.write(data)

        logger.success(f"{path.name} generated successfully.")
        return path


async def relocate(write_task: asyncio.Task[Path], destination: Path) -> bool:
    """Moves file written by `write_task` to `destination` once (and only if) the write succeeded."""

    await asyncio.wait([write_task])
    if write_task.cancelled() or write_task.exception() is not None:
        return False

    src = write_task.result()
    try:
        await aiofiles.os.rename(src, destination)
    except OSError as e:
        logger.error(f"[ERROR] There was an error trying to move the {src.name} file: {e}")
        return False

    logger.info(f"Moved {src.name} to {destination}")
    return True
