"""
Handles the low-level downloading of media streams over HTTP.
"""

import asyncio
import logging
import os

import aiofiles
import aiohttp
from rich.progress import TaskID

from ytmusic_dl.cli.progress_manager import ProgressManager
from ytmusic_dl.exceptions import FetchError

log = logging.getLogger(__name__)

_connection_pool: aiohttp.ClientSession | None = None
_pool_lock = asyncio.Lock()


async def get_connection_pool() -> aiohttp.ClientSession:
    """
    Gets or creates a shared aiohttp ClientSession for downloads.

    This function ensures that only one connection pool is created for the
    lifetime of the application run.
    """
    global _connection_pool
    async with _pool_lock:
        if _connection_pool and not _connection_pool.closed:
            return _connection_pool

        connector = aiohttp.TCPConnector(
            limit=4,
            ttl_dns_cache=600,  # 10 minutes
            keepalive_timeout=30,
            enable_cleanup_closed=True,
        )
        # No total timeout: a stream may legitimately take a long time.
        timeout = aiohttp.ClientTimeout(total=None, sock_connect=15)
        _connection_pool = aiohttp.ClientSession(connector=connector, timeout=timeout)
        log.debug("Created download connection pool")

    return _connection_pool


async def close_connection_pool() -> None:
    """Closes the shared global connection pool."""
    global _connection_pool
    async with _pool_lock:
        if _connection_pool and not _connection_pool.closed:
            await _connection_pool.close()
            _connection_pool = None
            log.debug("Shared downloader connection pool closed.")


class Downloader:
    """A low-level file downloader. Transfers are attempted exactly once."""

    CHUNK_SIZE = 262144  # 256 KB

    def __init__(self, progress_manager: ProgressManager | None = None):
        self.progress_manager = progress_manager

    async def download_file(
        self,
        url: str,
        destination_path: str,
        headers: dict[str, str] | None = None,
        total_size_estimate: int | None = None,
        description: str | None = None,
    ) -> int:
        """
        Downloads a URL to destination_path in full and returns the byte count.
        """
        file_name = os.path.basename(destination_path)
        task_id: TaskID | None = None
        if self.progress_manager:
            task_id = self.progress_manager.add_transfer_task(
                description or file_name, total_size_estimate
            )

        try:
            session = await get_connection_pool()
            async with session.get(
                url, headers=headers or {}, allow_redirects=True
            ) as response:
                response.raise_for_status()

                content_length = response.headers.get("Content-Length")
                if content_length and task_id is not None:
                    self.progress_manager.update_task_total(
                        task_id, total=int(content_length)
                    )

                bytes_downloaded = 0
                async with aiofiles.open(destination_path, "wb") as f:
                    async for chunk in response.content.iter_chunked(self.CHUNK_SIZE):
                        await f.write(chunk)
                        bytes_downloaded += len(chunk)
                        if task_id is not None:
                            self.progress_manager.update_task_progress(
                                task_id, completed=bytes_downloaded
                            )

            log.debug(f"Transferred {bytes_downloaded} bytes to '{file_name}'")
            return bytes_downloaded
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchError(f"Transfer of '{file_name}' failed: {e}") from e
        finally:
            if task_id is not None:
                self.progress_manager.remove_task(task_id)
