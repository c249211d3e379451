from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

import aiohttp

from formtree.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class UploadFile:
    name: str
    content_type: str
    data: bytes

    def is_image(self) -> bool:
        return self.content_type.startswith("image/")


PostFunction = Callable[[str, UploadFile], Awaitable[Any]]


async def post_multipart(url: str, file: UploadFile) -> Any:
    """POST the file as multipart form data, the file name is used as the field name."""

    data = aiohttp.FormData()
    data.add_field(file.name, file.data, filename=file.name, content_type=file.content_type)
    async with aiohttp.ClientSession() as session:
        async with session.post(url, data=data) as response:
            response.raise_for_status()
            return await response.json(content_type=None)


class SequentialUploader:
    """
    Uploads initiated from one control never overlap.

    Every upload waits for the previous one to finish, so the results are
    delivered in the order in which the uploads were started.
    """

    def __init__(self, url: str, post: Optional[PostFunction] = None) -> None:
        self.url = url
        self._post: PostFunction = post or post_multipart
        self._lock = asyncio.Lock()
        self.in_flight = 0

    async def upload(self, file: UploadFile) -> Any:
        async with self._lock:
            self.in_flight += 1
            try:
                logger.debug(f"uploading '{file.name}' to '{self.url}'")
                return await self._post(self.url, file)
            finally:
                self.in_flight -= 1
