from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from formtree.errors import SchemaError

from .base import BaseEditor
from .upload import SequentialUploader, UploadFile


class MultiImagesEditor(BaseEditor):
    """
    List of image URLs, new images are uploaded to the 'uploadUrl' input attribute.

    The value changes only after an upload finishes, a change is emitted for every added image.
    """

    input_type = None
    default_max_items = 10000

    def __init__(self, schema: Dict[str, Any], input_attributes: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(schema, input_attributes)
        self.images: List[Any] = []
        self.max_items: int = schema.get("maxItems", self.default_max_items)
        self._uploader: Optional[SequentialUploader] = None

    @property
    def disabled(self) -> bool:
        return len(self.images) >= self.max_items

    def num_upload_allowed(self) -> int:
        return self.max_items - len(self.images)

    def get_value(self) -> Any:
        return list(self.images)

    def set_value(self, value: Any) -> None:
        if isinstance(value, list):
            images = list(value)
        else:
            images = [value] if value else []
        self.images = images[: self.max_items]

    def add_photo(self, value: Any) -> None:
        if not value or self.disabled:
            return
        self.images.append(value)
        self.trigger_change()

    def remove_photo(self, index: int) -> None:
        del self.images[index]

    @property
    def uploader(self) -> SequentialUploader:
        if self._uploader is None:
            url = self.input_attributes.get("uploadUrl")
            if not url:
                raise SchemaError("image editors need the 'uploadUrl' input attribute", self.input_name or "")
            self._uploader = SequentialUploader(url)
        return self._uploader

    @uploader.setter
    def uploader(self, uploader: SequentialUploader) -> None:
        self._uploader = uploader

    async def upload(self, files: Iterable[UploadFile]) -> None:
        # only image files are uploaded, no more than the editor can still accept
        selected = [f for f in files if f.is_image()][: self.num_upload_allowed()]
        for f in selected:
            self.add_photo(await self.uploader.upload(f))


class ImageEditor(MultiImagesEditor):
    """Single image, its value is the URL or None."""

    default_max_items = 1

    def get_value(self) -> Any:
        return self.images[0] if self.images else None

    def num_upload_allowed(self) -> int:
        return 1

    def add_photo(self, value: Any) -> None:
        # a new image replaces the current one
        self.set_value(value)
        self.trigger_change()
