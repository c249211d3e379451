from .base import BaseEditor, Editor
from .registry import EditorRegistry, default_registry, infer_editor_kind
from .upload import SequentialUploader, UploadFile

__all__ = [
    "BaseEditor",
    "Editor",
    "EditorRegistry",
    "SequentialUploader",
    "UploadFile",
    "default_registry",
    "infer_editor_kind",
]
