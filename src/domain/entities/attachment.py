"""Photo attachment domain entity."""

from dataclasses import dataclass
from typing import Optional

IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "bmp", "webp"})


def is_image(extension: Optional[str], file_type: Optional[str]) -> bool:
    """Check if a file is an image by extension or MIME type."""
    return (extension or "").lower() in IMAGE_EXTENSIONS or (
        file_type or ""
    ).lower().startswith("image/")


@dataclass
class PhotoAttachment:
    """Image file attached to a ticket message."""

    id: str
    name: str = "Untitled"
    extension: str = ""
    type: str = ""
    size: int = 0
    url: str = ""
    created_at: Optional[str] = None

    def is_displayable(self) -> bool:
        """A photo can be shown when it is an image with a resolvable URL."""
        return bool(self.url) and is_image(self.extension, self.type)
