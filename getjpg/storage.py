"""
Write fetched images into the run's output directory
"""
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ImageStore:
    def __init__(self, image_dir: Path):
        self.image_dir = Path(image_dir)

    def save(self, filename: str, content: bytes) -> Path:
        """Create <image_dir>/<filename> and write the whole body to it."""
        image_path = self.image_dir / filename
        with open(image_path, 'wb') as f:
            f.write(content)
        logger.debug(f"Wrote {len(content)} bytes to {image_path}")
        return image_path
