"""Album art rendered as ASCII text."""

from __future__ import annotations

import io
from dataclasses import dataclass, replace

from PIL import Image

from lofiturtle.errors import ConfigurationError

# Characters from darkest to brightest.
ASCII_CHARS = " .:-=+*#%@"
NOTE_CHAR = "♪"
BORDER_CHAR = "│"

_MIN_WIDTH = 16
_MIN_HEIGHT = 8


@dataclass
class AlbumArtConfig:
    """Size and display options for album art."""

    width: int = 40
    height: int = 20
    show_art: bool = True
    use_color: bool = False


def _load_image(image_data: bytes) -> Image.Image:
    try:
        image = Image.open(io.BytesIO(image_data))
        image.load()
    except (OSError, ValueError) as error:
        raise ConfigurationError(f"Failed to load image: {error}") from error
    return image


def _brightness(pixel: tuple[int, int, int, int]) -> float:
    """Luminance of an RGBA pixel scaled by its alpha, 0.0 to 1.0."""
    r, g, b, a = (channel / 255.0 for channel in pixel)
    return (0.299 * r + 0.587 * g + 0.114 * b) * a


def _bounded_height(height: float, usable_height: int) -> int:
    return min(max(int(height), _MIN_HEIGHT), usable_height)


def _panel_width_and_height(panel_width: int, panel_height: int) -> tuple[int, int]:
    parent_width = max(panel_width - 2, 0)
    usable_height = max(panel_height - 2, 0)
    image_width = max(int(0.8 * parent_width), _MIN_WIDTH)
    return image_width, usable_height


class AlbumArtRenderer:
    """Turns image data into ASCII art, or draws a placeholder."""

    def __init__(self, config: AlbumArtConfig | None = None) -> None:
        self.config = replace(config) if config is not None else AlbumArtConfig()

    def image_to_ascii(self, image_data: bytes) -> str:
        """Resize the image to the configured size and map pixels to characters."""
        if not self.config.show_art:
            return ""
        width, height = self.config.width, self.config.height
        image = _load_image(image_data)
        resized = image.convert("RGBA").resize(
            (width, height), Image.Resampling.LANCZOS
        )
        pixels = resized.load()
        top = len(ASCII_CHARS) - 1
        lines = []
        for y in range(height):
            row = "".join(
                ASCII_CHARS[min(int(_brightness(pixels[x, y]) * top), top)]
                for x in range(width)
            )
            lines.append(row + "\n")
        return "".join(lines)

    def render_album_art(self, image_data: bytes) -> str:
        if not self.config.show_art:
            return ""
        return self.image_to_ascii(image_data)

    def _is_note(self, x: int, y: int, center_x: int, center_y: int) -> bool:
        dx = abs(x - center_x)
        dy = abs(y - center_y)
        return (dx <= 2 and dy <= 1) or (x == center_x and y < center_y and dy <= 3)

    def generate_placeholder(self) -> str:
        """A bordered box with a musical note in the middle."""
        if not self.config.show_art:
            return ""
        width, height = self.config.width, self.config.height
        center_x, center_y = width // 2, height // 2
        lines = []
        for y in range(height):
            chars = []
            for x in range(width):
                if self._is_note(x, y, center_x, center_y):
                    chars.append(NOTE_CHAR)
                elif x in (0, width - 1) or y in (0, height - 1):
                    chars.append(BORDER_CHAR)
                else:
                    chars.append(" ")
            lines.append("".join(chars) + "\n")
        return "".join(lines)

    def update_dimensions(self, width: int, height: int) -> None:
        self.config.width = width
        self.config.height = height

    @staticmethod
    def calculate_optimal_dimensions(
        image_data: bytes, panel_width: int, panel_height: int
    ) -> tuple[int, int]:
        """80% of the panel width, height following the image's aspect ratio."""
        image_width, usable_height = _panel_width_and_height(panel_width, panel_height)
        intrinsic_width, intrinsic_height = _load_image(image_data).size
        aspect_ratio = intrinsic_height / intrinsic_width
        height = _bounded_height(image_width * aspect_ratio, usable_height)
        return image_width, height

    def render_album_art_for_panel(
        self, image_data: bytes, panel_width: int, panel_height: int
    ) -> str:
        if not self.config.show_art:
            return ""
        width, height = self.calculate_optimal_dimensions(
            image_data, panel_width, panel_height
        )
        self.update_dimensions(width, height)
        return self.render_album_art(image_data)

    @staticmethod
    def calculate_placeholder_dimensions(
        panel_width: int, panel_height: int
    ) -> tuple[int, int]:
        """Dimensions for a square placeholder, doubled in height for the terminal."""
        image_width, usable_height = _panel_width_and_height(panel_width, panel_height)
        height = _bounded_height(image_width * 2.0, usable_height)
        return image_width, height

    def generate_placeholder_for_panel(self, panel_width: int, panel_height: int) -> str:
        if not self.config.show_art:
            return ""
        width, height = self.calculate_placeholder_dimensions(panel_width, panel_height)
        self.update_dimensions(width, height)
        return self.generate_placeholder()