"""Image viewer state: loaded image, chosen algorithm and zoom level."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike

from PIL import Image

from dithery.dither import DitherType, dither_image

ZOOM_STEP = 0.10000000149011612  # 0.1 held in single precision

_ALGORITHM_CHOICES: tuple[tuple[str, DitherType], ...] = (
    ("Select Algorithm..", DitherType.NONE),
    ("Basic", DitherType.BASIC),
    ("Floyd-Steinberg", DitherType.FLOYD_STEINBERG),
    ("Bayer 2x2", DitherType.BAYER_2X2),
    ("Bayer 4x4", DitherType.BAYER_4X4),
    ("Bayer 8x8", DitherType.BAYER_8X8),
)


def algorithm_choices() -> list[tuple[str, DitherType]]:
    """Return the (label, algorithm) entries offered for selection, in order."""
    return list(_ALGORITHM_CHOICES)


def _fit_size(size: tuple[int, int], target: tuple[int, int]) -> tuple[int, int]:
    """Largest size with the aspect ratio of ``size`` that fits inside ``target``."""
    width, height = size
    target_width, target_height = target
    if width == 0 or height == 0:
        return target
    fitted_width = target_height * width // height
    if fitted_width <= target_width:
        return fitted_width, target_height
    return target_width, target_width * height // width


@dataclass
class ViewerState:
    """What the viewer shows: the original image, its current rendering and the zoom."""

    original: Image.Image | None = None
    current: Image.Image | None = None
    dither_type: DitherType = DitherType.NONE
    scaling: float = 1.0
    file_text: str = ""

    def load(self, path: str | PathLike[str]) -> Image.Image:
        """Open an image file and make it both the original and the current image."""
        with Image.open(path) as opened:
            image = opened.convert("RGBA")
        self.file_text = f"File: {path}"
        self.set_image(image)
        return image

    def set_image(self, image: Image.Image) -> None:
        """Use ``image`` (converted to RGBA) as the original and the current image."""
        rgba = image.convert("RGBA")
        self.original = rgba
        self.current = rgba

    def zoom_in(self) -> bool:
        """Enlarge by one step; return whether anything changed."""
        if self.current is None:
            return False
        self.scaling += ZOOM_STEP
        return True

    def zoom_out(self) -> bool:
        """Shrink by one step while above the smallest zoom; return whether anything changed."""
        if self.scaling <= ZOOM_STEP or self.current is None:
            return False
        self.scaling -= ZOOM_STEP
        return True

    def select_algorithm(self, index: int) -> DitherType:
        """Choose the algorithm at ``index`` of the choices; out of range selects none."""
        if 0 <= index < len(_ALGORITHM_CHOICES):
            self.dither_type = _ALGORITHM_CHOICES[index][1]
        else:
            self.dither_type = DitherType.NONE
        return self.dither_type

    def apply_dither(self) -> Image.Image | None:
        """Dither the original with the chosen algorithm and make it current."""
        if self.original is None:
            return None
        self.current = dither_image(self.original, self.dither_type)
        return self.current

    def scaled_size(self) -> tuple[int, int] | None:
        """Display size of the current image at the present zoom, or None without one."""
        if self.current is None:
            return None
        width, height = self.current.size
        return int(width * self.scaling), int(height * self.scaling)

    def scaled_image(self) -> Image.Image | None:
        """The current image resized for display, or None if there is nothing to show."""
        box = self.scaled_size()
        if box is None:
            return None
        width, height = _fit_size(self.current.size, box)
        if width <= 0 or height <= 0:
            return None
        return self.current.resize((width, height), Image.Resampling.NEAREST)

    def scaling_text(self) -> str:
        """Zoom level as shown to the user."""
        return f"Scaling: {self.scaling:.2f}x"