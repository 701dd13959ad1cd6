"""CHIP-8 rendering utilities for inspecting the display."""

from pathlib import Path
from typing import Tuple, Union

import jax.numpy as jnp
import numpy as np
from PIL import Image

ON_PIXEL = "█"
OFF_PIXEL = " "


def display_to_text(display: jnp.ndarray, on: str = ON_PIXEL, off: str = OFF_PIXEL) -> str:
    """Render a (64, 32) display as 32 lines of 64 characters, top row first."""
    pixels = np.array(display, dtype=np.bool_)
    return "\n".join(
        "".join(on if pixel else off for pixel in row) for row in pixels.T
    )


def chip8_display_to_rgb(
    display: jnp.ndarray,
    scale: int = 8,
    on_color: Tuple[int, int, int] = (0, 255, 0),
    off_color: Tuple[int, int, int] = (0, 0, 0),
) -> np.ndarray:
    """Convert CHIP-8 boolean display to RGB array with optional upscaling.

    Args:
        display: Boolean array of shape (64, 32) representing CHIP-8 display
        scale: Upscaling factor for better visibility (default: 8x)
        on_color: RGB color for "on" pixels (default: green)
        off_color: RGB color for "off" pixels (default: black)

    Returns:
        RGB array of shape (height*scale, width*scale, 3) with uint8 values
    """
    pixels = np.array(display, dtype=np.bool_)

    # (64 width, 32 height) -> (32 height, 64 width)
    pixels = pixels.T
    height, width = pixels.shape

    rgb_frame = np.zeros((height, width, 3), dtype=np.uint8)

    rgb_frame[pixels] = on_color
    rgb_frame[~pixels] = off_color

    if scale > 1:
        rgb_frame = np.repeat(np.repeat(rgb_frame, scale, axis=0), scale, axis=1)

    return rgb_frame


def create_color_scheme(
    scheme: str = "classic",
) -> Tuple[Tuple[int, int, int], Tuple[int, int, int]]:
    """Get predefined color schemes for CHIP-8 rendering.

    Args:
        scheme: Color scheme name ("classic", "amber", "white", "blue", "retro")

    Returns:
        Tuple of (on_color, off_color) as RGB tuples
    """
    schemes = {
        "classic": ((0, 255, 0), (0, 0, 0)),  # Green on black
        "amber": ((255, 176, 0), (0, 0, 0)),
        "white": ((255, 255, 255), (0, 0, 0)),
        "blue": ((0, 255, 255), (0, 0, 64)),
        "retro": ((255, 255, 0), (64, 0, 64)),
    }

    if scheme not in schemes:
        raise ValueError(
            f"Unknown color scheme '{scheme}'. Available: {list(schemes.keys())}"
        )

    return schemes[scheme]


def save_frame(
    display: jnp.ndarray,
    filename: Union[str, Path],
    scale: int = 8,
    color_scheme: str = "classic",
) -> None:
    """Save a single display snapshot as an image file."""
    on_color, off_color = create_color_scheme(color_scheme)
    rgb = chip8_display_to_rgb(display, scale, on_color, off_color)
    Image.fromarray(rgb).save(filename)
