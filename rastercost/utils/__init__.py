import os
import numpy as np
from PIL import Image
from einops import rearrange

def imread(path: str) -> np.ndarray:
    """Load an image file as an RGBA uint8 array of shape [H, W, 4]."""
    with Image.open(path) as img:
        return np.array(img.convert('RGBA'), dtype=np.uint8)

def file_size(path: str) -> int:
    """Size of a file on disk in bytes, used as the reference compressed size."""
    return os.path.getsize(path)

def deinterleave(data, width=None, channels=4):
    """
    Splits an interleaved raster into one plane per channel.

    data: np.array of shape [H, W, C], or a flat byte buffer / array of
          shape [H * W * C] together with width
    width: int, pixels per scanline, required for flat input
    channels: int, number of interleaved channels

    returns
        planes: np.array of shape [C, H, W]
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        data = np.frombuffer(data, dtype=np.uint8)
    data = np.asarray(data)

    if data.ndim == 3:
        if data.shape[2] != channels:
            raise ValueError(f"Expected {channels} channels, got shape {data.shape}")
        return rearrange(data, 'h w c -> c h w')

    if data.ndim != 1:
        raise ValueError(f"Expected a flat buffer or a [H, W, C] array, got shape {data.shape}")
    if not width or data.size % (width * channels) != 0:
        raise ValueError(f"{data.size} bytes do not form rows of {width} pixels x {channels} channels")
    return rearrange(data, '(h w c) -> c h w', w=width, c=channels)

__all__ = ["imread", "file_size", "deinterleave"]
