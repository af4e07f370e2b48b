import os

from PIL import Image

from .errors import OutputError


def save_grayscale(grid, path="noise.png"):
    """Encode a 2D uint8 grid as a single-channel grayscale image."""
    try:
        img = Image.fromarray(grid)
        if img.mode != "L":
            img = img.convert("L")
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        img.save(path)
    except (OSError, ValueError, TypeError) as e:
        raise OutputError("Could not write image to {}: {}".format(path, e)) from e
    print(f"Saved {path}")
    return path
