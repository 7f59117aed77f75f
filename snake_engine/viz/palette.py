import random
from typing import List, Sequence, Tuple

import numpy as np

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

SPECTRUM_STEPS = 40
STROKE_LUMINANCE = -0.7
STROKE_ALPHA = 0x80

PRESET_SPECTRA = [
    ["#000000", "#327fb1", "#ffaf55"],
    ["#c39de0", "#9e62cc", "#824f8a", "#441c63", "#ff0000", "#310752", "#170326", "#f0cba3"],
]


def hex_to_rgb(value: str) -> RGB:
    value = value.lstrip("#")
    if len(value) == 3:
        value = "".join(c * 2 for c in value)
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def random_color(rng: random.Random) -> RGB:
    return rng.randrange(256), rng.randrange(256), rng.randrange(256)


def change_color_luminance(color: RGB, lum: float) -> RGB:
    """Scales each channel by (1 + lum), clamped to 0..255."""
    channels = np.asarray(color[:3], dtype=float)
    channels = np.clip(np.round(channels + channels * lum), 0, 255)
    return tuple(int(c) for c in channels)


def sample_spectrum(stops: Sequence[RGB], steps: int = SPECTRUM_STEPS) -> np.ndarray:
    """
    Evenly spaced gradient over `stops`, sampled at 0..steps inclusive.
    Returns an array of shape (steps + 1, 3).
    """
    stops = np.asarray(stops, dtype=float)
    if len(stops) == 1:
        return np.repeat(stops, steps + 1, axis=0).astype(int)

    positions = np.linspace(0, steps, len(stops))
    samples = np.arange(steps + 1)
    channels = [np.interp(samples, positions, stops[:, c]) for c in range(3)]
    return np.round(np.stack(channels, axis=1)).astype(int)


class Palette:
    def __init__(self, rng: random.Random = None):
        self.rng = rng if rng is not None else random.Random()
        self.colors: List[RGB] = []
        self.index = 0
        self.set_spectrum()

    def pick_spectrum(self) -> List[RGB]:
        choice = self.rng.randrange(4)
        if choice < len(PRESET_SPECTRA):
            return [hex_to_rgb(c) for c in PRESET_SPECTRA[choice]]
        if choice == 2:
            return [random_color(self.rng) for _ in range(3)]
        return [random_color(self.rng) for _ in range(6)]

    def set_spectrum(self, stops: Sequence[RGB] = None):
        if stops is None:
            stops = self.pick_spectrum()
        samples = sample_spectrum(stops)
        forward = [tuple(int(c) for c in row) for row in samples[:SPECTRUM_STEPS]]
        # Walk back down so colour cycling never jumps
        backward = [tuple(int(c) for c in row) for row in samples[SPECTRUM_STEPS:0:-1]]
        self.colors = forward + backward
        self.index = 0

    def next_color(self) -> RGB:
        color = self.colors[self.index]
        self.index = (self.index + 1) % len(self.colors)
        return color

    @staticmethod
    def stroke_color(color: RGB) -> RGBA:
        return change_color_luminance(color, STROKE_LUMINANCE) + (STROKE_ALPHA,)
