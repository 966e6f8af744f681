import numbers

import numpy as np

from ..color.conversion import HSL, check_tag, clamp, parse_color, to_tag
from ..errors import PaletteRangeError

MIN_PALETTE_SIZE = 9


class Palette:
    """A lightness ramp of one source color.

    Hue and saturation come from the source color and stay fixed; lightness
    runs linearly from ``min`` (index 0, darkest) to ``max`` (index
    ``size - 1``, lightest). Colors are computed on first access and kept
    in a write-once slot list, so ``get(i)`` always returns the same value.

    Args:
        source: Source color, any supported form
        size: Number of steps, at least 9
        min: Lightness of the darkest step (default 0)
        max: Lightness of the lightest step (default 1)
        out_type: Color tag of the output; defaults to the source's tag

    Raises:
        PaletteRangeError: If size is not an integer >= 9 or the lightness
            bounds are outside [0, 1] or reversed
    """

    def __init__(self, source, size, min=0.0, max=1.0, out_type=None):
        if isinstance(size, bool) or not isinstance(size, numbers.Integral):
            raise PaletteRangeError(f"Palette size must be an integer, got {size!r}")
        if size < MIN_PALETTE_SIZE:
            raise PaletteRangeError(
                f"Palette size must be at least {MIN_PALETTE_SIZE}, got {size}"
            )
        if not (0 <= min <= max <= 1):
            raise PaletteRangeError(
                f"Palette lightness bounds must satisfy 0 <= min <= max <= 1, "
                f"got min={min}, max={max}"
            )

        tag, hsl = parse_color(source)
        self._type = check_tag(out_type or tag)
        self._hsl = hsl
        self._size = int(size)
        self._min = float(min)
        self._max = float(max)
        self._source = to_tag(source, self._type)
        self._stops = np.linspace(self._min, self._max, self._size)
        self._slots = [None] * self._size

    @classmethod
    def create(cls, source, size, min=0.0, max=1.0, out_type=None):
        return cls(source, size, min=min, max=max, out_type=out_type)

    @property
    def source(self):
        """Source color in the palette's output form."""
        return self._source

    @property
    def hsl(self):
        return self._hsl

    @property
    def size(self):
        return self._size

    @property
    def type(self):
        return self._type

    @property
    def min(self):
        return self._min

    @property
    def max(self):
        return self._max

    def lightness(self, i):
        """Lightness of step ``i`` (clamped into range)."""
        return float(self._stops[self._index(i)])

    def _index(self, i):
        return int(clamp(i, 0, self._size - 1))

    def get(self, i):
        index = self._index(i)
        color = self._slots[index]
        if color is None:
            h, s, _ = self._hsl
            color = to_tag(HSL(h, s, float(self._stops[index])), self._type)
            self._slots[index] = color
        return color

    def all(self):
        """All steps, darkest first."""
        return [self.get(i) for i in range(self._size)]

    def __getitem__(self, i):
        return self.get(i)

    def __iter__(self):
        for i in range(self._size):
            yield self.get(i)

    def __len__(self):
        return self._size

    def __repr__(self):
        return (
            f"Palette(source={self._source!r}, size={self._size}, "
            f"min={self._min}, max={self._max}, out_type={self._type!r})"
        )


def get_palette_color(i, source, size, min=0.0, max=1.0, out_type=None):
    """Compute a single step without keeping a palette around."""
    return Palette(source, size, min=min, max=max, out_type=out_type).get(i)


def make_palette(source, size=11, min=0.0, max=1.0, out_type=None):
    """Build a full ramp as a list, darkest first."""
    return Palette(source, size, min=min, max=max, out_type=out_type).all()
