from .palette import MIN_PALETTE_SIZE, Palette, get_palette_color, make_palette

__all__ = ["MIN_PALETTE_SIZE", "Palette", "get_palette_color", "make_palette"]
