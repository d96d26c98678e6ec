"""Spacing, sizes and palettes of the generated table."""

from __future__ import annotations

from dataclasses import dataclass

RGB = tuple[float, float, float]


@dataclass
class LayoutConfig:
    """Controls the geometry and colors of the generated variants table."""

    font_family: str = "Inter"
    label_style: str = "Medium"
    heading_style: str = "Bold"

    # Root frame
    root_padding: float = 32.0
    root_spacing: float = 24.0
    title_font_size: float = 14.0

    # Group panels
    panel_padding: float = 12.0
    panel_spacing: float = 8.0
    panel_radius: float = 6.0
    panel_label_font_size: float = 16.0

    # Grid
    header_height: float = 32.0
    row_spacing: float = 8.0
    label_font_size: float = 12.0
    row_label_padding: float = 8.0  # added to the widest row label
    cell_padding: float = 8.0
    cell_extra_width: float = 16.0  # added to the widest variant / column label
    cell_radius: float = 4.0
    placeholder_size: float = 48.0  # used when variants report no size
    placeholder_dash: tuple[float, float] = (4.0, 4.0)

    # Distance between the selection and the table, and between a table and its dark copy
    placement_gap: float = 100.0

    # Light palette
    text_light: RGB = (0.0, 0.0, 0.0)
    panel_fill_light: RGB = (1.0, 1.0, 1.0)
    panel_stroke_light: RGB = (0.85, 0.85, 0.85)
    cell_fill_light: RGB = (1.0, 1.0, 1.0)
    cell_stroke_light: RGB = (0.95, 0.95, 0.95)
    placeholder_stroke_light: RGB = (1.0, 0.4, 0.4)

    # Dark palette
    text_dark: RGB = (1.0, 1.0, 1.0)
    panel_fill_dark: RGB = (0.08, 0.08, 0.10)
    cell_fill_dark: RGB = (0.12, 0.12, 0.14)
    stroke_dark: RGB = (0.4, 0.4, 0.45)
    placeholder_stroke_dark: RGB = (1.0, 0.7, 0.7)
