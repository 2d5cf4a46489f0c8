from .draw_axis import (
    LabelShift,
    dense_y_ticks,
    draw_axis,
    draw_axis_crossing,
    draw_x_labels,
    draw_y_labels,
    grow_for_labels,
    label_shift,
)
from .draw_lines import draw_bar, draw_custom_line, draw_line, fill_area
from .draw_markers import draw_markers
from .grid import Grid, new_cells

__all__ = [
    "Grid",
    "LabelShift",
    "dense_y_ticks",
    "draw_axis",
    "draw_axis_crossing",
    "draw_bar",
    "draw_custom_line",
    "draw_line",
    "draw_markers",
    "draw_x_labels",
    "draw_y_labels",
    "fill_area",
    "grow_for_labels",
    "label_shift",
    "new_cells",
]
