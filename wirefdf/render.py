"""Drawing of projected grids into images."""

from __future__ import annotations

__all__ = ["color_gradient", "draw_line", "draw_grid", "clear", "draw_frame"]


def _channels(color):
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def color_gradient(start, end, length, step):
    """Blend two 0xRRGGBB colours linearly at ``step`` out of ``length``."""
    if start == end:
        return start
    progress = step / length
    red, green, blue = (
        int(a * (1.0 - progress) + b * progress) & 0xFF
        for a, b in zip(_channels(start), _channels(end))
    )
    return (red << 16) | (green << 8) | blue


def draw_line(image, p1, p2):
    """Draw from p1 towards p2 with a colour gradient, stopping before p2.

    Nothing is drawn unless p1's x and p2's y lie inside the image.
    """
    if not image.contains(p1.px, p2.py):
        return
    x, y = p1.px, p1.py
    dx = abs(p2.px - p1.px)
    dy = abs(p2.py - p1.py)
    sx = 1 if p2.px >= p1.px else -1
    sy = 1 if p2.py >= p1.py else -1
    err = dx - dy
    length = int(max(dx, dy))
    for step in range(length):
        image.plot(x, y, color_gradient(p1.color, p2.color, length, step))
        if 2 * err > -dy:
            err -= dy
            x += sx
        if 2 * err < dx:
            err += dx
            y += sy


def draw_grid(image, grid):
    """Plot every point and join it to its right and lower neighbours."""
    rows = grid.points
    for i, row in enumerate(rows):
        for j, point in enumerate(row):
            image.plot(point.px, point.py, point.color)
            if j + 1 < len(row):
                draw_line(image, point, row[j + 1])
            if i + 1 < len(rows):
                draw_line(image, point, rows[i + 1][j])


def clear(image):
    """Paint the whole image black."""
    image.fill(0)


def draw_frame(image, grid):
    """Clear the image, project the grid and draw it; return the image."""
    clear(image)
    grid.project()
    draw_grid(image, grid)
    return image