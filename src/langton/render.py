"""Image output for a grid and its ant."""

import matplotlib.pyplot as plt


def save_image(grid, ant, out_path, title=None):
    """Save the grid as a black/white image with the ant overlaid."""
    img = grid.cells

    size = max(3.0, min(8.0, 0.4 * max(grid.width, grid.height)))
    plt.figure(figsize=(size, size), dpi=150)
    plt.imshow(img, cmap="gray_r", interpolation="nearest", vmin=0, vmax=1)
    if ant is not None:
        x, y = ant.position
        plt.scatter([x], [y], s=60, c="tab:red", marker=ant.direction.glyph, linewidths=0)

    if title is None and ant is not None:
        title = f"steps_left={ant.steps_left} black={grid.count()}"
    if title:
        plt.title(title)
    plt.axis("off")
    plt.tight_layout()
    plt.savefig(out_path, bbox_inches="tight", pad_inches=0.1)
    plt.close()
