from __future__ import annotations

from typing import List, Optional

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from palletload_core.models import ItemSpec, PlacementPlan
from palletload_core.settings import load_settings
from palletload_core.units import color_to_hex

# Corner order for the six faces of a unit cube.
_CUBE_FACES = np.array(
    [
        [[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]],
        [[0, 0, 1], [1, 0, 1], [1, 1, 1], [0, 1, 1]],
        [[0, 0, 0], [1, 0, 0], [1, 0, 1], [0, 0, 1]],
        [[1, 0, 0], [1, 1, 0], [1, 1, 1], [1, 0, 1]],
        [[0, 1, 0], [1, 1, 0], [1, 1, 1], [0, 1, 1]],
        [[0, 0, 0], [0, 1, 0], [0, 1, 1], [0, 0, 1]],
    ],
    dtype=float,
)


def box_faces(x: float, y: float, z: float, dx: float, dy: float, dz: float) -> np.ndarray:
    """Faces of the box with minimum corner ``(x, y, z)``, shape (6, 4, 3)."""
    return _CUBE_FACES * np.array([dx, dy, dz]) + np.array([x, y, z])


def add_box(ax, x, y, z, dx, dy, dz, color="#999999", alpha=0.9):
    poly = Poly3DCollection(
        list(box_faces(x, y, z, dx, dy, dz)),
        facecolors=color,
        edgecolors="black",
        linewidths=0.3,
        alpha=alpha,
    )
    ax.add_collection3d(poly)
    return poly


def _add_centered(ax, item: ItemSpec, center_l, center_z, base_h, scale, alpha=0.9):
    length = item.length / scale
    width = item.width / scale
    height = item.height / scale
    return add_box(
        ax,
        center_l / scale - length / 2,
        center_z / scale - width / 2,
        base_h / scale,
        length,
        width,
        height,
        color=color_to_hex(item.color),
        alpha=alpha,
    )


def draw_plan(
    plan: PlacementPlan,
    base: ItemSpec,
    ax=None,
    scale_factor: Optional[float] = None,
):
    """Draw every pallet of ``plan`` side by side and return the axes.

    Pallets are shifted along x by their drawing offset. Coordinates are
    divided by ``scale_factor`` (cm per drawing unit).
    """
    scale = scale_factor or load_settings().scale_factor
    if ax is None:
        fig = Figure(figsize=(10, 6))
        ax = fig.add_subplot(111, projection="3d")

    xs: List[float] = []
    top = base.height
    for pallet in plan:
        offset = pallet.drawing_offset_x
        _add_centered(ax, base, offset, 0.0, 0.0, scale, alpha=1.0)
        xs.extend([offset - pallet.max_l / 2, offset + pallet.max_l / 2])
        for placement in pallet.items:
            _add_centered(
                ax,
                placement.item,
                placement.pos_l + offset,
                placement.pos_z,
                placement.pos_h,
                scale,
            )
            top = max(top, placement.top)

    if xs:
        ax.set_xlim(min(xs) / scale, max(xs) / scale)
    half_b = max([base.width] + [pallet.max_b for pallet in plan]) / 2
    ax.set_ylim(-half_b / scale, half_b / scale)
    ax.set_zlim(0, top / scale)
    ax.set_xlabel("L")
    ax.set_ylabel("B")
    ax.set_zlabel("H")
    return ax


def save_plan_image(path: str, plan: PlacementPlan, base: ItemSpec, dpi: int = 100) -> None:
    fig = Figure(figsize=(10, 6))
    FigureCanvasAgg(fig)
    ax = fig.add_subplot(111, projection="3d")
    draw_plan(plan, base, ax=ax)
    fig.savefig(path, dpi=dpi)
