"""
Export functionality - JSON data, SVG and PNG images
"""

import json
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import PathPatch, Rectangle  # noqa: E402
from matplotlib.path import Path as MplPath  # noqa: E402


def _get_version():
    """Installed package version"""
    try:
        return version("crystallisation")
    except PackageNotFoundError:
        return "0.1.0"


def polygon_to_coordinates(polygon):
    """Convert polygon to GeoJSON coordinates format"""
    return [[[v.x, v.y] for v in polygon.vertices]]


def export_to_json(model, filename=None, indent=2):
    """
    Export a crystal to a GeoJSON style FeatureCollection

    Args:
        model: Crystal instance to export
        filename: Optional filename to save to. If None, returns JSON string
        indent: JSON indentation (default 2)

    Returns:
        JSON string if filename is None, otherwise None
    """
    features = []

    # Metadata
    features.append(
        {
            "type": "Feature",
            "id": "values",
            "width": model.width,
            "height": model.height,
            "settings": model.config.to_dict(),
            "generator": "crystallisation",
            "version": _get_version(),
        }
    )

    # Live polygons, one generation per polygon
    features.append(
        {
            "type": "MultiPolygon",
            "id": "polygons",
            "coordinates": [polygon_to_coordinates(p) for p in model.polygons],
            "generations": [p.generation for p in model.polygons],
        }
    )

    # Accumulated fracture lines
    line_geometries = [
        {"type": "LineString", "coordinates": [[s.a.x, s.a.y], [s.b.x, s.b.y]]}
        for s in model.lines
    ]
    features.append(
        {"type": "GeometryCollection", "id": "lines", "geometries": line_geometries}
    )

    feature_collection = {"type": "FeatureCollection", "features": features}

    json_str = json.dumps(feature_collection, indent=indent)

    if filename:
        with open(filename, "w") as f:
            f.write(json_str)
        return None
    else:
        return json_str


def export_svg(canvas, filename=None):
    """Write the canvas as SVG, or return the SVG text when no filename is given"""
    svg = canvas.to_svg()
    if filename:
        with open(filename, "w") as f:
            f.write(svg)
        return None
    return svg


def _subpaths_to_path(subpaths):
    """Build a matplotlib path from recorded canvas subpaths"""
    vertices = []
    codes = []
    for sp in subpaths:
        points = sp["points"]
        vertices.extend(points)
        codes.append(MplPath.MOVETO)
        codes.extend([MplPath.LINETO] * (len(points) - 1))
        if sp["closed"]:
            vertices.append(points[0])
            codes.append(MplPath.CLOSEPOLY)
    return MplPath(vertices, codes)


def export_png(canvas, filename, dpi=100):
    """Rasterize the canvas operations to a PNG file with matplotlib"""
    fig = plt.figure(figsize=(canvas.width / dpi, canvas.height / dpi), dpi=dpi)
    try:
        ax = fig.add_axes([0, 0, 1, 1])
        ax.set_xlim(0, canvas.width)
        ax.set_ylim(canvas.height, 0)  # screen coordinates, y down
        ax.set_aspect("equal")
        ax.axis("off")
        fig.patch.set_facecolor(canvas.BACKGROUND)

        for z, op in enumerate(canvas.operations):
            if op["kind"] == "clear":
                x, y, w, h = op["rect"]
                ax.add_patch(Rectangle((x, y), w, h, facecolor=canvas.BACKGROUND,
                                       edgecolor="none", zorder=z))
                continue

            # Canvas line widths are in pixels, matplotlib wants points
            ax.add_patch(PathPatch(
                _subpaths_to_path(op["subpaths"]),
                facecolor=op["fill"] or "none",
                edgecolor=op["stroke"] or "none",
                linewidth=op["line_width"] * 72.0 / dpi,
                zorder=z,
            ))

        fig.savefig(filename, dpi=dpi, facecolor=fig.get_facecolor())
    finally:
        plt.close(fig)


def export_image(canvas, filename):
    """Save the canvas, picking the format from the file suffix"""
    suffix = Path(filename).suffix.lower()
    if suffix == ".svg":
        export_svg(canvas, filename)
    elif suffix == ".png":
        export_png(canvas, filename)
    else:
        raise ValueError(f"Unsupported image format: {suffix or filename}")
