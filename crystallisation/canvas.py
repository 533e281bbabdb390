"""
Headless canvas with 2D-context style drawing calls, rendered to SVG
"""


class SvgCanvas:
    """
    Records paint operations issued through a canvas-like API.

    Nothing is cleared automatically: every fill and stroke stays on the
    canvas until clear_rect covers it.
    """

    BACKGROUND = "#ffffff"

    def __init__(self, width, height, fill_style="#fcfcfc", stroke_style="#333", line_width=0.25):
        self.width = width
        self.height = height
        self.fill_style = fill_style
        self.stroke_style = stroke_style
        self.line_width = line_width

        self.operations = []
        self._path = []

    def __repr__(self):
        return f"SvgCanvas({self.width}x{self.height}, {len(self.operations)} operations)"

    def resize(self, width, height):
        """Change canvas size, dropping everything painted so far"""
        self.width = width
        self.height = height
        self.clear_rect(0, 0, width, height)

    # Path building

    def begin_path(self):
        self._path = []

    def move_to(self, x, y):
        self._path.append({"points": [(float(x), float(y))], "closed": False})

    def line_to(self, x, y):
        if not self._path:
            self.move_to(x, y)
            return
        self._path[-1]["points"].append((float(x), float(y)))

    def close_path(self):
        if self._path:
            self._path[-1]["closed"] = True

    # Painting

    def fill(self):
        """Fill the current path with fill_style"""
        self._paint(fill=self.fill_style)

    def stroke(self):
        """Outline the current path with stroke_style"""
        self._paint(stroke=self.stroke_style, line_width=self.line_width)

    def _paint(self, fill=None, stroke=None, line_width=0.0):
        subpaths = [
            {"points": list(sp["points"]), "closed": sp["closed"]}
            for sp in self._path
            if len(sp["points"]) >= 2
        ]
        if not subpaths:
            return
        self.operations.append({
            "kind": "path",
            "subpaths": subpaths,
            "fill": fill,
            "stroke": stroke,
            "line_width": line_width,
        })

    def clear_rect(self, x, y, w, h):
        """Erase a rectangle; erasing the whole canvas forgets all operations"""
        if x <= 0 and y <= 0 and x + w >= self.width and y + h >= self.height:
            self.operations = []
            return
        self.operations.append({"kind": "clear", "rect": (x, y, w, h)})

    # Output

    @staticmethod
    def _subpath_to_d(subpath):
        """Convert a subpath to SVG path data"""
        points = subpath["points"]
        d = f"M {points[0][0]:.2f} {points[0][1]:.2f}"
        for x, y in points[1:]:
            d += f" L {x:.2f} {y:.2f}"
        if subpath["closed"]:
            d += " Z"
        return d

    def to_svg(self):
        """Serialize all recorded operations as an SVG document"""
        svg = f'''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" height="{self.height}" viewBox="0 0 {self.width} {self.height}">
<rect x="0" y="0" width="{self.width}" height="{self.height}" fill="{self.BACKGROUND}"/>
'''
        for op in self.operations:
            if op["kind"] == "clear":
                x, y, w, h = op["rect"]
                svg += f'<rect x="{x}" y="{y}" width="{w}" height="{h}" fill="{self.BACKGROUND}"/>\n'
                continue

            d = " ".join(self._subpath_to_d(sp) for sp in op["subpaths"])
            fill = op["fill"] or "none"
            if op["stroke"]:
                svg += f'<path d="{d}" fill="{fill}" stroke="{op["stroke"]}" stroke-width="{op["line_width"]}"/>\n'
            else:
                svg += f'<path d="{d}" fill="{fill}"/>\n'
        svg += '</svg>'
        return svg
