import math
import unittest
from pathlib import Path

from PIL import Image

from app.justifiedgrid.layout.justified import LayoutConfig, LayoutResult, Rect, compute_layout
from app.justifiedgrid.preview import render_preview


class TestRenderPreview(unittest.TestCase):
    def test_canvas_matches_layout(self):
        result = compute_layout(400, LayoutConfig(row_height=100, gap=10, items=({},) * 5))
        img = render_preview(result, 400)
        self.assertEqual(img.size, (400, math.ceil(result.container_height)))

        # Centre of the first tile is painted, the gap next to it is not.
        first = result.rects[0]
        inside = (int(first.x + first.width / 2), int(first.y + first.height / 2))
        self.assertEqual(img.getpixel(inside), (79, 129, 189))
        self.assertEqual(img.getpixel((int(first.width) + 5, 50)), (255, 255, 255))

    def test_saves_png(self):
        out = Path('.tmp-tests') / 'preview' / 'grid.png'
        if out.exists():
            out.unlink()
        result = LayoutResult(rects=[Rect(0, 0, 50, 20), Rect(0, 30, 0, 0)], container_height=40.5)
        render_preview(result, 120, out)
        self.assertTrue(out.exists())
        with Image.open(out) as img:
            self.assertEqual(img.size, (120, 41))
            self.assertEqual(img.format, "PNG")

    def test_empty_layout(self):
        img = render_preview(LayoutResult(rects=[], container_height=0), 0)
        self.assertEqual(img.size, (1, 1))


if __name__ == '__main__':
    unittest.main()
