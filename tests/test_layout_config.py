import unittest

from app.justifiedgrid.layout.justified import LayoutConfig, validate_config


class TestValidateConfig(unittest.TestCase):
    def test_defaults(self):
        config = LayoutConfig(row_height=200)
        self.assertEqual(config.gap, 0)
        self.assertEqual(config.maximum_shrink_factor, 0.2)
        self.assertEqual(config.maximum_stretch_factor, 0.5)
        self.assertAlmostEqual(config.default_aspect_ratio, 4 / 3)
        self.assertFalse(config.uniform)
        self.assertEqual(tuple(config.items), ())

    def test_valid_config_passes(self):
        validate_config(
            LayoutConfig(
                row_height=180,
                gap=8,
                items=({"width": 10, "height": 20}, {}),
                maximum_shrink_factor=1,
                maximum_stretch_factor=0.1,
            )
        )

    def test_invalid_inputs(self):
        with self.assertRaises(ValueError):
            validate_config(LayoutConfig(row_height=0))
        with self.assertRaises(ValueError):
            validate_config(LayoutConfig(row_height=100, gap=-1))
        with self.assertRaises(ValueError):
            validate_config(LayoutConfig(row_height=100, maximum_shrink_factor=0))
        with self.assertRaises(ValueError):
            validate_config(LayoutConfig(row_height=100, maximum_stretch_factor=1.5))
        with self.assertRaises(ValueError):
            validate_config(LayoutConfig(row_height=100, default_aspect_ratio=float("inf")))
        with self.assertRaises(ValueError):
            validate_config(LayoutConfig(row_height=100, default_aspect_ratio=-1))

    def test_negative_item_dimension_names_the_item(self):
        config = LayoutConfig(row_height=100, items=({"width": 1, "height": 1}, {"width": -5, "height": 2}))
        with self.assertRaises(ValueError) as ctx:
            validate_config(config)
        self.assertIn("item 1", str(ctx.exception))
        self.assertIn("width", str(ctx.exception))

    def test_config_is_frozen(self):
        config = LayoutConfig(row_height=100)
        with self.assertRaises(Exception):
            config.row_height = 50  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
