import unittest
import numpy as np
from core.vector import Vector3, Point3
from camera.camera import Camera, CameraSettings, ASPECT_RATIO, IMAGE_WIDTH


class TestCameraSettings(unittest.TestCase):

    def test_defaults(self):
        s = CameraSettings()
        self.assertEqual(s.aspect_ratio, ASPECT_RATIO)
        self.assertEqual(s.image_width, IMAGE_WIDTH)
        self.assertEqual(s.focal_length, 1.0)
        self.assertEqual(s.viewport_height, 2.0)
        self.assertEqual(s.center, Point3.zero())

    def test_default_image_height(self):
        self.assertEqual(CameraSettings(aspect_ratio=16.0 / 9.0, image_width=400).image_height, 225)

    def test_height_never_below_one(self):
        self.assertEqual(CameraSettings(aspect_ratio=1000.0, image_width=10).image_height, 1)

    def test_settings_are_immutable(self):
        s = CameraSettings()
        with self.assertRaises(AttributeError):
            s.image_width = 10

    def test_invalid_settings(self):
        for kwargs in ({"image_width": 0}, {"image_width": -5}, {"image_width": 10.5},
                       {"aspect_ratio": 0.0}, {"aspect_ratio": -1.0},
                       {"aspect_ratio": float("inf")}, {"focal_length": 0.0},
                       {"viewport_height": float("nan")}):
            with self.assertRaises(ValueError, msg=str(kwargs)):
                CameraSettings(**kwargs)


class TestCameraGeometry(unittest.TestCase):

    def setUp(self):
        self.cam = Camera()

    def test_viewport_vectors(self):
        np.testing.assert_almost_equal(list(self.cam.viewport_u), [2.0 * 400 / 225, 0.0, 0.0])
        np.testing.assert_almost_equal(list(self.cam.viewport_v), [0.0, -2.0, 0.0])

    def test_pixel_deltas(self):
        np.testing.assert_almost_equal(list(self.cam.pixel_delta_u), [2.0 / 225, 0.0, 0.0])
        np.testing.assert_almost_equal(list(self.cam.pixel_delta_v), [0.0, -2.0 / 225, 0.0])

    def test_first_pixel_is_cell_centered(self):
        np.testing.assert_almost_equal(list(self.cam.viewport_upper_left), [-16.0 / 9.0, 1.0, -1.0])
        np.testing.assert_almost_equal(list(self.cam.pixel00_loc),
                                       [-16.0 / 9.0 + 1.0 / 225, 1.0 - 1.0 / 225, -1.0])

    def test_viewport_uses_floored_height(self):
        cam = Camera(CameraSettings(image_width=401))
        self.assertEqual(cam.image_height, 225)
        self.assertAlmostEqual(cam.viewport_u.x, 2.0 * 401 / 225)

    def test_center_pixel_looks_down_minus_z(self):
        cam = Camera(CameraSettings(aspect_ratio=1.0, image_width=3))
        ray = cam.get_ray(1, 1)
        self.assertEqual(ray.origin, Point3.zero())
        self.assertTrue(ray.direction.isclose(Vector3(0.0, 0.0, -1.0)))

    def test_rays_start_at_camera_center(self):
        center = Point3(1.0, 2.0, 3.0)
        cam = Camera(CameraSettings(image_width=16, center=center))
        ray = cam.get_ray(5, 4)
        self.assertEqual(ray.origin, center)
        self.assertTrue(ray.at(1.0).isclose(cam.pixel_center(5, 4)))
        self.assertAlmostEqual(ray.at(1.0).z, 2.0)

    def test_last_pixel_mirrors_first(self):
        first = self.cam.pixel_center(0, 0)
        last = self.cam.pixel_center(399, 224)
        np.testing.assert_almost_equal(list(last), [-first.x, -first.y, first.z])


if __name__ == "__main__":
    unittest.main()
