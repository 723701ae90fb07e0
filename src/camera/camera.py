# camera/camera.py
import math
from core.matrix import Matrix4, IDENTITY
from core.ray import Ray
from core.vector import point, ORIGIN
from renderer.config import RenderSettings
from renderer.raytracer import Renderer


class Camera:
    """
    Pinhole camera looking down -z in its own space, with the image plane one
    unit in front of the eye. `transform` is the view transform, normally
    built with view_transform(from, to, up).
    """
    def __init__(self, hsize: int, vsize: int, field_of_view: float,
                 transform: Matrix4 = IDENTITY):
        if hsize < 1 or vsize < 1:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform
        self.update_camera()

    @classmethod
    def from_settings(cls, settings, transform: Matrix4 = IDENTITY) -> "Camera":
        return cls(settings.width, settings.height, settings.field_of_view, transform)

    @property
    def transform(self) -> Matrix4:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix4):
        # Raises NonInvertibleTransformError for a singular view transform.
        self.inverse = matrix.inverse()
        self._transform = matrix
        self.origin = self.inverse * ORIGIN

    def update_camera(self):
        """Computes the half extents of the image plane and the pixel size."""
        half_view = math.tan(self.field_of_view / 2)
        aspect = self.hsize / self.vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / self.hsize

    def ray_for_pixel(self, px: int, py: int, dx: float = 0.5, dy: float = 0.5) -> Ray:
        """
        World-space ray through position (dx, dy) inside pixel (px, py);
        the defaults aim at the pixel centre.
        """
        xoffset = (px + dx) * self.pixel_size
        yoffset = (py + dy) * self.pixel_size
        # The camera looks toward -z, so +x is to the left.
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset
        pixel = self.inverse * point(world_x, world_y, -1)
        direction = (pixel - self.origin).normalize()
        return Ray(self.origin, direction)

    def render(self, world, settings=None):
        """
        Renders `world` to a Canvas of hsize x vsize. Settings other than the
        image size and field of view come from `settings` when given.
        """
        if settings is None:
            settings = RenderSettings(width=self.hsize, height=self.vsize,
                                      field_of_view=self.field_of_view)
        return Renderer(settings).render(self, world)

    def __repr__(self) -> str:
        return f"Camera({self.hsize}x{self.vsize}, fov={self.field_of_view})"
