# camera/camera.py
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Pinhole camera looking down -z from its origin.

    The viewport geometry is derived once from the image size, viewport
    height and focal length and never changes afterwards.
    """
    def __init__(self, width: int, height: int, view_height: float = 2.0,
                 focal_length: float = 1.0, origin: Vector3 = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Camera dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.aspect = width / height
        self.view_height = view_height
        self.view_width = view_height * self.aspect
        self.focal_length = focal_length
        self.origin = origin if origin is not None else Vector3(0, 0, 0)

        self.horizontal = Vector3(self.view_width, 0, 0)
        self.vertical = Vector3(0, self.view_height, 0)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  Vector3(0, 0, focal_length))

    def get_ray(self, u: float, v: float) -> Ray:
        """
        Ray through viewport coordinates (u, v), both nominally in [0, 1] with
        v growing upwards. Values outside that range are not rejected.
        """
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.origin)
        return Ray(self.origin, direction)
