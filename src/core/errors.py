# core/errors.py


class RayTracerError(Exception):
    """Base class for every error raised by the renderer."""


class SceneError(RayTracerError, ValueError):
    """
    A malformed scene. Raised while the scene is being built, never while
    rays are being traced.
    """


class NonInvertibleTransformError(SceneError):
    """A shape, pattern or camera was given a singular transform."""


class DegenerateShapeError(SceneError):
    """Shape parameters that do not describe a usable surface."""


class RenderError(RayTracerError):
    """
    Raised after a render when one or more row bands failed.
    The canvas still holds every band that completed.
    """
    def __init__(self, failed_rows, canvas):
        self.failed_rows = failed_rows
        self.canvas = canvas
        ranges = ", ".join(f"{start}-{end - 1}" for start, end in failed_rows)
        super().__init__(f"Rendering failed for rows {ranges}")
