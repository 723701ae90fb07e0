# renderer/tone_mapping.py
import numpy as np


def clamp_to_uint8(linear):
    """
    Clamp linear RGB to [0, 1] and scale to 0..255, rounding half up.
    """
    scaled = np.floor(np.clip(linear, 0.0, 1.0) * 255.0 + 0.5)
    return scaled.astype(np.uint8)


def reinhard_tone_mapping(linear, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    scaled = np.maximum(linear, 0.0) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    return clamp_to_uint8(mapped)
