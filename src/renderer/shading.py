# renderer/shading.py
import math
from core.color import Color, BLACK
from core.ray import Ray
from geometry.intersection import hit, prepare_computations, schlick
from lights.shadows import intensity_at

# Recursion limit for reflected and refracted rays.
MAX_DEPTH = 5


def lighting(material, shape, light, point, eyev, normalv, intensity: float = 1.0) -> Color:
    """
    Phong illumination of `point` by one light.

    Ambient is always present. Diffuse and specular are averaged over the
    light's sample positions and scaled by `intensity`, the visible fraction
    of the light reported by the shadow sampler.
    """
    color = material.color_at(shape, point) if shape is not None else material.color
    effective_color = color * light.intensity
    ambient = effective_color * material.ambient
    if intensity == 0.0:
        return ambient

    samples = light.sample_points(point)
    diffuse_sum = 0.0
    specular_sum = 0.0
    for position in samples:
        lightv = (position - point).normalize()
        light_dot_normal = lightv.dot(normalv)
        # Light on the other side of the surface
        if light_dot_normal < 0:
            continue
        diffuse_sum += material.diffuse * light_dot_normal
        reflectv = (-lightv).reflect(normalv)
        reflect_dot_eye = reflectv.dot(eyev)
        # Light reflects away from the eye
        if reflect_dot_eye > 0:
            specular_sum += material.specular * math.pow(reflect_dot_eye, material.shininess)

    n = len(samples)
    diffuse = effective_color * (diffuse_sum / n)
    specular = light.intensity * (specular_sum / n)
    return ambient + (diffuse + specular) * intensity


def shade_hit(world, comps, remaining: int = MAX_DEPTH) -> Color:
    material = comps.object.material
    surface = BLACK
    for light in world.lights:
        intensity = intensity_at(light, world, comps.over_point)
        surface = surface + lighting(material, comps.object, light, comps.over_point,
                                     comps.eyev, comps.normalv, intensity)

    reflected = reflected_color(world, comps, remaining)
    refracted = refracted_color(world, comps, remaining)

    if material.reflective > 0 and material.transparency > 0:
        reflectance = schlick(comps)
        return surface + reflected * reflectance + refracted * (1 - reflectance)
    return surface + reflected + refracted


def reflected_color(world, comps, remaining: int = MAX_DEPTH) -> Color:
    reflective = comps.object.material.reflective
    if remaining <= 0 or reflective == 0:
        return BLACK
    reflect_ray = Ray(comps.over_point, comps.reflectv)
    return color_at(world, reflect_ray, remaining - 1) * reflective


def refracted_color(world, comps, remaining: int = MAX_DEPTH) -> Color:
    transparency = comps.object.material.transparency
    if remaining <= 0 or transparency == 0:
        return BLACK

    # Snell's law
    n_ratio = comps.n1 / comps.n2
    cos_i = comps.eyev.dot(comps.normalv)
    sin2_t = n_ratio * n_ratio * (1 - cos_i * cos_i)
    # Total internal reflection
    if sin2_t > 1:
        return BLACK

    cos_t = math.sqrt(1.0 - sin2_t)
    direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
    refract_ray = Ray(comps.under_point, direction)
    return color_at(world, refract_ray, remaining - 1) * transparency


def color_at(world, ray: Ray, remaining: int = MAX_DEPTH) -> Color:
    """
    Color seen along `ray`. Black when nothing is hit.
    """
    xs = world.intersect(ray)
    h = hit(xs)
    if h is None:
        return BLACK
    comps = prepare_computations(h, ray, xs)
    return shade_hit(world, comps, remaining)
