# FILE: core/materials.py
"""
Phong material and local illumination
"""
from dataclasses import dataclass, field

from .lights import PointLight
from .tuples import BLACK, WHITE, Tuple4


@dataclass(frozen=True)
class Material:
    """Surface properties for the Phong reflection model"""
    color: Tuple4 = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    def lighting(self, light: PointLight, point: Tuple4,
                 eyev: Tuple4, normalv: Tuple4) -> Tuple4:
        """
        Shade a surface point lit by a single point light.

        Args:
            light: The point light
            point: World space point being shaded
            eyev: Unit vector from the point towards the eye
            normalv: Unit surface normal at the point

        Returns:
            Unclamped color (ambient + diffuse + specular)
        """
        effective_color = self.color * light.intensity
        lightv = (light.position - point).normalize()
        ambient = effective_color * self.ambient

        # Negative means the light is on the other side of the surface
        light_dot_normal = lightv.dot(normalv)
        if light_dot_normal < 0:
            diffuse = BLACK
            specular = BLACK
        else:
            diffuse = effective_color * self.diffuse * light_dot_normal

            # Negative means the light reflects away from the eye
            reflectv = (-lightv).reflect(normalv)
            reflect_dot_eye = reflectv.dot(eyev)
            if reflect_dot_eye <= 0:
                specular = BLACK
            else:
                factor = reflect_dot_eye ** self.shininess
                specular = light.intensity * self.specular * factor

        return ambient + diffuse + specular
