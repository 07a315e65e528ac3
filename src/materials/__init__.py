from materials.material import Material, ScatterResult
from materials.textures import CheckerColor, ColorType, NormalColor, SolidColor
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.emissive import Emissive

__all__ = [
    "Material",
    "ScatterResult",
    "ColorType",
    "SolidColor",
    "NormalColor",
    "CheckerColor",
    "Lambertian",
    "Metal",
    "Dielectric",
    "Emissive",
]
