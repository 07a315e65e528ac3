from renderer.config import RenderConfig
from renderer.framebuffer import Framebuffer
from renderer.integrator import NIGHT, SKY, Background, ray_color
from renderer.raytracer import Renderer, render
from renderer.tone_mapping import to_color, tone_map_channel

__all__ = [
    "RenderConfig",
    "Framebuffer",
    "Background",
    "NIGHT",
    "SKY",
    "ray_color",
    "Renderer",
    "render",
    "to_color",
    "tone_map_channel",
]
