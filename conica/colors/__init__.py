from .endpoint import EndpointColors, ColorInput, normalize_color_input

__all__ = ["EndpointColors", "ColorInput", "normalize_color_input"]
