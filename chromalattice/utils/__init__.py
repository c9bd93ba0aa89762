from .num_utils import round_half_up, clamp_channels, to_color_array

__all__ = ["round_half_up", "clamp_channels", "to_color_array"]
