"""plotnine color / fill scales using the Insper palettes.

*_d scales are for discrete mappings (one palette color per level), *_c scales
interpolate the palette along a continuous range.
"""
import plotnine as p9

from .colors import insper_pal


def scale_color_insper_d(palette="main", reverse=False, **kwargs):
    return p9.scale_color_manual(values=insper_pal(palette, reverse=reverse), **kwargs)


def scale_fill_insper_d(palette="main", reverse=False, **kwargs):
    return p9.scale_fill_manual(values=insper_pal(palette, reverse=reverse), **kwargs)


def scale_color_insper_c(palette="red_teal", reverse=False, **kwargs):
    return p9.scale_color_gradientn(
        colors=insper_pal(palette, type='continuous', reverse=reverse), **kwargs)


def scale_fill_insper_c(palette="red_teal", reverse=False, **kwargs):
    return p9.scale_fill_gradientn(
        colors=insper_pal(palette, type='continuous', reverse=reverse), **kwargs)


def scale_color_insper(palette="main", discrete=True, reverse=False, **kwargs):
    """Discrete or continuous color scale, depending on discrete"""
    if discrete:
        return scale_color_insper_d(palette, reverse=reverse, **kwargs)
    return scale_color_insper_c(palette, reverse=reverse, **kwargs)


def scale_fill_insper(palette="main", discrete=True, reverse=False, **kwargs):
    """Discrete or continuous fill scale, depending on discrete"""
    if discrete:
        return scale_fill_insper_d(palette, reverse=reverse, **kwargs)
    return scale_fill_insper_c(palette, reverse=reverse, **kwargs)


scale_colour_insper_d = scale_color_insper_d
scale_colour_insper_c = scale_color_insper_c
scale_colour_insper = scale_color_insper
