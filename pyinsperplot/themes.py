"""The Insper plotnine theme and its variants"""
import logging

import plotnine as p9
from matplotlib import font_manager

from .colors import insper_col
from .config import resolve_config
from .errors import InvalidParameterValue

logger = logging.getLogger(__name__)

_generic_families = {
    'sans': 'sans-serif',
    'sans-serif': 'sans-serif',
    'serif': 'serif',
    'monospace': 'monospace',
    'cursive': 'cursive',
    'fantasy': 'fantasy',
}

_valid_borders = ('none', 'half', 'closed')


def _installed_fonts():
    return {f.name.lower() for f in font_manager.fontManager.ttflist}


def detect_font(font_name, fallback="sans-serif", config=None):
    """font_name if it can be used, otherwise fallback.

    A font can be used if config.fonts_loaded says so, or if matplotlib's
    font manager knows about it. Generic families (serif, sans...) are
    always usable.
    """
    config = resolve_config(config)
    if font_name.lower() in _generic_families:
        return _generic_families[font_name.lower()]
    if config.fonts_loaded:
        return font_name
    if font_name.lower() in _installed_fonts():
        return font_name
    return _generic_families.get(fallback.lower(), fallback)


def check_insper_fonts(config=None):
    """Which brand fonts are available? Returns a family -> bool dict"""
    config = resolve_config(config)
    installed = _installed_fonts()
    status = {}
    for family in ('EB Garamond', 'Barlow'):
        status[family] = config.fonts_loaded or family.lower() in installed
        if status[family]:
            logger.info("%s available", family)
        else:
            logger.warning("%s not found - plots will use fallback fonts", family)
    return status


def theme_insper(base_size=12,
                 font_title="EB Garamond",
                 font_text="Barlow",
                 grid=True,
                 border="none",
                 config=None,
                 **kwargs):
    """Insper visual identity on top of theme_minimal.

    grid: dashed light gray major grid lines (True) or none (False).
    border: 'none', 'half' (axis lines and ticks) or 'closed' (full panel border).
    Extra kwargs go to theme_minimal.
    Fonts that are not available fall back to serif / sans-serif.
    """
    if not isinstance(grid, bool):
        raise InvalidParameterValue("Argument grid must be one of True or False, was %r" % (grid, ))
    if not isinstance(border, str) or border not in _valid_borders:
        raise InvalidParameterValue(
            "Argument border must be one of 'none', 'half', or 'closed', was %r" % (border, ))

    font_title = detect_font(font_title, fallback='serif', config=config)
    font_text = detect_font(font_text, fallback='sans-serif', config=config)

    t = p9.theme_minimal(base_size=base_size, **kwargs) + p9.theme(
        text=p9.element_text(family=font_text, size=base_size),
        plot_background=p9.element_rect(fill=insper_col('off_white'), color=insper_col('off_white')),
        panel_background=p9.element_rect(fill=insper_col('off_white'), color=insper_col('off_white')),
        panel_grid_minor=p9.element_blank(),
        legend_position='top',
        legend_direction='horizontal',
        legend_title=p9.element_text(weight='bold'),
        axis_text=p9.element_text(size=base_size, color='#1A1A1A'),
        axis_title=p9.element_text(size=base_size, color=insper_col('black')),
        plot_title=p9.element_text(size=base_size * 1.8, family=font_title,
                                   color=insper_col('black'), ha='left'),
        plot_subtitle=p9.element_text(size=base_size * 0.9, family=font_title,
                                      color=insper_col('gray_meddark'), ha='left'),
        plot_caption=p9.element_text(size=base_size * 0.8, color='#666666', ha='right'),
        strip_text=p9.element_text(size=base_size, weight='bold'),
    )

    if grid:
        t += p9.theme(panel_grid_major=p9.element_line(
            size=0.35, linetype='dashed', color=insper_col('gray_light')))
    else:
        t += p9.theme(panel_grid_major=p9.element_blank())

    if border == 'half':
        t += p9.theme(
            axis_line=p9.element_line(color=insper_col('black')),
            axis_ticks=p9.element_line(color=insper_col('gray_dark')),
            axis_ticks_length=7,
        )
    elif border == 'closed':
        t += p9.theme(
            panel_border=p9.element_rect(color=insper_col('black'), fill=None),
            axis_ticks=p9.element_line(color=insper_col('gray_dark')),
            axis_ticks_length=7,
        )
    return t


def theme_insper_minimal(base_size=12, font_title="EB Garamond", font_text="Barlow", **kwargs):
    """No grid, no border"""
    return theme_insper(base_size=base_size, font_title=font_title, font_text=font_text,
                        grid=False, border='none', **kwargs)


def theme_insper_presentation(base_size=16, font_title="EB Garamond", font_text="Barlow", **kwargs):
    """Larger text for slides"""
    return theme_insper(base_size=base_size, font_title=font_title, font_text=font_text,
                        grid=False, border='none', **kwargs)


def theme_insper_print(base_size=11, font_title="EB Garamond", font_text="Barlow", **kwargs):
    """Grid plus a closed border, for print"""
    return theme_insper(base_size=base_size, font_title=font_title, font_text=font_text,
                        grid=True, border='closed', **kwargs)
