"""Insper brand colors and palettes.

INSPER_COLORS are the atomic brand colors (reds1, teals2...), INSPER_PALETTES
the ordered color collections used by the scale_*_insper_* functions.
"""
import logging
import warnings
from collections import OrderedDict

import numpy as np
import pandas as pd
import plotnine as p9
from matplotlib import colors as mcolors
from mizani.palettes import gradient_n_pal

from .errors import InvalidParameterValue
from .plot_nine import Plot

logger = logging.getLogger(__name__)

INSPER_COLORS = OrderedDict([
    # basics
    ('white', '#FFFFFF'),
    ('off_white', '#FEFEFE'),
    ('black', '#000000'),
    # grays, light to dark
    ('gray_light', '#E6E7E8'),
    ('gray_med', '#BCBEC0'),
    ('gray_meddark', '#414042'),
    ('gray_dark', '#333333'),
    # reds - reds1 is the primary brand red
    ('reds1', '#E4002B'),
    ('reds2', '#FCA5A8'),
    ('reds3', '#A50020'),
    ('oranges1', '#F15A22'),
    ('oranges2', '#F58220'),
    ('oranges3', '#FAA61A'),
    ('magentas1', '#A62B4D'),
    ('magentas2', '#C43150'),
    ('magentas3', '#EE2A5D'),
    # teals - the secondary brand color
    ('teals1', '#009491'),
    ('teals2', '#27A5A2'),
    ('teals3', '#3CBFAE'),
])

INSPER_PALETTES = OrderedDict([
    ('main', ['#E4002B', '#F15A22', '#FAA61A', '#009491', '#3CBFAE', '#414042']),
    # single hue, light to dark
    ('reds', ['#FEE5E7', '#FCA5A8', '#E4002B', '#A50020', '#6B0015']),
    ('oranges', ['#FEF1E5', '#FAA61A', '#F58220', '#F15A22', '#B83E16']),
    ('teals', ['#E5F7F7', '#3CBFAE', '#27A5A2', '#009491', '#006763']),
    ('grays', ['#F5F5F5', '#E6E7E8', '#BCBEC0', '#414042', '#1A1A1A']),
    # meaningful center
    ('red_teal', ['#E4002B', '#FCA5A8', '#FFFFFF', '#7DD4D2', '#009491']),
    ('red_teal_ext', [
        '#6B0015', '#A50020', '#E4002B', '#FCA5A8', '#FEE5E7', '#FFFFFF',
        '#E5F7F7', '#7DD4D2', '#009491', '#006763', '#003D3B'
    ]),
    ('diverging', ['#009491', '#3CBFAE', '#E6E7E8', '#FCA5A8', '#E4002B']),
    # unordered categories
    ('bright', ['#E4002B', '#F15A22', '#FAA61A', '#009491', '#EE2A5D', '#9B59B6']),
    ('contrast', ['#E4002B', '#009491', '#F58220', '#A62B4D', '#414042', '#3CBFAE']),
    ('categorical', [
        '#003366', '#4A90E2', '#FF6B35', '#2ECC71', '#E74C3C', '#F39C12',
        '#9B59B6', '#6C757D'
    ]),
    # greys, then the highlight colors
    ('accent_red', ['#414042', '#BCBEC0', '#E6E7E8', '#FAA61A', '#F15A22', '#E4002B']),
    ('accent_teal', ['#414042', '#BCBEC0', '#E6E7E8', '#003366', '#009491', '#954000']),
    # colorblind safe
    ('categorical_ito', [
        '#E69F00', '#56B4E9', '#009E73', '#F0E442', '#0072B2', '#D55E00',
        '#CC79A7', '#999999'
    ]),
    ('categorical_tab', [
        '#4E79A7', '#F28E2B', '#E15759', '#76B7B2', '#59A14F', '#EDC948',
        '#B07AA1', '#FF9DA7', '#9C755F', '#BAB0AC'
    ]),
    ('categorical_set', [
        '#E41A1C', '#377EB8', '#4DAF4A', '#984EA3', '#FF7F00', '#FFFF33',
        '#A65628', '#F781BF', '#999999'
    ]),
])

# name, type, recommended use
_palette_info = [
    ('main', 'qualitative', 'Primary Insper brand colors'),
    ('reds', 'sequential', 'Intensity scales (light to dark red)'),
    ('oranges', 'sequential', 'Intensity scales (light to dark orange)'),
    ('teals', 'sequential', 'Intensity scales (light to dark teal)'),
    ('grays', 'sequential', 'Intensity scales (light to dark gray)'),
    ('red_teal', 'diverging', 'Diverging data (negative/positive, red/teal)'),
    ('red_teal_ext', 'diverging', 'Extended diverging palette (11 colors)'),
    ('diverging', 'diverging', 'Classic diverging palette (teal/gray/red)'),
    ('bright', 'qualitative', 'Bright categorical colors (high contrast)'),
    ('contrast', 'qualitative', 'High contrast categorical colors'),
    ('categorical', 'qualitative', '8-color categorical palette'),
    ('accent_red', 'qualitative', 'Grays with red highlights'),
    ('accent_teal', 'qualitative', 'Grays with teal highlights'),
    ('categorical_ito', 'qualitative', 'Okabe-Ito, colorblind safe'),
    ('categorical_tab', 'qualitative', 'Tableau 10'),
    ('categorical_set', 'qualitative', 'ColorBrewer Set1'),
]

_palette_types = ('sequential', 'diverging', 'qualitative')

_color_families = OrderedDict([
    ('reds', 'reds'),
    ('oranges', 'oranges'),
    ('magentas', 'magentas'),
    ('teals', 'teals'),
    ('grays', 'gray'),
    ('basic', ('white', 'black', 'off_white')),
])


def insper_col(name):
    """A single brand color by name, e.g. insper_col('reds1') -> '#E4002B'"""
    try:
        return INSPER_COLORS[name]
    except KeyError:
        raise InvalidParameterValue("Color %r not found. Available: %s" %
                                    (name, ", ".join(INSPER_COLORS)))


def get_insper_colors(*names):
    """Brand colors as an ordered name -> hex dict.
    Without names, all colors are returned."""
    if not names:
        return OrderedDict(INSPER_COLORS)
    return OrderedDict((name, insper_col(name)) for name in names)


def _check_palette(palette):
    if palette not in INSPER_PALETTES:
        raise InvalidParameterValue(
            "Palette %r not found. Available palettes: %s" %
            (palette, ", ".join(INSPER_PALETTES)))


def insper_pal(palette="main", n=None, type="discrete", reverse=False):
    """Colors from an Insper palette.

    discrete: the first n colors (recycled, with a warning, if n exceeds the
    palette). continuous: n colors interpolated along the palette.
    """
    _check_palette(palette)
    if type not in ('discrete', 'continuous'):
        raise InvalidParameterValue(
            "type must be one of 'discrete', 'continuous', was %r" % (type, ))
    pal = list(INSPER_PALETTES[palette])
    if reverse:
        pal = pal[::-1]
    if n is None:
        n = len(pal)
    if type == 'discrete':
        if n > len(pal):
            warnings.warn("Not enough colors in palette. Recycling colors.")
            logger.debug("recycling palette %s (%i colors) to %i", palette,
                         len(pal), n)
            pal = (pal * (n // len(pal) + 1))[:n]
        else:
            pal = pal[:n]
        return pal
    ramp = gradient_n_pal(pal)
    return [mcolors.to_hex(c).upper() for c in ramp(np.linspace(0, 1, n))]


def get_palette_colors(palette, n=None, reverse=False):
    """The first n colors of a palette (no interpolation)"""
    return insper_pal(palette, n=n, type='discrete', reverse=reverse)


def list_palettes(type="all", names_only=False):
    """Palette name, type, n_colors and recommended_use as a DataFrame
    (or just the names)"""
    if type != 'all' and type not in _palette_types:
        raise InvalidParameterValue(
            "type must be one of 'all', %s, was %r" %
            (", ".join("'%s'" % x for x in _palette_types), type))
    df = pd.DataFrame(
        [(name, typ, len(INSPER_PALETTES[name]), use)
         for (name, typ, use) in _palette_info],
        columns=['name', 'type', 'n_colors', 'recommended_use'])
    if type != 'all':
        df = df[df['type'] == type].reset_index(drop=True)
    if names_only:
        return list(df['name'])
    return df


def _text_color_for(hex_color):
    r, g, b = mcolors.to_rgb(hex_color)
    return 'black' if (r * 0.299 + g * 0.587 + b * 0.114) > 0.5 else 'white'


def _swatch_title_theme():
    return p9.theme(
        plot_title=p9.element_text(ha='center', size=14, weight='bold'),
        plot_subtitle=p9.element_text(ha='center', size=10),
        figure_size=(10, 3),
    )


def show_insper_colors(color_family="all"):
    """Tiles of the individual brand colors, optionally one family only
    (reds, oranges, magentas, teals, grays, basic)"""
    names = list(INSPER_COLORS)
    if color_family != 'all':
        if color_family not in _color_families:
            raise InvalidParameterValue(
                "Invalid color family: %r. Choose: all, %s" %
                (color_family, ", ".join(_color_families)))
        prefix = _color_families[color_family]
        names = [x for x in names if x.startswith(prefix)]
    hexes = [INSPER_COLORS[x] for x in names]
    df = pd.DataFrame({
        'name': names,
        'hex': hexes,
        'x': np.arange(1, len(names) + 1),
        'y': 1,
        'label': ["%s\n%s" % (name, hex) for (name, hex) in zip(names, hexes)],
        'text_color': [_text_color_for(x) for x in hexes],
    })
    p = Plot(df)
    p += p9.geom_tile(p9.aes('x', 'y', fill='hex'), width=0.9, height=0.9, color='black')
    p += p9.scale_fill_identity()
    p += p9.geom_text(p9.aes('x', 'y', label='label', color='text_color'), size=7, fontweight='bold')
    p += p9.scale_color_identity()
    p += p9.theme_void()
    p += p9.labs(title="Insper Individual Colors: %s" % color_family.title(),
                 subtitle="Use get_insper_colors('name') to extract by name")
    p += _swatch_title_theme()
    return p


def show_insper_palette(palette="all"):
    """Swatches of one palette - or of all of them, grouped by type"""
    if palette == 'all':
        return show_palette_types()
    _check_palette(palette)
    colors = INSPER_PALETTES[palette]
    info = list_palettes()
    info = info[info['name'] == palette].iloc[0]
    df = pd.DataFrame({
        'position': np.arange(1, len(colors) + 1),
        'y': 1,
        'hex': colors,
    })
    p = Plot(df)
    p += p9.geom_tile(p9.aes('position', 'y', fill='hex'), width=0.9, height=1, color='white', size=1)
    p += p9.scale_fill_identity()
    p += p9.geom_text(p9.aes('position', 'y', label='hex'), size=8, fontweight='bold', angle=90, color='white')
    p += p9.theme_void()
    p += p9.labs(title="Palette: %s" % palette,
                 subtitle="%s | %i colors | %s" %
                 (info['type'].title(), info['n_colors'], info['recommended_use']))
    p += _swatch_title_theme()
    return p


def show_palette_types():
    """All palettes, one row each, faceted into sequential / diverging / qualitative"""
    info = list_palettes()
    parts = []
    for _, row in info.iterrows():
        colors = INSPER_PALETTES[row['name']]
        parts.append(
            pd.DataFrame({
                'palette': row['name'],
                'type': row['type'],
                'color': colors,
                'position': np.arange(1, len(colors) + 1),
            }))
    df = pd.concat(parts, ignore_index=True)
    df['type'] = pd.Categorical(df['type'], categories=list(_palette_types))
    p = Plot(df)
    p += p9.geom_tile(p9.aes('position', 'palette', fill='color'), color='white', size=1)
    p += p9.scale_fill_identity()
    p += p9.facet_wrap('type', scales='free_y', ncol=1)
    p += p9.theme_minimal()
    p += p9.labs(title="Insper Color Palettes",
                 subtitle="Organized by type: Sequential, Diverging, and Qualitative",
                 x="", y="")
    p += p9.theme(
        axis_text_x=p9.element_blank(),
        axis_ticks=p9.element_blank(),
        panel_grid=p9.element_blank(),
        strip_text=p9.element_text(weight='bold', size=12),
        plot_title=p9.element_text(weight='bold', size=16),
        plot_subtitle=p9.element_text(size=11, color='#666666'),
        figure_size=(10, 12),
    )
    return p
