"""Insper chart recipes.

Each builder takes a DataFrame plus column references (column names,
Column(...) or Expression(...)) and returns a Plot with the Insper theme
and scales applied. color / fill arguments may be a fixed color ('red',
'#E4002B') or a mapping (Column('cyl'), Expression('factor(cyl)')) -
see aesthetics.classify_aesthetic.
"""
import warnings

import numpy as np
import pandas as pd
import plotnine as p9
from mizani.labels import label_comma

from .aesthetics import classify_aesthetic, factor, is_continuous_values, warn_palette_ignored
from .colors import insper_col
from .errors import (InvalidInputType, InvalidParameterValue, MissingRequiredParameter,
                     NonFactorAxisWarning)
from .plot_nine import Plot
from .scales import (scale_color_insper_c, scale_color_insper_d, scale_fill_insper_c,
                     scale_fill_insper_d)
from .themes import theme_insper

_bar_positions = ('dodge', 'stack', 'fill', 'identity')
_smooth_methods = ('lm', 'loess', 'glm', 'lowess')
_bin_methods = ('sturges', 'fd', 'scott', 'manual')
_scales = {
    ('fill', True): scale_fill_insper_c,
    ('fill', False): scale_fill_insper_d,
    ('color', True): scale_color_insper_c,
    ('color', False): scale_color_insper_d,
}


def _palette_or_default(palette):
    return palette if palette is not None else 'categorical'


def _insper_scale(aesthetic, classification, palette, discrete=False):
    continuous = classification.is_continuous and not discrete
    if continuous and palette is None:
        palette = 'red_teal'
    return _scales[aesthetic, continuous](palette=_palette_or_default(palette))


def _discrete_column(p, classification, name):
    """Column name for a mapping that must be categorical"""
    column = p.column(classification.mapping, name)
    if classification.is_continuous:
        column = p.column(factor(p.values(column)), 'factor(%s)' % (column, ))
    return column


def _check_choice(value, choices, param_name):
    if value not in choices:
        raise InvalidParameterValue(
            "%s must be one of %s, was %r" %
            (param_name, ", ".join("'%s'" % x for x in choices), value))


def _factor_x(p, x, builder):
    """Boxplots / violins need a categorical x"""
    if is_continuous_values(p.values(x)):
        warnings.warn(
            "%s: x (%s) is continuous and was converted with factor(). "
            "Pass a categorical column or Expression('factor(...)') to silence this." %
            (builder, x),
            NonFactorAxisWarning,
            stacklevel=3)
        return p.column(factor(p.values(x)), 'factor(%s)' % (x, ))
    return x


def _comma_1(values):
    return ["{:,.1f}".format(v) for v in values]


def insper_barplot(data, x, y, fill=None, position="dodge", palette=None, zero=True,
                   text=False, text_size=9, text_color="black", label_formatter=None,
                   config=None, **kwargs):
    """Bar chart of y by x.

    The bars are horizontal when x is numeric and y is not. fill may be a
    fixed color or a (always discrete) mapping, grouped bars follow position
    (dodge, stack, fill or identity). text=True labels the bars with
    label_formatter(values) (default: one decimal, comma separated).
    Extra kwargs go to geom_col.
    """
    p = Plot(data)
    _check_choice(position, _bar_positions, 'position')
    fill_type = classify_aesthetic(fill, p.dataframe, 'fill')
    warn_palette_ignored(fill_type, palette, 'fill')

    x = p.column(x, 'x')
    y = p.column(y, 'y')
    horizontal = is_continuous_values(p.values(x)) and not is_continuous_values(p.values(y))
    category, value = (y, x) if horizontal else (x, y)
    mapping = {'x': category, 'y': value}

    if fill_type.is_mapping:
        mapping['fill'] = _discrete_column(p, fill_type, 'fill')
        p.set_mapping(**mapping)
        p += p9.geom_col(position=position, **kwargs)
        p += _insper_scale('fill', fill_type, palette, discrete=True)
    else:
        p.set_mapping(**mapping)
        color = fill_type.literal_value if fill_type.is_static else insper_col('reds1')
        p += p9.geom_col(fill=color, position=position, **kwargs)

    if zero:
        p += p9.geom_hline(yintercept=0, size=1, color=insper_col('black'))

    if text:
        formatter = label_formatter if label_formatter is not None else _comma_1
        label = p.column(pd.Series(formatter(p.values(value))), 'label_text')
        label_position = position
        if position == 'dodge':
            label_position = p9.position_dodge(width=0.9)
        if horizontal:
            p += p9.geom_text(p9.aes(label=label), position=label_position, ha='left',
                              size=text_size, color=text_color)
        else:
            p += p9.geom_text(p9.aes(label=label), position=label_position, va='bottom',
                              size=text_size, color=text_color)

    p += p9.scale_y_continuous(expand=(0, 0, 0.1, 0), labels=label_comma())
    if horizontal:
        p += p9.coord_flip()
    p += theme_insper(config=config)
    if horizontal:
        p += p9.theme(panel_grid_major_y=p9.element_blank())
    else:
        p += p9.theme(panel_grid_major_x=p9.element_blank())
    return p


def insper_scatterplot(data, x, y, color=None, fill=None, palette=None, add_smooth=False,
                       smooth_method="lm", point_size=2, point_alpha=1, config=None,
                       **kwargs):
    """Scatter plot of y against x.

    color and fill are classified independently, each may be a fixed color
    or a mapping (continuous or discrete scale chosen from the data).
    add_smooth adds a smoother (lm, loess, glm or lowess) in orange.
    Extra kwargs go to geom_point.
    """
    p = Plot(data)
    _check_choice(smooth_method, _smooth_methods, 'smooth_method')
    color_type = classify_aesthetic(color, p.dataframe, 'color')
    fill_type = classify_aesthetic(fill, p.dataframe, 'fill')
    if not color_type.is_mapping and not fill_type.is_mapping:
        if color_type.is_static:
            warn_palette_ignored(color_type, palette, 'color')
        else:
            warn_palette_ignored(fill_type, palette, 'fill')

    p.set_mapping(x=p.column(x, 'x'), y=p.column(y, 'y'))
    mapping = {}
    params = {'size': point_size, 'alpha': point_alpha}
    if color_type.is_mapping:
        mapping['color'] = p.column(color_type.mapping, 'color')
        p += _insper_scale('color', color_type, palette)
    elif color_type.is_static:
        params['color'] = color_type.literal_value
    elif fill_type.is_mapping:
        params['color'] = insper_col('teals3')
    else:
        params['color'] = insper_col('teals1')

    if fill_type.is_mapping:
        mapping['fill'] = p.column(fill_type.mapping, 'fill')
        p += _insper_scale('fill', fill_type, palette)
    elif fill_type.is_static:
        params['fill'] = fill_type.literal_value
    params.update(kwargs)
    p += p9.geom_point(p9.aes(**mapping), **params)

    if add_smooth:
        p += p9.geom_smooth(method=smooth_method, color=insper_col('oranges1'),
                            fill=insper_col('oranges1'), alpha=0.2)
    p += theme_insper(config=config)
    return p


def insper_timeseries(data, x, y, color=None, palette=None, line_width=0.8,
                      add_points=False, config=None, **kwargs):
    """Line chart of y over x (usually dates), one line per color group
    if color is a mapping"""
    p = Plot(data)
    color_type = classify_aesthetic(color, p.dataframe, 'color')
    warn_palette_ignored(color_type, palette, 'color')

    mapping = {'x': p.column(x, 'x'), 'y': p.column(y, 'y')}
    params = {'size': line_width}
    if color_type.is_mapping:
        mapping['color'] = p.column(color_type.mapping, 'color')
        p += _insper_scale('color', color_type, palette)
    else:
        params['color'] = color_type.literal_value if color_type.is_static else insper_col('teals1')
    p.set_mapping(**mapping)
    params.update(kwargs)
    p += p9.geom_line(**params)
    if add_points:
        point_params = {'size': line_width * 2}
        if 'color' in params:
            point_params['color'] = params['color']
        p += p9.geom_point(**point_params)
    p += theme_insper(config=config)
    return p


def insper_area(data, x, y, fill=None, palette=None, stacked=False, area_alpha=0.9,
                fill_color=None, add_line=True, line_color=None, line_width=0.8,
                line_alpha=1, zero=False, config=None, **kwargs):
    """Area chart of y over x.

    A fill mapping draws one area per group (stacked if stacked=True,
    overlapping otherwise) and colors the outlines alike. Otherwise the
    area is fill_color (teals1) with a line_color (teals3) outline.
    """
    p = Plot(data)
    fill_type = classify_aesthetic(fill, p.dataframe, 'fill')
    warn_palette_ignored(fill_type, palette, 'fill')
    if fill_color is None:
        fill_color = insper_col('teals1')
    if line_color is None:
        line_color = insper_col('teals3')

    mapping = {'x': p.column(x, 'x'), 'y': p.column(y, 'y')}
    if fill_type.is_mapping:
        fill_column = _discrete_column(p, fill_type, 'fill') if stacked else p.column(
            fill_type.mapping, 'fill')
        mapping['fill'] = fill_column
        mapping['group'] = fill_column
        p.set_mapping(**mapping)
        position = 'stack' if stacked else 'identity'
        p += p9.geom_area(alpha=area_alpha, position=position, **kwargs)
        if add_line:
            p += p9.geom_line(p9.aes(color=fill_column), size=line_width, alpha=line_alpha,
                              position=position)
            p += _insper_scale('color', fill_type, palette, discrete=stacked)
        p += _insper_scale('fill', fill_type, palette, discrete=stacked)
    else:
        p.set_mapping(**mapping)
        area = fill_type.literal_value if fill_type.is_static else fill_color
        p += p9.geom_area(fill=area, alpha=area_alpha, **kwargs)
        if add_line:
            p += p9.geom_line(color=line_color, size=line_width, alpha=line_alpha)

    if zero:
        p += p9.geom_hline(yintercept=0, size=0.5, color=insper_col('black'))
    p += theme_insper(config=config)
    return p


def insper_boxplot(data, x, y, fill=None, palette=None, add_jitter=None, add_notch=False,
                   box_alpha=0.8, config=None, **kwargs):
    """Boxplots of y per x group.

    add_jitter=None shows the raw points when every group has fewer than
    100 observations. Extra kwargs go to geom_boxplot.
    """
    p = Plot(data)
    fill_type = classify_aesthetic(fill, p.dataframe, 'fill')
    warn_palette_ignored(fill_type, palette, 'fill')

    x = _factor_x(p, p.column(x, 'x'), 'insper_boxplot')
    mapping = {'x': x, 'y': p.column(y, 'y')}
    if add_jitter is None:
        add_jitter = bool(pd.Series(p.values(x)).value_counts().max() < 100)

    if fill_type.is_mapping:
        mapping['fill'] = _discrete_column(p, fill_type, 'fill')
        p.set_mapping(**mapping)
        p += p9.geom_boxplot(alpha=box_alpha, notch=add_notch, **kwargs)
        p += _insper_scale('fill', fill_type, palette, discrete=True)
    else:
        p.set_mapping(**mapping)
        color = fill_type.literal_value if fill_type.is_static else insper_col('teals2')
        p += p9.geom_boxplot(fill=color, alpha=box_alpha, notch=add_notch, **kwargs)

    if add_jitter:
        p += p9.geom_jitter(width=0.2, height=0, alpha=0.5, color=insper_col('gray_med'))
    p += theme_insper(config=config)
    return p


def insper_violin(data, x, y, fill=None, palette=None, show_boxplot=False, show_points=False,
                  violin_alpha=0.7, config=None, **kwargs):
    """Violin plots of y per x group, optionally with narrow boxplots
    and jittered points on top"""
    p = Plot(data)
    fill_type = classify_aesthetic(fill, p.dataframe, 'fill')
    warn_palette_ignored(fill_type, palette, 'fill')

    x = _factor_x(p, p.column(x, 'x'), 'insper_violin')
    mapping = {'x': x, 'y': p.column(y, 'y')}
    if fill_type.is_mapping:
        mapping['fill'] = _discrete_column(p, fill_type, 'fill')
        p.set_mapping(**mapping)
        p += p9.geom_violin(alpha=violin_alpha, **kwargs)
        p += _insper_scale('fill', fill_type, palette, discrete=True)
    else:
        p.set_mapping(**mapping)
        color = fill_type.literal_value if fill_type.is_static else insper_col('teals2')
        p += p9.geom_violin(fill=color, alpha=violin_alpha, **kwargs)

    if show_boxplot:
        p += p9.geom_boxplot(width=0.2, alpha=0.5, outlier_alpha=0)
    if show_points:
        p += p9.geom_jitter(width=0.1, height=0, alpha=0.3, size=1)
    p += theme_insper(config=config)
    return p


def _bin_count(values, bins, bin_method):
    if bin_method == 'manual':
        return int(bins)
    values = pd.to_numeric(pd.Series(values), errors='coerce').dropna().values.astype(float)
    if len(values) == 0:
        return 1
    edges = np.histogram_bin_edges(values, bins=bin_method)
    return max(len(edges) - 1, 1)


def insper_histogram(data, x, fill=None, palette=None, bins=None, bin_method="sturges",
                     border_color="white", zero=True, config=None, **kwargs):
    """Histogram of x.

    The number of bins is bins if given, otherwise computed with
    bin_method (sturges, fd or scott). bin_method='manual' requires bins.
    A fill mapping draws overlapping, semi transparent histograms.
    """
    p = Plot(data)
    _check_choice(bin_method, _bin_methods, 'bin_method')
    if bin_method == 'manual' and bins is None:
        raise MissingRequiredParameter("bins must be given when bin_method is 'manual'")
    fill_type = classify_aesthetic(fill, p.dataframe, 'fill')
    warn_palette_ignored(fill_type, palette, 'fill')

    x = p.column(x, 'x')
    if bins is None:
        bins = _bin_count(p.values(x), bins, bin_method)

    if fill_type.is_mapping:
        fill_column = _discrete_column(p, fill_type, 'fill')
        p.set_mapping(x=x, fill=fill_column)
        p += p9.geom_histogram(bins=bins, color=border_color, position='identity', alpha=0.7,
                               **kwargs)
        p += _insper_scale('fill', fill_type, palette, discrete=True)
    else:
        p.set_mapping(x=x)
        color = fill_type.literal_value if fill_type.is_static else insper_col('reds1')
        p += p9.geom_histogram(bins=bins, fill=color, color=border_color, **kwargs)

    if zero:
        p += p9.geom_hline(yintercept=0, size=1, color=insper_col('black'))
    p += p9.scale_y_continuous(expand=(0, 0, 0.05, 0))
    p += theme_insper(config=config)
    return p


def insper_density(data, x, fill=None, palette=None, fill_color=None, line_color=None,
                   alpha=0.6, bw=None, adjust=1, kernel="gaussian", config=None, **kwargs):
    """Kernel density of x, one (outlined) curve per group if fill is a mapping"""
    p = Plot(data)
    fill_type = classify_aesthetic(fill, p.dataframe, 'fill')
    warn_palette_ignored(fill_type, palette, 'fill')
    if fill_color is None:
        fill_color = insper_col('teals1')
    if line_color is None:
        line_color = insper_col('teals3')

    params = {'alpha': alpha, 'adjust': adjust, 'kernel': kernel}
    if bw is not None:
        params['bw'] = bw
    params.update(kwargs)
    x = p.column(x, 'x')
    if fill_type.is_mapping:
        fill_column = _discrete_column(p, fill_type, 'fill')
        p.set_mapping(x=x, fill=fill_column, color=fill_column)
        p += p9.geom_density(**params)
        p += _insper_scale('fill', fill_type, palette, discrete=True)
        p += _insper_scale('color', fill_type, palette, discrete=True)
    else:
        p.set_mapping(x=x)
        area = fill_type.literal_value if fill_type.is_static else fill_color
        p += p9.geom_density(fill=area, color=line_color, **params)
    p += theme_insper(config=config)
    return p


def _melt_matrix(data):
    """Wide numeric matrix -> long Var1 (row), Var2 (column), value frame,
    keeping row and column order"""
    if isinstance(data, np.ndarray):
        if data.ndim != 2:
            raise InvalidInputType("insper_heatmap needs a 2 dimensional array, got %i dimensions"
                                   % (data.ndim, ))
        data = pd.DataFrame(data,
                            index=range(1, data.shape[0] + 1),
                            columns=range(1, data.shape[1] + 1))
    rows = [str(x) for x in data.index]
    columns = [str(x) for x in data.columns]
    return pd.DataFrame({
        'Var1': pd.Categorical(np.tile(rows, len(columns)), categories=list(dict.fromkeys(rows))),
        'Var2': pd.Categorical(np.repeat(columns, len(rows)), categories=list(dict.fromkeys(columns))),
        'value': data.values.flatten(order='F'),
    })


def insper_heatmap(data, show_values=False, value_color="white", value_size=8,
                   palette="diverging", config=None, **kwargs):
    """Heatmap of a numeric matrix (DataFrame or 2d array) or of a long
    frame with Var1, Var2 and value columns.

    Extra kwargs go to geom_tile.
    """
    if isinstance(data, pd.DataFrame) and {'Var1', 'Var2', 'value'}.issubset(data.columns):
        melted = data
    elif isinstance(data, pd.DataFrame):
        non_numeric = [c for c in data.columns if not pd.api.types.is_numeric_dtype(data[c])]
        if non_numeric:
            raise InvalidInputType(
                "insper_heatmap needs a numeric matrix or a data frame with Var1, Var2 and "
                "value columns. Non numeric columns: %s" % (non_numeric, ))
        melted = _melt_matrix(data)
    elif isinstance(data, np.ndarray):
        melted = _melt_matrix(data)
    else:
        raise InvalidInputType(
            "insper_heatmap needs a pandas.DataFrame or numpy array, you supplied an object "
            "of class %s" % (type(data).__name__, ))

    p = Plot(melted)
    p.set_mapping(x='Var1', y='Var2', fill='value')
    params = {'color': 'white', 'size': 0.5}
    params.update(kwargs)
    p += p9.geom_tile(**params)
    p += scale_fill_insper_c(palette=palette)
    if show_values:
        label = p.column(pd.Series(np.round(p.values('value'), 2)), 'value_label')
        p += p9.geom_text(p9.aes(label=label), color=value_color, size=value_size)
    p += theme_insper(config=config)
    p += p9.theme(
        axis_text_x=p9.element_text(rotation=45, ha='right'),
        axis_title=p9.element_blank(),
        panel_grid=p9.element_blank(),
    )
    p += p9.labs(fill='Value')
    return p
