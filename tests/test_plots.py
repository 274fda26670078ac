import warnings

import numpy as np
import pandas as pd
import plotnine as p9
import pytest

from pyinsperplot import (Column, Expression, Plot, insper_area, insper_barplot, insper_boxplot,
                          insper_col, insper_density, insper_heatmap, insper_histogram,
                          insper_scatterplot, insper_timeseries, insper_violin)
from pyinsperplot.errors import (InvalidColorSpec, InvalidInputType, InvalidParameterValue,
                                 MissingRequiredParameter, NonFactorAxisWarning,
                                 PaletteIgnoredWarning)


def geoms(p):
    return [layer.geom for layer in p.plot.layers]


def has_scale(p, cls):
    return any(isinstance(s, cls) for s in p.plot.scales)


def render(p, tmp_path, name='plot.png'):
    fn = tmp_path / name
    p.render(str(fn), width=4, height=3, dpi=50)
    assert fn.exists()
    return fn


@pytest.fixture
def no_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter('error', PaletteIgnoredWarning)
        yield


@pytest.mark.parametrize('builder', [
    lambda d: insper_barplot(d, 'x', 'y'),
    lambda d: insper_scatterplot(d, 'x', 'y'),
    lambda d: insper_timeseries(d, 'x', 'y'),
    lambda d: insper_area(d, 'x', 'y'),
    lambda d: insper_boxplot(d, 'x', 'y'),
    lambda d: insper_violin(d, 'x', 'y'),
    lambda d: insper_histogram(d, 'x'),
    lambda d: insper_density(d, 'x'),
    lambda d: insper_heatmap(d),
])
def test_builders_reject_non_dataframes(builder):
    with pytest.raises(InvalidInputType):
        builder([[1, 2], [3, 4]])


class TestBarplot:

    def test_default_fill(self, mtcars, tmp_path):
        p = insper_barplot(mtcars, 'model', 'mpg')
        assert isinstance(p, Plot)
        assert isinstance(geoms(p)[0], p9.geom_col)
        assert geoms(p)[0].aes_params['fill'] == insper_col('reds1')
        assert isinstance(geoms(p)[1], p9.geom_hline)
        assert not isinstance(p.plot.coordinates, p9.coord_flip)
        render(p, tmp_path)

    def test_static_fill(self, mtcars):
        p = insper_barplot(mtcars, 'model', 'mpg', fill='steelblue', zero=False)
        assert len(geoms(p)) == 1
        assert geoms(p)[0].aes_params['fill'] == 'steelblue'

    def test_invalid_fill(self, mtcars):
        with pytest.raises(InvalidColorSpec):
            insper_barplot(mtcars, 'model', 'mpg', fill='cyl')

    def test_mapped_fill_is_discrete(self, mtcars, no_warnings, tmp_path):
        p = insper_barplot(mtcars, Expression('factor(am)'), 'mpg', fill=Column('cyl'))
        assert p.plot.mapping['fill'] == 'factor(cyl)'
        assert str(p.dataframe['factor(cyl)'].dtype) == 'category'
        assert has_scale(p, p9.scale_fill_manual)
        render(p, tmp_path)

    def test_palette_with_static_fill_warns(self, mtcars):
        with pytest.warns(PaletteIgnoredWarning):
            insper_barplot(mtcars, 'model', 'mpg', fill='blue', palette='bright')

    def test_horizontal(self, mtcars, tmp_path):
        p = insper_barplot(mtcars, 'mpg', 'model')
        assert isinstance(p.plot.coordinates, p9.coord_flip)
        assert p.plot.mapping['x'] == 'model'
        assert p.plot.mapping['y'] == 'mpg'
        render(p, tmp_path)

    def test_position(self, mtcars):
        with pytest.raises(InvalidParameterValue, match='must be one of'):
            insper_barplot(mtcars, 'model', 'mpg', position='sideways')
        p = insper_barplot(mtcars, 'gear', 'mpg', fill=Column('cyl'), position='stack')
        assert isinstance(p.plot.layers[0].position, p9.position_stack)

    def test_text_labels(self, mtcars, tmp_path):
        p = insper_barplot(mtcars, 'model', 'hp', text=True)
        assert isinstance(geoms(p)[-1], p9.geom_text)
        assert p.dataframe['label_text'].iloc[0] == '110.0'
        p = insper_barplot(mtcars, 'model', 'hp', text=True,
                           label_formatter=lambda values: ['%i hp' % v for v in values])
        assert p.dataframe['label_text'].iloc[0] == '110 hp'
        render(p, tmp_path)

    def test_more_layers_can_be_added(self, mtcars):
        p = insper_barplot(mtcars, 'model', 'mpg')
        n = len(p.plot.layers)
        result = p + p9.geom_point(color='black')
        assert result is p
        assert len(p.plot.layers) == n + 1
        with pytest.raises(TypeError):
            p + object()


class TestScatterplot:

    def test_defaults(self, mtcars, tmp_path):
        p = insper_scatterplot(mtcars, 'wt', 'mpg')
        point = geoms(p)[0]
        assert isinstance(point, p9.geom_point)
        assert point.aes_params['color'] == insper_col('teals1')
        assert point.aes_params['size'] == 2
        render(p, tmp_path)

    def test_continuous_color(self, mtcars, no_warnings, tmp_path):
        p = insper_scatterplot(mtcars, 'wt', 'mpg', color=Column('hp'))
        assert p.plot.layers[0].mapping['color'] == 'hp'
        assert has_scale(p, p9.scale_color_gradientn)
        render(p, tmp_path)

    def test_discrete_color(self, mtcars, no_warnings):
        p = insper_scatterplot(mtcars, 'wt', 'mpg', color=Expression('factor(cyl)'),
                               palette='bright')
        assert has_scale(p, p9.scale_color_manual)
        assert 'factor(cyl)' in p.dataframe.columns

    def test_fill_mapping_gets_outline(self, mtcars):
        p = insper_scatterplot(mtcars, 'wt', 'mpg', fill=Expression('factor(gear)'))
        assert geoms(p)[0].aes_params['color'] == insper_col('teals3')
        assert has_scale(p, p9.scale_fill_manual)

    def test_static_with_palette_warns(self, mtcars):
        with pytest.warns(PaletteIgnoredWarning):
            insper_scatterplot(mtcars, 'wt', 'mpg', color='red', palette='bright')

    def test_two_static_colors_warn_once(self, mtcars):
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            insper_scatterplot(mtcars, 'wt', 'mpg', color='blue', fill='red', palette='bright')
        ignored = [x for x in w if issubclass(x.category, PaletteIgnoredWarning)]
        assert len(ignored) == 1
        assert 'color' in str(ignored[0].message)

    def test_static_fill_only_warns_for_fill(self, mtcars):
        with pytest.warns(PaletteIgnoredWarning, match='fill is the static color'):
            insper_scatterplot(mtcars, 'wt', 'mpg', fill='red', palette='bright')

    def test_misspelled_column(self, mtcars):
        with pytest.raises(InvalidParameterValue, match='Could not find column wtt'):
            insper_scatterplot(mtcars, 'wtt', 'mpg')

    def test_one_mapped_aesthetic_silences_the_warning(self, mtcars, no_warnings):
        insper_scatterplot(mtcars, 'wt', 'mpg', color=Column('hp'), fill='white',
                           palette='teals')

    def test_smooth(self, mtcars, tmp_path):
        p = insper_scatterplot(mtcars, 'wt', 'mpg', add_smooth=True)
        assert isinstance(geoms(p)[1], p9.geom_smooth)
        assert geoms(p)[1].aes_params['color'] == insper_col('oranges1')
        with pytest.raises(InvalidParameterValue):
            insper_scatterplot(mtcars, 'wt', 'mpg', add_smooth=True, smooth_method='gam')
        render(p, tmp_path)

    def test_kwargs_override_point_params(self, mtcars):
        p = insper_scatterplot(mtcars, 'wt', 'mpg', size=4, shape='s')
        assert geoms(p)[0].aes_params['size'] == 4
        assert geoms(p)[0].aes_params['shape'] == 's'


class TestTimeseries:

    def test_single_line(self, sales, tmp_path):
        north = sales[sales['region'] == 'north']
        p = insper_timeseries(north, 'date', 'value', add_points=True)
        assert isinstance(geoms(p)[0], p9.geom_line)
        assert isinstance(geoms(p)[1], p9.geom_point)
        assert geoms(p)[0].aes_params['color'] == insper_col('teals1')
        render(p, tmp_path)

    def test_grouped(self, sales, no_warnings, tmp_path):
        p = insper_timeseries(sales, 'date', 'value', color=Column('region'))
        assert p.plot.mapping['color'] == 'region'
        assert has_scale(p, p9.scale_color_manual)
        render(p, tmp_path)


class TestArea:

    def test_single(self, sales, tmp_path):
        north = sales[sales['region'] == 'north']
        p = insper_area(north, 'date', 'value')
        assert isinstance(geoms(p)[0], p9.geom_area)
        assert geoms(p)[0].aes_params['fill'] == insper_col('teals1')
        assert geoms(p)[1].aes_params['color'] == insper_col('teals3')
        render(p, tmp_path)

    def test_without_line(self, sales):
        north = sales[sales['region'] == 'north']
        p = insper_area(north, 'date', 'value', add_line=False, zero=True)
        assert [type(g) for g in geoms(p)] == [p9.geom_area, p9.geom_hline]

    def test_stacked(self, sales, tmp_path):
        p = insper_area(sales, 'date', 'value', fill=Column('region'), stacked=True)
        assert isinstance(p.plot.layers[0].position, p9.position_stack)
        assert p.plot.layers[1].mapping['color'] == 'region'
        assert has_scale(p, p9.scale_fill_manual)
        assert has_scale(p, p9.scale_color_manual)
        render(p, tmp_path)


class TestBoxplotViolin:

    def test_boxplot(self, species, tmp_path):
        p = insper_boxplot(species, 'species', 'sepal_length')
        assert isinstance(geoms(p)[0], p9.geom_boxplot)
        assert geoms(p)[0].aes_params['fill'] == insper_col('teals2')
        # small groups get the raw points
        assert isinstance(geoms(p)[1], p9.geom_jitter)
        render(p, tmp_path)

    def test_no_jitter_for_large_groups(self):
        df = pd.DataFrame({'g': ['a', 'b'] * 150, 'v': np.arange(300)})
        p = insper_boxplot(df, 'g', 'v')
        assert len(geoms(p)) == 1
        p = insper_boxplot(df, 'g', 'v', add_jitter=True)
        assert len(geoms(p)) == 2

    def test_continuous_x_is_converted(self, mtcars, tmp_path):
        with pytest.warns(NonFactorAxisWarning):
            p = insper_boxplot(mtcars, 'cyl', 'mpg')
        assert p.plot.mapping['x'] == 'factor(cyl)'
        render(p, tmp_path)

    def test_boxplot_fill_mapping(self, mtcars, no_warnings):
        p = insper_boxplot(mtcars, Expression('factor(cyl)'), 'mpg', fill=Column('am'),
                           palette='main')
        assert p.plot.mapping['fill'] == 'factor(am)'
        assert has_scale(p, p9.scale_fill_manual)

    def test_violin(self, species, tmp_path):
        p = insper_violin(species, 'species', 'petal_length', show_boxplot=True,
                          show_points=True)
        assert [type(g) for g in geoms(p)] == [p9.geom_violin, p9.geom_boxplot, p9.geom_jitter]
        render(p, tmp_path)

    def test_violin_static_fill(self, species):
        p = insper_violin(species, 'species', 'petal_length', fill='#E4002B')
        assert geoms(p)[0].aes_params['fill'] == '#E4002B'
        with pytest.raises(InvalidColorSpec):
            insper_violin(species, 'species', 'petal_length', fill='species')


class TestHistogramDensity:

    def test_histogram_bins(self, species):
        p = insper_histogram(species, 'sepal_length')
        # sturges for 60 values
        assert p.plot.layers[0].stat.params['bins'] == 7
        assert geoms(p)[0].aes_params['fill'] == insper_col('reds1')
        p = insper_histogram(species, 'sepal_length', bins=12)
        assert p.plot.layers[0].stat.params['bins'] == 12

    def test_histogram_methods(self, species, tmp_path):
        for method in ('fd', 'scott'):
            p = insper_histogram(species, 'sepal_length', bin_method=method)
            render(p, tmp_path, method + '.png')
        with pytest.raises(MissingRequiredParameter):
            insper_histogram(species, 'sepal_length', bin_method='manual')
        with pytest.raises(InvalidParameterValue):
            insper_histogram(species, 'sepal_length', bin_method='rice')
        p = insper_histogram(species, 'sepal_length', bin_method='manual', bins=5)
        assert p.plot.layers[0].stat.params['bins'] == 5

    def test_histogram_groups(self, species, no_warnings, tmp_path):
        p = insper_histogram(species, 'sepal_length', fill=Column('species'))
        assert p.plot.mapping['fill'] == 'species'
        assert has_scale(p, p9.scale_fill_manual)
        render(p, tmp_path)

    def test_density(self, species, tmp_path):
        p = insper_density(species, 'sepal_length')
        assert isinstance(geoms(p)[0], p9.geom_density)
        assert geoms(p)[0].aes_params['fill'] == insper_col('teals1')
        assert geoms(p)[0].aes_params['color'] == insper_col('teals3')
        render(p, tmp_path)

    def test_density_groups(self, species, tmp_path):
        p = insper_density(species, 'sepal_length', fill=Column('species'), adjust=1.5)
        assert p.plot.mapping['color'] == 'species'
        assert has_scale(p, p9.scale_fill_manual)
        assert has_scale(p, p9.scale_color_manual)
        render(p, tmp_path)

    def test_density_palette_with_static_warns(self, species):
        with pytest.warns(PaletteIgnoredWarning):
            insper_density(species, 'sepal_length', fill='orange', palette='main')


class TestHeatmap:

    def test_matrix(self, tmp_path):
        m = np.arange(6).reshape(2, 3)
        p = insper_heatmap(m, show_values=True)
        df = p.dataframe
        assert list(df['Var1']) == ['1', '2', '1', '2', '1', '2']
        assert list(df['Var2']) == ['1', '1', '2', '2', '3', '3']
        assert list(df['value']) == [0, 3, 1, 4, 2, 5]
        assert isinstance(geoms(p)[0], p9.geom_tile)
        assert isinstance(geoms(p)[1], p9.geom_text)
        assert has_scale(p, p9.scale_fill_gradientn)
        render(p, tmp_path)

    def test_dataframe_keeps_order(self, mtcars):
        corr = mtcars[['mpg', 'hp', 'wt']].corr()
        p = insper_heatmap(corr)
        assert list(p.dataframe['Var1'].cat.categories) == ['mpg', 'hp', 'wt']
        assert p.dataframe['value'].iloc[0] == pytest.approx(1)

    def test_melted(self):
        df = pd.DataFrame({'Var1': ['a', 'b'], 'Var2': ['c', 'c'], 'value': [1.0, 2.0]})
        p = insper_heatmap(df)
        assert list(p.dataframe['value']) == [1.0, 2.0]

    def test_non_numeric(self, mtcars):
        with pytest.raises(InvalidInputType):
            insper_heatmap(mtcars)
        with pytest.raises(InvalidInputType):
            insper_heatmap(np.arange(3))
