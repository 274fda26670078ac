import io
import pandas as pd
import matplotlib
matplotlib.use('agg')
import plotnine as p9

from .aesthetics import Column, Expression, evaluate
from .errors import InvalidInputType


class Plot:
    """A plotnine ggplot together with the (prepared) DataFrame it draws.

    plot + component adds any plotnine component (geoms, scales, labs, themes...)
    in place and returns the Plot, so the chart builders' results can be
    extended just like a ggplot object.
    """

    def __init__(self, dataframe):
        self.dataframe = self._prep_dataframe(dataframe)
        self.ipython_plot_width = 600
        self.ipython_plot_height = 600
        self.plot = p9.ggplot(self.dataframe)

    def __add__(self, other):
        if not hasattr(other, '__radd__'):
            raise TypeError("Can not add %r to a Plot - expected a plotnine component" % (other,))
        self.plot = self.plot + other
        return self

    def _prep_dataframe(self, df):
        """make sure it's a pandas dataframe without multi index columns,
        and turn a meaningful index into a column"""
        if not isinstance(df, pd.DataFrame):
            raise InvalidInputType(
                "data must be a pandas.DataFrame, you supplied an object of class %s. Convert it with pandas.DataFrame(...)"
                % (type(df).__name__, ))
        df = df.copy()
        if isinstance(df.columns, pd.MultiIndex):
            df.columns = [' '.join(str(x) for x in col).strip() for col in df.columns.values]
        if not isinstance(df.index, pd.RangeIndex):
            df = df.reset_index()
        return df

    def column(self, value, name=None):
        """Return the name of a dataframe column holding value.

        Column names (str or Column) are returned as is, expressions are
        evaluated and stored under their own text, array like values are
        stored under name.
        """
        if isinstance(value, str):
            value = Column(value)
        if isinstance(value, Column):
            evaluate(value, self.dataframe)  # raises on unknown columns
            return value.name
        if isinstance(value, Expression):
            new_name = value.expr_str
            if new_name in self.dataframe.columns:
                return new_name
        else:
            new_name = name if name is not None else 'value'
        values = evaluate(value, self.dataframe)
        if isinstance(values, (pd.Series, pd.Categorical)):
            values = pd.Series(values).reset_index(drop=True).values
        self.dataframe[new_name] = values
        self.plot.data = self.dataframe
        return new_name

    def values(self, value):
        """The data a mapping refers to"""
        return evaluate(value, self.dataframe)

    def set_mapping(self, **mapping):
        """Plot level aesthetics (column names), inherited by all layers"""
        self.plot.mapping = p9.aes(**mapping)

    def _image(self, format, width, height):
        """Image bytes of the plot, width and height in pixels at 72 dpi"""
        buf = io.BytesIO()
        self.plot.save(buf, format=format, width=width / 72., height=height / 72.,
                       dpi=72, verbose=False)
        return buf.getvalue()

    def _repr_png_(self, width=None, height=None):
        """Notebook display as png"""
        if width is None:
            width, height = self.ipython_plot_width, self.ipython_plot_height
        return self._image('png', width, height)

    def _repr_svg_(self, width=None, height=None):
        """Notebook display as svg, at half the png size"""
        if width is None:
            width = self.ipython_plot_width / 2.
            height = self.ipython_plot_height / 2.
        svg = self._image('svg', width, height).decode('utf-8')
        # jupyter sizes isolated svg iframes by their height attribute
        svg = svg.replace("viewBox=", "height='%i' viewBox=" % (height, ), 1)
        return svg, {"isolated": True}

    def render(self, output_filename, width=8, height=6, dpi=300, **kwargs):
        """Save to a file - the format follows the extension (png, pdf, svg...)"""
        self.plot.save(filename=output_filename, width=width, height=height,
                       dpi=dpi, verbose=False, **kwargs)
        return output_filename
