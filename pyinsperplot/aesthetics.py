"""Decide what a color / fill argument means.

An aesthetic argument is either omitted (None), a literal color (a plain
string or Literal), or a column mapping (Column, Expression, or array like
values). Strings are never guessed to be column names - if you have a
column called 'red', Column('red') maps it while 'red' paints everything red.
"""
import re
import warnings
from dataclasses import dataclass
from enum import Enum

import numpy as np  # available to Expression()s
import pandas as pd
from matplotlib import colors as mcolors
from plotnine.exceptions import PlotnineError
from plotnine.mapping import Environment
from plotnine.mapping.evaluation import evaluate as evaluate_aes

from .errors import InvalidColorSpec, InvalidParameterValue, PaletteIgnoredWarning

_hex_color = re.compile(r'#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})')


class Column:
    """Map an aesthetic to a dataframe column"""

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return 'Column(%r)' % (self.name, )

    def __eq__(self, other):
        return isinstance(other, Column) and other.name == self.name

    def __hash__(self):
        return hash(('Column', self.name))


class Expression:
    """Map an aesthetic to a computed expression, e.g. Expression('factor(cyl)')"""

    def __init__(self, expr_str):
        self.expr_str = expr_str

    def __repr__(self):
        return 'Expression(%r)' % (self.expr_str, )

    def __eq__(self, other):
        return isinstance(other, Expression) and other.expr_str == self.expr_str

    def __hash__(self):
        return hash(('Expression', self.expr_str))


class Literal:
    """An explicit fixed value. Plain strings are treated the same way."""

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return 'Literal(%r)' % (self.value, )

    def __eq__(self, other):
        return isinstance(other, Literal) and other.value == self.value

    def __hash__(self):
        return hash(('Literal', self.value))


class AestheticKind(Enum):
    ABSENT = 'absent'
    STATIC_COLOR = 'static_color'
    COLUMN_MAPPING = 'column_mapping'


@dataclass(frozen=True)
class AestheticClassification:
    kind: AestheticKind
    literal_value: object = None
    is_continuous: bool = False
    mapping: object = None

    @classmethod
    def absent(cls):
        return cls(AestheticKind.ABSENT)

    @classmethod
    def static_color(cls, value):
        return cls(AestheticKind.STATIC_COLOR, literal_value=value)

    @classmethod
    def column_mapping(cls, mapping, is_continuous=False):
        return cls(AestheticKind.COLUMN_MAPPING,
                   is_continuous=bool(is_continuous),
                   mapping=mapping)

    @property
    def is_absent(self):
        return self.kind is AestheticKind.ABSENT

    @property
    def is_static(self):
        return self.kind is AestheticKind.STATIC_COLOR

    @property
    def is_mapping(self):
        return self.kind is AestheticKind.COLUMN_MAPPING


def factor(values):
    """Turn values into a categorical, like R's factor()"""
    return pd.Series(pd.Categorical(values))


def is_valid_color(value):
    """Is value a single hex color (#RGB, #RRGGBB, #RRGGBBAA) or a named color?

    Hex forms are checked first - matplotlib happily treats strings such as
    '0.5' as grey levels, so anything starting with '#' is decided by the
    hex pattern alone.
    """
    if not isinstance(value, str) or not value:
        return False
    if value.startswith('#'):
        return _hex_color.fullmatch(value) is not None
    return value.lower() in mcolors.get_named_colors_mapping()


def is_continuous_values(values):
    """Numeric, non boolean, non categorical values get a continuous scale"""
    if isinstance(values, pd.Categorical):
        return False
    if not isinstance(values, pd.Series):
        values = pd.Series(values)
    dtype = values.dtype
    if isinstance(dtype, pd.CategoricalDtype):
        return False
    if pd.api.types.is_bool_dtype(dtype):
        return False
    return pd.api.types.is_numeric_dtype(dtype)


def evaluate(value, data):
    """Resolve a mapping against data and return the values.

    Strings and Column() name a column. Expressions are evaluated by
    plotnine's aes evaluation (columns, factor(), reorder() and np).
    """
    if isinstance(value, str):
        value = Column(value)
    if isinstance(value, Column):
        if value.name not in data.columns:
            raise InvalidParameterValue(
                "Could not find column %s, available: %s" %
                (value.name, list(data.columns)))
        return data[value.name]
    if isinstance(value, Expression):
        try:
            evaled = evaluate_aes({'value': value.expr_str}, data, Environment.capture(0))
        except PlotnineError as e:
            raise InvalidParameterValue(
                "Could not evaluate %s: %s" % (value, e)) from e
        return evaled['value']
    return value


def classify_aesthetic(value, data=None, param_name=None):
    """Classify an aesthetic argument as absent, static color or column mapping.

    Raises InvalidColorSpec for a string that is not a recognized color.
    """
    if value is None:
        return AestheticClassification.absent()
    if isinstance(value, (str, Literal)):
        if isinstance(value, Literal):
            value = value.value
        if is_valid_color(value):
            return AestheticClassification.static_color(value)
        raise InvalidColorSpec(value, param_name)
    if data is None:
        return AestheticClassification.column_mapping(value)
    return AestheticClassification.column_mapping(
        value, is_continuous_values(evaluate(value, data)))


def warn_palette_ignored(classification, palette, param_name):
    """Warn when a palette was chosen for an aesthetic that is a fixed color"""
    if palette is not None and classification.is_static:
        warnings.warn(
            "palette %r is ignored: %s is the static color %r. "
            "Pass a Column(...) as %s to use a palette." %
            (palette, param_name, classification.literal_value, param_name),
            PaletteIgnoredWarning,
            stacklevel=3)
