"""Exceptions and warnings raised by pyinsperplot.

All errors are raised where they are detected and surfaced unmodified.
Advisory conditions are reported through the warnings module, so they can be
filtered or escalated with the usual warnings filters.
"""


class InsperPlotError(Exception):
    """Base class for all pyinsperplot errors"""


class InvalidInputType(InsperPlotError, TypeError):
    """Something other than a DataFrame was passed where one was required"""


class InvalidColorSpec(InsperPlotError, ValueError):
    """A string in a static color position is neither hex nor a named color"""

    def __init__(self, value, param_name=None):
        self.value = value
        self.param_name = param_name
        if param_name:
            msg = "%r passed as %s is not a valid color. Use a hex code (#RRGGBB) or a named color, or Column(%r) to map a column" % (
                value, param_name, value)
        else:
            msg = "%r is not a valid color" % (value, )
        InsperPlotError.__init__(self, msg)


class InvalidParameterValue(InsperPlotError, ValueError):
    """An enumerated parameter received a value outside its allowed set"""


class MissingRequiredParameter(InsperPlotError, ValueError):
    """A parameter required by the selected mode was omitted"""


class PaletteIgnoredWarning(UserWarning):
    """A palette was chosen, but nothing is mapped to a column"""


class NonFactorAxisWarning(UserWarning):
    """A categorical axis received continuous values"""
