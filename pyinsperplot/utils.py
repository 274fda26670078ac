"""Captions, Brazilian number formatting and saving"""
import datetime
import logging
import math
import warnings

import numpy as np

from .config import resolve_config
from .errors import InvalidParameterValue
from .plot_nine import Plot

logger = logging.getLogger(__name__)

_months = {
    'pt': ['janeiro', 'fevereiro', 'março', 'abril', 'maio', 'junho', 'julho',
           'agosto', 'setembro', 'outubro', 'novembro', 'dezembro'],
    'en': ['January', 'February', 'March', 'April', 'May', 'June', 'July',
           'August', 'September', 'October', 'November', 'December'],
}
_source_prefix = {'pt': 'Fonte:', 'en': 'Source:'}


def insper_caption(text=None, source=None, date=None, lang="pt"):
    """Caption in the form 'text | Fonte: source | Insper | month year'.

    Missing parts are left out. date must be a datetime.date (or datetime),
    anything else is replaced by today, with a warning.
    """
    if lang not in _source_prefix:
        raise InvalidParameterValue("lang must be one of 'pt', 'en', was %r" % (lang, ))
    parts = []
    if text is not None:
        parts.append(text)
    if source is not None:
        parts.append("%s %s" % (_source_prefix[lang], source))
    if date is not None:
        if not isinstance(date, datetime.date):
            warnings.warn("Invalid date supplied. Using the current day.")
            date = datetime.date.today()
        parts.append("Insper | %s %i" % (_months[lang][date.month - 1], date.year))
    return " | ".join(parts)


def _is_na(value):
    return value is None or (isinstance(value, float) and math.isnan(value))


def _format_br(value, digits):
    if _is_na(value):
        return 'NA'
    text = "{:,.{}f}".format(value, digits)
    return text.replace(',', '_').replace('.', ',').replace('_', '.')


def _vectorize(func, x):
    if np.ndim(x) == 0:
        return func(x)
    return [func(v) for v in x]


def format_num_br(x, digits=None):
    """1234.5 -> '1.234,5' (digits decimals, whole numbers if None).
    Scalars give a str, sequences a list"""
    return _vectorize(lambda v: _format_br(v, 0 if digits is None else digits), x)


def format_brl(x, symbol=True, digits=2):
    """Brazilian Real: 1234.56 -> 'R$ 1.234,56'"""
    def fmt(v):
        text = _format_br(v, digits)
        return "R$ " + text if symbol and not _is_na(v) else text
    return _vectorize(fmt, x)


def format_percent_br(x, digits=1):
    """A proportion as a percentage: 0.1234 -> '12,3%'"""
    def fmt(v):
        if _is_na(v):
            return 'NA'
        return _format_br(v * 100, digits) + '%'
    return _vectorize(fmt, x)


def label_br(digits=None):
    """A plotnine labels= callable using format_num_br"""
    def labels(breaks):
        return format_num_br(list(breaks), digits)
    return labels


def save_insper_plot(plot, filename, width=None, height=None, dpi=None, config=None, **kwargs):
    """Save a Plot (or plotnine ggplot) on a white background.

    height defaults to 4.3 inches and width to height * 1.618, dpi to 300
    (see InsperConfig). The format follows the file extension.
    Further kwargs go to plotnine's save / matplotlib's savefig.
    """
    config = resolve_config(config)
    if height is None:
        height = config.save_height
    if width is None:
        width = height * config.aspect_ratio
    if dpi is None:
        dpi = config.save_dpi
    if isinstance(plot, Plot):
        plot = plot.plot
    kwargs.setdefault('facecolor', 'white')
    plot.save(filename=str(filename), width=width, height=height, dpi=dpi, verbose=False, **kwargs)
    logger.info("Plot saved: %s", filename)
    return filename
