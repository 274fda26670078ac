## Copyright (c) 2009-2015, Florian Finkernagel. All rights reserved.

## Redistribution and use in source and binary forms, with or without
## modification, are permitted provided that the following conditions are
## met:

##     * Redistributions of source code must retain the above copyright
##       notice, this list of conditions and the following disclaimer.

##     * Redistributions in binary form must reproduce the above
##       copyright notice, this list of conditions and the following
##       disclaimer in the documentation and/or other materials provided
##       with the distribution.

##     * Neither the name of the Andrew Straw nor the names of its
##       contributors may be used to endorse or promote products derived
##       from this software without specific prior written permission.

## THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
## "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
## LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR
## A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT
## OWNER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL,
## SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
## LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE,
## DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY
## THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT
## (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
## OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.

"""Insper branded charts on top of plotnine.

Each insper_* builder takes a pandas.DataFrame and returns a Plot - a
plotnine ggplot plus the DataFrame it draws - with the Insper theme and
color scales applied. Add further plotnine components with +:

    p = insper_scatterplot(df, 'wt', 'mpg', color=Column('cyl'))
    p += plotnine.labs(title='Weight vs mileage', caption=insper_caption(source='mtcars'))
    save_insper_plot(p, 'scatter.png')

color / fill arguments are either a fixed color or a mapping:
    - a string is always a color ('red', '#E4002B'). A string that is not a
      color raises InvalidColorSpec - it is never treated as a column name.
    - Column('name') maps a column, Expression('factor(cyl)') maps computed
      values. Numeric values get a continuous scale, everything else a
      discrete one.
    - choosing a palette for a fixed color warns (PaletteIgnoredWarning).

The theme falls back to serif / sans-serif when EB Garamond and Barlow are
not installed. Pass InsperConfig(fonts_loaded=True) (or set
INSPERPLOT_FONTS_LOADED=1 and use InsperConfig.from_env()) if they are
registered in a way matplotlib's font manager does not see.
"""

from .aesthetics import (AestheticClassification, AestheticKind, Column, Expression, Literal,
                         classify_aesthetic, factor, is_continuous_values, is_valid_color)
from .colors import (INSPER_COLORS, INSPER_PALETTES, get_insper_colors, get_palette_colors,
                     insper_col, insper_pal, list_palettes, show_insper_colors,
                     show_insper_palette, show_palette_types)
from .config import InsperConfig
from .errors import (InsperPlotError, InvalidColorSpec, InvalidInputType, InvalidParameterValue,
                     MissingRequiredParameter, NonFactorAxisWarning, PaletteIgnoredWarning)
from .plot_nine import Plot
from .plots import (insper_area, insper_barplot, insper_boxplot, insper_density,
                    insper_heatmap, insper_histogram, insper_scatterplot, insper_timeseries,
                    insper_violin)
from .scales import (scale_color_insper, scale_color_insper_c, scale_color_insper_d,
                     scale_colour_insper, scale_colour_insper_c, scale_colour_insper_d,
                     scale_fill_insper, scale_fill_insper_c, scale_fill_insper_d)
from .themes import (check_insper_fonts, detect_font, theme_insper, theme_insper_minimal,
                     theme_insper_presentation, theme_insper_print)
from .utils import (format_brl, format_num_br, format_percent_br, insper_caption, label_br,
                    save_insper_plot)

__version__ = '1.0'
