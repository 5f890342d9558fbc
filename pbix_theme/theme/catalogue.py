"""
Fixed visual-style catalogue: visual type -> card -> property -> color source.
Single source of truth for what color goes where in an assembled theme.

A source is either a semantic role name (see tokens.REPORT_TOKEN_DEFAULTS) or one of
the palette surface keys "background" / "foreground".
"""

# Global defaults applied when a visual has no explicit entry
GLOBAL_STYLES: dict[str, dict[str, str]] = {
    "title": {"color": "primary"},
    "label": {"color": "neutral"},
}

VISUAL_STYLE_MAP: dict[str, dict[str, dict[str, str]]] = {
    # charts
    "barChart": {
        "dataPoint": {"fill": "accent"},
        "categoryAxis": {"labelColor": "neutral"},
        "valueAxis": {"labelColor": "neutral"},
    },
    "columnChart": {
        "dataPoint": {"fill": "primary"},
        "categoryAxis": {"labelColor": "neutral"},
    },
    "lineChart": {
        "lines": {"stroke": "primary"},
        "markers": {"fill": "accent"},
    },
    "areaChart": {
        "dataPoint": {"fill": "accent"},
        "lines": {"stroke": "primary"},
    },
    "comboChart": {
        "primarySeries": {"fill": "primary"},
        "secondarySeries": {"fill": "accent"},
    },
    "scatterChart": {
        "bubbles": {"fill": "accent"},
        "marker": {"outline": "neutral"},
    },
    "pieChart": {
        "slices": {"fill": "accent"},
    },
    "donutChart": {
        "slices": {"fill": "accent"},
    },
    # cards and tables
    "card": {
        "title": {"color": "primary"},
        "label": {"color": "neutral"},
    },
    "multiRowCard": {
        "title": {"color": "primary"},
        "label": {"color": "neutral"},
    },
    "table": {
        "header": {"background": "primary"},
        "rows": {"rowStripeColor": "neutral"},
        "grid": {"color": "neutral"},
    },
    "matrix": {
        "header": {"background": "primary"},
        "rows": {"rowStripeColor": "neutral"},
    },
    "slicer": {
        "selection": {"fill": "accent"},
        "header": {"labelColor": "neutral"},
    },
    "timeline": {
        "item": {"fill": "accent"},
        "range": {"fill": "primary"},
    },
    # fallback container settings
    "visualContainer": {
        "background": {"color": "background"},
        "foreground": {"color": "foreground"},
    },
}

VISUAL_TYPES: tuple[str, ...] = tuple(VISUAL_STYLE_MAP)
