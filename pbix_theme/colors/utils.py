"""
Color utilities: parse and normalize hex strings, convert to RGB/HSL,
WCAG relative luminance and contrast ratio. Pure and stateless.
"""
import math
import re

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class InvalidColorError(ValueError):
    """Value could not be parsed as a #rgb / #rrggbb hex color."""
    def __init__(self, value: object):
        super().__init__(f"Invalid hex color: {value!r}")
        self.value = value


def parse_hex(value: object) -> tuple[int, int, int]:
    """
    Parse a hex color into (R, G, B) 0–255.
    Accepts #rrggbb or #rgb, leading '#' optional, any case.
    Shorthand expands by digit duplication (#abc -> #aabbcc).
    """
    if not isinstance(value, str):
        raise InvalidColorError(value)
    m = _HEX_RE.match(value.strip())
    if not m:
        raise InvalidColorError(value)
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def is_valid_hex(value: object) -> bool:
    try:
        parse_hex(value)
        return True
    except InvalidColorError:
        return False


def rgb_to_hex(r: float, g: float, b: float, *, upper: bool = False) -> str:
    """(R, G, B) 0–255 to '#rrggbb'. Channels are rounded and clamped."""
    ri, gi, bi = (max(0, min(255, int(round(c)))) for c in (r, g, b))
    out = f"#{ri:02x}{gi:02x}{bi:02x}"
    return out.upper() if upper else out


def normalize_hex(value: object, *, upper: bool = False, default: str | None = None) -> str:
    """
    Canonical 7-char hex for value. Unparseable input returns default when given,
    otherwise raises InvalidColorError.
    """
    try:
        r, g, b = parse_hex(value)
    except InvalidColorError:
        if default is not None:
            return default
        raise
    return rgb_to_hex(r, g, b, upper=upper)


def hex_to_rgb(value: object) -> tuple[int, int, int]:
    """Alias of parse_hex kept for callers that think in conversions."""
    return parse_hex(value)


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    (R, G, B) 0–255 to (hue degrees, saturation 0–1, lightness 0–1).
    Achromatic colors have hue NaN.
    """
    rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
    cmax = max(rf, gf, bf)
    cmin = min(rf, gf, bf)
    delta = cmax - cmin
    lightness = (cmax + cmin) / 2.0
    if delta == 0:
        return float("nan"), 0.0, lightness
    if lightness < 0.5:
        sat = delta / (cmax + cmin)
    else:
        sat = delta / (2.0 - cmax - cmin)
    if cmax == rf:
        hue = 60.0 * (((gf - bf) / delta) % 6)
    elif cmax == gf:
        hue = 60.0 * ((bf - rf) / delta + 2)
    else:
        hue = 60.0 * ((rf - gf) / delta + 4)
    return hue % 360.0, sat, lightness


def hex_to_hsl(value: object) -> tuple[float, float, float]:
    """HSL of a hex color; NaN hue (grays) is reported as 0."""
    h, s, l = rgb_to_hsl(*parse_hex(value))
    return (0.0 if math.isnan(h) else h), s, l


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """(hue degrees, s 0–1, l 0–1) to (R, G, B) 0–255."""
    h = (0.0 if math.isnan(h) else h) % 360.0
    c = (1.0 - abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - abs((h / 60.0) % 2 - 1.0))
    m = l - c / 2.0
    sector = int(h // 60)
    rp, gp, bp = [
        (c, x, 0.0),
        (x, c, 0.0),
        (0.0, c, x),
        (0.0, x, c),
        (x, 0.0, c),
        (c, 0.0, x),
    ][sector % 6]
    return (
        int(round((rp + m) * 255)),
        int(round((gp + m) * 255)),
        int(round((bp + m) * 255)),
    )


def _channel_to_linear(c: float) -> float:
    c = c / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(value: object) -> float:
    """WCAG relative luminance (0 black .. 1 white)."""
    r, g, b = parse_hex(value)
    return (
        0.2126 * _channel_to_linear(r)
        + 0.7152 * _channel_to_linear(g)
        + 0.0722 * _channel_to_linear(b)
    )


def contrast_ratio(color_a: object, color_b: object) -> float:
    """WCAG contrast ratio between two colors, 1.0–21.0."""
    la = relative_luminance(color_a)
    lb = relative_luminance(color_b)
    lighter, darker = max(la, lb), min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


def is_light_color(value: object) -> bool:
    return relative_luminance(value) > 0.5
