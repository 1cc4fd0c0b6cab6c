"""
CAM16 color appearance model.

CAM16 predicts how a color looks to a viewer under given viewing conditions
(lighting, background, surround). Hue and chroma of HCT come from here; its
J*/a*/b* coordinates form the CAM16-UCS space used for color distances.

Reference: Li et al., "Comprehensive color solutions: CAM16, CAT16, and
CAM16-UCS" (2017).
"""

import math

from .color import (
    XYZ,
    argb_from_xyz,
    linearized,
    red_from_argb,
    green_from_argb,
    blue_from_argb,
    white_point_d65,
    y_from_lstar,
)
from .mathutil import clamp_double, lerp, signum

# Transforms XYZ to the cone-like CAM16 RGB space
XYZ_TO_CAM16RGB = (
    (0.401288, 0.650173, -0.051461),
    (-0.250268, 1.204414, 0.045854),
    (-0.002079, 0.048952, 0.953127),
)

CAM16RGB_TO_XYZ = (
    (1.86206786, -1.01125463, 0.14918677),
    (0.38752654, 0.62144744, -0.00897398),
    (-0.01584150, -0.03412294, 1.04996444),
)


class ViewingConditions:
    """
    Environment in which a color is observed.

    Values are precomputed once so that per-color conversions stay cheap.
    Build instances with make() or default_with_background_lstar(); the
    constructor takes the already-derived parameters.
    """
    __slots__ = ('n', 'aw', 'nbb', 'ncb', 'c', 'nc', 'rgb_d', 'fl', 'fl_root', 'z')

    DEFAULT: "ViewingConditions"

    def __init__(
        self,
        n: float,
        aw: float,
        nbb: float,
        ncb: float,
        c: float,
        nc: float,
        rgb_d: tuple[float, float, float],
        fl: float,
        fl_root: float,
        z: float,
    ):
        self.n = n
        self.aw = aw
        self.nbb = nbb
        self.ncb = ncb
        self.c = c
        self.nc = nc
        self.rgb_d = rgb_d
        self.fl = fl
        self.fl_root = fl_root
        self.z = z

    @classmethod
    def make(
        cls,
        white_point: XYZ,
        adapting_luminance: float,
        background_lstar: float,
        surround: float,
        discounting_illuminant: bool,
    ) -> "ViewingConditions":
        """
        Derive viewing conditions from physical parameters.

        Args:
            white_point: XYZ coordinates of white, e.g. the D65 white point
            adapting_luminance: Light strength in lux
            background_lstar: Average L* of the surroundings; clamped to >= 0.1
            surround: 0 is pitch dark (movie theater), 1 dim, 2 average
            discounting_illuminant: Whether the eye fully adapts to the light source
        """
        background_lstar = max(0.1, background_lstar)
        matrix = XYZ_TO_CAM16RGB
        r_w = white_point[0] * matrix[0][0] + white_point[1] * matrix[0][1] + white_point[2] * matrix[0][2]
        g_w = white_point[0] * matrix[1][0] + white_point[1] * matrix[1][1] + white_point[2] * matrix[1][2]
        b_w = white_point[0] * matrix[2][0] + white_point[1] * matrix[2][1] + white_point[2] * matrix[2][2]

        f = 0.8 + surround / 10.0
        if f >= 0.9:
            c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
        else:
            c = lerp(0.525, 0.59, (f - 0.8) * 10.0)

        if discounting_illuminant:
            d = 1.0
        else:
            d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
        d = clamp_double(0.0, 1.0, d)
        nc = f

        rgb_d = (
            d * (100.0 / r_w) + 1.0 - d,
            d * (100.0 / g_w) + 1.0 - d,
            d * (100.0 / b_w) + 1.0 - d,
        )

        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k * k * k * k
        k4f = 1.0 - k4
        fl = k4 * adapting_luminance + 0.1 * k4f * k4f * math.cbrt(5.0 * adapting_luminance)

        n = y_from_lstar(background_lstar) / white_point[1]
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / n ** 0.2
        ncb = nbb

        rgb_a_factors = (
            (fl * rgb_d[0] * r_w / 100.0) ** 0.42,
            (fl * rgb_d[1] * g_w / 100.0) ** 0.42,
            (fl * rgb_d[2] * b_w / 100.0) ** 0.42,
        )
        rgb_a = [400.0 * factor / (factor + 27.13) for factor in rgb_a_factors]
        aw = (2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb

        return cls(n, aw, nbb, ncb, c, nc, rgb_d, fl, fl ** 0.25, z)

    @classmethod
    def default_with_background_lstar(cls, lstar: float) -> "ViewingConditions":
        """sRGB-like viewing conditions over a background of the given L*."""
        return cls.make(
            white_point_d65(),
            200.0 / math.pi * y_from_lstar(50.0) / 100.0,
            lstar,
            2.0,
            False,
        )


ViewingConditions.DEFAULT = ViewingConditions.default_with_background_lstar(50.0)


class Cam16:
    """
    A color in the CAM16 appearance model.

    hue, chroma and j (lightness) are the commonly used dimensions; q, m and
    s are brightness, colorfulness and saturation. jstar, astar and bstar
    are the CAM16-UCS coordinates.
    """
    __slots__ = ('hue', 'chroma', 'j', 'q', 'm', 's', 'jstar', 'astar', 'bstar')

    def __init__(
        self,
        hue: float,
        chroma: float,
        j: float,
        q: float,
        m: float,
        s: float,
        jstar: float,
        astar: float,
        bstar: float,
    ):
        self.hue = hue
        self.chroma = chroma
        self.j = j
        self.q = q
        self.m = m
        self.s = s
        self.jstar = jstar
        self.astar = astar
        self.bstar = bstar

    def __repr__(self) -> str:
        return f"Cam16(hue={self.hue:.3f}, chroma={self.chroma:.3f}, j={self.j:.3f})"

    def distance(self, other: "Cam16") -> float:
        """CAM16-UCS color difference; values below ~1 are imperceptible."""
        d_j = self.jstar - other.jstar
        d_a = self.astar - other.astar
        d_b = self.bstar - other.bstar
        d_e_prime = math.sqrt(d_j * d_j + d_a * d_a + d_b * d_b)
        return 1.41 * d_e_prime ** 0.63

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_argb(cls, argb: int) -> "Cam16":
        return cls.from_argb_in_viewing_conditions(argb, ViewingConditions.DEFAULT)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Cam16":
        return cls.from_argb((255 << 24) | (r << 16) | (g << 8) | b)

    @classmethod
    def from_argb_in_viewing_conditions(cls, argb: int, vc: ViewingConditions) -> "Cam16":
        red_l = linearized(red_from_argb(argb))
        green_l = linearized(green_from_argb(argb))
        blue_l = linearized(blue_from_argb(argb))
        x = 0.41233895 * red_l + 0.35762064 * green_l + 0.18051042 * blue_l
        y = 0.2126 * red_l + 0.7152 * green_l + 0.0722 * blue_l
        z = 0.01932141 * red_l + 0.11916382 * green_l + 0.95034478 * blue_l
        return cls.from_xyz_in_viewing_conditions(x, y, z, vc)

    @classmethod
    def from_xyz_in_viewing_conditions(
        cls, x: float, y: float, z: float, vc: ViewingConditions
    ) -> "Cam16":
        matrix = XYZ_TO_CAM16RGB
        r_t = x * matrix[0][0] + y * matrix[0][1] + z * matrix[0][2]
        g_t = x * matrix[1][0] + y * matrix[1][1] + z * matrix[1][2]
        b_t = x * matrix[2][0] + y * matrix[2][1] + z * matrix[2][2]

        # Chromatic adaptation
        r_d = vc.rgb_d[0] * r_t
        g_d = vc.rgb_d[1] * g_t
        b_d = vc.rgb_d[2] * b_t

        r_af = (vc.fl * abs(r_d) / 100.0) ** 0.42
        g_af = (vc.fl * abs(g_d) / 100.0) ** 0.42
        b_af = (vc.fl * abs(b_d) / 100.0) ** 0.42
        r_a = signum(r_d) * 400.0 * r_af / (r_af + 27.13)
        g_a = signum(g_d) * 400.0 * g_af / (g_af + 27.13)
        b_a = signum(b_d) * 400.0 * b_af / (b_af + 27.13)

        # Redness-greenness and yellowness-blueness
        a = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
        b = (r_a + g_a - 2.0 * b_a) / 9.0

        u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
        p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

        atan_degrees = math.degrees(math.atan2(b, a))
        if atan_degrees < 0:
            hue = atan_degrees + 360.0
        elif atan_degrees >= 360:
            hue = atan_degrees - 360.0
        else:
            hue = atan_degrees
        hue_radians = math.radians(hue)

        ac = p2 * vc.nbb
        j = 100.0 * (ac / vc.aw) ** (vc.c * vc.z)
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root

        hue_prime = hue + 360 if hue < 20.14 else hue
        e_hue = 0.25 * (math.cos(math.radians(hue_prime) + 2.0) + 3.8)
        p1 = 50000.0 / 13.0 * e_hue * vc.nc * vc.ncb
        t = p1 * math.hypot(a, b) / (u + 0.305)
        alpha = (1.64 - 0.29 ** vc.n) ** 0.73 * t ** 0.9

        c = alpha * math.sqrt(j / 100.0)
        m = c * vc.fl_root
        s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))

        jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
        mstar = 1.0 / 0.0228 * math.log1p(0.0228 * m)
        astar = mstar * math.cos(hue_radians)
        bstar = mstar * math.sin(hue_radians)
        return cls(hue, c, j, q, m, s, jstar, astar, bstar)

    @classmethod
    def from_jch(cls, j: float, c: float, h: float) -> "Cam16":
        return cls.from_jch_in_viewing_conditions(j, c, h, ViewingConditions.DEFAULT)

    @classmethod
    def from_jch_in_viewing_conditions(
        cls, j: float, c: float, h: float, vc: ViewingConditions
    ) -> "Cam16":
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root
        m = c * vc.fl_root
        alpha = c / math.sqrt(j / 100.0)
        s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))

        hue_radians = math.radians(h)
        jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
        mstar = 1.0 / 0.0228 * math.log1p(0.0228 * m)
        astar = mstar * math.cos(hue_radians)
        bstar = mstar * math.sin(hue_radians)
        return cls(h, c, j, q, m, s, jstar, astar, bstar)

    @classmethod
    def from_ucs(cls, jstar: float, astar: float, bstar: float) -> "Cam16":
        return cls.from_ucs_in_viewing_conditions(jstar, astar, bstar, ViewingConditions.DEFAULT)

    @classmethod
    def from_ucs_in_viewing_conditions(
        cls, jstar: float, astar: float, bstar: float, vc: ViewingConditions
    ) -> "Cam16":
        m = math.hypot(astar, bstar)
        m2 = math.expm1(m * 0.0228) / 0.0228
        c = m2 / vc.fl_root
        h = math.degrees(math.atan2(bstar, astar))
        if h < 0.0:
            h += 360.0
        j = jstar / (1.0 - (jstar - 100.0) * 0.007)
        return cls.from_jch_in_viewing_conditions(j, c, h, vc)

    # -------------------------------------------------------------------------
    # Conversion back to XYZ / ARGB
    # -------------------------------------------------------------------------

    def to_argb(self) -> int:
        return self.viewed(ViewingConditions.DEFAULT)

    def viewed(self, vc: ViewingConditions) -> int:
        """ARGB of this color when seen under the given conditions."""
        x, y, z = self.xyz_in_viewing_conditions(vc)
        return argb_from_xyz(x, y, z)

    def xyz_in_viewing_conditions(self, vc: ViewingConditions) -> XYZ:
        if self.chroma == 0.0 or self.j == 0.0:
            alpha = 0.0
        else:
            alpha = self.chroma / math.sqrt(self.j / 100.0)

        t = (alpha / (1.64 - 0.29 ** vc.n) ** 0.73) ** (1.0 / 0.9)
        h_rad = math.radians(self.hue)

        e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
        ac = vc.aw * (self.j / 100.0) ** (1.0 / vc.c / vc.z)
        p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
        p2 = ac / vc.nbb

        h_sin = math.sin(h_rad)
        h_cos = math.cos(h_rad)

        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        r_c_base = max(0.0, (27.13 * abs(r_a)) / (400.0 - abs(r_a)))
        r_c = signum(r_a) * (100.0 / vc.fl) * r_c_base ** (1.0 / 0.42)
        g_c_base = max(0.0, (27.13 * abs(g_a)) / (400.0 - abs(g_a)))
        g_c = signum(g_a) * (100.0 / vc.fl) * g_c_base ** (1.0 / 0.42)
        b_c_base = max(0.0, (27.13 * abs(b_a)) / (400.0 - abs(b_a)))
        b_c = signum(b_a) * (100.0 / vc.fl) * b_c_base ** (1.0 / 0.42)

        r_f = r_c / vc.rgb_d[0]
        g_f = g_c / vc.rgb_d[1]
        b_f = b_c / vc.rgb_d[2]

        matrix = CAM16RGB_TO_XYZ
        x = r_f * matrix[0][0] + g_f * matrix[0][1] + b_f * matrix[0][2]
        y = r_f * matrix[1][0] + g_f * matrix[1][1] + b_f * matrix[1][2]
        z = r_f * matrix[2][0] + g_f * matrix[2][1] + b_f * matrix[2][2]
        return (x, y, z)
