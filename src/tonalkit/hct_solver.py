"""
Solve (hue, chroma, tone) back into an sRGB color.

HCT has no closed-form inverse. The solver first tries a few Newton steps on
CAM16 lightness J, which succeeds for most in-gamut requests. When that fails
(the requested chroma is out of gamut), it walks the plane of constant
luminance Y inside the linear RGB cube: first to the polygon edge that
brackets the target hue, then bisects along the sRGB critical planes until
the hue is pinned down. The result is always in gamut; chroma that cannot
be reached is silently reduced.
"""

import math
from typing import Optional

from .cam16 import Cam16, ViewingConditions
from .color import argb_from_linrgb, argb_from_lstar, linearized, y_from_lstar
from .mathutil import matrix_multiply, sanitize_degrees, signum

# Type alias
LinRGB = tuple[float, float, float]

SCALED_DISCOUNT_FROM_LINRGB = (
    (0.001200833568784504, 0.002389694492170889, 0.0002795742885861124),
    (0.0005891086651375999, 0.0029785502573438758, 0.0003270666104008398),
    (0.00010146692491640572, 0.0005364214359186694, 0.0032979401770712076),
)

LINRGB_FROM_SCALED_DISCOUNT = (
    (1373.2198709594231, -1100.4251190754821, -7.278681089101213),
    (-271.815969077903, 559.6580465940733, -32.46047482791194),
    (1.9622899599665666, -57.173814538844006, 308.7233197812385),
)

Y_FROM_LINRGB = (0.2126, 0.7152, 0.0722)

# Linear values where an sRGB channel steps from i to i + 1
CRITICAL_PLANES = tuple(linearized(i + 0.5) for i in range(255))

_NO_VERTEX = (-1.0, -1.0, -1.0)


def _sanitize_radians(angle: float) -> float:
    return (angle + math.pi * 8) % (math.pi * 2)


def _true_delinearized(rgb_component: float) -> float:
    """Delinearize without rounding; result in [0, 255]."""
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        delinearized = normalized * 12.92
    else:
        delinearized = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    return delinearized * 255.0


def _chromatic_adaptation(component: float) -> float:
    af = abs(component) ** 0.42
    return signum(component) * 400.0 * af / (af + 27.13)


def _inverse_chromatic_adaptation(adapted: float) -> float:
    adapted_abs = abs(adapted)
    base = max(0.0, 27.13 * adapted_abs / (400.0 - adapted_abs))
    return signum(adapted) * base ** (1.0 / 0.42)


def _hue_of(linrgb: LinRGB) -> float:
    """CAM16 hue of a linear RGB color, in radians."""
    scaled_discount = matrix_multiply(linrgb, SCALED_DISCOUNT_FROM_LINRGB)
    r_a = _chromatic_adaptation(scaled_discount[0])
    g_a = _chromatic_adaptation(scaled_discount[1])
    b_a = _chromatic_adaptation(scaled_discount[2])
    a = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
    b = (r_a + g_a - 2.0 * b_a) / 9.0
    return math.atan2(b, a)


def _are_in_cyclic_order(a: float, b: float, c: float) -> bool:
    """True if b lies on the counter-clockwise arc from a to c."""
    delta_ab = _sanitize_radians(b - a)
    delta_ac = _sanitize_radians(c - a)
    return delta_ab < delta_ac


def _intercept(source: float, mid: float, target: float) -> float:
    """Fraction of the way from source to target at which mid lies."""
    return (mid - source) / (target - source)


def _lerp_point(source: LinRGB, t: float, target: LinRGB) -> LinRGB:
    return (
        source[0] + (target[0] - source[0]) * t,
        source[1] + (target[1] - source[1]) * t,
        source[2] + (target[2] - source[2]) * t,
    )


def _set_coordinate(source: LinRGB, coordinate: float, target: LinRGB, axis: int) -> LinRGB:
    """Point on segment source-target whose given axis equals coordinate."""
    t = _intercept(source[axis], coordinate, target[axis])
    return _lerp_point(source, t, target)


def _is_bounded(x: float) -> bool:
    return 0.0 <= x <= 100.0


def _nth_vertex(y: float, n: int) -> LinRGB:
    """
    Intersect the plane of luminance y with the nth edge of the RGB cube.

    The cube has 12 edges; returns (-1, -1, -1) if the plane misses edge n.
    """
    k_r, k_g, k_b = Y_FROM_LINRGB
    coord_a = 0.0 if n % 4 <= 1 else 100.0
    coord_b = 0.0 if n % 2 == 0 else 100.0
    if n < 4:
        g = coord_a
        b = coord_b
        r = (y - g * k_g - b * k_b) / k_r
        if _is_bounded(r):
            return (r, g, b)
        return _NO_VERTEX
    elif n < 8:
        b = coord_a
        r = coord_b
        g = (y - r * k_r - b * k_b) / k_g
        if _is_bounded(g):
            return (r, g, b)
        return _NO_VERTEX
    r = coord_a
    g = coord_b
    b = (y - r * k_r - g * k_g) / k_b
    if _is_bounded(b):
        return (r, g, b)
    return _NO_VERTEX


def _bisect_to_segment(y: float, target_hue: float) -> tuple[LinRGB, LinRGB]:
    """Find the edge of the constant-y polygon whose hue range holds target_hue."""
    left = _NO_VERTEX
    right = left
    left_hue = 0.0
    right_hue = 0.0
    initialized = False
    uncut = True
    for n in range(12):
        mid = _nth_vertex(y, n)
        if mid[0] < 0:
            continue
        mid_hue = _hue_of(mid)
        if not initialized:
            left = mid
            right = mid
            left_hue = mid_hue
            right_hue = mid_hue
            initialized = True
            continue
        if uncut or _are_in_cyclic_order(left_hue, mid_hue, right_hue):
            uncut = False
            if _are_in_cyclic_order(left_hue, target_hue, mid_hue):
                right = mid
                right_hue = mid_hue
            else:
                left = mid
                left_hue = mid_hue
    return left, right


def _midpoint(a: LinRGB, b: LinRGB) -> LinRGB:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2, (a[2] + b[2]) / 2)


def _critical_plane_below(x: float) -> int:
    return math.floor(x - 0.5)


def _critical_plane_above(x: float) -> int:
    return math.ceil(x - 0.5)


def _bisect_to_limit(y: float, target_hue: float) -> LinRGB:
    """Linear RGB on the gamut boundary with luminance y and the target hue."""
    left, right = _bisect_to_segment(y, target_hue)
    left_hue = _hue_of(left)
    for axis in range(3):
        if left[axis] == right[axis]:
            continue
        if left[axis] < right[axis]:
            l_plane = _critical_plane_below(_true_delinearized(left[axis]))
            r_plane = _critical_plane_above(_true_delinearized(right[axis]))
        else:
            l_plane = _critical_plane_above(_true_delinearized(left[axis]))
            r_plane = _critical_plane_below(_true_delinearized(right[axis]))
        for _ in range(8):
            if abs(r_plane - l_plane) <= 1:
                break
            m_plane = (l_plane + r_plane) // 2
            mid_plane_coordinate = CRITICAL_PLANES[m_plane]
            mid = _set_coordinate(left, mid_plane_coordinate, right, axis)
            mid_hue = _hue_of(mid)
            if _are_in_cyclic_order(left_hue, target_hue, mid_hue):
                right = mid
                r_plane = m_plane
            else:
                left = mid
                left_hue = mid_hue
                l_plane = m_plane
    return _midpoint(left, right)


def _find_result_by_j(hue_radians: float, chroma: float, y: float) -> Optional[int]:
    """
    Newton iteration on J for a color of the given hue, chroma and luminance.

    Returns None when the result leaves the sRGB gamut.
    """
    # Initial estimate of J from Y
    j = math.sqrt(y) * 11.0
    vc = ViewingConditions.DEFAULT
    t_inner_coeff = 1 / (1.64 - 0.29 ** vc.n) ** 0.73
    e_hue = 0.25 * (math.cos(hue_radians + 2.0) + 3.8)
    p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
    h_sin = math.sin(hue_radians)
    h_cos = math.cos(hue_radians)
    for iteration_round in range(5):
        j_normalized = j / 100.0
        if chroma == 0.0 or j == 0.0:
            alpha = 0.0
        else:
            alpha = chroma / math.sqrt(j_normalized)
        t = (alpha * t_inner_coeff) ** (1.0 / 0.9)
        ac = vc.aw * j_normalized ** (1.0 / vc.c / vc.z)
        p2 = ac / vc.nbb
        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0
        scaled = (
            _inverse_chromatic_adaptation(r_a),
            _inverse_chromatic_adaptation(g_a),
            _inverse_chromatic_adaptation(b_a),
        )
        linrgb = matrix_multiply(scaled, LINRGB_FROM_SCALED_DISCOUNT)
        if linrgb[0] < 0 or linrgb[1] < 0 or linrgb[2] < 0:
            return None
        k_r, k_g, k_b = Y_FROM_LINRGB
        fnj = k_r * linrgb[0] + k_g * linrgb[1] + k_b * linrgb[2]
        if fnj <= 0:
            return None
        if iteration_round == 4 or abs(fnj - y) < 0.002:
            if linrgb[0] > 100.01 or linrgb[1] > 100.01 or linrgb[2] > 100.01:
                return None
            return argb_from_linrgb(linrgb)
        # 2 * fn(j) / j approximates fn'(j)
        j = j - (fnj - y) * j / (2 * fnj)
    return None


def solve_to_argb(hue_degrees: float, chroma: float, lstar: float) -> int:
    """
    Find the sRGB color closest to the requested HCT.

    Args:
        hue_degrees: CAM16 hue; any value, wrapped into [0, 360)
        chroma: Requested CAM16 chroma; lowered if out of gamut
        lstar: L* in [0, 100]

    Returns:
        ARGB color whose hue and tone match the request
    """
    if chroma < 0.0001 or lstar < 0.0001 or lstar > 99.9999:
        return argb_from_lstar(lstar)
    hue_degrees = sanitize_degrees(hue_degrees)
    hue_radians = hue_degrees / 180.0 * math.pi
    y = y_from_lstar(lstar)
    exact_answer = _find_result_by_j(hue_radians, chroma, y)
    if exact_answer is not None:
        return exact_answer
    linrgb = _bisect_to_limit(y, hue_radians)
    return argb_from_linrgb(linrgb)


def solve_to_cam(hue_degrees: float, chroma: float, lstar: float) -> Cam16:
    return Cam16.from_argb(solve_to_argb(hue_degrees, chroma, lstar))
