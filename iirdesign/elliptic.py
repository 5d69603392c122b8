"""Elliptic (Cauer) filters: equiripple pass band and stop band."""

from __future__ import annotations

import itertools
import math

from iirdesign.rootfinder import RootFindingError
from iirdesign.transforms import (
    INFINITY,
    Layout,
    PoleFilter,
    band_pass_transform,
    band_stop_transform,
    high_pass_transform,
    low_pass_transform,
)

_MAX_FACTOR_ITERATIONS = 10000


def elliptic_k(k: float) -> float:
    """Complete elliptic integral of the first kind for modulus ``k``."""
    m = k * k
    a = 1.0
    b = math.sqrt(1 - m)
    c = a - b
    while True:
        previous = c
        c = (a - b) / 2
        mean = (a + b) / 2
        b = math.sqrt(a * b)
        a = mean
        if not c < previous:
            break
    return math.pi / (a + a)


def _jacobi_sn(u: float, k: float, k_prime: float) -> float:
    """Jacobi ``sn`` from its q-series, up to a constant factor."""
    q = math.exp(-math.pi * k_prime / k)
    v = math.pi * 0.5 * u / k
    total = 0.0
    for j in itertools.count():
        w = q ** (j + 0.5)
        total += w * math.sin((2 * j + 1) * v) / (1 - w * w)
        if w < 1e-7:
            return total
    raise AssertionError("unreachable")


class _Polynomials:
    """Scratch polynomials for factoring the elliptic characteristic function."""

    def __init__(self, num_poles: int, e: float, z1: list[float]) -> None:
        self.nin = num_poles % 2
        self.n2 = num_poles // 2
        self.m = self.nin + 2 * self.n2
        self.em = 2 * (self.m // 2)
        self.e = e
        self.z1 = z1
        size = 2 * self.m + 4
        self.a1 = [0.0] * size
        self.b1 = [0.0] * size
        self.c1 = [0.0] * size
        self.d1 = [0.0] * size
        self.s1 = [0.0] * size
        self.p = [0.0] * size
        self.q1 = [0.0] * size

    def _product(self, count: int) -> None:
        """Store the product of ``(z + s1[i])`` for i in 1..count in ``b1``."""
        a1, b1, s1 = self.a1, self.b1, self.s1
        b1[0] = s1[1]
        b1[1] = 1.0
        for j in range(2, count + 1):
            a1[0] = s1[j] * b1[0]
            for i in range(1, j):
                a1[i] = b1[i - 1] + s1[j] * b1[i]
            b1[:j] = a1[:j]
            b1[j] = 1.0

    def _square_term(self, i: int) -> None:
        ji = jf = 0
        if i < self.em + 2:
            ji, jf = 0, i
        if i > self.em:
            ji, jf = i - self.em, self.em
        a1 = self.a1
        self.c1[i] = 0.0
        for j in range(ji, jf + 1, 2):
            self.c1[i] += a1[j] * (a1[i - j] * 10.0 ** (self.m - i // 2))

    def _numerator(self) -> None:
        """Compute f(z) and its square."""
        s1, z1, nin, n2 = self.s1, self.z1, self.nin, self.n2
        i = 1
        if nin == 1:
            s1[i] = 1.0
            i += 1
        for i in range(i, nin + n2 + 1):
            s1[i] = s1[i + n2] = z1[i - nin]
        self._product(nin + 2 * n2)
        for i in range(0, self.em + 1, 2):
            self.a1[i] = self.e * self.b1[i]
        for i in range(0, 2 * self.em + 1, 2):
            self._square_term(i)

    def _denominator(self) -> None:
        """Compute q(z)."""
        s1, z1, nin, n2 = self.s1, self.z1, self.nin, self.n2
        for i in range(1, nin + 1):
            s1[i] = -10.0
        for i in range(nin + 1, nin + n2 + 1):
            s1[i] = -10 * z1[i - nin] * z1[i - nin]
        for i in range(nin + n2 + 1, nin + 2 * n2 + 1):
            s1[i] = s1[i - n2]
        self._product(self.m)
        sign = -1 if self.nin == 1 else 1
        for i in range(0, 2 * self.m + 1, 2):
            self.d1[i] = sign * self.b1[i // 2]

    def _factor(self, t: int) -> float:
        """Split ``a1`` into quadratic factors; return the real root term, if any."""
        a1, b1, c1 = self.a1, self.b1, self.c1
        for i in range(1, t + 1):
            a1[i] /= a1[0]
        a1[0] = b1[0] = c1[0] = 1.0
        index = 0
        while t > 2:
            p0 = q0 = 0.0
            index += 1
            for _ in range(_MAX_FACTOR_ITERATIONS):
                b1[1] = a1[1] - p0
                c1[1] = b1[1] - p0
                for i in range(2, t + 1):
                    b1[i] = a1[i] - p0 * b1[i - 1] - q0 * b1[i - 2]
                for i in range(2, t):
                    c1[i] = b1[i] - p0 * c1[i - 1] - q0 * c1[i - 2]
                x1, x2, x3 = t - 1, t - 2, t - 3
                x4 = c1[x2] * c1[x2] + c1[x3] * (b1[x1] - c1[x1])
                if x4 == 0:
                    x4 = 1e-3
                ddp = (b1[x1] * c1[x2] - b1[t] * c1[x3]) / x4
                p0 += ddp
                dq = (b1[t] * c1[x2] - b1[x1] * (c1[x1] - b1[x1])) / x4
                q0 += dq
                if abs(ddp + dq) < 1e-6:
                    break
            else:
                raise RootFindingError("elliptic factorisation did not converge")
            self.p[index] = p0
            self.q1[index] = q0
            a1[1] = a1[1] - p0
            t -= 2
            for i in range(2, t + 1):
                a1[i] -= p0 * a1[i - 1] + q0 * a1[i - 2]

        if t == 2:
            index += 1
            self.p[index] = a1[1]
            self.q1[index] = a1[2]
        if t == 1:
            return -a1[1]
        return 0.0

    def factor_characteristic(self) -> float:
        self._numerator()
        self._denominator()
        m = self.m
        if m > self.em:
            self.c1[2 * m] = 0.0
        for i in range(0, 2 * m + 1, 2):
            self.a1[m - i // 2] = self.c1[i] + self.d1[i]
        return self._factor(m)


class AnalogLowPass(Layout):
    """Analog elliptic low pass prototype.

    ``ripple_db`` is the pass band ripple; ``rolloff`` widens or narrows the
    transition band.
    """

    def __init__(self) -> None:
        super().__init__()
        self._key = None
        self.set_normal(0, 1)

    def design(self, num_poles: int, ripple_db: float, rolloff: float) -> None:
        key = (num_poles, ripple_db, rolloff)
        if self._key == key:
            return
        if num_poles < 1:
            raise ValueError(f"num_poles must be at least 1, got {num_poles}")
        if ripple_db <= 0:
            raise ValueError("pass band ripple must be positive")

        n = num_poles
        e2 = 10.0 ** (ripple_db / 10) - 1
        xi = 5 * math.exp(rolloff - 1) + 1
        k = elliptic_k(1 / xi)
        k_prime = elliptic_k(math.sqrt(1 - 1 / (xi * xi)))

        ni = 0 if n % 2 else 1
        n2 = n // 2
        f = [0.0] * (n2 + 1)
        zeros = []
        for i in range(1, n2 + 1):
            sn = _jacobi_sn((2 * i - ni) * k / n, k, k_prime) * 2 * math.pi / k
            f[i] = 1 / sn
            zeros.append(1 / sn)

        z1 = [0.0] * (n2 + 1)
        for i in range(1, n2 + 1):
            x = f[n2 + 1 - i]
            z1[i] = math.sqrt(1 - 1 / (x * x))

        fb = 1 / (2 * math.pi)
        fbb = fb * fb
        tp = 2 * math.pi

        polys = _Polynomials(n, math.sqrt(e2), z1)
        a0 = polys.factor_characteristic()

        self.reset()
        for r in range(1, polys.em // 2 + 1):
            p = polys.p[r] / 10
            q = polys.q1[r] / 100
            d = 1 + p + q
            b = (1 + p / 2) * fbb / d
            zf = fb / math.pow(d, 0.25)
            zq = 1 / math.sqrt(abs(2 * (1 - b / (zf * zf))))
            zw = tp * zf
            pole = complex(
                -0.5 * zw / zq,
                0.5 * math.sqrt(abs(zw * zw / (zq * zq) - 4 * zw * zw)),
            )
            self.add_pole_zero_conjugate_pairs(pole, complex(0, zeros[r - 1]))

        if a0 != 0:
            self.add(-math.sqrt(fbb / (0.1 * a0 - 1)) * tp, INFINITY)

        self.set_normal(0, 1.0 if n % 2 else 10.0 ** (-ripple_db / 20.0))
        self._key = key


class LowPass(PoleFilter):
    analog_prototype = AnalogLowPass

    def setup(
        self,
        order: int,
        sample_rate: float,
        cutoff_frequency: float,
        ripple_db: float,
        rolloff: float,
    ) -> None:
        self._check_order(order)
        self.analog_proto.design(order, ripple_db, rolloff)
        low_pass_transform(cutoff_frequency / sample_rate, self.digital_proto, self.analog_proto)
        self.set_layout(self.digital_proto)


class HighPass(PoleFilter):
    analog_prototype = AnalogLowPass

    def setup(
        self,
        order: int,
        sample_rate: float,
        cutoff_frequency: float,
        ripple_db: float,
        rolloff: float,
    ) -> None:
        self._check_order(order)
        self.analog_proto.design(order, ripple_db, rolloff)
        high_pass_transform(cutoff_frequency / sample_rate, self.digital_proto, self.analog_proto)
        self.set_layout(self.digital_proto)


class BandPass(PoleFilter):
    analog_prototype = AnalogLowPass
    poles_per_order = 2

    def setup(
        self,
        order: int,
        sample_rate: float,
        center_frequency: float,
        width_frequency: float,
        ripple_db: float,
        rolloff: float,
    ) -> None:
        self._check_order(order)
        self.analog_proto.design(order, ripple_db, rolloff)
        band_pass_transform(
            center_frequency / sample_rate,
            width_frequency / sample_rate,
            self.digital_proto,
            self.analog_proto,
        )
        self.set_layout(self.digital_proto)


class BandStop(PoleFilter):
    analog_prototype = AnalogLowPass
    poles_per_order = 2

    def setup(
        self,
        order: int,
        sample_rate: float,
        center_frequency: float,
        width_frequency: float,
        ripple_db: float,
        rolloff: float,
    ) -> None:
        self._check_order(order)
        self.analog_proto.design(order, ripple_db, rolloff)
        band_stop_transform(
            center_frequency / sample_rate,
            width_frequency / sample_rate,
            self.digital_proto,
            self.analog_proto,
        )
        self.set_layout(self.digital_proto)