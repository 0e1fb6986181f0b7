## Fibonacci numbers modulo m via exponentiation of the transformation matrix T = [[0, 1], [1, 1]].
# Since T^n = [[F(n-1), F(n)], [F(n), F(n+1)]], F(n) mod m is the row-0/column-1 entry of T^n mod m, i.e. the state
# vector [F(0), F(1)] = [0, 1] projected through row 0 of T^n. Exponentiation by squaring needs O(log n) 2-by-2 matrix
# multiplications.
# Two numeric domains share the algorithm:
#   u64: n and m below 2**64, matrices stored as numpy.uint64 (products are widened before reduction)
#   big: n and m of any size, matrices stored as python ints
## @author: Luke Li<zhongwei.li@mavs.uta.edu>
from typing import Optional

from .common import *

STATE = (0, 1)  # [F(0), F(1)]


class FibMod:
    def __init__(self):

        self._ring: Optional[ModRing] = None  # Z/mZ for the chosen domain
        self._T = None  # transformation matrix, reduced mod m

        self.exp_opt: Optional[str] = None  # exponentiation method configuration
        self.pow = None  # the method

    @classmethod
    def factory(cls, mod: int, domain: Optional[str] = None, exp_opt: Optional[str] = None) -> 'FibMod':
        inst = cls()
        inst.ring = make_ring(mod, domain)

        return inst.config(exp_opt)

    @property
    def N(self):
        return self._ring.modulus

    @property
    def domain(self):
        return self._ring.domain

    @property
    def ring(self):
        return self._ring

    @ring.setter
    def ring(self, value: ModRing):
        self._ring = value
        self._T = transformation(value)

    @property
    def T(self) -> 'ModMatrix':
        return ModMatrix(self._T, self._ring)

    def config(self, exp_opt: Optional[str] = None) -> 'FibMod':
        self.pow = get_exp(exp_opt)
        self.exp_opt = EXP_OPT if exp_opt is None else exp_opt
        return self

    def matrix_power(self, p) -> 'ModMatrix':
        if self.pow is None:
            raise ValueError("Exponentiation method not configured (call factory constructor first)")

        p = self._ring.check(p, 'p')
        if p == 0:
            return ModMatrix(self._ring.identity(), self._ring)

        pow_ = self.pow
        if pow_ is mat_pow_recursive and p.bit_length() > RECURSIVE_MAX_BITS:
            pow_ = mat_pow_binary  # too deep to recurse

        return ModMatrix(pow_(self._T, p, self._ring), self._ring)

    def __call__(self, n) -> int:
        n = self._ring.check(n, 'n')

        if n < 2:
            return n

        P = self.matrix_power(n)

        answer = 0
        for i in range(2):
            answer = (answer + P[0, i] * STATE[i]) % self.N

        return answer

    def pair(self, n):
        ''' (F(n) mod m, F(n+1) mod m), read off the second row of T^n '''
        P = self.matrix_power(n)
        return P[1, 0], P[1, 1]

    def __repr__(self):
        return f'FibMod(N={self.N}, domain={self.domain!r}, exp_opt={self.exp_opt!r})'


class ModMatrix:
    def __init__(self, values, ring: ModRing):
        self.ring = ring
        self._values = ring.matrix(values)
        self._values.setflags(write=False)

    def _check_ring(self, other: 'ModMatrix'):
        if self.ring != other.ring:
            raise ValueError(f'Cannot mix matrices over {self.ring!r} and {other.ring!r}')

    def __mul__(self, other):
        if isinstance(other, ModMatrix):
            self._check_ring(other)
            return ModMatrix(mat_mul_mod(self._values, other._values, self.ring), self.ring)
        return NotImplemented

    def __pow__(self, exponent):
        p = check_index(exponent, 'p')
        if p == 0:
            return ModMatrix(self.ring.identity(), self.ring)

        return ModMatrix(mat_pow_mod(self._values, p, self.ring), self.ring)

    def __getitem__(self, key):
        ''' m[i, j] is an int, a row or column key (m[0], m[:, 1]) gives a tuple of ints '''
        value = self._values[key]
        if isinstance(value, np.ndarray):
            return tuple(int(v) for v in value)
        return int(value)

    def __eq__(self, other):
        if isinstance(other, ModMatrix):
            return self.ring == other.ring and self.tolist() == other.tolist()
        return NotImplemented

    def __hash__(self):
        return hash((self.ring, tuple(map(tuple, self.tolist()))))

    def tolist(self):
        return [[int(v) for v in row] for row in self._values]

    def __repr__(self):
        return f'ModMatrix({self.tolist()}, {self.ring!r})'


@profiler(num_runs=PROFILE_RUNS, enabled=PROFILE)
def fib_with_mod(n, modulo) -> int:
    '''
        F(n) mod modulo for 0 <= n, modulo < 2**64; F(0) = 0, F(1) = 1
    :raises InvalidModulusError: modulo == 0
    :raises ValueError: n or modulo outside the 64-bit range
    '''
    return FibMod.factory(modulo, domain='u64')(n)


@profiler(num_runs=PROFILE_RUNS, enabled=PROFILE)
def fib_with_mod_big(n, modulo) -> int:
    '''
        F(n) mod modulo for arbitrary-precision n >= 0 and modulo >= 1
    :raises InvalidModulusError: modulo == 0
    '''
    return FibMod.factory(modulo, domain='big')(n)
