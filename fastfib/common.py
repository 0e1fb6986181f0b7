## Common arithmetics over Z/mZ for 2-by-2 matrices
## @author: Luke Li<zhongwei.li@mavs.uta.edu>
import numpy as np
from sympy.utilities.misc import as_int

from .utils import *
from .typing import ModRing

# Convenient lambdas
ith_bit = lambda n, i: (n >> i) & 1  # get the i-th bit of nunmber n
fits = lambda n, w: n >> w == 0  # check if non-negative n fits in w bits

# Constants
U64_BITS = 64
U64_MAX = (1 << U64_BITS) - 1
DOMAINS = ('u64', 'big')
EXP_OPTS = ('recursive', 'binary', 'ladder')
RECURSIVE_MAX_BITS = 256  # recursion depth of mat_pow_recursive is up to 2 * p.bit_length()

# Configuration of the default exponentiation/domain
config = load_config()
EXP_OPT = config.get('DEFAULT_EXP_OPT', 'binary')
DOMAIN = config.get('DEFAULT_DOMAIN', 'u64')
PROFILE = bool(config.get('PROFILE', False))
PROFILE_RUNS = int(config.get('PROFILE_RUNS', 100))


class InvalidModulusError(ValueError):
    pass


def check_index(value, name='n', bits=None):
    '''
        Normalise an index-like value (python/numpy/sympy integers) into a plain int
    :param value:
    :param name: used in the error message
    :param bits: max bit width if the domain is bounded
    :return: int(value)
    '''
    value = as_int(value, strict=True)  # floats, strings and bools raise ValueError here

    if value < 0:
        raise ValueError(f'{name} must be non-negative, got {value}')

    if bits is not None and not fits(value, bits):
        raise ValueError(f'{name}={value} does not fit in {bits} bits')

    return value


def check_modulus(value, bits=None):
    value = as_int(value, strict=True)

    if value <= 0:
        raise InvalidModulusError(f'The modulus must be a positive integer, got {value}')

    if bits is not None and not fits(value, bits):
        raise ValueError(f'The modulus {value} does not fit in {bits} bits')

    return value


class U64Ring(ModRing):
    '''
        Z/mZ with entries stored as numpy.uint64; m <= 2**64 - 1.
        Entries are always < m, but the product of two of them needs up to 128 bits, so mul_add widens to python ints
        before multiplying and only narrows the reduced sum back.
    '''

    def __init__(self, modulus):
        super().__init__(check_modulus(modulus, U64_BITS))

    @property
    def dtype(self):
        return np.uint64

    @property
    def bits(self):
        return U64_BITS

    @property
    def domain(self):
        return 'u64'

    def check(self, value, name='value'):
        return check_index(value, name, U64_BITS)

    def narrow(self, value):
        return np.uint64(value)

    def mul_add(self, acc, a, b):
        return self.narrow((int(acc) + int(a) * int(b)) % self.modulus)

    def matrix(self, rows):
        return np.array([[self.narrow(int(v) % self.modulus) for v in row] for row in rows], dtype=np.uint64)


class BigRing(ModRing):
    ''' Z/mZ with arbitrary-precision python int entries (numpy object arrays) '''

    def __init__(self, modulus):
        super().__init__(check_modulus(modulus))

    @property
    def dtype(self):
        return object

    @property
    def bits(self):
        return None

    @property
    def domain(self):
        return 'big'

    def check(self, value, name='value'):
        return check_index(value, name)

    def narrow(self, value):
        return int(value)

    def mul_add(self, acc, a, b):
        return (acc + a * b) % self.modulus

    def matrix(self, rows):
        return np.array([[int(v) % self.modulus for v in row] for row in rows], dtype=object)


def make_ring(mod, domain=None) -> ModRing:
    domain = DOMAIN if domain is None else domain

    if domain == 'u64':
        return U64Ring(mod)
    elif domain == 'big':
        return BigRing(mod)
    else:
        raise ValueError(f'Unknown domain: {domain}, choose from {DOMAINS}')


def transformation(ring):
    ''' T = [[0, 1], [1, 1]], so that T^p = [[F(p-1), F(p)], [F(p), F(p+1)]] '''
    return ring.matrix([[0, 1], [1, 1]])


def mat_mul_mod(a, b, ring):
    '''
        C = A * B mod m for 2-by-2 matrices, entries of A and B must be in [0, m)
    :return: a new matrix, a and b are left untouched
    '''
    c = ring.zeros()
    for i in range(2):
        for j in range(2):
            acc = c[i, j]
            for k in range(2):
                acc = ring.mul_add(acc, a[i, k], b[k, j])
            c[i, j] = acc

    return c


def mat_pow_recursive(t, p, ring):
    '''
        T^p mod m by peeling one factor off odd exponents and squaring T^(p/2) for even ones.
        Recursion depth is up to 2*log2(p), so p is limited to RECURSIVE_MAX_BITS bits.
    '''
    if p < 1:
        raise ValueError(f'Recursive exponentiation needs p >= 1, got {p}')

    if p.bit_length() > RECURSIVE_MAX_BITS:
        raise ValueError(f'Recursive exponentiation supports p of at most {RECURSIVE_MAX_BITS} bits, '
                         f'got {p.bit_length()} bits (use the binary or ladder method)')

    if p == 1:
        return t.copy()

    if ith_bit(p, 0):
        return mat_mul_mod(t, mat_pow_recursive(t, p - 1, ring), ring)

    x = mat_pow_recursive(t, p >> 1, ring)
    return mat_mul_mod(x, x, ring)


def mat_pow_binary(t, p, ring):
    ''' Right-to-left square-and-multiply '''
    result, base = ring.identity(), t
    while p:
        if ith_bit(p, 0):
            result = mat_mul_mod(result, base, ring)

        p >>= 1
        if p:
            base = mat_mul_mod(base, base, ring)

    return result


def mat_pow_ladder(t, p, ring):
    '''
        Montgomery ladder, invariant: r1 = r0 * t
        Every bit costs one multiplication and one squaring, whatever its value.
    '''
    r0, r1 = ring.identity(), t.copy()
    for i in reversed(range(p.bit_length())):
        if ith_bit(p, i):
            r0, r1 = mat_mul_mod(r0, r1, ring), mat_mul_mod(r1, r1, ring)
        else:
            r0, r1 = mat_mul_mod(r0, r0, ring), mat_mul_mod(r0, r1, ring)

    return r0


def get_exp(exp_opt=None):
    exp_opt = EXP_OPT if exp_opt is None else exp_opt

    if exp_opt == 'recursive':
        return mat_pow_recursive
    elif exp_opt == 'binary':
        return mat_pow_binary
    elif exp_opt == 'ladder':
        return mat_pow_ladder
    else:
        raise ValueError(f'Unknown exponentiation method: {exp_opt}, choose from {EXP_OPTS}')


def mat_pow_mod(t, p, ring, exp_opt=None):
    ''' T^p mod m with the chosen (or configured) exponentiation method '''
    exp = get_exp(exp_opt)
    return exp(t, check_index(p, 'p'), ring)
