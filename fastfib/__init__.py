from .common import (InvalidModulusError, U64Ring, BigRing, make_ring, mat_mul_mod, mat_pow_mod, mat_pow_recursive,
                     mat_pow_binary, mat_pow_ladder)
from .fib import FibMod, ModMatrix, fib_with_mod, fib_with_mod_big

__version__ = '0.1.0'
