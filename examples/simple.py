from fastfib import FibMod, fib_with_mod, fib_with_mod_big

if __name__ == '__main__':

    # 64-bit domain
    assert fib_with_mod(100, 1_000_000_000) == 261_915_075
    assert fib_with_mod(1_000_000_000_000_000, 1_000_000) == 546_875

    # products of two entries close to 2**64 - 1 need 128 bits
    m = (1 << 64) - 1
    assert fib_with_mod(1_955_995_342_096_516, m) == 2_886_946_313_980_141_317

    # arbitrary precision
    n, p = 1 << 100, (1 << 127) - 1
    f = fib_with_mod_big(n, p)
    assert f == fib_with_mod_big(n, p)
    print(f'F(2**100) mod (2**127 - 1) = {f}')

    # same modulus, different exponentiation methods
    F0 = FibMod.factory(mod=p, domain='big', exp_opt='recursive')
    F1 = FibMod.factory(mod=p, domain='big', exp_opt='ladder')
    assert F0(n) == F1(n) == f

    # T^n = [[F(n-1), F(n)], [F(n), F(n+1)]]
    T = F1.T
    P = T ** 10
    assert P.tolist() == [[34, 55], [55, 89]]
    assert F1.pair(10) == (55, 89)

    try:
        fib_with_mod(10, 0)
    except ValueError as e:
        print(f'rejected: {e}')

    print(f'succeeded!')
