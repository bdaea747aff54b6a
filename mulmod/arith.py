# 2^64 - 1, so 2^64 = 1 (mod P)
P = 2**64 - 1


class InvalidArgument(ValueError):
    pass


def check_operand(name, x):
    # bool is an int subclass but not a meaningful operand
    if isinstance(x, bool) or not isinstance(x, int):
        raise InvalidArgument(f"{name} must be an integer, got {type(x).__name__}")
    if x < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {x}")


def mul_mod(a, b, p=P):
    """Compute (a mod p) * (b mod p) mod p.

    Operands are reduced first so the product stays below p^2. Python ints
    are arbitrary precision, so the 128-bit intermediate never overflows.
    """
    check_operand("a", a)
    check_operand("b", b)
    check_operand("p", p)
    if p < 2:
        raise InvalidArgument(f"modulus must be at least 2, got {p}")

    r = ((a % p) * (b % p)) % p
    assert 0 <= r < p
    return r
