from mulmod.arith import P, InvalidArgument, mul_mod

__all__ = ["P", "InvalidArgument", "mul_mod"]
