from mulmod.arith import P, mul_mod

DIVISOR = 7
DIV_RESULT = 5270498306774157605


def report(div_result, divisor, p=P):
    recovered = mul_mod(div_result, divisor, p)
    return [
        f"p = {p}",
        "",
        "Given:",
        f"  divisor = {divisor}",
        f"   = {div_result}",
        "",
        f"Recovered dividend: {recovered}",
        "",
        f"Verification: divResult × divisor mod p = {recovered}",
    ]


def main():
    for line in report(DIV_RESULT, DIVISOR):
        print(line)


if __name__ == "__main__":
    main()
