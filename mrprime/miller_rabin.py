# mrprime/miller_rabin.py
# Deterministic Miller–Rabin for 64-bit candidates
# - Overflow-free multiply-mod (Python int is the double-width intermediate)
# - Square-and-multiply modular exponentiation
# - Single-base strong-probable-prime witness check
# - Fixed witness bases {2,3,5,7,11,13,17}, no random sampling

from __future__ import annotations
from typing import Tuple

PRIME = "PRIME"
COMPOSITE = "COMPOSITE"

# Fixed, ordered witness bases
WITNESS_BASES: Tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17)

# Largest candidate accepted by is_prime (unsigned 64-bit)
MAX_CANDIDATE = 0xFFFFFFFFFFFFFFFF

# Smallest strong pseudoprime to every base in WITNESS_BASES (10670053 × 32010157).
# Composites below this are always rejected; primes are always accepted.
DETERMINISTIC_LIMIT = 341_550_071_728_321

# ---------- Arithmetic ----------

def mulmod(a: int, b: int, m: int) -> int:
    """(a*b) % m, exact for 64-bit operands. Caller guarantees m > 0."""
    return (a * b) % m

def modexp(a: int, b: int, m: int) -> int:
    """(a^b) % m by binary exponentiation on top of mulmod."""
    result = 1
    while b > 0:
        if b & 1:
            result = mulmod(result, a, m)
        a = mulmod(a, a, m)
        b >>= 1
    return result

# ---------- Miller–Rabin ----------

def decompose(n: int) -> Tuple[int, int]:
    """Write n-1 = d * 2^s with d odd. Returns (d, s); n must be odd and >= 3."""
    d = n - 1
    s = 0
    while (d & 1) == 0:
        d >>= 1
        s += 1
    return d, s

def check_composite(a: int, d: int, n: int, s: int) -> bool:
    """
    One strong Miller–Rabin round for base a, with n-1 = d*2^s.
    True means a proves n composite; False means n passes for this base.
    """
    x = modexp(a, d, n)
    if x == 1 or x == n - 1:
        return False
    for _ in range(s - 1):
        x = mulmod(x, x, n)
        if x == n - 1:
            return False
        if x == 1:
            # nontrivial square root of 1, impossible mod a prime
            return True
    return True

def is_prime(n: int) -> bool:
    """
    Miller–Rabin over WITNESS_BASES.
    n < 2 is never prime; 2 is the only even prime.
    Raises ValueError for n above MAX_CANDIDATE.
    """
    if n > MAX_CANDIDATE:
        raise ValueError("n must be a 64-bit integer (n <= 2^64-1)")
    if n < 2: return False
    if n % 2 == 0: return n == 2

    d, s = decompose(n)
    for a in WITNESS_BASES:
        if a >= n:
            continue
        if check_composite(a, d, n, s):
            return False
    return True

def classify(n: int) -> str:
    """Verdict string for n: PRIME or COMPOSITE."""
    return PRIME if is_prime(n) else COMPOSITE

def describe(n: int) -> dict:
    info = {
        "n": n,
        "bits": n.bit_length(),
        "verdict": classify(n),
        "deterministic": n < DETERMINISTIC_LIMIT,
    }
    info["is_prime"] = info["verdict"] == PRIME
    return info
