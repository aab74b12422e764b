from .miller_rabin import (
    COMPOSITE,
    DETERMINISTIC_LIMIT,
    MAX_CANDIDATE,
    PRIME,
    WITNESS_BASES,
    check_composite,
    classify,
    decompose,
    describe,
    is_prime,
    modexp,
    mulmod,
)
__all__ = [
    "COMPOSITE", "DETERMINISTIC_LIMIT", "MAX_CANDIDATE", "PRIME", "WITNESS_BASES",
    "check_composite", "classify", "decompose", "describe", "is_prime", "modexp", "mulmod",
]
