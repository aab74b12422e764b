import os, sys, csv, random, argparse
from concurrent.futures import ThreadPoolExecutor, as_completed
import requests
from sympy import nextprime, isprime
from mrprime import is_prime, DETERMINISTIC_LIMIT

BASE_URL = (os.getenv("BASE_URL", "http://127.0.0.1:8080") or "http://127.0.0.1:8080").rstrip("/")
TIMEOUT = float(os.getenv("TIMEOUT", "15"))  # seconds

# Carmichael numbers and strong pseudoprimes that fool smaller witness sets
FIXTURES = [
    2, 3, 17, 97, 7919, 999999937, 2147483647,
    21, 100, 9409, 999999999, 3 * 9999999967,
    561, 1105, 1729, 2465, 2821, 15841, 29341,
    2047, 1373653, 25326001, 3215031751, 2152302898747, 3474749660383,
]

def http_isprime(n: int) -> bool:
    r = requests.get(f"{BASE_URL}/api/isprime", params={"n": str(n)}, timeout=TIMEOUT,
                     headers={"User-Agent": "mrprime-accuracy-suite"})
    r.raise_for_status()
    return bool(r.json()["is_prime"])

def local_isprime(n: int) -> bool:
    return is_prime(n)

def rand_k_digit_prime(rng: random.Random, k: int) -> int:
    return int(nextprime(rng.randrange(10**(k-1), 10**k)))

def rand_composite(rng: random.Random, k: int) -> int:
    p = rand_k_digit_prime(rng, max(1, k // 2))
    q = rand_k_digit_prime(rng, max(1, k - k // 2))
    return p * q

def cases(seed: int = 42, per_size: int = 3):
    rng = random.Random(seed)
    jobs = [(n, "prime" if isprime(n) else "composite") for n in FIXTURES]
    for k in range(2, 15):  # stays below DETERMINISTIC_LIMIT
        for _ in range(per_size):
            jobs.append((rand_k_digit_prime(rng, k), "prime"))
            jobs.append((rand_composite(rng, k), "composite"))
        for _ in range(per_size):
            n = rng.randrange(10**(k-1), 10**k)
            jobs.append((n, "prime" if isprime(n) else "composite"))
    return [(n, tag) for n, tag in jobs if n < DETERMINISTIC_LIMIT]

def run_case(n: int, expect: str, check) -> dict:
    got = check(n)
    ok = got == (expect == "prime")
    return {"n": str(n), "digits": len(str(n)), "expect": expect,
            "got": "prime" if got else "composite", "ok": ok,
            "reason": "" if ok else "verdict disagrees with sympy"}

def run_suite(check, jobs, workers: int = 8) -> list:
    results = []
    with ThreadPoolExecutor(max_workers=workers) as ex:
        futs = {ex.submit(run_case, n, tag, check): (n, tag) for n, tag in jobs}
        for fut in as_completed(futs):
            try:
                results.append(fut.result())
            except Exception as e:
                n, tag = futs[fut]
                results.append({"n": str(n), "digits": len(str(n)), "expect": tag, "got": None,
                                "ok": False, "reason": f"exception: {e}"})
    return results

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--local", action="store_true", help="check mrprime.is_prime in-process instead of over HTTP")
    ap.add_argument("--seed", type=int, default=42)
    ap.add_argument("--per-size", type=int, default=3)
    ap.add_argument("--workers", type=int, default=8)
    ap.add_argument("--out", default="accuracy_failures.csv")
    args = ap.parse_args(argv)

    check = local_isprime if args.local else http_isprime
    results = run_suite(check, cases(args.seed, args.per_size), workers=args.workers)

    total = len(results)
    ok = sum(1 for r in results if r["ok"])
    by = {}
    for r in results:
        by.setdefault(r["expect"], [0, 0])
        if r["ok"]: by[r["expect"]][0] += 1
        else: by[r["expect"]][1] += 1

    print("\n=== SUMMARY ===")
    print(f"Target: {'local' if args.local else BASE_URL}")
    print(f"Total: {total} | PASS: {ok} | FAIL: {total-ok}")
    for k, (p, f) in by.items():
        print(f"  {k:10s}  PASS {p:3d}  FAIL {f:3d}")

    fails = [r for r in results if not r["ok"]]
    if fails:
        with open(args.out, "w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=list(fails[0].keys()))
            w.writeheader()
            w.writerows(fails)
        print(f"\nWrote details for {len(fails)} failures to {args.out}")
        return 1
    print("\nNo failures recorded.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
