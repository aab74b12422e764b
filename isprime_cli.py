import sys, argparse, json, time
from mrprime import is_prime, PRIME, COMPOSITE, DETERMINISTIC_LIMIT

# exit status bits
RC_COMPOSITE = 1
RC_INVALID = 2

def process(n: int, as_json: bool = False) -> int:
    t0 = time.perf_counter()
    try:
        ok = is_prime(n)
    except ValueError as e:
        print(f"# error: {e}", file=sys.stderr)
        return RC_INVALID
    ms = (time.perf_counter() - t0) * 1000
    verdict = PRIME if ok else COMPOSITE
    if as_json:
        print(json.dumps({"n": n, "verdict": verdict,
                          "deterministic": n < DETERMINISTIC_LIMIT, "ms": round(ms, 3)}))
    else:
        print(f"{n} is {verdict}")
    return 0 if ok else RC_COMPOSITE

def prompt() -> int:
    line = ""
    try:
        line = input("Enter a number: ")
        n = int(line.strip(), 10)
    except (ValueError, EOFError):
        print(f"# skip: {line.strip()}", file=sys.stderr)
        return RC_INVALID
    return process(n)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Deterministic Miller-Rabin primality test")
    ap.add_argument("--json", action="store_true", help="emit one JSON object per candidate")
    ap.add_argument("--prompt", action="store_true", help="ask for a single number interactively")
    ap.add_argument("N", nargs="*", type=int, help="optional list of integers (default: read stdin)")
    args = ap.parse_args(argv)

    if args.prompt:
        raise SystemExit(prompt())

    rc = 0
    if args.N:
        for n in args.N:
            rc |= process(n, args.json)
    else:
        for line in sys.stdin:
            line = line.strip()
            if not line: continue
            try: n = int(line, 10)
            except ValueError:
                print(f"# skip: {line}", file=sys.stderr); rc |= RC_INVALID; continue
            rc |= process(n, args.json)
    raise SystemExit(rc)

if __name__ == "__main__":
    main()
