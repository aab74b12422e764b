import os, time
from flask import Flask, request, jsonify
from werkzeug.exceptions import BadRequest
from mrprime import describe, MAX_CANDIDATE, WITNESS_BASES, DETERMINISTIC_LIMIT

MAX_BATCH = int(os.getenv("MRPRIME_MAX_BATCH", "1000"))

app = Flask(__name__)

@app.errorhandler(BadRequest)
def bad_request(e):
    return jsonify(ok=False, error=e.description), 400

def _parse_n(raw) -> int:
    if raw is None or str(raw).strip() == "":
        raise BadRequest("missing n")
    try:
        n = int(str(raw).strip())
    except ValueError:
        raise BadRequest("n must be integer")
    if n > MAX_CANDIDATE:
        raise BadRequest("n must be a 64-bit integer (n <= 2^64-1)")
    return n

def _isprime_core(n: int) -> dict:
    t0 = time.perf_counter()
    info = describe(n)
    dt_ms = int((time.perf_counter() - t0) * 1000)
    return {"ok": True, "n": str(n), "verdict": info["verdict"], "is_prime": info["is_prime"],
            "deterministic": info["deterministic"], "duration_ms": dt_ms}

def _respond(payload: dict, t0: float):
    d = jsonify(payload)
    d.headers["X-Compute-ms"] = str(int((time.perf_counter() - t0) * 1000))
    return d

# /api/isprime?n=561
@app.get("/api/isprime")
def api_isprime_query():
    t0 = time.perf_counter()
    n = _parse_n(request.args.get("n"))
    return _respond(_isprime_core(n), t0)

@app.post("/api/isprime")
def api_isprime_post():
    t0 = time.perf_counter()
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise BadRequest("Invalid payload: expected JSON object")
    n = _parse_n(data.get("n"))
    return _respond(_isprime_core(n), t0)

@app.post("/api/isprime/batch")
def api_isprime_batch():
    t0 = time.perf_counter()
    data = request.get_json(force=True, silent=True)
    ns = data.get("ns") if isinstance(data, dict) else None
    if not isinstance(ns, list):
        raise BadRequest("ns must be a list of integers")
    if len(ns) > MAX_BATCH:
        raise BadRequest(f"batch too large; cap is {MAX_BATCH}")
    results = [_isprime_core(_parse_n(raw)) for raw in ns]
    return _respond({"ok": True, "results": results}, t0)

@app.get("/api/health")
def api_health():
    return jsonify(ok=True, bases=list(WITNESS_BASES), deterministic_limit=DETERMINISTIC_LIMIT,
                   max_batch=MAX_BATCH)

if __name__ == "__main__":
    app.run(host=os.getenv("MRPRIME_HOST", "127.0.0.1"), port=int(os.getenv("MRPRIME_PORT", "8080")))
