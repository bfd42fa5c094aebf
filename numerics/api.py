import time
from flask import Blueprint, current_app, g, jsonify, request
from werkzeug.exceptions import BadRequest

from . import config
from .basics import fits_u64
from .divisors import gcd, lcm
from .primes import (
    classify,
    is_large_prime,
    is_prime,
    next_prime,
    next_prime_factor,
    prime_factors,
)
from .prng import Generator, default_generator
from .results import Found, InvalidArgument, NumericsError

numerics_bp = Blueprint("numerics_bp", __name__)

# ------------------ helpers ------------------
def _u64_arg(name: str, default: int | None = None, capped: bool = True) -> int:
    raw = request.args.get(name, "").strip()
    if not raw:
        if default is not None:
            return default
        raise BadRequest(f"missing {name}")
    try:
        value = int(raw)
    except ValueError:
        raise BadRequest(f"{name} must be integer")
    if not fits_u64(value):
        raise BadRequest(f"{name} must be a 64-bit unsigned integer (0..2^64-1)")
    if capped and value.bit_length() > config.MAX_BITS:
        raise BadRequest(f"{name} is limited to {config.MAX_BITS} bits on this server")
    return value

def _flag(name: str) -> bool:
    return request.args.get(name, "").strip().lower() in {"1", "true", "yes", "on"}

@numerics_bp.before_request
def _start_clock():
    g.t0 = time.perf_counter()

@numerics_bp.after_request
def _compute_header(resp):
    t0 = g.get("t0")
    if t0 is not None:
        resp.headers["X-Compute-ms"] = str(int((time.perf_counter() - t0) * 1000))
    return resp

@numerics_bp.errorhandler(BadRequest)
def _bad_request(e):
    current_app.logger.info("rejected %s: %s", request.full_path, e.description)
    return jsonify(error=e.description), 400

@numerics_bp.errorhandler(NumericsError)
def _numerics_error(e):
    current_app.logger.info("rejected %s: %s", request.full_path, e)
    return jsonify(error=str(e)), 400

# ------------------ API ------------------
@numerics_bp.get("/api/health")
def health():
    return jsonify(ok=True, witness_rounds=config.WITNESS_ROUNDS, time=int(time.time()))

@numerics_bp.get("/api/is_prime")
def api_is_prime():
    n = _u64_arg("n")
    out = {"n": str(n), "is_prime": is_prime(n)}
    if _flag("large"):
        if n > config.RM_MAX:
            raise BadRequest(f"large prime test is limited to n <= {config.RM_MAX}")
        out["is_large_prime"] = is_large_prime(n)
    return jsonify(out)

@numerics_bp.get("/api/next_prime")
def api_next_prime():
    n = _u64_arg("n")
    return jsonify(n=str(n), next_prime=str(next_prime(n)))

@numerics_bp.get("/api/next_prime_factor")
def api_next_prime_factor():
    n = _u64_arg("n")
    min_factor = _u64_arg("min", default=2)
    res = next_prime_factor(n, min_factor)
    if isinstance(res, InvalidArgument):
        raise BadRequest(res.reason)
    out = {"n": str(n), "min": min_factor, "result": "found" if res.ok else "none"}
    if isinstance(res, Found):
        out["factor"] = str(res.value)
    return jsonify(out)

@numerics_bp.get("/api/factor")
def api_factor():
    n = _u64_arg("n")
    if n == 0:
        raise BadRequest("n must be positive")
    return jsonify(n=str(n), factors=[str(f) for f in prime_factors(n)])

@numerics_bp.get("/api/classify")
def api_classify():
    info = classify(_u64_arg("n"))
    info["n"] = str(info["n"])
    if info["factor"] is not None:
        info["factor"] = str(info["factor"])
    return jsonify(info)

@numerics_bp.get("/api/gcd")
def api_gcd():
    n, m = _u64_arg("n"), _u64_arg("m")
    return jsonify(n=str(n), m=str(m), gcd=str(gcd(n, m)))

@numerics_bp.get("/api/lcm")
def api_lcm():
    n, m = _u64_arg("n"), _u64_arg("m")
    return jsonify(n=str(n), m=str(m), lcm=str(lcm(n, m)))

@numerics_bp.get("/api/random")
def api_random():
    lo = _u64_arg("min", default=0, capped=False)
    hi = _u64_arg("max", default=0, capped=False)
    seed = _u64_arg("seed", default=0, capped=False)
    gen = Generator(seed=seed) if seed else default_generator()
    res = gen.range(lo, hi)
    if isinstance(res, InvalidArgument):
        raise BadRequest(res.reason)
    return jsonify(min=lo, max=hi, value=res.value)
