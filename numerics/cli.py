#!/usr/bin/env python3
# numerics/cli.py - JSON-per-line front end to the library
import argparse
import json
import sys
import time
from typing import Callable, Iterable, List, Optional

import numpy as np

from . import config
from .basics import fits_u64
from .divisors import gcd, lcm
from .primes import classify, is_large_prime, is_prime, next_prime, prime_factors
from .prng import Generator, default_generator
from .results import InvalidArgument, NumericsError


def _emit(obj: dict) -> None:
    print(json.dumps(obj), flush=True)


def _inputs(values: List[str]) -> Iterable[str]:
    if values:
        yield from values
        return
    for line in sys.stdin:
        line = line.strip()
        if line:
            yield line


def _each(values: List[str], fn: Callable[[int], dict]) -> int:
    rc = 0
    for raw in _inputs(values):
        try:
            n = int(raw, 10)
        except ValueError:
            print(f"# skip: {raw}", file=sys.stderr)
            rc |= 1
            continue
        if not fits_u64(n):
            print(f"# skip: {raw} is not a 64-bit unsigned integer", file=sys.stderr)
            rc |= 1
            continue
        t0 = time.perf_counter()
        try:
            out = fn(n)
        except NumericsError as e:
            print(f"# error: {n}: {e}", file=sys.stderr)
            rc |= 1
            continue
        out["ms"] = round((time.perf_counter() - t0) * 1000, 3)
        _emit(out)
    return rc


def _is_prime(large: bool) -> Callable[[int], dict]:
    def run(n: int) -> dict:
        out = {"n": n, "is_prime": is_prime(n)}
        if large:
            if n > config.RM_MAX:
                raise NumericsError(f"large prime test is limited to n <= {config.RM_MAX}")
            out["is_large_prime"] = is_large_prime(n)
        return out
    return run


def _classify(n: int) -> dict:
    info = classify(n)
    info.pop("steps")
    return info


def _pair(args, fn: Callable[[int, int], int], key: str) -> int:
    try:
        value = fn(args.n, args.m)
    except NumericsError as e:
        print(f"# error: {e}", file=sys.stderr)
        return 1
    _emit({"n": args.n, "m": args.m, key: value})
    return 0


def _random(args) -> int:
    try:
        gen = Generator(seed=args.seed) if args.seed else default_generator()
    except NumericsError as e:
        print(f"# error: {e}", file=sys.stderr)
        return 1
    draws = []
    for _ in range(args.count):
        res = gen.range(args.min, args.max)
        if isinstance(res, InvalidArgument):
            print(f"# error: {res.reason}", file=sys.stderr)
            return 1
        draws.append(res.value)

    if args.count == 1:
        _emit({"min": args.min, "max": args.max, "value": draws[0]})
        return 0

    arr = np.asarray(draws, dtype=np.int64)
    counts, edges = np.histogram(arr, bins=args.bins)
    _emit({
        "min": args.min,
        "max": args.max,
        "count": int(arr.size),
        "observed_min": int(arr.min()),
        "observed_max": int(arr.max()),
        "mean": round(float(arr.mean()), 3),
        "histogram": [int(c) for c in counts],
        "edges": [round(float(e), 3) for e in edges],
    })
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="numerics", description="Teaching-grade prime and random helpers")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("is-prime", help="trial-division primality (optionally Rabin-Miller first)")
    p.add_argument("--large", action="store_true", help="also run the Rabin-Miller + trial division test")
    p.add_argument("N", nargs="*", help="integers; read from stdin when omitted")

    p = sub.add_parser("next-prime", help="smallest prime above N")
    p.add_argument("N", nargs="*")

    p = sub.add_parser("factor", help="prime factors with multiplicity")
    p.add_argument("N", nargs="*")

    p = sub.add_parser("classify", help="prime / composite / unit summary")
    p.add_argument("N", nargs="*")

    for name in ("gcd", "lcm"):
        p = sub.add_parser(name)
        p.add_argument("n", type=int)
        p.add_argument("m", type=int)

    p = sub.add_parser("random", help="draw from [min, max] (max 0 = full range)")
    p.add_argument("--min", type=int, default=0)
    p.add_argument("--max", type=int, default=0)
    p.add_argument("--seed", type=lambda v: int(v, 0), default=0,
                   help="explicit seed (decimal or 0x-prefixed hex); 0 = process generator")
    p.add_argument("--count", type=int, default=1)
    p.add_argument("--bins", type=int, default=10)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.cmd == "is-prime":
        return _each(args.N, _is_prime(args.large))
    if args.cmd == "next-prime":
        return _each(args.N, lambda n: {"n": n, "next_prime": next_prime(n)})
    if args.cmd == "factor":
        return _each(args.N, lambda n: {"n": n, "factors": prime_factors(n)})
    if args.cmd == "classify":
        return _each(args.N, _classify)
    if args.cmd == "gcd":
        return _pair(args, gcd, "gcd")
    if args.cmd == "lcm":
        return _pair(args, lcm, "lcm")
    if args.count < 1:
        print("# error: --count must be >= 1", file=sys.stderr)
        return 1
    return _random(args)


if __name__ == "__main__":
    raise SystemExit(main())
