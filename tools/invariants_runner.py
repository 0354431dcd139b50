#!/usr/bin/env python3
# tools/invariants_runner.py
#
# Randomized invariant checks for double_int.
#
# This runner:
# - samples integers near every interesting boundary (the double-safe range,
#   each fixed width, int64) plus uniformly across the whole range
# - checks construction, round-trip and cross-width equality invariants
#
# Exit code:
#   0 -> all checks passed
#   1 -> invariant violation

import os, sys, json, random
from typing import Any, Dict, List

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(ROOT, "implementations", "python"))

import double_int
from double_int import (
    DoubleInt,
    DoubleIntError,
    DoubleIntJSONEncoder,
    MAX,
    MIN,
    WIDTHS,
    deserialize,
    from_json,
    serialize,
    to_json,
)

SEED = int(os.environ.get("DOUBLE_INT_SEED", "1337"))
TRIALS = int(os.environ.get("DOUBLE_INT_TRIALS", "2000"))

random.seed(SEED)

EDGES: List[int] = sorted({
    e + d
    for w in WIDTHS.values()
    for e in (w.min, w.max, MIN, MAX, 0)
    for d in (-2, -1, 0, 1, 2)
})


def rand_int() -> int:
    r = random.random()
    if r < 0.40:
        return random.choice(EDGES)
    if r < 0.80:
        return random.randint(MIN, MAX)
    w = random.choice(list(WIDTHS.values()))
    return random.randint(w.min, w.max)


def outcome(fn, *args) -> Dict[str, Any]:
    try:
        return {"value": fn(*args).as_int64()}
    except DoubleIntError as e:
        return {"err": e.code}


def fail(label: str, ctx: Dict[str, Any]) -> None:
    print("INVARIANT FAIL:", label)
    print("CTX:", json.dumps(ctx)[:2000])
    raise SystemExit(1)


def main() -> int:
    for t in range(TRIALS):
        x = rand_int()
        in_i64 = double_int.INT64_MIN <= x <= double_int.INT64_MAX
        in_range = MIN <= x <= MAX

        # (1)/(2) construction accepts exactly the double-safe range
        got = outcome(DoubleInt.try_from, x)
        if in_range:
            want = {"value": x}
        elif in_i64:
            want = {"err": double_int.ERR_OUT_OF_RANGE}
        else:
            want = {"err": double_int.ERR_TYPE_MISMATCH}
        if got != want:
            fail("try_from", {"trial": t, "x": x, "got": got, "want": want})

        # JSON decode agrees with direct construction
        j = outcome(from_json, json.dumps(x))
        if j != got:
            fail("json decode parity", {"trial": t, "x": x, "json": j, "try_from": got})

        if not in_range:
            continue
        d = DoubleInt(x)

        # the stored value is exact as a double
        if int(float(x)) != x:
            fail("double exactness", {"trial": t, "x": x})

        # (4) round-trips
        if deserialize(serialize(d)) != d or from_json(to_json(d)) != d:
            fail("round trip", {"trial": t, "x": x})
        if json.loads(json.dumps([d], cls=DoubleIntJSONEncoder)) != [x]:
            fail("encoder", {"trial": t, "x": x})

        # (3) narrow widths: infallible construction, equal under equals()
        for w in WIDTHS.values():
            if w.narrow and w.fits(x):
                if not DoubleInt.from_narrow(x, w).equals(x, w):
                    fail("from_narrow", {"trial": t, "x": x, "width": w.name})

        # (5) equals() is mathematical equality for every width
        y = rand_int()
        for w in WIDTHS.values():
            for cand in (x, y):
                if w.fits(cand) and d.equals(cand, w) != (x == cand):
                    fail("equals", {"trial": t, "x": x, "t": cand, "width": w.name})
        if (d == y) != (x == y) or (y == d) != (x == y):
            fail("== symmetry", {"trial": t, "x": x, "y": y})

    print(f"OK: invariants passed for TRIALS={TRIALS} seed={SEED}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
