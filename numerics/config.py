# numerics/config.py
# Environment knobs, read once at import.
import os
import sys
from typing import Optional

HOST            = os.getenv("NUMERICS_HOST", "127.0.0.1") or "127.0.0.1"
PORT            = int(os.getenv("NUMERICS_PORT", "8082"))
DEBUG           = os.getenv("NUMERICS_DEBUG", "0").strip().lower() in {"1", "true", "yes", "on"}

# Trial division is O(sqrt(n)); HTTP inputs above this bit length are refused
MAX_BITS        = int(os.getenv("NUMERICS_MAX_BITS", "40"))

# Rabin-Miller witnesses drawn per is_large_prime() call
WITNESS_ROUNDS  = max(1, int(os.getenv("NUMERICS_WITNESS_ROUNDS", "1")))

# One Rabin-Miller round costs ~n/2 multiplications (linear exponent walk).
# classify() skips it above this bound; HTTP/CLI large-prime tests refuse such n.
RM_MAX          = min(int(os.getenv("NUMERICS_RM_MAX", str(1 << 20))), 1 << 32)


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    """NUMERICS_SEED as a nonzero u32, or None (clock seeding) when unset or unusable."""
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        value = int(raw, 0)
    except ValueError:
        print(f"[numerics] ignoring NUMERICS_SEED={raw!r}: not an integer", file=sys.stderr)
        return None
    if not 0 < value <= 0xFFFFFFFF:
        print(f"[numerics] ignoring NUMERICS_SEED={raw!r}: must be a nonzero 32-bit value", file=sys.stderr)
        return None
    return value


# Unset -> the default generator seeds itself from the clock on first use
SEED            = _parse_seed(os.getenv("NUMERICS_SEED"))
