"""Fast approximate logarithm.

The natural log is the bottleneck of UCB scoring, so it is approximated from
the IEEE-754 bit pattern of a float32: the exponent field gives a coarse
log2 and a fixed rational correction over the mantissa refines it.

Inputs must be strictly positive.
"""

import math

import numpy as np

LN_2 = 0.69314718

# Inputs are divided by this radix before the bit trick and the offset is
# added back afterwards, which keeps large visit counts in the accurate range.
LOG_RADIX = 10e6
LOG_OF_RADIX = math.log2(LOG_RADIX)

_MANTISSA_MASK = np.uint32(0x007FFFFF)
_HALF_EXPONENT = np.uint32(0x3F000000)


def fastlog2_array(x: np.ndarray) -> np.ndarray:
    """Approximate log2 of a float array."""
    bits = np.array(x, dtype=np.float32, ndmin=1).view(np.uint32)
    mx = ((bits & _MANTISSA_MASK) | _HALF_EXPONENT).view(np.float32)
    y = bits.astype(np.float32) * np.float32(1.1920928955078125e-7)
    return (
        y
        - np.float32(124.22551499)
        - np.float32(1.498030302) * mx
        - np.float32(1.72587999) / (np.float32(0.3520887068) + mx)
    )


def fastlog_array(x: np.ndarray) -> np.ndarray:
    """Approximate natural log of a float array."""
    scaled = np.array(x, dtype=np.float32, ndmin=1) / np.float32(LOG_RADIX)
    return np.float32(LN_2) * (fastlog2_array(scaled) + np.float32(LOG_OF_RADIX))


def fastlog2(x: float) -> float:
    """Approximate log2 of a positive scalar."""
    return float(fastlog2_array(x)[0])


def fastlog(x: float) -> float:
    """Approximate natural log of a positive scalar."""
    return float(fastlog_array(x)[0])
