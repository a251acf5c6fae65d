"""Single-precision helpers matching the RTL float32 word layout exactly."""
import numpy as np

def narrow_f32(x):
    """Narrow float64 to float32 (IEEE-754 round-to-nearest-even)."""
    vals = np.asarray(x, dtype=np.float64).astype(np.float32)
    if vals.ndim == 0:
        return np.float32(vals)
    return vals

def f32_bits(v):
    """Raw bit pattern of a float32 value as uint32.
    This is a same-width view of the bits, not a numeric conversion.
    """
    arr = np.asarray(v, dtype=np.float32)
    bits = arr.view(np.uint32)
    if bits.ndim == 0:
        return np.uint32(bits)
    return bits

def bits_to_f32(u):
    """Reinterpret uint32 words as float32 values."""
    arr = np.asarray(u, dtype=np.uint32)
    vals = arr.view(np.float32)
    if vals.ndim == 0:
        return np.float32(vals)
    return vals
