"""Reference exp LUT: exp(-k/128) for k = 0..1024, as float32 bit patterns."""
import math

import numpy as np
from .f32 import narrow_f32, f32_bits, bits_to_f32

# ── Table parameters ─────────────────────────────────────────────────────
EXP_LUT_STEPS   = 1024                 # 0..1024 inclusive
EXP_LUT_STEP    = 1.0 / 128.0
EXP_LUT_ENTRIES = EXP_LUT_STEPS + 1    # 1025
EXP_LUT_WIDTH   = 32                   # float32 words
EXP_LUT_NAME    = 'exp_lut_1over128'
EXP_LUT_FILE    = EXP_LUT_NAME + '.hex'

def make_exp_lut_inputs(steps=EXP_LUT_STEPS, step=EXP_LUT_STEP):
    """Sample inputs x_k = -k * step, k = 0..steps, in float64 (x in [-8, 0])."""
    x = np.zeros(steps + 1, dtype=np.float64)
    for k in range(steps + 1):
        x[k] = -k * step
    return x

def make_exp_lut(steps=EXP_LUT_STEPS, step=EXP_LUT_STEP):
    """Generate the exp LUT as uint32 words.
    exp is taken in double precision, narrowed to float32, and the float32
    bits become the word.
    """
    lut = np.zeros(steps + 1, dtype=np.uint32)
    for k, x in enumerate(make_exp_lut_inputs(steps, step)):
        y = narrow_f32(math.exp(x))
        lut[k] = f32_bits(y)
    return lut

def decode_exp_lut(words):
    """Float32 values carried by a word table."""
    return bits_to_f32(np.asarray(words, dtype=np.uint32))

EXP_LUT = make_exp_lut()
