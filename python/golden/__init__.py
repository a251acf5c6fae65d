"""Golden reference model for the exp LUT."""
from .f32 import *
from .exp_lut_ref import (EXP_LUT, EXP_LUT_STEPS, EXP_LUT_STEP, EXP_LUT_ENTRIES,
                          EXP_LUT_WIDTH, EXP_LUT_NAME, EXP_LUT_FILE,
                          make_exp_lut, make_exp_lut_inputs, decode_exp_lut)
