#!/usr/bin/env python3
"""
Generate the exp LUT ROM file.
Writes exp(-k/128), k = 0..1024, as float32 bit patterns:
- exp_lut_1over128.hex     (1025 lines, 8 hex digits each, $readmemh-ready)
- exp_lut_1over128_init.sv (optional SystemVerilog case statement)

Usage:
  python make_exp_lut.py                 # writes ./exp_lut_1over128.hex
  python make_exp_lut.py -o build --sv
"""
import argparse
import os
import sys

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))
from golden.exp_lut_ref import EXP_LUT, EXP_LUT_NAME, EXP_LUT_WIDTH

def format_word(word):
    """8 lowercase hex digits, zero-padded, no prefix."""
    return f'{int(word) & 0xFFFFFFFF:08x}'

def _open_output(filepath):
    try:
        return open(filepath, 'w', newline='\n')
    except OSError as e:
        raise RuntimeError(f"Failed to open output file {filepath}: {e.strerror}") from e

def _output_path(filename, output_dir):
    if output_dir is None:
        return filename
    return os.path.join(output_dir, filename)

def write_memh(name, lut, output_dir=None):
    """Write a $readmemh file: one word per line, no header."""
    filepath = _output_path(f'{name}.hex', output_dir)
    lines = [format_word(val) + '\n' for val in lut]

    with _open_output(filepath) as f:
        f.writelines(lines)

    print(f"Generated {filepath} with {len(lines)} entries.")
    return filepath

def write_sv_case(name, lut, output_dir=None):
    """Write a SystemVerilog case-statement LUT."""
    filepath = _output_path(f'{name}_init.sv', output_dir)
    addr_bits = int(np.ceil(np.log2(len(lut))))
    data_width = EXP_LUT_WIDTH

    with _open_output(filepath) as f:
        f.write(f'// Auto-generated by make_exp_lut.py - DO NOT EDIT\n')
        f.write(f'// LUT: {name}, {len(lut)} entries, {data_width}-bit float32\n\n')
        f.write(f'function automatic logic [{data_width-1}:0] {name}_lookup;\n')
        f.write(f'  input logic [{addr_bits-1}:0] addr;\n')
        f.write(f'  case (addr)\n')
        for i, val in enumerate(lut):
            f.write(f"    {addr_bits}'d{i}: {name}_lookup = {data_width}'h{format_word(val)};\n")
        f.write(f'    default: {name}_lookup = {data_width}\'d0;\n')
        f.write(f'  endcase\n')
        f.write(f'endfunction\n')

    print(f"Generated {filepath} with {len(lut)} entries.")
    return filepath

def read_memh(filepath):
    """Load a $readmemh file back into uint32 words."""
    words = []
    with open(filepath) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('//'):
                continue
            words.append(int(line, 16))
    return np.array(words, dtype=np.uint32)

def main(argv=None):
    parser = argparse.ArgumentParser(description='Generate exp LUT (step 1/128, float32 words)')
    parser.add_argument('-o', '--output-dir', default=None,
                        help='Output directory (must exist, default: current directory)')
    parser.add_argument('--sv', action='store_true',
                        help='Also write a SystemVerilog case-statement LUT')
    # Unrecognized arguments never stop generation
    args, _ = parser.parse_known_args(argv)

    try:
        write_memh(EXP_LUT_NAME, EXP_LUT, args.output_dir)
        if args.sv:
            write_sv_case(EXP_LUT_NAME, EXP_LUT, args.output_dir)
    except RuntimeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == '__main__':
    main()
