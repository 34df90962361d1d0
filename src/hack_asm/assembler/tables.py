"""
Hack Instruction Set Tables
===========================

This module holds the fixed vocabulary of the Hack assembly language:
the predefined symbols and the three bit-field tables used to encode
compute instructions. Everything here is read-only and built once at
import time.

Instruction Formats
-------------------
Address instruction (``@value``)::

    0vvv vvvv vvvv vvvv      v = 15-bit address or constant

Compute instruction (``dest=comp;jump``)::

    111a cccc ccdd djjj      a+c = computation, d = destination, j = jump

The ``a`` bit selects M (RAM[A]) instead of A as the second ALU operand,
which is why every M form shares its c-bits with the matching A form.

Reference
---------
- The Elements of Computing Systems, chapter 6 (Nisan & Schocken)
- https://www.nand2tetris.org/
"""

from types import MappingProxyType


# =============================================================================
# Word Layout Constants
# =============================================================================

WORD_WIDTH = 16
ADDRESS_MASK = 0x7FFF        # A-instructions carry 15 bits; bit 15 is always 0
COMPUTE_PREFIX = "111"
NULL_MNEMONIC = "null"       # Name for an absent destination or jump
VARIABLE_BASE = 16           # First RAM address handed out to variables


# =============================================================================
# Predefined Symbols
# =============================================================================
# SP, LCL, ARG, THIS and THAT alias R0-R4. They are the VM's stack and
# segment pointers and live in the same low RAM words as the registers.

PREDEFINED_SYMBOLS = MappingProxyType({
    **{f"R{n}": n for n in range(16)},
    "SCREEN": 16384,
    "KBD": 24576,
    "SP": 0,
    "LCL": 1,
    "ARG": 2,
    "THIS": 3,
    "THAT": 4,
})


# =============================================================================
# Computation Table (a c1 c2 c3 c4 c5 c6)
# =============================================================================

COMP_CODES = MappingProxyType({
    # a = 0: second operand is A
    "0":   "0101010",
    "1":   "0111111",
    "-1":  "0111010",
    "D":   "0001100",
    "A":   "0110000",
    "!D":  "0001101",
    "!A":  "0110001",
    "-D":  "0001111",
    "-A":  "0110011",
    "D+1": "0011111",
    "A+1": "0110111",
    "D-1": "0001110",
    "A-1": "0110010",
    "D+A": "0000010",
    "D-A": "0010011",
    "A-D": "0000111",
    "D&A": "0000000",
    "D|A": "0010101",
    # a = 1: second operand is M
    "M":   "1110000",
    "!M":  "1110001",
    "-M":  "1110011",
    "M+1": "1110111",
    "M-1": "1110010",
    "D+M": "1000010",
    "D-M": "1010011",
    "M-D": "1000111",
    "D&M": "1000000",
    "D|M": "1010101",
})


# =============================================================================
# Destination Table (d1 d2 d3 = A D M)
# =============================================================================

DEST_CODES = MappingProxyType({
    NULL_MNEMONIC: "000",
    "M":   "001",
    "D":   "010",
    "MD":  "011",
    "A":   "100",
    "AM":  "101",
    "AD":  "110",
    "AMD": "111",
})

# Canonical letter order used in DEST_CODES keys
DEST_REGISTERS = "AMD"


# =============================================================================
# Jump Table (j1 j2 j3 = out<0, out=0, out>0)
# =============================================================================

JUMP_CODES = MappingProxyType({
    NULL_MNEMONIC: "000",
    "JGT": "001",
    "JEQ": "010",
    "JGE": "011",
    "JLT": "100",
    "JNE": "101",
    "JLE": "110",
    "JMP": "111",
})


def canonical_destination(dest: str) -> str:
    """
    Reorder destination letters to the order used in DEST_CODES.

    ``DM`` and ``MD`` name the same registers, as do ``ADM`` and ``AMD``.
    Anything that is not a set of distinct A/D/M letters is returned
    unchanged so that the table lookup reports it.
    """
    if dest and len(set(dest)) == len(dest) and set(dest) <= set(DEST_REGISTERS):
        return "".join(r for r in DEST_REGISTERS if r in dest)
    return dest
