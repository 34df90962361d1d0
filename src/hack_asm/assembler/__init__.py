"""
Hack Assembler
==============

Translates Hack assembly source into 16-bit binary machine words, one
``'0'``/``'1'`` string per instruction.

Main Components
---------------
- **Assembler**: Orchestrates the pipeline below
- **normalizer**: Strips comments and whitespace, drops blank lines
- **labels**: First pass, binds ``(NAME)`` declarations to ROM addresses
- **Encoder**: Second pass, resolves symbols and encodes instructions
- **SymbolTable**: Labels and variables for one run
- **tables**: Predefined symbols and the comp/dest/jump bit tables

Example Usage
-------------
>>> from hack_asm.assembler import assemble
>>> assemble(["@16", "M=M+1  // increment", "(END)", "@END", "0;JMP"])
['0000000000010000', '1111110111001000', '0000000000000010', '1110101010000111']
"""

from hack_asm.assembler.assembler import Assembler, assemble, assemble_file
from hack_asm.assembler.encoder import Encoder, split_compute
from hack_asm.assembler.labels import extract_labels, is_label, label_name
from hack_asm.assembler.normalizer import normalize, normalize_line
from hack_asm.assembler.symbols import SymbolTable
from hack_asm.assembler.tables import (
    COMP_CODES,
    DEST_CODES,
    JUMP_CODES,
    PREDEFINED_SYMBOLS,
)

__all__ = [
    # Main class and functions
    "Assembler",
    "assemble",
    "assemble_file",
    # Pipeline stages
    "normalize",
    "normalize_line",
    "extract_labels",
    "is_label",
    "label_name",
    "Encoder",
    "split_compute",
    "SymbolTable",
    # Tables
    "COMP_CODES",
    "DEST_CODES",
    "JUMP_CODES",
    "PREDEFINED_SYMBOLS",
]
