"""
hack_asm - Assembler for the Hack Computer
==========================================

This package translates Hack assembly language, the symbolic machine
language of the 16-bit Hack computer from "The Elements of Computing
Systems", into the binary ``.hack`` format loaded by the CPU emulator.

Quick Start
-----------
    >>> from hack_asm import Assembler
    >>> asm = Assembler()
    >>> words = asm.assemble_file("Max.asm")
    >>> asm.write_hack("Max.hack")

Or from the command line:
    $ hackasm Max.asm
"""

__version__ = "1.0.0"

from hack_asm.assembler import Assembler, assemble, assemble_file
from hack_asm.errors import (
    HackError,
    AssemblerError,
    MnemonicError,
    SourceLocation,
)

__all__ = [
    "__version__",
    # Assembler
    "Assembler",
    "assemble",
    "assemble_file",
    # Exception hierarchy
    "HackError",
    "AssemblerError",
    "MnemonicError",
    "SourceLocation",
]
