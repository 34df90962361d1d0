"""
Label Extraction (first pass)
=============================

Walks the normalized program once, binding every ``(NAME)`` declaration
to the ROM address of the next real instruction and removing the
declaration from the stream. This pass must finish before encoding
starts, otherwise a forward jump target would be mistaken for a new
variable.

Example:
    @i          ROM 0
    (LOOP)      LOOP = 1
    D=M         ROM 1
    @LOOP       ROM 2
    0;JMP       ROM 3
"""

import logging
import re
from typing import Iterable, Optional

from hack_asm.assembler.symbols import SymbolTable


logger = logging.getLogger(__name__)

LABEL_PATTERN = re.compile(r"\((.+)\)")


def label_name(text: str) -> Optional[str]:
    """Return the label declared by text, or None if it is not a declaration."""
    match = LABEL_PATTERN.fullmatch(text)
    return match.group(1) if match else None


def is_label(text: str) -> bool:
    return label_name(text) is not None


def extract_labels(instructions: Iterable[str], symbols: SymbolTable) -> list[str]:
    """
    Record label addresses in symbols and return the label-free program.

    Args:
        instructions: Normalized instruction texts, labels included
        symbols: Symbol table receiving the label bindings

    Returns:
        The real instructions, in source order
    """
    program: list[str] = []

    for text in instructions:
        name = label_name(text)
        if name is None:
            program.append(text)
        else:
            # Labels occupy no ROM: bind to the next instruction's address
            symbols.define_label(name, len(program))

    logger.debug(f"Label pass: {len(symbols.labels)} labels, {len(program)} instructions")
    return program
