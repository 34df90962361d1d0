"""
Instruction Encoder (second pass)
=================================

Turns each label-free instruction into a 16-character binary word.

Address instructions
--------------------
``@value`` where value is a decimal literal or a symbol. Symbols are
resolved through the SymbolTable (predefined, then label, then variable);
an unknown symbol becomes a new variable. The result is written as a
zero-padded 16-bit binary string with bit 15 clear.

Compute instructions
--------------------
``dest=comp;jump`` where dest and jump are optional::

    D=D+1       dest=D    comp=D+1  jump=null  -> 111 0011111 010 000
    0;JMP       dest=null comp=0    jump=JMP   -> 111 0101010 000 111

Each field is looked up in its own table. A miss raises MnemonicError
and aborts the run: the tables are the whole language, so there is no
sensible partial output.
"""

import difflib
import logging
import re
from collections.abc import Mapping
from typing import Optional, Sequence

from hack_asm.assembler.symbols import SymbolTable
from hack_asm.assembler.tables import (
    ADDRESS_MASK,
    COMP_CODES,
    COMPUTE_PREFIX,
    DEST_CODES,
    JUMP_CODES,
    NULL_MNEMONIC,
    WORD_WIDTH,
    canonical_destination,
)
from hack_asm.errors import MnemonicError, SourceLocation


logger = logging.getLogger(__name__)

ADDRESS_MARKER = "@"
DEST_SEPARATOR = "="
JUMP_SEPARATOR = ";"

_DECIMAL = re.compile(r"[0-9]+")


def split_compute(instruction: str) -> tuple[str, str, str]:
    """
    Split a compute instruction into (dest, comp, jump).

    Missing destination or jump parts come back as ``"null"``.
    """
    dest = NULL_MNEMONIC
    jump = NULL_MNEMONIC
    rest = instruction

    if DEST_SEPARATOR in rest:
        dest, rest = rest.split(DEST_SEPARATOR, 1)
    if JUMP_SEPARATOR in rest:
        rest, jump = rest.split(JUMP_SEPARATOR, 1)

    return dest, rest, jump


def to_binary(value: int) -> str:
    """Render a value as a zero-padded 16-character binary string."""
    return format(value, f"0{WORD_WIDTH}b")


class Encoder:
    """
    Encodes label-free Hack instructions into binary words.

    The encoder shares the SymbolTable filled in by the label pass and
    allocates variables into it as it goes, so instructions must be
    encoded in program order.

    Attributes:
        symbols: Symbol table for this run
        locations: Optional source location per ROM address, used only
                   to enrich error messages
    """

    def __init__(
        self,
        symbols: SymbolTable,
        locations: Optional[Sequence[SourceLocation]] = None,
    ):
        self.symbols = symbols
        self.locations = locations

    def encode_all(self, instructions: Sequence[str]) -> list[str]:
        """Encode a whole program. Stops at the first malformed instruction."""
        words = [self.encode(text, address) for address, text in enumerate(instructions)]
        logger.debug(
            f"Encode pass: {len(words)} words, "
            f"{len(self.symbols.variables)} variables"
        )
        return words

    def encode(self, instruction: str, address: Optional[int] = None) -> str:
        """
        Encode a single instruction.

        Args:
            instruction: Normalized instruction text (no labels)
            address: ROM address of the instruction, for error reporting

        Returns:
            16-character string of '0' and '1'
        """
        if instruction.startswith(ADDRESS_MARKER):
            return self.encode_address(instruction)
        return self.encode_compute(instruction, address)

    def encode_address(self, instruction: str) -> str:
        """Encode ``@value`` / ``@symbol``."""
        token = instruction[len(ADDRESS_MARKER):]

        if _DECIMAL.fullmatch(token):
            value = int(token)
        else:
            value = self.symbols.resolve(token)

        if value > ADDRESS_MASK:
            logger.warning(
                f"Address {value} in '{instruction}' exceeds 15 bits, "
                f"truncated to {value & ADDRESS_MASK}"
            )
            value &= ADDRESS_MASK

        return to_binary(value)

    def encode_compute(self, instruction: str, address: Optional[int] = None) -> str:
        """Encode ``dest=comp;jump``."""
        dest, comp, jump = split_compute(instruction)

        comp_bits = self._lookup(COMP_CODES, "computation", comp, instruction, address)
        dest_bits = self._lookup(
            DEST_CODES, "destination", canonical_destination(dest), instruction, address,
            shown=dest,
        )
        jump_bits = self._lookup(JUMP_CODES, "jump", jump, instruction, address)

        return COMPUTE_PREFIX + comp_bits + dest_bits + jump_bits

    def _lookup(
        self,
        table: Mapping[str, str],
        field: str,
        mnemonic: str,
        instruction: str,
        address: Optional[int],
        shown: Optional[str] = None,
    ) -> str:
        bits = table.get(mnemonic)
        if bits is not None:
            return bits

        location = None
        if address is not None and self.locations is not None and address < len(self.locations):
            location = self.locations[address]

        raise MnemonicError(
            field,
            shown if shown is not None else mnemonic,
            instruction,
            address=address,
            location=location,
            source_line=instruction if location is not None else None,
            suggestions=difflib.get_close_matches(mnemonic, list(table), n=3),
        )
