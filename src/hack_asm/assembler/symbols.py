"""
Symbol Table
============

Per-run symbol storage for the assembler. Predefined symbols live in the
read-only ``PREDEFINED_SYMBOLS`` table; this class adds the two mappings
that are filled while assembling:

- **labels**: written by the label pass, one entry per ``(NAME)``
- **variables**: allocated by the encoder the first time an unknown
  symbol is referenced, starting at RAM address 16

Resolution order is predefined, then label, then variable. A symbol is
only ever found in one of them, since a name is allocated as a variable
only after both other lookups miss.

A fresh SymbolTable is created for each assembly run and is not shared.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from hack_asm.assembler.tables import PREDEFINED_SYMBOLS, VARIABLE_BASE


logger = logging.getLogger(__name__)


@dataclass
class SymbolTable:
    """
    Labels and variables for a single assembly run.

    Attributes:
        labels: Label name -> ROM address of the following instruction
        variables: Variable name -> allocated RAM address
        next_variable: RAM address the next new variable will receive
    """
    labels: dict[str, int] = field(default_factory=dict)
    variables: dict[str, int] = field(default_factory=dict)
    next_variable: int = VARIABLE_BASE

    def define_label(self, name: str, address: int) -> None:
        """Bind a label to a ROM address. A redefinition replaces the old one."""
        previous = self.labels.get(name)
        if previous is not None and previous != address:
            logger.debug(f"Label '{name}' redefined: {previous} -> {address}")
        self.labels[name] = address

    def lookup(self, symbol: str) -> Optional[int]:
        """Return the address bound to symbol, or None. Never allocates."""
        if symbol in PREDEFINED_SYMBOLS:
            return PREDEFINED_SYMBOLS[symbol]
        if symbol in self.labels:
            return self.labels[symbol]
        return self.variables.get(symbol)

    def resolve(self, symbol: str) -> int:
        """
        Return the address for symbol, allocating a variable if it is new.

        Args:
            symbol: Symbol name from an address instruction

        Returns:
            The predefined, label or variable address
        """
        address = self.lookup(symbol)
        if address is None:
            address = self.allocate(symbol)
        return address

    def allocate(self, symbol: str) -> int:
        """Assign the next free RAM address to a new variable."""
        address = self.next_variable
        self.variables[symbol] = address
        self.next_variable += 1
        logger.debug(f"Allocated variable '{symbol}' at {address}")
        return address

    def __contains__(self, symbol: object) -> bool:
        return (
            symbol in PREDEFINED_SYMBOLS
            or symbol in self.labels
            or symbol in self.variables
        )

    def as_dict(self) -> dict[str, int]:
        """Labels and variables defined by this run (predefined symbols excluded)."""
        return {**self.labels, **self.variables}
