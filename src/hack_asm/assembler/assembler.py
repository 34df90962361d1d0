"""
Hack Assembler - Main Interface
===============================

This module provides the Assembler class, the primary interface for
translating Hack assembly into binary words. It drives the three stages
in order:

1. **Normalizer**: strip comments and whitespace, drop blank lines
2. **Label pass**: bind ``(NAME)`` declarations, remove them
3. **Encoder**: resolve symbols and encode every instruction

Each call to ``assemble`` works on a fresh SymbolTable, so runs are
independent. The words and symbols of the most recent run are kept only
so they can be written out afterwards.

Example Usage
-------------
>>> from hack_asm.assembler import Assembler
>>> asm = Assembler()
>>> asm.assemble_string('''
... @2
... D=A
... @3
... D=D+A
... @0
... M=D
... ''')
['0000000000000010', '1110110000010000', '0000000000000011', '1110000010010000', '0000000000000000', '1110001100001000']
>>> asm.write_hack("Add.hack")

Command-Line Usage
------------------
    $ hackasm Add.asm -o Add.hack -s Add.sym
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from hack_asm.assembler.encoder import Encoder
from hack_asm.assembler.labels import is_label, extract_labels
from hack_asm.assembler.normalizer import numbered
from hack_asm.assembler.symbols import SymbolTable
from hack_asm.errors import SourceLocation


logger = logging.getLogger(__name__)


class Assembler:
    """
    Hack assembler.

    Attributes:
        verbose: If True, log progress at INFO level instead of DEBUG
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the assembler.

        Args:
            verbose: Log a summary of each run at INFO level
        """
        self._verbose = verbose
        self._words: list[str] = []
        self._symbols: Optional[SymbolTable] = None

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble(self, lines: Iterable[str], filename: str = "<input>") -> list[str]:
        """
        Assemble raw source lines into binary words.

        Args:
            lines: Raw source lines, comments and blank lines included
            filename: Name used in error locations

        Returns:
            One 16-character binary string per real instruction

        Raises:
            MnemonicError: If a compute instruction uses an unknown mnemonic
        """
        # A failed run must not leave the previous program behind
        self._words = []
        self._symbols = None

        statements = list(numbered(lines))
        symbols = SymbolTable()

        # Pass 1: labels. Must complete before any symbol is resolved.
        program = extract_labels((text for _, text in statements), symbols)

        locations = [
            SourceLocation(filename, line_number)
            for line_number, text in statements
            if not is_label(text)
        ]

        # Pass 2: encode
        words = Encoder(symbols, locations).encode_all(program)

        self._words = words
        self._symbols = symbols

        self._log(
            f"Assembled {filename}: {len(words)} words, "
            f"{len(symbols.labels)} labels, {len(symbols.variables)} variables"
        )
        return words

    def assemble_string(self, source: str, filename: str = "<input>") -> list[str]:
        """Assemble source code held in a string."""
        return self.assemble(source.splitlines(), filename)

    def assemble_file(self, filepath: str | Path) -> list[str]:
        """
        Assemble source code from a file.

        Raises:
            AssemblerError: If assembly fails
            FileNotFoundError: If source file not found
        """
        filepath = Path(filepath)
        return self.assemble_string(filepath.read_text(), str(filepath))

    # =========================================================================
    # Output Methods
    # =========================================================================

    def get_words(self) -> list[str]:
        """Binary words produced by the last run."""
        return list(self._words)

    def get_symbols(self) -> dict[str, int]:
        """Labels and variables defined by the last run."""
        if self._symbols is None:
            return {}
        return self._symbols.as_dict()

    def write_hack(self, filepath: str | Path) -> None:
        """Write the last run's words to filepath, one per line."""
        Path(filepath).write_text("".join(f"{word}\n" for word in self._words))
        self._log(f"Wrote {len(self._words)} words to {filepath}")

    def write_symbols(self, filepath: str | Path) -> None:
        """
        Write the symbol listing of the last run.

        Each line is ``NAME ADDRESS``, labels first then variables, each
        group sorted by address.
        """
        lines = []
        if self._symbols is not None:
            for table in (self._symbols.labels, self._symbols.variables):
                for name, address in sorted(table.items(), key=lambda item: (item[1], item[0])):
                    lines.append(f"{name} {address}\n")
        Path(filepath).write_text("".join(lines))
        self._log(f"Wrote {len(lines)} symbols to {filepath}")

    def _log(self, message: str) -> None:
        logger.log(logging.INFO if self._verbose else logging.DEBUG, message)


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(lines: Iterable[str], filename: str = "<input>") -> list[str]:
    """Assemble raw source lines with a throwaway Assembler."""
    return Assembler().assemble(lines, filename)


def assemble_file(filepath: str | Path) -> list[str]:
    """Assemble a source file with a throwaway Assembler."""
    return Assembler().assemble_file(filepath)
