"""
Hack Assembler Error Hierarchy
==============================

This module defines the exception hierarchy for the hack_asm package.
All exceptions inherit from HackError, allowing callers to catch every
assembler-related error with a single except clause if desired.

Exception Hierarchy
-------------------
HackError (base)
└── AssemblerError (assembler-related)
    └── MnemonicError - destination, computation or jump not in its table

Unknown symbols in address instructions are never errors: they declare
a new variable. The only fatal condition during translation is a compute
instruction whose fields fall outside the fixed mnemonic tables.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HackError(Exception):
    """
    Base exception for all hack_asm errors.

        try:
            Assembler().assemble_file("Max.asm")
        except HackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for in-memory input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int = 1

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(HackError):
    """
    Base exception for assembler errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            Max.asm:12:1: error: unknown computation 'D+2' in 'D=D+2'
                D=D+2
                ^
            hint: did you mean 'D+1', 'D+A'?
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class MnemonicError(AssemblerError):
    """
    A compute instruction field is not in its fixed mnemonic table.

    Raised by the encoder when the destination, computation or jump part
    of a compute instruction has no entry in the corresponding table. Lines
    that look like neither an address instruction nor a label also end up
    here, since they are read as a bare computation.

    Attributes:
        field: Which part was malformed ("destination", "computation", "jump")
        mnemonic: The offending token
        instruction: The full normalized instruction text
        address: ROM address of the instruction, if known
        suggestions: Close matches from the table, best first
    """

    def __init__(
        self,
        field: str,
        mnemonic: str,
        instruction: str,
        address: Optional[int] = None,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.field = field
        self.mnemonic = mnemonic
        self.instruction = instruction
        self.address = address
        self.suggestions = suggestions or []

        hint = None
        if self.suggestions:
            hint = "did you mean " + ", ".join(f"'{s}'" for s in self.suggestions[:3]) + "?"

        message = f"unknown {field} '{mnemonic}' in '{instruction}'"
        if address is not None and location is None:
            message += f" (ROM address {address})"

        super().__init__(
            message,
            location=location,
            hint=hint,
            source_line=source_line,
        )
