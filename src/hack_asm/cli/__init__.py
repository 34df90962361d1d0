"""
hack_asm Command-Line Interface
===============================

- **hackasm**: Hack assembler (``.asm`` -> ``.hack``)

Implemented as a Click-based CLI application.
"""

__all__ = ["hackasm"]
