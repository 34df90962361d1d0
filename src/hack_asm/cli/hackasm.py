"""
hackasm - Hack Assembler Command-Line Interface
===============================================

Usage Examples
--------------
Basic assembly (writes Max.hack next to the source):
    $ hackasm Max.asm

With output file and symbol listing:
    $ hackasm Max.asm -o build/Max.hack -s build/Max.sym

Verbose mode:
    $ hackasm -v Max.asm
"""

import logging
from pathlib import Path
from typing import Optional

import click

from hack_asm import __version__
from hack_asm.assembler import Assembler
from hack_asm.cli.errors import handle_cli_exception


@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output .hack file (default: input.hack)",
)
@click.option(
    "-s", "--symbols",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write label and variable addresses to this file",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackasm")
def main(
    input_file: Path,
    output: Optional[Path],
    symbols: Optional[Path],
    verbose: bool,
) -> None:
    """
    Assemble Hack assembly source into binary machine code.

    INPUT_FILE is the assembly source file (.asm) to assemble. The output
    holds one 16-character binary word per line.

    \b
    Examples:
        hackasm Max.asm                # Outputs Max.hack
        hackasm Max.asm -o out.hack    # Specify output file
        hackasm Max.asm -s Max.sym     # Also write the symbol table
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    output_file = output if output is not None else input_file.with_suffix(".hack")
    asm = Assembler(verbose=verbose)

    try:
        if verbose:
            click.echo(f"Assembling {input_file}...")

        words = asm.assemble_file(input_file)
        asm.write_hack(output_file)

        if symbols:
            asm.write_symbols(symbols)
            if verbose:
                click.echo(f"Wrote symbols to {symbols}")

        if verbose:
            click.echo(f"Wrote {len(words)} words to {output_file}")
            click.echo(f"Defined {len(asm.get_symbols())} symbols")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")


if __name__ == "__main__":
    main()
