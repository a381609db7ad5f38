import logging
import sys

import typer

from fuzzdump.cli import CLI, StandardCLI
from fuzzdump.globals.cli_config import CLIConfig

app = typer.Typer()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    corpus_dir: str = typer.Argument(
        default=None, help="Path to the fuzz test corpus directory, e.g. testdata/fuzz/FuzzFoo"
    ),
    verbose: bool = typer.Option(default=False, help="Log the progress of the corpus scan"),
):
    """Dump the entries of a Go fuzz test corpus directory to stdout.

    Entries of a single-argument corpus are dumped as a flat list of values,
    entries of a multiple-argument corpus as a list of value groups.

    Args:
        corpus_dir: Path to the fuzz test corpus directory.
        verbose: Whether to log the progress of the corpus scan to stderr.

    Exit Codes:
        0: Success.
        1: Some files were invalid, but others could be dumped.
        2: No valid corpus files were found.
        3: Another critical error occurred.

    Examples:
        Dump a corpus:
            $ fuzzdump testdata/fuzz/FuzzMyFunc

        Dump a corpus, logging the files skipped:
            $ fuzzdump --verbose testdata/fuzz/FuzzMyFunc
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    config = CLIConfig(
        corpus_dir=corpus_dir,
        prog_name=ctx.info_name or "fuzzdump",
        verbose=verbose,
    )

    cli: CLI = StandardCLI(config)
    exit_code = cli.run()
    sys.exit(exit_code)
