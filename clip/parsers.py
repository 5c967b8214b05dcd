# Clip Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the argparse root parser for the `python -m clip` entry point.

The entry point loads argument definitions from a config file and resolves a
token sequence against them, which makes it a quick way to try out a
definition file from the shell.
"""
from argparse import REMAINDER, ArgumentParser, RawDescriptionHelpFormatter


def get_root_parser(
    prog: str | None = "clip",
    description: str | None = "Clip - Resolve tokens against argument definitions.",
    epilog: str | None = (
        "Tip: Put the tokens after '--' so they are not read as options of clip itself."
    ),
    exit_on_error: bool = True,
) -> ArgumentParser:
    """
    Construct the root-level ArgumentParser for the Clip entry point.

    Notes:
        ```
        Includes the following arguments:
            config            : YAML or TOML argument definitions.
            -v / --verbose    : Enable debug logging.
            --json            : Print the resolved inputs as JSON.
            --line LINE       : Resolve a single space-separated string instead of TOKENS.
            tokens            : Tokens to resolve.
        ```
    """
    parser = ArgumentParser(
        prog=prog,
        description=description,
        epilog=epilog,
        formatter_class=RawDescriptionHelpFormatter,
        exit_on_error=exit_on_error,
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to a YAML or TOML definition file (default: ./clip.yaml or $CLIP_CONFIG).",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging for Clip."
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the resolved inputs as JSON."
    )
    parser.add_argument(
        "--line",
        default=None,
        help="Resolve a space-separated string instead of TOKENS.",
    )
    parser.add_argument("tokens", nargs=REMAINDER, help="Tokens to resolve.")
    return parser
