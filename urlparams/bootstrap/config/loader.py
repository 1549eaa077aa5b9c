import argparse
import os
from functools import lru_cache
from pathlib import Path


@lru_cache
def get_cli_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="urlparams",
        description=(
            "Serialize a YAML or JSON document into URL parameters.\n\n"
            "The document must be a mapping. Lists repeat their key for every\n"
            "element, null values are omitted and strings are percent-encoded:\n\n"
            "  {film: Fight Club, filter: [Thriller, Drama]}\n"
            "  → film=Fight+Club&filter=Thriller&filter=Drama"
        ),
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Document to serialize. Reads stdin when omitted or '-'."
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to a urlparams configuration file"
    )

    parser.add_argument(
        "--space",
        type=str,
        default=None,
        choices=["plus", "percent"],
        help=(
            "How spaces are escaped in values.\n"
            "plus    → '+' (default)\n"
            "percent → '%%20'"
        )
    )

    parser.add_argument(
        "--encode-keys",
        action="store_true",
        default=None,
        help="Percent-encode keys as well as values."
    )

    parser.add_argument(
        "-l", "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=(
            "Logging verbosity.\n"
            "Choose among: DEBUG, INFO, WARNING, ERROR, CRITICAL.\n\n"
            "Example:\n"
            "  --log-level DEBUG"
        ),
    )

    return parser.parse_args()


@lru_cache
def get_configfile() -> Path | None:
    args = get_cli_args()

    # Priority: CLI > ENV > default file in current working directory
    raw = args.config or os.getenv("URLPARAMSCONFIG")

    if raw is None:
        file = Path.cwd() / "urlparams.yaml"
        return file if file.is_file() else None

    file = Path(raw)
    if not file.is_file():
        raise SystemExit(
            f"[config] Configuration file not found: '{file}'.\n"
            "  - Use --config <file.yaml>\n"
            "  - Or set the URLPARAMSCONFIG environment variable\n"
            "  - Or place a 'urlparams.yaml' file in the current working directory."
        )

    return file
