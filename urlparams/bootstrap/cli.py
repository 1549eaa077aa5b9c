import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from urlparams.api import to_string
from urlparams.bootstrap.config.loader import get_cli_args
from urlparams.bootstrap.deps import get_serializer_config, get_settings
from urlparams.core.errors import UrlParamsError
from urlparams.core.helpers.utils import setup_logging


def read_document(file: str | None) -> Any:
    if file is None or file == "-":
        text = sys.stdin.read()
    else:
        path = Path(file)
        if not path.is_file():
            raise SystemExit(f"[urlparams] Input file not found: '{path}'.")
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as ex:
            raise SystemExit(f"[urlparams] Invalid document: {ex}")

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as ex:
        raise SystemExit(f"[urlparams] Invalid document: {ex}")


def main() -> None:
    args = get_cli_args()
    settings = get_settings()

    setup_logging(settings.log_level)
    logger = logging.getLogger("urlparams.cli")

    document = read_document(args.file)
    logger.debug(f"Loaded document of type {type(document).__name__}")

    try:
        query = to_string(document, get_serializer_config())
    except UrlParamsError as ex:
        raise SystemExit(f"[urlparams] {ex}")

    print(query)


if __name__ == "__main__":
    main()
