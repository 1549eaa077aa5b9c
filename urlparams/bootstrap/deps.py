import json
from functools import lru_cache

from pydantic import ValidationError

from urlparams.bootstrap.config.loader import get_cli_args
from urlparams.bootstrap.config.settings import UrlParamsSettings
from urlparams.core.models.config import SerializerConfig


@lru_cache
def get_settings() -> UrlParamsSettings:
    args = get_cli_args()
    overrides = {
        name: value
        for name, value in (
            ("space", args.space),
            ("encode_keys", args.encode_keys),
            ("log_level", args.log_level),
        )
        if value is not None
    }

    try:
        return UrlParamsSettings(**overrides)
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(map(str, err['loc']))}: {err['msg']}")
        raise SystemExit("\n".join(msg))


@lru_cache
def get_serializer_config() -> SerializerConfig:
    return get_settings().to_serializer_config()
