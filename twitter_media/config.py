import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .utils import strtobool


@dataclass(frozen=True)
class Config:
    validate: bool = True
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ):
        return cls(
            validate=strtobool(environ.get("TWITTER_MEDIA_VALIDATE"), True),
            debug=strtobool(environ.get("DEBUG"))
        )


def setup_logging(config: Config):
    if not config.debug:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.DEBUG)
