from .config import Config, setup_logging
from .models import MediaAttachment
from .parser import dumps, loads, parse_entities, parse_tweet

__all__ = ["Config", "MediaAttachment", "dumps", "loads", "parse_entities", "parse_tweet", "setup_logging"]
