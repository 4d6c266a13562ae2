import json
import logging
from typing import Any, List, Optional

import fastjsonschema

from .config import Config
from .models import MediaAttachment
from .schemas import entities_schema, media_schema


def _get_config(config: Optional[Config]) -> Config:
    return config if config is not None else Config.from_env()


def loads(text: str, config: Optional[Config] = None) -> Optional[MediaAttachment]:
    config = _get_config(config)

    try:
        doc = json.loads(text)
    except json.JSONDecodeError:
        logging.error(f"Malformed media JSON: {text}")
        return None

    if not isinstance(doc, dict):
        logging.error(f"Media JSON is not an object: {text}")
        return None

    if config.validate:
        try:
            media_schema(doc)
        except fastjsonschema.JsonSchemaException:
            logging.error(f"Malformed media object: {text}")
            return None

    return MediaAttachment.load(doc)


def dumps(media: MediaAttachment, omit_none: bool = False) -> str:
    return json.dumps(media.dump(omit_none), ensure_ascii=False)


def parse_entities(entities: Any, config: Optional[Config] = None) -> List[MediaAttachment]:
    config = _get_config(config)

    if config.validate:
        try:
            entities_schema(entities)
        except fastjsonschema.JsonSchemaException:
            logging.error(f"Malformed tweet entities: {entities}")
            return []
    elif not isinstance(entities, dict):
        logging.error(f"Tweet entities is not an object: {entities}")
        return []

    raw_media = entities.get("media") or []
    if not isinstance(raw_media, list):
        logging.error(f"Tweet media is not an array: {raw_media}")
        return []

    media_list = []
    for medium in raw_media:
        if not isinstance(medium, dict):
            logging.error(f"Skipped malformed media entry: {medium}")
            continue
        media_list.append(MediaAttachment.load(medium))

    logging.debug(f"Parsed {len(media_list)} media attachment(s).")
    return media_list


def parse_tweet(raw_tweet: dict, config: Optional[Config] = None) -> List[MediaAttachment]:
    if "entities" not in raw_tweet.keys():
        return []
    return parse_entities(raw_tweet["entities"], config)
