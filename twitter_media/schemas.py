import fastjsonschema

raw_media_schema = {
    "$schema": "http://json-schema.org/draft-04/schema#",
    "type": "object",
    "properties": {
        "media_url": {
            "type": ["string", "null"]
        },
        "url": {
            "type": ["string", "null"]
        }
    }
}

raw_entities_schema = {
    "$schema": "http://json-schema.org/draft-04/schema#",
    "type": "object",
    "properties": {
        "media": {
            "type": "array",
            "items": raw_media_schema
        }
    }
}

media_schema = fastjsonschema.compile(raw_media_schema)
entities_schema = fastjsonschema.compile(raw_entities_schema)
