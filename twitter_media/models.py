from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional


@dataclass
class MediaAttachment:
    media_url: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def load(cls, doc: Mapping[str, Any]):
        if not isinstance(doc, Mapping):
            raise TypeError(f"Media object must be a mapping, got {type(doc).__name__}.")
        return cls(doc.get("media_url"), doc.get("url"))

    def dump(self, omit_none: bool = False) -> Dict[str, Optional[str]]:
        doc = {
            "media_url": self.media_url,
            "url": self.url,
        }
        if omit_none:
            return {k: v for k, v in doc.items() if v is not None}
        return doc
