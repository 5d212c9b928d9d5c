import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

log = logging.getLogger(__name__)


class JsonHandler:
    def match(self, path: Path) -> bool:
        return path.suffix.lower() == ".json"

    def load(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            return data if isinstance(data, dict) else {}
        except (json.JSONDecodeError, OSError) as e:
            log.warning(f"Could not load message file {path}: {e}")
            return {}


class MessageStore:
    """
    Resolves message ids to formatted strings.

    Lookup Order:
    1. Target Language
    2. Default Language (en)
    3. Identity (the id itself)
    """

    def __init__(self, roots: List[Path], default_lang: str = "en"):
        self.roots = roots
        self.default_lang = default_lang
        self._handler = JsonHandler()
        self._registry: Dict[str, Dict[str, str]] = {}

    def _detect_lang(self) -> str:
        # 1. Explicit override
        env_lang = os.getenv("DOMSTUB_LANG")
        if env_lang:
            return env_lang

        # 2. System LANG (e.g. "de_DE.UTF-8" -> "de")
        sys_lang = os.getenv("LANG")
        if sys_lang:
            base_lang = sys_lang.split(".")[0].split("_")[0].lower()
            if base_lang and base_lang not in ("c", "posix"):
                return base_lang

        return self.default_lang

    def _load_lang(self, lang: str) -> Dict[str, str]:
        if lang in self._registry:
            return self._registry[lang]

        merged: Dict[str, str] = {}
        # Earlier roots take precedence, so merge them last.
        for root in reversed(self.roots):
            lang_dir = root / "needle" / lang
            if not lang_dir.is_dir():
                continue
            for file_path in sorted(lang_dir.rglob("*")):
                if file_path.is_file() and self._handler.match(file_path):
                    merged.update(self._handler.load(file_path))

        self._registry[lang] = merged
        return merged

    def template(self, msg_id: str, lang: Optional[str] = None) -> str:
        target_lang = lang or self._detect_lang()

        value = self._load_lang(target_lang).get(msg_id)
        if value is None and target_lang != self.default_lang:
            value = self._load_lang(self.default_lang).get(msg_id)

        return msg_id if value is None else str(value)

    def get(self, msg_id: str, **kwargs: Any) -> str:
        template = self.template(msg_id)
        if not kwargs:
            return template
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError):
            return template
