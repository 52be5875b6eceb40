"""
Script tags and honorific tables for name-form synthesis.

Defaults match ``config/gedcomx_converter.yml``; ``from_config`` lets the
YAML override them without the name functions ever reading configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from gedcomx_converter.model.conclusion import ScriptTag


def _default_langs() -> Dict[ScriptTag, str]:
    return {
        ScriptTag.PRIMARY: "ja",
        ScriptTag.PHONETIC: "ja-Hrkt",
        ScriptTag.ROMANIZED: "ja-Latn",
    }


def _default_honorifics() -> Dict[ScriptTag, str]:
    return {
        ScriptTag.PHONETIC: "フジン",
        ScriptTag.ROMANIZED: "Fujin",
    }


@dataclass(frozen=True)
class NameSettings:
    langs: Mapping[ScriptTag, str] = field(default_factory=_default_langs)
    female_honorific: str = "夫人"
    honorific_translations: Mapping[ScriptTag, str] = field(default_factory=_default_honorifics)

    def lang_for(self, script: ScriptTag) -> str | None:
        return self.langs.get(script)

    def honorific_for(self, script: ScriptTag) -> str:
        """Translated honorific for ``script``; falls back to the primary token."""
        return self.honorific_translations.get(script, self.female_honorific)

    @classmethod
    def from_config(cls, cfg: Any) -> "NameSettings":
        names = getattr(cfg, "names", None) or {}
        scripts = names.get("scripts", {}) or {}
        female = (names.get("honorifics", {}) or {}).get("female", {}) or {}

        langs = _default_langs()
        translations = _default_honorifics()
        for script in ScriptTag:
            if scripts.get(script.value):
                langs[script] = str(scripts[script.value])
            if script is not ScriptTag.PRIMARY and female.get(script.value):
                translations[script] = str(female[script.value])

        return cls(
            langs=langs,
            female_honorific=str(female.get("token") or "夫人"),
            honorific_translations=translations,
        )


DEFAULT_SETTINGS = NameSettings()
