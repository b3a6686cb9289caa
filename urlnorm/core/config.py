from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import yaml
from jsonschema import validate


CONFIG_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "default_scheme": {"type": "string", "pattern": "^[A-Za-z][A-Za-z0-9+.\\-]*$"},
        "suffix_list_urls": {
            "anyOf": [
                {"type": "null"},
                {"type": "array", "items": {"type": "string"}},
            ]
        },
        "cache_dir": {"type": ["string", "null"]},
        "include_psl_private_domains": {"type": "boolean"},
        "fallback_to_snapshot": {"type": "boolean"},
        "extract_schemes": {
            "type": "array",
            "items": {"type": "string"},
            "minItems": 1,
        },
        "max_workers": {"type": "integer", "minimum": 1},
    },
}


@dataclass
class NormalizerConfig:
    default_scheme: str = "http"
    suffix_list_urls: list[str] | None = None
    cache_dir: str | None = None
    include_psl_private_domains: bool = False
    fallback_to_snapshot: bool = True
    extract_schemes: tuple[str, ...] = ("http", "https")
    max_workers: int = 1

    @staticmethod
    def from_dict(data: dict | None) -> "NormalizerConfig":
        """Build a config from parsed YAML/JSON data.

        Raises:
            jsonschema.ValidationError: Unknown keys or wrongly typed values.
        """
        data = data or {}
        validate(instance=data, schema=CONFIG_SCHEMA)
        return NormalizerConfig(
            default_scheme=str(data.get("default_scheme", "http")).lower(),
            suffix_list_urls=data.get("suffix_list_urls"),
            cache_dir=data.get("cache_dir"),
            include_psl_private_domains=bool(data.get("include_psl_private_domains", False)),
            fallback_to_snapshot=bool(data.get("fallback_to_snapshot", True)),
            extract_schemes=tuple(data.get("extract_schemes", ["http", "https"])),
            max_workers=int(data.get("max_workers", 1)),
        )

    @staticmethod
    def from_file(path: str) -> "NormalizerConfig":
        ext = Path(path).suffix.lower()
        with open(path, "r", encoding="utf-8") as handle:
            if ext in {".yaml", ".yml"}:
                data = yaml.safe_load(handle)
            elif ext == ".json":
                data = json.load(handle)
            else:
                raise ValueError(f"Unsupported config file extension: {ext}")
        return NormalizerConfig.from_dict(data)

    def snapshot(self) -> dict:
        return {
            "default_scheme": self.default_scheme,
            "suffix_list_urls": self.suffix_list_urls,
            "cache_dir": self.cache_dir,
            "include_psl_private_domains": self.include_psl_private_domains,
            "fallback_to_snapshot": self.fallback_to_snapshot,
            "extract_schemes": list(self.extract_schemes),
            "max_workers": self.max_workers,
        }
