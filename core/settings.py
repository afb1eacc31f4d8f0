"""
Settings for textops.

Loads optional YAML configuration. Every value has a default, so running
without a config file behaves exactly like the built-in demo.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict

import yaml


DEFAULT_ENCODING = "utf-8"
DEFAULT_AUDIT_LOG = "data/audit_log.jsonl"
DEFAULT_DEMO_FILE = "demo_file.txt"
DEFAULT_DEMO_COPY = "demo_file_copy.txt"


def _string(value: Any, default: str) -> str:
    """Keep non-empty string values; anything else falls back to the default."""
    if isinstance(value, str) and value:
        return value
    return default


@dataclass
class Settings:
    """Runtime settings, optionally backed by a YAML file."""
    encoding: str = DEFAULT_ENCODING
    audit_log: str = DEFAULT_AUDIT_LOG
    demo_file: str = DEFAULT_DEMO_FILE
    demo_copy: str = DEFAULT_DEMO_COPY
    config_path: Path = field(default=Path("config.yaml"), repr=False)

    @classmethod
    def load(cls, config_path: str = "config.yaml") -> "Settings":
        """
        Load settings from a YAML file.

        A missing or unreadable file yields the defaults. Keys may be nested
        under a top-level ``textops`` mapping or given bare.
        """
        path = Path(config_path)
        data = cls._read_yaml(path)

        demo = data.get("demo")
        if not isinstance(demo, dict):
            demo = {}
        return cls(
            encoding=_string(data.get("encoding"), DEFAULT_ENCODING),
            audit_log=_string(data.get("audit_log"), DEFAULT_AUDIT_LOG),
            demo_file=_string(demo.get("file"), DEFAULT_DEMO_FILE),
            demo_copy=_string(demo.get("copy"), DEFAULT_DEMO_COPY),
            config_path=path,
        )

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            return {}

        if not isinstance(config, dict):
            return {}
        section = config.get("textops", config)
        return section if isinstance(section, dict) else {}

    def to_dict(self) -> Dict[str, Any]:
        """Settings in the shape written to the config file."""
        values = asdict(self)
        values.pop("config_path")
        return {
            "encoding": values["encoding"],
            "audit_log": values["audit_log"],
            "demo": {
                "file": values["demo_file"],
                "copy": values["demo_copy"],
            },
        }

    def save(self) -> None:
        """Save current settings, keeping unrelated top-level keys."""
        config: Dict[str, Any] = {}
        if self.config_path.exists():
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    existing = yaml.safe_load(f) or {}
                if isinstance(existing, dict):
                    config = existing
            except (OSError, yaml.YAMLError):
                config = {}

        config["textops"] = self.to_dict()

        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.dump(config, f, default_flow_style=False)
