"""Decision cache persisted as individual YAML files."""

import hashlib
import logging
import re
from datetime import date
from pathlib import Path
from typing import Optional

import yaml

from news_imagery.core import POLICY_VERSION, DecisionCache, ImageDecision
from news_imagery.core.classifier import is_brand_by_filename, is_generic_image

logger = logging.getLogger(__name__)


class YamlDecisionCache(DecisionCache):
    """Store one YAML artifact per normalized article title."""

    def __init__(self, storage_dir: Path) -> None:
        self.storage_dir = storage_dir

    def get(self, key: str) -> Optional[ImageDecision]:
        """Load a stored decision; unreadable or malformed files count as absent."""
        artifact_path = self._get_artifact_path(key)
        if not artifact_path.exists():
            return None

        try:
            with open(artifact_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return ImageDecision.from_dict(data["decision"])
        except (OSError, yaml.YAMLError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring unreadable cache entry {artifact_path.name}: {e}")
            return None

    def set(self, key: str, decision: ImageDecision) -> None:
        """Write (or overwrite) the artifact for ``key``.

        Raises:
            OSError: The artifact could not be written.
        """
        artifact_path = self._get_artifact_path(key)
        artifact_path.parent.mkdir(parents=True, exist_ok=True)

        artifact = {
            "key": key,
            "date_cached": date.today().isoformat(),
            "decision": decision.to_dict(),
        }

        with open(artifact_path, "w", encoding="utf-8") as f:
            yaml.dump(artifact, f, allow_unicode=True, default_flow_style=False, sort_keys=False)

    def clear(self) -> None:
        for artifact_path in self._artifacts():
            artifact_path.unlink()

    def _artifacts(self) -> list[Path]:
        if not self.storage_dir.exists():
            return []
        return sorted(self.storage_dir.glob("*.yaml"))

    def _get_artifact_path(self, key: str) -> Path:
        """Get path for artifact file."""
        safe_key = re.sub(r"[^\w\s-]", "", key)
        safe_key = re.sub(r"[-\s]+", "-", safe_key).strip("-")
        safe_key = safe_key[:50]

        # Hash keeps distinct titles with the same slug apart
        key_hash = hashlib.md5(key.encode()).hexdigest()[:8]

        return self.storage_dir / f"{safe_key}_{key_hash}.yaml"

    def _load_all(self) -> list[dict]:
        entries = []
        for artifact_path in self._artifacts():
            try:
                with open(artifact_path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
                if isinstance(data, dict) and isinstance(data.get("decision"), dict):
                    entries.append(data)
            except (OSError, yaml.YAMLError):
                continue
        return entries

    def get_stats(self, sample_size: int = 5) -> dict:
        """Get statistics about cached decisions."""
        entries = self._load_all()
        filenames = [entry["decision"].get("filename", "") for entry in entries]

        return {
            "size": len(entries),
            "sample_entries": [
                {"key": entry.get("key", ""), "filename": entry["decision"].get("filename", "")}
                for entry in entries[:sample_size]
            ],
            "policy_version": POLICY_VERSION,
            "stale_count": sum(
                1 for entry in entries
                if entry["decision"].get("policy_version") != POLICY_VERSION
            ),
            "brand_image_count": sum(1 for name in filenames if is_brand_by_filename(name)),
            "generic_image_count": sum(1 for name in filenames if is_generic_image(name)),
        }

    def prune_stale(self) -> int:
        """Remove entries written under another policy version.

        Returns:
            Number of artifacts removed
        """
        removed = 0
        for artifact_path in self._artifacts():
            try:
                with open(artifact_path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
                version = (data.get("decision") or {}).get("policy_version")
            except (OSError, yaml.YAMLError, AttributeError):
                version = None

            if version != POLICY_VERSION:
                artifact_path.unlink()
                removed += 1
        return removed
