"""Data models for the N2H exporter."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List


@dataclass(frozen=True)
class PublishTag:
    """A tag that publishes notes into a Hugo content section."""

    name: str
    target: str


@dataclass(frozen=True)
class Page:
    """A single note exported as a standalone page (not processed yet)."""

    id: str
    target: str


@dataclass(frozen=True)
class SiteConfig:
    """Export configuration for one website."""

    publish_tags: List[PublishTag] = field(default_factory=list)
    pages: List[Page] = field(default_factory=list)

    def tag_targets(self, site_dir: Path) -> Dict[str, Path]:
        """Map publish tag names to their content directories.

        A tag name defined more than once maps to its last definition.

        Args:
            site_dir: Hugo website root

        Returns:
            Dictionary mapping tag name to ``site_dir/content/<target>``
        """
        targets: Dict[str, Path] = {}
        for tag in self.publish_tags:
            targets[tag.name] = Path(site_dir) / "content" / tag.target
        return targets


@dataclass
class ExportResult:
    """Result of an export run."""

    scanned_notes: int = 0
    exported_notes: int = 0
    copied_attachments: int = 0
    skipped_files: int = 0
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if every note was exported without errors."""
        return len(self.errors) == 0
