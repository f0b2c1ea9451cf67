"""Exporter that turns tagged notes into Hugo content pages."""

import shutil
from pathlib import Path
from typing import Dict, List, Optional, TextIO, Union

from .logger import logger
from .models import ExportResult, SiteConfig
from .utils import (
    TITLE_LINE_RE,
    is_tag_line,
    note_date,
    note_id_from_filename,
    open_note,
    slug_from_title,
    strip_line_ending,
    tags_from_file,
    yield_note_files,
)


class ExportError(RuntimeError):
    """Raised when the export can't start at all."""


ATTACHMENTS_DIRNAME = "files"


def write_front_matter(out: TextIO, title: str, date: str, slug: str) -> None:
    """Write the page front matter.

    Values are written verbatim between double quotes, without YAML
    escaping.
    """
    out.write("---\n")
    out.write(f'title: "{title}"\n')
    out.write(f"date: {date}\n")
    out.write(f'slug: "{slug}"\n')
    out.write("---\n")


class NoteExporter:
    """Exports notes carrying publish tags into a Hugo website."""

    def __init__(self, config: SiteConfig, notes_dir: Union[str, Path], site_dir: Union[str, Path]):
        """Initialize exporter.

        Args:
            config: Website export configuration
            notes_dir: Directory holding the notes
            site_dir: Hugo website root
        """
        self.config = config
        self.notes_dir = Path(notes_dir)
        self.site_dir = Path(site_dir)
        self.result = ExportResult()

        logger.debug(f"Notes directory: {self.notes_dir}")
        logger.debug(f"Site directory: {self.site_dir}")

    def export(self) -> ExportResult:
        """Export every note that carries a configured publish tag.

        Returns:
            Export statistics with any warnings and errors

        Raises:
            ExportError: If the notes directory can't be read or a target
                directory can't be created
        """
        if not self.config.publish_tags:
            msg = "No publish tags configured, nothing to export"
            logger.warning(msg)
            self.result.warnings.append(msg)
            return self.result

        tag_targets = self._prepare_tag_targets()

        try:
            note_paths: List[Path] = list(yield_note_files(self.notes_dir))
        except OSError as e:
            raise ExportError(f"Could not read notes directory: {e}") from e

        logger.info(f"Scanning {len(note_paths)} notes in {self.notes_dir}")

        for note_path in note_paths:
            self.result.scanned_notes += 1
            self.process_note(note_path, tag_targets)

        logger.info(
            f"Export finished: {self.result.exported_notes} pages, "
            f"{self.result.copied_attachments} attachments"
        )
        return self.result

    def _prepare_tag_targets(self) -> Dict[str, Path]:
        tag_targets = self.config.tag_targets(self.site_dir)
        for tag_name, target_dir in tag_targets.items():
            try:
                target_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ExportError(f"Failed to create target directory '{target_dir}': {e}") from e
            logger.debug(f"   Mapping: #{tag_name} -> {target_dir}")
        return tag_targets

    def process_note(self, note_path: Path, tag_targets: Dict[str, Path]) -> None:
        """Export one note once for every publish tag it carries."""
        try:
            tags = tags_from_file(note_path)
        except OSError as e:
            error_msg = f"Error reading file, skipping {note_path.name}: {e}"
            logger.error(error_msg)
            self.result.errors.append(error_msg)
            return

        matched = False
        for tag in tags:
            target_dir = tag_targets.get(tag)
            if target_dir is None:
                continue
            matched = True
            self.transfer_note(note_path.name, self.notes_dir, target_dir)

        if not matched:
            logger.debug(f"No publish tag in {note_path.name} (tags: {tags})")
            self.result.skipped_files += 1

    def transfer_note(self, note_filename: str, notes_dir: Path, target_dir: Path) -> Optional[str]:
        """Rewrite a note into a page in the target directory.

        Lines before the first level 1 heading are dropped, the heading
        becomes front matter, blank lines right after it are skipped and tag
        lines are removed from the body. Attachments are copied afterwards.

        Args:
            note_filename: Note file name inside notes_dir
            notes_dir: Directory holding the note
            target_dir: Content directory to write the page to

        Returns:
            Slug of the page, or None if the note could not be exported
        """
        logger.info(f"Exporting note {note_filename} to {target_dir}")

        note_id = note_id_from_filename(note_filename)
        if note_id is None:
            error_msg = f"Not a note file name: {note_filename}"
            logger.error(error_msg)
            self.result.errors.append(error_msg)
            return None

        source_path = Path(notes_dir) / note_filename
        target_path = Path(target_dir) / f"{note_id}.md"
        date = note_date(note_id)
        slug = ""

        # The note is read in full so a failed read leaves the page alone.
        try:
            with open_note(source_path) as source:
                lines = source.readlines()
        except OSError as e:
            error_msg = f"Couldn't open note {source_path}: {e}"
            logger.error(error_msg)
            self.result.errors.append(error_msg)
            return None

        front_matter = False
        empty_skipped = False
        try:
            with open_note(target_path, "w") as target:
                for raw_line in lines:
                    line = strip_line_ending(raw_line)
                    if not front_matter:
                        # Skip lines until the first level 1 heading.
                        match = TITLE_LINE_RE.match(line)
                        if match:
                            title = match.group(1)
                            slug = slug_from_title(title)
                            write_front_matter(target, title, date, slug)
                            front_matter = True
                        continue
                    # Tag lines don't end the blank run after the title.
                    if is_tag_line(line):
                        continue
                    if not empty_skipped:
                        if line == "":
                            continue
                        empty_skipped = True
                    target.write(line + "\n")
        except OSError as e:
            error_msg = f"Couldn't write target {target_path}: {e}"
            logger.error(error_msg)
            self.result.errors.append(error_msg)
            return None

        if not front_matter:
            # Page stays empty.
            warning_msg = f"No title line in {note_filename}, wrote empty page {target_path}"
            logger.warning(warning_msg)
            self.result.warnings.append(warning_msg)

        self.result.exported_notes += 1
        self.result.copied_attachments += self.copy_note_files(note_id, slug, notes_dir, target_dir)
        return slug

    def copy_note_files(self, note_id: str, slug: str, notes_dir: Path, target_dir: Path) -> int:
        """Copy the attachment bundle of a note next to its page.

        Files in ``<notes_dir>/files/<id>/`` go to
        ``<target_dir>/<slug>/files/<id>/``. Subdirectories are not copied.

        Returns:
            Number of files copied
        """
        source_dir = Path(notes_dir) / ATTACHMENTS_DIRNAME / note_id
        if not source_dir.is_dir():
            return 0

        dest_dir = Path(target_dir) / slug / ATTACHMENTS_DIRNAME / note_id
        try:
            dest_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            error_msg = f"Failed to create attachment directory {dest_dir}: {e}"
            logger.error(error_msg)
            self.result.errors.append(error_msg)
            return 0

        try:
            entries = sorted(source_dir.iterdir())
        except OSError as e:
            error_msg = f"Failed to list attachments in {source_dir}: {e}"
            logger.error(error_msg)
            self.result.errors.append(error_msg)
            return 0

        copied = 0
        for source_path in entries:
            if source_path.is_dir():
                logger.debug(f"   Skipping attachment directory: {source_path}")
                continue
            try:
                shutil.copyfile(source_path, dest_dir / source_path.name)
                copied += 1
                logger.debug(f"   Copied attachment: {source_path.name}")
            except OSError as e:
                error_msg = f"Failed to copy file {source_path}: {e}"
                logger.error(error_msg)
                self.result.errors.append(error_msg)
        return copied
