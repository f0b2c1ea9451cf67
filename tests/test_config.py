"""Tests for site configuration loading and tag routing."""

from pathlib import Path

import pytest

from n2h.config import ConfigurationError, config_path, load_config, parse_config
from n2h.models import Page, PublishTag, SiteConfig


class TestLoadConfig:
    """Test reading sites/<name>.yaml files."""

    def test_config_path(self, notes_dir):
        assert config_path(notes_dir, "blog") == notes_dir / "sites" / "blog.yaml"

    def test_load_publish_tags_and_pages(self, notes_dir, write_config):
        write_config(
            publish_tags=[
                {"name": "public", "target": "posts"},
                {"name": "til", "target": "til"},
            ],
            pages=[{"id": "202102012138", "target": "about"}],
        )

        config = load_config(config_path(notes_dir, "blog"))

        assert config.publish_tags == [
            PublishTag(name="public", target="posts"),
            PublishTag(name="til", target="til"),
        ]
        assert config.pages == [Page(id="202102012138", target="about")]

    def test_unquoted_page_id_is_string(self, notes_dir):
        config_file = notes_dir / "sites" / "blog.yaml"
        config_file.write_text("pages:\n  - id: 202102012138\n    target: about\n", encoding="utf-8")

        config = load_config(config_file)

        assert config.pages == [Page(id="202102012138", target="about")]
        assert config.publish_tags == []

    def test_empty_file(self, notes_dir):
        config_file = notes_dir / "sites" / "empty.yaml"
        config_file.write_text("", encoding="utf-8")

        assert load_config(config_file) == SiteConfig()

    def test_missing_file(self, notes_dir):
        with pytest.raises(ConfigurationError, match="Could not load config file"):
            load_config(notes_dir / "sites" / "missing.yaml")

    def test_invalid_yaml(self, notes_dir):
        config_file = notes_dir / "sites" / "broken.yaml"
        config_file.write_text("publish_tags: [\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(config_file)


class TestParseConfig:
    """Test validation of decoded config documents."""

    def test_top_level_must_be_mapping(self):
        with pytest.raises(ConfigurationError, match="top level must be a mapping"):
            parse_config(["public"])

    def test_publish_tags_must_be_list(self):
        with pytest.raises(ConfigurationError, match="'publish_tags' must be a list"):
            parse_config({"publish_tags": {"name": "public"}})

    def test_entry_must_be_mapping(self):
        with pytest.raises(ConfigurationError, match=r"publish_tags\[0\] must be a mapping"):
            parse_config({"publish_tags": ["public"]})

    def test_entry_needs_target(self):
        with pytest.raises(ConfigurationError, match=r"publish_tags\[1\] needs a 'target' value"):
            parse_config({"publish_tags": [
                {"name": "public", "target": "posts"},
                {"name": "til"},
            ]})

    def test_page_needs_id(self):
        with pytest.raises(ConfigurationError, match=r"pages\[0\] needs a 'id' value"):
            parse_config({"pages": [{"target": "about"}]})

    def test_unknown_keys_are_ignored(self):
        config = parse_config({"title": "Blog", "publish_tags": []})
        assert config == SiteConfig()


class TestTagTargets:
    """Test mapping publish tags to content directories."""

    def test_targets_under_content(self, tmp_path):
        config = SiteConfig(publish_tags=[
            PublishTag(name="public", target="posts"),
            PublishTag(name="til", target="notes/til"),
        ])

        targets = config.tag_targets(tmp_path)

        assert targets == {
            "public": tmp_path / "content" / "posts",
            "til": tmp_path / "content" / "notes" / "til",
        }

    def test_duplicate_tag_last_wins(self, tmp_path):
        config = SiteConfig(publish_tags=[
            PublishTag(name="public", target="posts"),
            PublishTag(name="public", target="articles"),
        ])

        assert config.tag_targets(tmp_path) == {"public": tmp_path / "content" / "articles"}

    def test_accepts_string_site_dir(self):
        config = SiteConfig(publish_tags=[PublishTag(name="public", target="posts")])
        assert config.tag_targets("/srv/site") == {"public": Path("/srv/site/content/posts")}
