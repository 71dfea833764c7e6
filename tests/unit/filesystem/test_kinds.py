"""Unit tests for content-kind classification."""

import logging

import pytest
from lsq.filesystem.kinds import (
    DEFAULT_KINDS,
    MASK_ARCHIVE,
    MASK_AUDIO,
    MASK_CODE,
    MASK_IMAGE,
    MASK_MEDIA,
    MASK_ODEV,
    MASK_VIDEO,
    MASK_ZIP,
    as_mask,
    build_kind_table,
    str_to_mask,
)


class TestStrToMask:
    """Tests for kind token resolution."""

    def test_full_names(self) -> None:
        """Full kind names resolve to their bit."""
        assert str_to_mask("image") == MASK_IMAGE
        assert str_to_mask("video") == MASK_VIDEO
        assert str_to_mask("archive") == MASK_ARCHIVE

    def test_aliases_and_case(self) -> None:
        """Aliases and mixed case resolve like the full name."""
        assert str_to_mask("IMG") == MASK_IMAGE
        assert str_to_mask("vid") == MASK_VIDEO
        assert str_to_mask(" a ") == MASK_AUDIO

    def test_media_is_union(self) -> None:
        """media covers image, video and audio."""
        assert str_to_mask("media") == MASK_IMAGE | MASK_VIDEO | MASK_AUDIO == MASK_MEDIA

    def test_unknown_token_is_zero(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown tokens resolve to 0 and log a warning."""
        with caplog.at_level(logging.WARNING, logger="lsq.filesystem.kinds"):
            assert str_to_mask("spreadsheet") == 0
        assert "Unknown content kind: spreadsheet" in caplog.text

    def test_as_mask_ors_tokens(self) -> None:
        """as_mask combines several tokens."""
        assert as_mask(["image", "code"]) == MASK_IMAGE | MASK_CODE
        assert as_mask([]) == 0


class TestKindTable:
    """Tests for KindTable lookups."""

    def test_mask_for_extension(self) -> None:
        """Files are classified by extension."""
        assert DEFAULT_KINDS.mask_for("photo.jpg") == MASK_IMAGE
        assert DEFAULT_KINDS.mask_for("clip.MKV") == MASK_VIDEO
        assert DEFAULT_KINDS.mask_for("main.py") == MASK_CODE

    def test_no_extension(self) -> None:
        """Names without an extension have no kind."""
        assert DEFAULT_KINDS.mask_for("Makefile") == 0
        assert DEFAULT_KINDS.mask_for("sub") == 0

    def test_dotfile_uses_whole_name(self) -> None:
        """Dotfiles like .gitignore are looked up by their full name."""
        assert DEFAULT_KINDS.mask_for(".gitignore") == MASK_ODEV

    def test_zip_like_is_also_archive(self) -> None:
        """Zip-like extensions carry both the zip and archive bits."""
        mask = DEFAULT_KINDS.mask_for("book.cbz")
        assert mask & MASK_ZIP
        assert mask & MASK_ARCHIVE

    def test_cbr_is_not_zip_like(self) -> None:
        """.cbr is an archive but cannot be expanded as a zip."""
        assert DEFAULT_KINDS.mask_for("book.cbr") == MASK_ARCHIVE
        assert not DEFAULT_KINDS.is_zip_like("book.cbr")
        assert DEFAULT_KINDS.is_zip_like("pack.ZIP")


class TestBuildKindTable:
    """Tests for build_kind_table with user extensions."""

    def test_extra_extensions(self) -> None:
        """Extra extensions extend the named kind."""
        table = build_kind_table({"code": ["zig", ".NIM"]})
        assert table.mask_for("main.zig") == MASK_CODE
        assert table.mask_for("main.nim") == MASK_CODE

    def test_extra_alias(self) -> None:
        """Kind aliases are accepted as keys."""
        table = build_kind_table({"img": [".raw"]})
        assert table.mask_for("shot.raw") == MASK_IMAGE

    def test_extra_zip_implies_archive(self) -> None:
        """Extensions added to zip also become archives."""
        table = build_kind_table({"zip": [".jar"]})
        assert table.is_zip_like("lib.jar")
        assert table.mask_for("lib.jar") & MASK_ARCHIVE

    def test_default_table_unchanged(self) -> None:
        """Building a table with extras leaves DEFAULT_KINDS alone."""
        build_kind_table({"code": [".zig"]})
        assert DEFAULT_KINDS.mask_for("main.zig") == 0

    def test_unknown_kind_rejected(self) -> None:
        """Unknown kinds raise ValueError."""
        with pytest.raises(ValueError, match="unknown kind 'spreadsheet'"):
            build_kind_table({"spreadsheet": [".xls"]})

    def test_union_kind_rejected(self) -> None:
        """media has no extensions of its own."""
        with pytest.raises(ValueError, match="unknown kind 'media'"):
            build_kind_table({"media": [".xyz"]})
