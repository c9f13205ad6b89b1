"""End-to-end tests for the site build pipeline."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from conftest import BASE_MTIME, write_doc
from mdshelf.builder import SiteBuilder, check_output_ids
from mdshelf.config import SiteConfig
from mdshelf.exceptions import IdentifierCollisionError, InputAccessError, OutputWriteError
from mdshelf.utils.files import compute_sha256, write_text


def _snapshot(directory: Path) -> dict[str, bytes]:
    return {
        str(path.relative_to(directory)): path.read_bytes()
        for path in sorted(directory.rglob("*"))
        if path.is_file()
    }


class TestCheckOutputIds:
    """Tests for check_output_ids."""

    def test_unique_ids_pass(self, make_record) -> None:
        check_output_ids([make_record("a"), make_record("b", "x")])

    def test_flattened_collision_detected(self, make_record) -> None:
        """Folder a/b file c and folder a file b_c both want a_b_c."""
        first = make_record("c", "a/b")
        second = make_record("b_c", "a")

        with pytest.raises(IdentifierCollisionError) as exc_info:
            check_output_ids([first, second])

        assert exc_info.value.output_id == "a_b_c"
        assert set(exc_info.value.paths) == {first.source_path, second.source_path}

    def test_index_is_reserved(self, make_record) -> None:
        """A root-level index.md would overwrite the dashboard."""
        with pytest.raises(IdentifierCollisionError):
            check_output_ids([make_record("index")])

    def test_nested_index_allowed(self, make_record) -> None:
        check_output_ids([make_record("index", "notes")])


class TestSiteBuilder:
    """Tests for SiteBuilder."""

    def test_example_tree(self, sample_tree: Path, tmp_path: Path) -> None:
        """Root and nested documents produce cross-linked pages."""
        out = tmp_path / "site"

        stats = SiteBuilder(SiteConfig(root_dir=sample_tree, output_dir=out)).build()

        assert (out / "root.html").exists()
        assert (out / "notes_sub.html").exists()
        assert (out / "index.html").exists()
        assert (out / "styles.css").exists()
        assert (stats.documents, stats.groups, stats.pages, stats.assets) == (2, 2, 3, 0)

        index = (out / "index.html").read_text(encoding="utf-8")
        assert index.index("根目录") < index.index('id="notes"')
        assert 'href="root.html"' in index
        assert 'href="notes_sub.html"' in index

        sub = (out / "notes_sub.html").read_text(encoding="utf-8")
        assert '<a href="root.html" class="nav-link">Root Doc</a>' in sub
        assert '<a href="notes_sub.html" class="nav-link active">Sub</a>' in sub
        assert '<div class="doc-breadcrumb">notes</div>' in sub
        assert "<p>Detail here.</p>" in sub

        root = (out / "root.html").read_text(encoding="utf-8")
        assert "doc-breadcrumb" not in root

    def test_title_fallback_page(self, tmp_path: Path) -> None:
        """A document without heading is titled by its file name."""
        root = tmp_path / "docs"
        write_doc(root, "plan.md", "just notes")
        out = tmp_path / "site"

        SiteBuilder(SiteConfig(root_dir=root, output_dir=out)).build()

        assert "<h1>plan</h1>" in (out / "plan.html").read_text(encoding="utf-8")

    def test_ignored_dist_contributes_nothing(self, tmp_path: Path) -> None:
        """A directory named dist anywhere is skipped."""
        root = tmp_path / "docs"
        write_doc(root, "a.md", "# A")
        write_doc(root, "dist/old.md", "# Old")
        write_doc(root, "notes/dist/older.md", "# Older")
        out = tmp_path / "site"

        stats = SiteBuilder(SiteConfig(root_dir=root, output_dir=out, ignore_names={"dist"})).build()

        assert stats.documents == 1
        assert sorted(p.name for p in out.glob("*.html")) == ["a.html", "index.html"]

    def test_default_output_inside_root(self, sample_tree: Path) -> None:
        """Building twice into ROOT/dist never picks up generated files."""
        config = SiteConfig(root_dir=sample_tree)

        SiteBuilder(config).build()
        stats = SiteBuilder(config).build()

        assert stats.documents == 2
        assert (sample_tree / "dist" / "index.html").exists()

    def test_idempotent(self, sample_tree: Path, tmp_path: Path) -> None:
        """Rebuilding an unchanged tree gives byte-identical output."""
        first_out = tmp_path / "first"
        second_out = tmp_path / "second"

        SiteBuilder(SiteConfig(root_dir=sample_tree, output_dir=first_out)).build()
        SiteBuilder(SiteConfig(root_dir=sample_tree, output_dir=second_out)).build()

        assert _snapshot(first_out) == _snapshot(second_out)

    def test_stats_record_hashes(self, sample_tree: Path, tmp_path: Path) -> None:
        out = tmp_path / "site"

        stats = SiteBuilder(SiteConfig(root_dir=sample_tree, output_dir=out)).build()

        assert {f.path.name for f in stats.written_files} == {
            "root.html",
            "notes_sub.html",
            "index.html",
            "styles.css",
        }
        for emitted in stats.written_files:
            assert emitted.sha256 == compute_sha256(emitted.path)

    def test_assets_copied(self, sample_tree: Path, tmp_path: Path) -> None:
        assets = tmp_path / "png"
        assets.mkdir()
        (assets / "chart.png").write_bytes(b"\x89PNG")
        out = tmp_path / "site"

        stats = SiteBuilder(SiteConfig(root_dir=sample_tree, output_dir=out, asset_dir=assets)).build()

        assert stats.assets == 1
        assert (out / "png" / "chart.png").read_bytes() == b"\x89PNG"

    def test_missing_asset_dir_fails_before_writing(self, sample_tree: Path, tmp_path: Path) -> None:
        """No page is written when the asset directory is missing."""
        out = tmp_path / "site"
        config = SiteConfig(root_dir=sample_tree, output_dir=out, asset_dir=tmp_path / "missing")

        with pytest.raises(InputAccessError):
            SiteBuilder(config).build()

        assert not out.exists()

    def test_missing_root(self, tmp_path: Path) -> None:
        config = SiteConfig(root_dir=tmp_path / "missing", output_dir=tmp_path / "site")

        with pytest.raises(InputAccessError):
            SiteBuilder(config).build()

    def test_collision_aborts_before_writing(self, tmp_path: Path) -> None:
        """Colliding documents abort the build with nothing written."""
        root = tmp_path / "docs"
        write_doc(root, "a/b/c.md", "# One")
        write_doc(root, "a/b_c.md", "# Two")
        out = tmp_path / "site"

        with pytest.raises(IdentifierCollisionError):
            SiteBuilder(SiteConfig(root_dir=root, output_dir=out)).build()

        assert not out.exists()

    def test_write_failure_keeps_previous_site(self, sample_tree: Path, tmp_path: Path) -> None:
        """A failure halfway through leaves the last good site in place."""
        out = tmp_path / "site"
        out.mkdir()
        (out / "index.html").write_text("previous build")

        def failing_write(path: Path, content: str) -> None:
            if path.name == "index.html":
                raise OutputWriteError(path, "disk full")
            write_text(path, content)

        with patch("mdshelf.site.emitter.write_text", side_effect=failing_write):
            with pytest.raises(OutputWriteError):
                SiteBuilder(SiteConfig(root_dir=sample_tree, output_dir=out)).build()

        assert sorted(p.name for p in out.iterdir()) == ["index.html"]
        assert (out / "index.html").read_text() == "previous build"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["docs", "site"]

    def test_rebuild_drops_stale_pages(self, sample_tree: Path, tmp_path: Path) -> None:
        """Pages of deleted documents do not survive a rebuild."""
        out = tmp_path / "site"
        SiteBuilder(SiteConfig(root_dir=sample_tree, output_dir=out)).build()
        (sample_tree / "notes" / "sub.md").unlink()

        SiteBuilder(SiteConfig(root_dir=sample_tree, output_dir=out)).build()

        assert not (out / "notes_sub.html").exists()
        assert (out / "root.html").exists()

    def test_output_replacing_root_refused(self, sample_tree: Path) -> None:
        """The output directory may not be the source tree itself."""
        with pytest.raises(OutputWriteError):
            SiteBuilder(SiteConfig(root_dir=sample_tree, output_dir=sample_tree)).build()

        assert (sample_tree / "root.md").exists()

    def test_output_containing_assets_refused(self, sample_tree: Path, tmp_path: Path) -> None:
        out = tmp_path / "site"
        assets = out / "png"
        assets.mkdir(parents=True)

        with pytest.raises(OutputWriteError):
            SiteBuilder(SiteConfig(root_dir=sample_tree, output_dir=out, asset_dir=assets)).build()

        assert assets.exists()

    def test_empty_tree(self, tmp_path: Path) -> None:
        """An empty tree still yields an index and stylesheet."""
        root = tmp_path / "docs"
        root.mkdir()
        out = tmp_path / "site"

        stats = SiteBuilder(SiteConfig(root_dir=root, output_dir=out)).build()

        assert stats.documents == 0
        assert "0 篇文档" in (out / "index.html").read_text(encoding="utf-8")

    def test_scan_sorted_newest_first(self, tmp_path: Path) -> None:
        root = tmp_path / "docs"
        write_doc(root, "old.md", "x", mtime=BASE_MTIME)
        write_doc(root, "new.md", "x", mtime=BASE_MTIME + 50)

        docs = SiteBuilder(SiteConfig(root_dir=root)).scan()

        assert [doc.base_name for doc in docs] == ["new", "old"]

    def test_plan_uses_renderer(self, sample_tree: Path) -> None:
        """The configured renderer produces every document body."""

        class UpperRenderer:
            def render(self, text: str) -> str:
                return f"<pre>{text.upper()}</pre>"

        builder = SiteBuilder(SiteConfig(root_dir=sample_tree), renderer=UpperRenderer())
        plan = builder.plan(builder.scan())

        assert "<pre># SUB\nDETAIL HERE.</pre>" in plan.pages["notes_sub.html"]
        assert list(plan.pages) == ["root.html", "notes_sub.html", "index.html", "styles.css"]
