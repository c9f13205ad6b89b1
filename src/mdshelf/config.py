"""Build configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_IGNORE_NAMES = frozenset({"node_modules", ".git", ".netlify", ".vs", "dist", "png"})
DEFAULT_ROOT_LABEL = "根目录"


@dataclass(slots=True)
class SiteConfig:
    root_dir: Path = Path(".")
    output_dir: Path | None = None
    asset_dir: Path | None = None
    ignore_names: frozenset[str] = field(default_factory=lambda: DEFAULT_IGNORE_NAMES)
    extension: str = ".md"
    description_max_chars: int = 150
    ellipsis: str = "..."
    root_label: str = DEFAULT_ROOT_LABEL
    site_title: str = "工作文档仓库"
    site_subtitle: str = "Stock Investment Documentation Dashboard"
    footer_text: str = "工作相关笔记"
    lang: str = "zh-CN"
    asset_subdir: str = "png"
    stylesheet_name: str = "styles.css"

    def __post_init__(self) -> None:
        self.root_dir = Path(self.root_dir)
        if self.output_dir is None:
            self.output_dir = self.root_dir / "dist"
        self.output_dir = Path(self.output_dir)
        if self.asset_dir is not None:
            self.asset_dir = Path(self.asset_dir)
        self.ignore_names = frozenset(self.ignore_names)

    def resolve_output_dir(self, base_dir: Path | None = None) -> Path:
        output = Path(self.output_dir)
        if output.is_absolute() or base_dir is None:
            return output
        return base_dir / output

    def excluded_dirs(self) -> frozenset[Path]:
        """Resolved output and asset directories, which are never scanned."""
        return frozenset(
            Path(candidate).resolve()
            for candidate in (self.output_dir, self.asset_dir)
            if candidate is not None
        )
