"""
LaghuGuru - global configuration as a dataclass.
"""
from dataclasses import dataclass
from pathlib import Path


@dataclass
class ToolkitConfig:
    """Configuration shared by every command of the toolkit."""

    # === PATHS ===
    input_path: Path = Path("poem.txt")
    output_dir: Path = Path("output")

    # === INGESTION ===
    garble_threshold: float = 50.0  # minimum % of Kannada characters in PDF text

    # === PROSODY ===
    max_line_width: int = 0  # 0 = keep lines as written

    # === STATISTICS ===
    top_k_unigrams: int = 20
    top_k_ngrams: int = 10
    max_ngram: int = 15

    # === REPORT ===
    plot_dpi: int = 150
    top_n_chars_plot: int = 40

    # --- Derived paths ---

    @property
    def prosody_dir(self) -> Path:
        return self.output_dir / "prosody"

    @property
    def stats_dir(self) -> Path:
        return self.output_dir / "stats"

    @property
    def report_dir(self) -> Path:
        return self.output_dir / "report"

    def ensure_dirs(self) -> None:
        """Create every output directory."""
        for d in [self.prosody_dir, self.stats_dir, self.report_dir]:
            d.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_overrides(cls, **kwargs) -> "ToolkitConfig":
        """Build a config ignoring None values (for Click integration)."""
        filtered = {k: v for k, v in kwargs.items() if v is not None}
        return cls(**filtered)
