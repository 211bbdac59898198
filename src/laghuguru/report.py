"""
Human-readable report and charts for a prosody + statistics run.

Produces:
- laghuguru_analysis.txt (line-by-line patterns, totals, statistics tables)
- analysis.json (both analyses)
- character_frequency.png, line_weights.png
"""
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .analyzer import analyze_document, load_input
from .config import ToolkitConfig
from .models import PoemAnalysis, TextStatsAnalysis
from .text_stats import compute_document_stats
from .utils import print_header, print_step, save_json, timer


def format_prosody(analysis: PoemAnalysis) -> str:
    out = ["LaghuGuru Analysis Report", "=========================", ""]
    for line in analysis.lines:
        out.append(f"Line {line.index}: {line.original_text}")
        out.append(f"Pattern: {line.pattern}")
        out.append("")
    out.append("--- Summary ---")
    out.append(f"Total Laghu (ಲ): {analysis.total_laghu}")
    out.append(f"Total Guru (ಗು): {analysis.total_guru}")
    return "\n".join(out) + "\n"


def format_statistics(stats: TextStatsAnalysis) -> str:
    out = ["--- Text Statistics ---"]
    out.append(f"Total words: {stats.total_words}")
    out.append(f"Total sentences: {stats.total_sentences}")
    out.append(f"Average words per sentence: {stats.average_words_per_sentence:.2f}")
    out.append(f"Average word length: {stats.average_word_length:.2f}")

    out.append("")
    out.append("--- Character Frequency ---")
    for entry in stats.character_frequency:
        out.append(f"{entry.character}\t{entry.count}")

    for n, grams in stats.ngram_frequencies.items():
        out.append("")
        out.append(f"--- {n}-gram Frequency ---")
        for rank, gram in enumerate(grams, 1):
            out.append(f"{rank:2d}. {gram.phrase} ({gram.count})")
    return "\n".join(out) + "\n"


def format_report(analysis: PoemAnalysis, stats: TextStatsAnalysis) -> str:
    return format_prosody(analysis) + "\n" + format_statistics(stats)


def format_highlight(analysis: PoemAnalysis) -> str:
    """Every syllable tagged with its weight, words separated by ' | '."""
    out = []
    for line in analysis.lines:
        words = [
            " ".join(f"{s.text}/{s.type}" for s in word.syllables)
            for word in line.words
            if word.syllables
        ]
        out.append(f"{line.index:3d}: " + " | ".join(words))
    return "\n".join(out) + "\n"


# =====================================================================
# Charts
# =====================================================================

@timer
def plot_character_frequency(stats: TextStatsAnalysis, path,
                             top_n: int = 40, dpi: int = 150) -> None:
    """Bar chart of the most frequent characters (collation order kept)."""
    ranked = sorted(stats.character_frequency, key=lambda c: c.count,
                    reverse=True)[:top_n]
    chosen = {c.character for c in ranked}
    entries = [c for c in stats.character_frequency if c.character in chosen]

    fig, ax = plt.subplots(figsize=(14, 5))
    ax.bar(range(len(entries)), [c.count for c in entries],
           color="#8B4513", alpha=0.7)
    ax.set_xticks(range(len(entries)))
    ax.set_xticklabels([f"U+{ord(c.character):04X}" for c in entries],
                       rotation=90, fontsize=7)
    ax.set_ylabel("Count")
    ax.set_title(f"Kannada character frequency (top {len(entries)})")
    plt.tight_layout()
    plt.savefig(str(path), dpi=dpi)
    plt.close(fig)


@timer
def plot_line_weights(analysis: PoemAnalysis, path, dpi: int = 150) -> None:
    """Stacked Laghu/Guru counts per line."""
    idx = np.arange(1, len(analysis.lines) + 1)
    laghu = np.array([line.laghu_count for line in analysis.lines])
    guru = np.array([line.guru_count for line in analysis.lines])

    fig, ax = plt.subplots(figsize=(12, 5))
    ax.bar(idx, laghu, color="#1f77b4", alpha=0.7, label="Laghu")
    ax.bar(idx, guru, bottom=laghu, color="#d62728", alpha=0.7, label="Guru")
    ax.set_xlabel("Line")
    ax.set_ylabel("Syllables")
    ax.set_title("Laghu / Guru per line")
    ax.legend()
    plt.tight_layout()
    plt.savefig(str(path), dpi=dpi)
    plt.close(fig)


def run(config: ToolkitConfig, force: bool = False) -> None:
    """Entry point for the report command."""
    print_header("LAGHUGURU - Report")
    config.ensure_dirs()

    report_path = config.report_dir / "laghuguru_analysis.txt"
    if report_path.exists() and not force:
        print("  Report already present, skip (use --force to rerun)")
        return

    print_step(f"Reading {config.input_path}...")
    text = load_input(config)

    print_step("Prosody analysis...")
    analysis = analyze_document(text, config.max_line_width)

    print_step("Text statistics...")
    stats = compute_document_stats(text, config)

    print_step("Writing report...")
    report_path.write_text(format_report(analysis, stats), encoding="utf-8")
    (config.report_dir / "highlight.txt").write_text(
        format_highlight(analysis), encoding="utf-8")
    save_json(
        {"prosody": analysis.to_dict(), "statistics": stats.to_dict()},
        config.report_dir / "analysis.json",
    )

    print_step("Charts...")
    if stats.character_frequency:
        plot_character_frequency(
            stats, config.report_dir / "character_frequency.png",
            top_n=config.top_n_chars_plot, dpi=config.plot_dpi,
        )
    if analysis.lines:
        plot_line_weights(analysis, config.report_dir / "line_weights.png",
                          dpi=config.plot_dpi)

    print(f"\n  Report: {report_path}")
