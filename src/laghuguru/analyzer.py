"""
Prosody analysis: syllabify every line of a poem, classify each syllable
as Laghu or Guru, and rebuild the word-aligned pattern.
"""
import click

from .assemble import assemble_line
from .config import ToolkitConfig
from .ingest import IngestError, extract_text
from .models import PoemAnalysis, Syllable
from .prosody import GURU, LAGHU, classify_sequence
from .reformat import wrap_lines
from .syllabify import iter_syllable_spans
from .utils import print_header, print_step, save_json, timer


def analyze_line(index: int, line: str):
    """Analyze one already-trimmed line."""
    spans = list(iter_syllable_spans(line))
    raw = [line[start:end] for start, end in spans]
    labels = classify_sequence(raw)
    syllables = [Syllable(text=t, type=lab) for t, lab in zip(raw, labels)]
    return assemble_line(index, line, syllables, spans)


def analyze_prosody(text: str) -> PoemAnalysis:
    """Analyze a whole poem. Blank lines are dropped before numbering."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    lines = [line.strip() for line in text.split("\n") if line.strip()]
    analyzed = tuple(analyze_line(i + 1, line) for i, line in enumerate(lines))

    total_laghu = 0
    total_guru = 0
    for line in analyzed:
        for syllable in line.syllables:
            if syllable.type == LAGHU:
                total_laghu += 1
            elif syllable.type == GURU:
                total_guru += 1

    return PoemAnalysis(
        lines=analyzed,
        total_laghu=total_laghu,
        total_guru=total_guru,
    )


def load_input(config: ToolkitConfig) -> str:
    """Read the configured input document, mapping failures to Click errors."""
    if not config.input_path.exists():
        raise click.ClickException(
            f"File not found: {config.input_path}\n"
            f"  Pass the poem with --input /path/to/poem.txt"
        )
    try:
        return extract_text(config.input_path, config.garble_threshold)
    except IngestError as e:
        raise click.ClickException(str(e)) from e


@timer
def analyze_document(text: str, max_line_width: int = 0) -> PoemAnalysis:
    return analyze_prosody(wrap_lines(text, max_line_width))


def run(config: ToolkitConfig, force: bool = False) -> None:
    """Entry point for the prosody command."""
    print_header("LAGHUGURU - Prosody Analysis")
    config.ensure_dirs()

    report_path = config.prosody_dir / "prosody.json"
    if report_path.exists() and not force:
        print("  Prosody analysis already present, skip (use --force to rerun)")
        return

    print_step(f"Reading {config.input_path}...")
    text = load_input(config)
    print(f"    {len(text)} characters")

    print_step("Syllabification and Laghu/Guru classification...")
    analysis = analyze_document(text, config.max_line_width)

    save_json(analysis.to_dict(), report_path)

    print(f"\n  Lines:        {len(analysis.lines)}")
    print(f"  Syllables:    {analysis.total_syllables}")
    print(f"  Total Laghu:  {analysis.total_laghu}")
    print(f"  Total Guru:   {analysis.total_guru}")
    for line in analysis.lines[:5]:
        print(f"\n    {line.index:3d}: {line.original_text}")
        for pattern_line in line.pattern.split("\n"):
            print(f"         {pattern_line}")
    print(f"\n  Full analysis: {report_path}")
