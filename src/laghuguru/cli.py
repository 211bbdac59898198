"""
Unified CLI for LaghuGuru.

Entry point: laghuguru
"""
from pathlib import Path

import click

from .config import ToolkitConfig


@click.group()
@click.option("--input", "input_path", type=click.Path(exists=False, path_type=Path),
              default=None,
              help="Poem to analyze (.txt, .pdf or .docx).")
@click.option("--output-dir", type=click.Path(path_type=Path), default=None,
              help="Output directory (default: output/).")
@click.option("--force", is_flag=True, default=False,
              help="Rerun even if the output already exists.")
@click.pass_context
def cli(ctx, input_path, output_dir, force):
    """Kannada Chandas (Laghu/Guru) and text statistics toolkit."""
    ctx.ensure_object(dict)
    overrides = {}
    if input_path is not None:
        overrides["input_path"] = input_path
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    ctx.obj["config"] = ToolkitConfig.from_overrides(**overrides)
    ctx.obj["force"] = force


@cli.command()
@click.option("--max-width", type=int, default=None,
              help="Re-wrap lines longer than this many characters (default: off).")
@click.pass_context
def prosody(ctx, max_width):
    """Syllabify the poem and classify every syllable as Laghu or Guru."""
    from .analyzer import run

    config = ctx.obj["config"]
    if max_width is not None:
        config.max_line_width = max_width
    run(config, force=ctx.obj["force"])


@cli.command()
@click.option("--top-k", type=int, default=None,
              help="Number of 1-grams to keep (default: 20).")
@click.pass_context
def stats(ctx, top_k):
    """Word, sentence, character and n-gram statistics."""
    from .text_stats import run

    config = ctx.obj["config"]
    if top_k is not None:
        config.top_k_unigrams = top_k
    run(config, force=ctx.obj["force"])


@cli.command()
@click.pass_context
def report(ctx):
    """Text report, JSON dump and charts for both analyses."""
    from .report import run

    run(ctx.obj["config"], force=ctx.obj["force"])


@cli.command("run-all")
@click.pass_context
def run_all(ctx):
    """Run every step in sequence."""
    ctx.invoke(prosody)
    ctx.invoke(stats)
    ctx.invoke(report)


def main():
    cli()
