"""
Helpers shared across the command modules.
"""
import json
import time
import functools
from pathlib import Path


def timer(func):
    """Decorator that prints a function's execution time."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start = time.time()
        result = func(*args, **kwargs)
        elapsed = time.time() - start
        print(f"  ⏱  {func.__name__} completed in {elapsed:.1f}s")
        return result
    return wrapper


def save_json(data: dict, path: Path) -> None:
    """Write `data` as indented UTF-8 JSON, keeping Kannada text readable."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def print_header(title: str):
    """Print a formatted section header."""
    width = 60
    print("\n" + "=" * width)
    print(f"  {title}")
    print("=" * width)


def print_step(step: str):
    """Print a progress step."""
    print(f"\n  -> {step}")
