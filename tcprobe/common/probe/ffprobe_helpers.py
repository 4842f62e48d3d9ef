# tcprobe/common/probe/ffprobe_helpers.py
from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

def build_ffprobe_cmd(input_path: str | Path, ffprobe_bin: str = "ffprobe",
                      extra_args: Iterable[str] | None = None) -> List[str]:
    """
    Build the ffprobe command whose text report the parser understands:
    the stream overview on stderr and one [STREAM] block per stream on stdout.
    """
    if isinstance(input_path, Path):
        input_path = str(input_path)
    base = [
        ffprobe_bin,
        "-show_streams",
        "--",  # Stop option parsing in case of weird filenames
        input_path,
    ]
    if extra_args:
        # Insert before the separator so they are still parsed as options
        base = base[:-2] + list(extra_args) + base[-2:]
    return base
