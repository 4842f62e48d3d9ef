from pathlib import Path
import sys

import click

from tcprobe.domain.entities.probe import ProbeConfig
from tcprobe.domain.enums.result_field import CANONICAL_ORDER
from tcprobe.domain.errors import ProbeError
from tcprobe.services.probe.ffprobe_adapter import FFprobeAdapter, FFprobeError
from tcprobe.services.probe.service import TimecodeProbeService

_FLAG_HELP = {
    "start": "Print the start frame timecode of the video stream.",
    "end": "Print the end (last displayed) frame timecode.",
    "duration": "Print the duration in frames.",
    "fps": "Print the frame rate reported by ffprobe.",
    "resolution": "Print the resolution as WIDTH*HEIGHT.",
    "codec": "Print codec, profile and pixel format.",
    "colorspace": "Print the color space.",
}

_ORDER = ", ".join(f.value for f in CANONICAL_ORDER)


def _field_options(func):
    for fld in reversed(CANONICAL_ORDER):
        func = click.option(f"--{fld.value}", is_flag=True, help=_FLAG_HELP[fld.value])(func)
    return func


@click.command(
    epilog=f"Results are printed in this order regardless of the flag order: {_ORDER}",
)
@click.help_option("-h", "--help")
@click.argument("media", type=click.Path(dir_okay=False, path_type=Path))
@_field_options
@click.option("--ffprobe-bin", default=None, help="ffprobe executable (default: settings / PATH)")
def main(media: Path, ffprobe_bin: str | None, **flags: bool) -> None:
    """Print timecode and format metadata of MEDIA's video stream."""
    config = ProbeConfig(**flags)
    if not config.any():
        flag_list = ", ".join(f"--{f.value}" for f in CANONICAL_ORDER)
        click.echo(f"need to set at least one of {flag_list} flag", err=True)
        sys.exit(1)

    try:
        svc = TimecodeProbeService(FFprobeAdapter(ffprobe_bin=ffprobe_bin))
        result = svc.probe(media, config)
    except (ProbeError, FFprobeError) as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    for line in result.lines():
        click.echo(line)


if __name__ == "__main__":
    main()
