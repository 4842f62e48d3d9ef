from tcprobe.common.probe.ffprobe_helpers import build_ffprobe_cmd


def test_build_ffprobe_cmd_uses_stream_flags(tmp_path):
    f = tmp_path / "video.mov"
    cmd = build_ffprobe_cmd(f)
    assert "ffprobe" in cmd[0].lower()
    assert "-show_streams" in cmd
    assert "-print_format" not in cmd
    assert str(f) == cmd[-1]


def test_build_ffprobe_cmd_extra_args_stay_options(tmp_path):
    f = tmp_path / "-weird.mov"
    cmd = build_ffprobe_cmd(f, ffprobe_bin="/opt/ffprobe", extra_args=["-select_streams", "v"])
    assert cmd[0] == "/opt/ffprobe"
    assert cmd[-2:] == ["--", str(f)]
    assert cmd.index("-select_streams") < cmd.index("--")
