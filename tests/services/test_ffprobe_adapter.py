from __future__ import annotations

import subprocess
from types import SimpleNamespace

import pytest

from tcprobe.services.probe import ffprobe_adapter as mod
from tcprobe.services.probe.ffprobe_adapter import FFprobeAdapter, FFprobeError


@pytest.fixture()
def media(tmp_path):
    f = tmp_path / "clip.mov"
    f.write_bytes(b"\x00\x00\x00\x14ftypqt  ")
    return f


def _fake_run(calls, *, rc=0, stdout="", stderr=""):
    def _run(cmd, **kwargs):
        calls.append((cmd, kwargs))
        return SimpleNamespace(returncode=rc, stdout=stdout, stderr=stderr)
    return _run


def test_read_report_puts_overview_before_blocks(media, monkeypatch):
    calls = []
    monkeypatch.setattr(
        mod.subprocess, "run",
        _fake_run(calls, stdout="[STREAM]\nindex=0\n[/STREAM]\n", stderr="Stream #0:0: Video: h264, 24 fps\n"),
    )
    adapter = FFprobeAdapter(ffprobe_bin="/opt/ffmpeg/bin/ffprobe", timeout_sec=5)

    out = adapter.read_report(media)

    assert out == "Stream #0:0: Video: h264, 24 fps\n[STREAM]\nindex=0\n[/STREAM]\n"
    cmd, kwargs = calls[0]
    assert cmd[0] == "/opt/ffmpeg/bin/ffprobe"
    assert "-show_streams" in cmd
    assert cmd[-1] == str(media)
    assert kwargs["timeout"] == 5


def test_non_zero_exit_raises(media, monkeypatch):
    monkeypatch.setattr(mod.subprocess, "run", _fake_run([], rc=1, stderr="Invalid data found"))
    with pytest.raises(FFprobeError) as exc:
        FFprobeAdapter(ffprobe_bin="/usr/bin/ffprobe").read_report(media)
    assert exc.value.rc == 1
    assert "Invalid data found" in str(exc.value)


def test_timeout_raises(media, monkeypatch):
    def _run(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])
    monkeypatch.setattr(mod.subprocess, "run", _run)
    with pytest.raises(FFprobeError) as exc:
        FFprobeAdapter(ffprobe_bin="/usr/bin/ffprobe", timeout_sec=2).read_report(media)
    assert "timed out after 2s" in exc.value.message


def test_missing_file_raises(tmp_path):
    with pytest.raises(FFprobeError):
        FFprobeAdapter(ffprobe_bin="/usr/bin/ffprobe").read_report(tmp_path / "nope.mov")


def test_binary_resolved_from_path(monkeypatch):
    monkeypatch.setattr(mod.shutil, "which", lambda name: None)
    with pytest.raises(FFprobeError):
        FFprobeAdapter(ffprobe_bin="ffprobe")

    monkeypatch.setattr(mod.shutil, "which", lambda name: "/usr/local/bin/ffprobe")
    assert FFprobeAdapter().ffprobe_bin == "/usr/local/bin/ffprobe"
