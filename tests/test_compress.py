import subprocess
from pathlib import Path

import pytest

from tiassets.compress import OptiPng, compress, optimizer_level
from tiassets.config import CompressionTier


@pytest.mark.parametrize(
    "tier, level",
    [
        (CompressionTier.LOW, 1),
        (CompressionTier.MEDIUM, 2),
        (CompressionTier.HIGH, 3),
        (CompressionTier.NONE, 2),
        (7, 2),
    ],
)
def test_optimizer_level(tier, level):
    assert optimizer_level(tier) == level


def test_compress_runs_once_for_the_whole_batch(optimizer):
    batch = [Path("a.png"), Path("b c.png"), Path("d.png")]
    assert compress(batch, CompressionTier.HIGH, optimizer)
    assert optimizer.calls == [(batch, 3)]


def test_compress_disabled_for_none_tier(optimizer):
    assert not compress([Path("a.png")], CompressionTier.NONE, optimizer)
    assert optimizer.calls == []


def test_compress_skips_empty_batch(optimizer):
    assert not compress([], CompressionTier.MEDIUM, optimizer)
    assert optimizer.calls == []


def test_optipng_command_keeps_paths_as_separate_arguments():
    cmd = OptiPng().command([Path("out/with space.png"), Path("b.png")], 2)
    assert cmd == ["optipng", "-v", "-o", "2", "out/with space.png", "b.png"]


def test_optipng_missing_executable_is_ignored(capsys):
    OptiPng(executable="definitely-not-optipng-here", verbose=True).optimize([Path("a.png")], 1)
    assert "not found" in capsys.readouterr().out


def test_optipng_failure_is_ignored(monkeypatch):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, 1, stdout="", stderr="boom")

    monkeypatch.setattr(subprocess, "run", fake_run)
    OptiPng().optimize([Path("a.png"), Path("b.png")], 3)
    assert calls == [["optipng", "-v", "-o", "3", "a.png", "b.png"]]
