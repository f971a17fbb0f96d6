from PIL import Image

from tiassets import cli
from tiassets.compress import OptiPng


def test_list_prints_catalog_without_rendering(make_image, out_dir, capsys):
    icon = make_image("icon.png")

    code = cli.main(["icons", "--icon", str(icon), "-o", str(out_dir), "-p", "tizen", "--list"])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["app/assets/tizen/appicon.png 96x96 @72dpi"]
    assert not (out_dir / "app").exists()


def test_icons_command(make_image, out_dir, capsys, monkeypatch):
    calls = []
    monkeypatch.setattr(OptiPng, "optimize", lambda self, paths, level: calls.append(level))
    icon = make_image("icon.png")

    code = cli.main(
        [
            "icons",
            "--icon", str(icon),
            "-o", str(out_dir),
            "-p", "blackberry",
            "-p", "mobileweb",
            "--compression", "high",
            "--classic-layout",
        ]
    )

    assert code == 0
    assert "Wrote 2 icons files" in capsys.readouterr().out
    assert calls == [3]
    with Image.open(out_dir / "Resources/blackberry/appicon.png") as img:
        assert img.size == (114, 114)


def test_splash_command_with_language(make_image, out_dir, monkeypatch):
    monkeypatch.setattr(OptiPng, "optimize", lambda self, paths, level: None)
    splash = make_image("splash.png", size=(300, 300))

    code = cli.main(
        [
            "splash",
            "--splash", str(splash),
            "-o", str(out_dir),
            "-p", "android",
            "--orientation", "portrait",
            "--language", "de",
            "--compression", "none",
        ]
    )

    assert code == 0
    assert (out_dir / "app/assets/android/images/res-de-long-port-mdpi/default.png").exists()
    assert not (out_dir / "GooglePlayFeature.png").exists()


def test_invalid_option_exit_code(make_image, out_dir, capsys):
    code = cli.main(["icons", "--icon", str(make_image("icon.png")), "-o", str(out_dir), "--radius", "60"])
    assert code == 2
    assert "between 0 and 50" in capsys.readouterr().err


def test_failed_run_exit_code(tmp_path, out_dir, capsys):
    bogus = tmp_path / "icon.png"
    bogus.write_bytes(b"nope")

    code = cli.main(["icons", "--icon", str(bogus), "-o", str(out_dir), "-p", "iphone"])

    assert code == 1
    assert "icons failed" in capsys.readouterr().err
