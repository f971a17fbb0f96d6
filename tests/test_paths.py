from pathlib import Path

from tiassets.paths import AssetPaths


def test_layouts():
    assert AssetPaths(alloy=True).assets == "app/assets"
    assert AssetPaths(alloy=False).assets == "Resources"


def test_ios_folder_follows_language():
    assert AssetPaths().ios == "app/assets/iphone"
    assert AssetPaths(alloy=False).ios == "Resources/iphone"
    assert AssetPaths(language="fr").ios == "i18n/fr"
    assert AssetPaths(alloy=False, language="fr").ios == "i18n/fr"


def test_android_prefix():
    assert AssetPaths().android_prefix == ""
    assert AssetPaths(language="es").android_prefix == "es-"


def test_resolve():
    paths = AssetPaths(language="fr")
    template = "{assets}/android/images/res-{android_prefix}long-port-hdpi/default.png"
    assert paths.resolve(Path("out"), template) == Path(
        "out/app/assets/android/images/res-fr-long-port-hdpi/default.png"
    )
    assert paths.resolve(Path("out"), "GooglePlay.png") == Path("out/GooglePlay.png")
