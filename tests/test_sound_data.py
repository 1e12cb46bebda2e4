from pathlib import Path

from pengin.sound_data import SoundData, SoundType


def test_defaults():
    data = SoundData("sfx/jump.wav")
    assert data.sound_type is SoundType.VFX
    assert data.is_3d is True
    assert data.is_looping is False
    assert data.is_stream is False
    assert data.volume == 1.0


def test_sound_type_values():
    assert SoundType(0) is SoundType.VFX
    assert SoundType(1) is SoundType.MUSIC
    assert SoundData("theme.ogg", SoundType(1)).sound_type is SoundType.MUSIC


def test_path_like_is_stored_as_text():
    data = SoundData(Path("music") / "theme.ogg", SoundType.MUSIC)
    assert data.sound_path == str(Path("music") / "theme.ogg")


def test_describe_default_sound():
    text = SoundData("sfx/jump.wav").describe()
    assert text.splitlines() == [
        "SoundPath: sfx/jump.wav",
        "Position: [0, 0, 0]",
        "Volume: 1",
        "Is 3D: Yes",
        "Is Looping: No",
        "Is Stream: No",
    ]
    assert text.endswith("\n")


def test_describe_flags_and_fractions():
    data = SoundData(
        "loop.wav",
        position=(1.5, 2.0, -3.25),
        is_3d=False,
        is_looping=True,
        is_stream=True,
        volume=0.5,
    )
    lines = data.describe().splitlines()
    assert lines[1] == "Position: [1.5, 2, -3.25]"
    assert lines[2] == "Volume: 0.5"
    assert lines[3:] == ["Is 3D: No", "Is Looping: Yes", "Is Stream: Yes"]