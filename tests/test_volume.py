import sys
from unittest import mock

import pytest

from barstatus import volume


@pytest.fixture
def card(tmp_path):
    path = tmp_path / "mixer"
    path.write_bytes(b"")
    return str(path)


def fake_ioctl(devmask, level):
    def ioctl(fd, request, buf, mutate):
        value = devmask if request == volume.SOUND_MIXER_READ_DEVMASK else level
        buf[:] = value.to_bytes(4, sys.byteorder)
        return 0

    return ioctl


def test_missing_card(tmp_path, capsys):
    assert volume.vol_perc(str(tmp_path / "absent")) is None
    assert "open '" in capsys.readouterr().err


def test_not_a_mixer(card, capsys):
    assert volume.vol_perc(card) is None
    assert "ioctl 'SOUND_MIXER_READ_DEVMASK':" in capsys.readouterr().err


def test_reads_left_channel(card):
    level = (20 << 8) | 75
    with mock.patch("barstatus.volume.fcntl.ioctl", side_effect=fake_ioctl(1, level)):
        assert volume.vol_perc(card) == str(level & 0xFF)


def test_no_vol_device(card):
    with mock.patch("barstatus.volume.fcntl.ioctl", side_effect=fake_ioctl(0b10, 50)):
        assert volume.vol_perc(card) is None


def test_channel_read_failure(card, capsys):
    def ioctl(fd, request, buf, mutate):
        if request == volume.SOUND_MIXER_READ_DEVMASK:
            buf[:] = (1).to_bytes(4, sys.byteorder)
            return 0
        raise OSError("failed")

    with mock.patch("barstatus.volume.fcntl.ioctl", side_effect=ioctl):
        assert volume.vol_perc(card) is None
    assert "MIXER_READ(0)" in capsys.readouterr().err