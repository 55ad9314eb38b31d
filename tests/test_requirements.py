import pytest

from distro_spec.shared.requirements import ACORN_REQUIREMENTS, LEVITATE_REQUIREMENTS


@pytest.mark.parametrize(('ram', 'expected'), [(32, 'ok'), (16, 'ok'), (12, 'minimum'), (8, 'minimum'), (4, 'insufficient')])
def test_levitate_ram(ram, expected):
    assert LEVITATE_REQUIREMENTS.check_ram(ram) == expected


@pytest.mark.parametrize(('disk', 'expected'), [(512, 'ok'), (64, 'minimum'), (31.5, 'insufficient')])
def test_acorn_disk(disk, expected):
    assert ACORN_REQUIREMENTS.check_disk(disk) == expected


def test_acorn_is_lighter():
    assert ACORN_REQUIREMENTS.min_ram_gb < LEVITATE_REQUIREMENTS.min_ram_gb
    assert ACORN_REQUIREMENTS.min_disk_gb < LEVITATE_REQUIREMENTS.min_disk_gb
