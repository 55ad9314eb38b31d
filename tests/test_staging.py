import logging

import pytest

from distro_spec.lib import staging
from distro_spec.shared.auth.pam import PAM_OTHER


def test_render_levitate():
    files = staging.render_files('levitate', hostname='box')

    assert files['/boot/loader/loader.conf'] == 'default levitateos.conf\ntimeout 3\n'
    assert files['/boot/loader/entries/levitateos.conf'].startswith('title   LevitateOS\n')
    assert files['/etc/hostname'] == 'box\n'
    assert files['/etc/sudoers.d/wheel'] == '%wheel ALL=(ALL:ALL) ALL\n'
    assert files['/etc/pam.d/other'] == PAM_OTHER
    assert '/usr/lib/tmpfiles.d/sshd.conf' in files
    assert '/usr/lib/tmpfiles.d/udev-initrd.conf' in files


def test_render_acorn_with_root_device():
    files = staging.render_files('acorn', root_device='/dev/vda2')

    assert files['/etc/hostname'] == 'acornos\n'
    assert 'options root=/dev/vda2 rw quiet\n' in files['/boot/loader/entries/acornos.conf']
    assert not any(path.startswith('/etc/pam.d/') for path in files)


def test_render_unknown_distro():
    with pytest.raises(ValueError):
        staging.render_files('gentoo')


def test_stage_files_writes(tmp_path):
    staged = staging.stage_files(tmp_path, {'/etc/hostname': 'box\n', 'boot/loader/loader.conf': 'x\n'})

    assert (tmp_path / 'etc' / 'hostname').read_text() == 'box\n'
    assert (tmp_path / 'boot' / 'loader' / 'loader.conf').read_text() == 'x\n'
    assert staged == [str((tmp_path / 'etc' / 'hostname').resolve()),
                      str((tmp_path / 'boot' / 'loader' / 'loader.conf').resolve())]


def test_stage_files_dry_run(tmp_path, caplog):
    with caplog.at_level(logging.INFO, logger='distro_spec.lib.staging'):
        staging.stage_files(tmp_path, {'/etc/hostname': 'box\n'}, dry_run=True)

    assert not (tmp_path / 'etc').exists()
    assert 'Would write' in caplog.text


def test_escape_is_rejected_before_writing(tmp_path):
    root = tmp_path / 'stage'
    root.mkdir()
    files = {'/etc/hostname': 'box\n', '/../outside': 'nope\n'}

    with pytest.raises(staging.StagingViolation):
        staging.stage_files(root, files)

    assert not (tmp_path / 'outside').exists()
    assert not (root / 'etc').exists()


def test_protected_root_is_rejected():
    with pytest.raises(staging.StagingViolation):
        staging.stage_files('/', {'/etc/hostname': 'box\n'})


@pytest.mark.parametrize('root', ['/tmp/..', '//', '/usr/../etc/..'])
def test_protected_root_after_resolving(root):
    with pytest.raises(staging.StagingViolation):
        staging.stage_files(root, {'/etc/hostname': 'box\n'}, dry_run=True)


def test_violation_is_value_error():
    assert issubclass(staging.StagingViolation, ValueError)
