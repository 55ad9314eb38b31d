import pytest

from distro_spec import acorn, levitate
from distro_spec.shared import paths


@pytest.mark.parametrize('path', ['/', '/usr', '/etc', '/boot', '/home', '/usr/'])
def test_protected(path):
    assert paths.is_protected_path(path)


@pytest.mark.parametrize('path', ['/mnt', '/mnt/usr', '/usr/local', '/tmp/staging', 'usr'])
def test_not_protected(path):
    assert not paths.is_protected_path(path)


def test_first_existing(tmp_path):
    present = tmp_path / 'b.tar.xz'
    present.write_text('')

    assert paths.first_existing([str(tmp_path / 'a.tar.xz'), str(present)]) == str(present)
    assert paths.first_existing([str(tmp_path / 'missing')]) is None


def test_find_tarball(monkeypatch, tmp_path):
    tarball = tmp_path / 'levitateos-base.tar.xz'
    tarball.write_text('')
    monkeypatch.setattr(levitate.paths, 'TARBALL_SEARCH_PATHS', ('/nonexistent/x.tar.xz', str(tarball)))

    assert levitate.paths.find_tarball() == str(tarball)


def test_tarball_search_paths_match_name():
    for spec in (levitate.paths, acorn.paths):
        assert all(p.endswith(spec.TARBALL_NAME) for p in spec.TARBALL_SEARCH_PATHS)


def test_busybox_url_env_override(monkeypatch):
    monkeypatch.delenv('BUSYBOX_URL', raising=False)
    assert levitate.busybox_url() == levitate.paths.BUSYBOX_URL

    monkeypatch.setenv('BUSYBOX_URL', 'file:///srv/busybox')
    assert levitate.busybox_url() == 'file:///srv/busybox'
    assert acorn.busybox_url() == 'file:///srv/busybox'


def test_live_issue_message_keeps_agetty_escape():
    assert '\\l' in levitate.paths.LIVE_ISSUE_MESSAGE
    assert levitate.paths.LIVE_ISSUE_MESSAGE.startswith('\nLevitateOS Live - ')
    assert acorn.paths.LIVE_ISSUE_MESSAGE.startswith('\nAcornOS Live - ')
