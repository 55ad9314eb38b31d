import pytest

from distro_spec import acorn
from distro_spec.acorn import packages, paths, uki


def test_alpine_urls():
    assert paths.alpine_iso_url() == (
        'https://dl-cdn.alpinelinux.org/alpine/v3.21/releases/x86_64/alpine-extended-3.21.3-x86_64.iso'
    )
    assert paths.alpine_iso_sha256_url() == paths.alpine_iso_url() + '.sha256'
    assert paths.alpine_community_repo() == 'https://dl-cdn.alpinelinux.org/alpine/v3.21/community'
    assert paths.apk_tools_static_url().endswith('/v3.21/main/x86_64/apk-tools-static-2.14.6-r3.apk')
    assert paths.ALPINE_EXTENDED_ISO_FILENAME == paths.alpine_iso_filename()


def test_local_override_env(monkeypatch):
    monkeypatch.delenv(paths.ALPINE_ISO_PATH_ENV, raising=False)
    assert paths.alpine_iso_path() is None

    monkeypatch.setenv(paths.ALPINE_ISO_PATH_ENV, '/srv/alpine.iso')
    monkeypatch.setenv(paths.APK_TOOLS_PATH_ENV, '/srv/apk.static')
    assert paths.alpine_iso_path() == '/srv/alpine.iso'
    assert paths.apk_tools_path() == '/srv/apk.static'


def test_boot_modules_are_gzip():
    assert acorn.BOOT_MODULES
    assert all(m.endswith('.ko.gz') for m in acorn.BOOT_MODULES)
    assert 'kernel/fs/squashfs/squashfs.ko.gz' in acorn.BOOT_MODULES


def test_uki_entries():
    assert [e.filename for e in uki.UKI_ENTRIES] == [
        'acornos-live.efi', 'acornos-emergency.efi', 'acornos-debug.efi',
    ]
    recovery = uki.UKI_INSTALLED_ENTRIES[1]
    assert recovery.name == 'AcornOS (Recovery)'
    assert recovery.cmdline('root=LABEL=root rw') == 'root=LABEL=root rw single'
    assert recovery.esp_path() == 'EFI/Linux/acornos-recovery.efi'


def test_tiers_not_empty():
    for tier in (packages.BOOTABLE_PACKAGES, packages.CORE_PACKAGES,
                 packages.DAILY_DRIVER_PACKAGES, packages.LIVE_ISO_PACKAGES):
        assert tier


def test_tiers_are_cumulative():
    bootable = packages.bootable_packages()
    core = packages.core_packages()
    daily = packages.daily_driver_packages()
    live = packages.all_live_packages()

    assert core[:len(bootable)] == bootable
    assert daily[:len(core)] == core
    assert live[:len(daily)] == daily
    assert live == list(packages.BOOTABLE_PACKAGES + packages.CORE_PACKAGES
                        + packages.DAILY_DRIVER_PACKAGES + packages.LIVE_ISO_PACKAGES)


@pytest.mark.parametrize('pkg', ['doas', 'eudev', 'cryptsetup', 'ca-certificates', 'tzdata', 'less', 'curl'])
def test_critical_packages_present(pkg):
    assert pkg in packages.all_live_packages()


def _write_keys(keys_dir, body='-----BEGIN PUBLIC KEY-----\nMIIB\n-----END PUBLIC KEY-----\n'):
    keys_dir.mkdir(exist_ok=True)
    for name in packages.ALPINE_KEY_FILENAMES:
        (keys_dir / name).write_text(body)


def test_alpine_keys(tmp_path):
    _write_keys(tmp_path / 'keys')

    keys = packages.alpine_keys(tmp_path / 'keys')

    assert [name for name, _ in keys] == list(packages.ALPINE_KEY_FILENAMES)
    assert len(keys) == 5
    assert all('BEGIN PUBLIC KEY' in pem for _, pem in keys)


def test_alpine_keys_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        packages.alpine_keys(tmp_path)


def test_alpine_keys_not_pem(tmp_path):
    _write_keys(tmp_path, body='not a key\n')
    with pytest.raises(ValueError):
        packages.alpine_keys(tmp_path)


def test_acorn_identity():
    assert acorn.OS_NAME == 'AcornOS'
    assert acorn.ISO_LABEL == 'ACORNOS'
    assert acorn.DEFAULT_SHELL == acorn.ROOT_SHELL == '/bin/ash'
    assert paths.SQUASHFS_COMPRESSION == 'gzip'


def test_alpine_keys_attribute(monkeypatch, tmp_path):
    _write_keys(tmp_path)
    monkeypatch.delenv(packages.KEYS_DIR_ENV, raising=False)
    monkeypatch.setattr(packages, 'KEYS_DIR', tmp_path)

    assert len(packages.ALPINE_KEYS) == 5
    for filename, pem in packages.ALPINE_KEYS:
        assert filename in packages.ALPINE_KEY_FILENAMES
        assert 'BEGIN PUBLIC KEY' in pem


def test_alpine_keys_dir_from_env(monkeypatch, tmp_path):
    _write_keys(tmp_path / 'keys')
    monkeypatch.setenv(packages.KEYS_DIR_ENV, str(tmp_path / 'keys'))

    assert packages.default_keys_dir() == tmp_path / 'keys'
    assert len(packages.alpine_keys()) == 5


def test_alpine_keys_fall_back_to_host(monkeypatch, tmp_path):
    _write_keys(tmp_path / 'apk-keys')
    monkeypatch.delenv(packages.KEYS_DIR_ENV, raising=False)
    monkeypatch.setattr(packages, 'KEYS_DIR', tmp_path / 'empty')
    monkeypatch.setattr(packages, 'HOST_KEYS_DIRS', (str(tmp_path / 'apk-keys'),))

    assert packages.default_keys_dir() == tmp_path / 'apk-keys'


def test_alpine_keys_missing_everywhere_names_packaged_dir(monkeypatch, tmp_path):
    monkeypatch.delenv(packages.KEYS_DIR_ENV, raising=False)
    monkeypatch.setattr(packages, 'KEYS_DIR', tmp_path / 'empty')
    monkeypatch.setattr(packages, 'HOST_KEYS_DIRS', ())

    with pytest.raises(FileNotFoundError, match='empty'):
        packages.alpine_keys()


@pytest.mark.skipif(
    not all((packages.KEYS_DIR / name).is_file() for name in packages.ALPINE_KEY_FILENAMES),
    reason='Alpine signing keys are not in distro_spec/acorn/keys',
)
def test_packaged_alpine_keys():
    keys = packages.alpine_keys(packages.KEYS_DIR)

    assert [name for name, _ in keys] == list(packages.ALPINE_KEY_FILENAMES)
    assert all(pem.startswith('-----BEGIN PUBLIC KEY-----') for _, pem in keys)


def test_alpine_key_by_id(monkeypatch, tmp_path):
    _write_keys(tmp_path / 'keys')
    (tmp_path / 'keys' / packages.ALPINE_KEY_FILENAMES[-1]).write_text(
        '-----BEGIN PUBLIC KEY-----\nlast\n-----END PUBLIC KEY-----\n'
    )
    monkeypatch.setenv(packages.KEYS_DIR_ENV, str(tmp_path / 'keys'))

    assert 'last' in packages.ALPINE_KEY_61666E3F
    assert 'last' not in packages.ALPINE_KEY_4A6A0840
    with pytest.raises(AttributeError):
        packages.ALPINE_KEY_DEADBEEF
