from distro_spec.shared import components, udev
from distro_spec.shared.auth import components as auth_components


def test_systemd_units_are_unique():
    assert len(components.ALL_SYSTEMD_UNITS) == len(set(components.ALL_SYSTEMD_UNITS))
    for unit in components.SSH_UNITS + components.NM_UNITS:
        assert unit in components.ALL_SYSTEMD_UNITS


def test_merged_usr_symlinks():
    assert ('bin', 'usr/bin') in components.FHS_SYMLINKS
    assert ('sbin', 'usr/sbin') in components.FHS_SYMLINKS
    for _, target in components.FHS_SYMLINKS:
        assert target in components.FHS_DIRS


def test_reexports():
    assert components.UDEV_HELPERS is udev.UDEV_HELPERS
    assert components.PAM_MODULES is auth_components.PAM_MODULES
    assert components.LEVITATE_TOOLS == ('recstrap', 'recfstab', 'recchroot')


def test_system_accounts():
    assert components.SYSTEM_USERS[0] == 'root'
    assert 'wheel' in components.SYSTEM_GROUPS
    assert set(components.SYSTEM_USERS) <= set(components.SYSTEM_GROUPS)


def test_auth_components():
    assert 'etc/pam.d/other' in auth_components.PAM_CONFIGS
    assert 'pam_deny.so' in auth_components.PAM_MODULES
    assert 'unix_chkpwd' in auth_components.AUTH_SBIN
    assert 'sshd' in auth_components.SSH_SBIN


def test_udev_texts_create_run_udev():
    for entry in udev.UDEV_TMPFILES_ENTRIES:
        assert entry in udev.UDEV_TMPFILES_CONF
    assert 'ExecStart=/bin/mkdir -p /run/udev /run/udev/rules.d' in udev.UDEV_DIRS_SERVICE
    assert 'systemd-udevd.service' in udev.UDEV_UNITS_TO_PATCH
