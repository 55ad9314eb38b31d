import pytest

from distro_spec.shared.auth import getty, pam, ssh


@pytest.mark.parametrize('rel', sorted(pam.PAM_FILES))
def test_every_pam_file_parses(rel):
    rules = pam.parse_pam_config(pam.PAM_FILES[rel])
    assert rules
    assert {r.type for r in rules} <= set(pam.PAM_PHASES)


def test_other_denies_everything():
    rules = pam.parse_pam_config(pam.PAM_OTHER)

    assert [r.type for r in rules] == ['auth', 'account', 'password', 'session']
    assert all(r.control == 'required' and r.module == 'pam_deny.so' for r in rules)


def test_optional_module_marker():
    rules = pam.rules_for_phase(pam.PAM_SYSTEMD_USER, 'session')
    systemd = [r for r in rules if r.module == 'pam_systemd.so']

    assert len(systemd) == 1
    assert systemd[0].ignore_missing
    assert systemd[0].control == 'optional'


def test_bracketed_control():
    rules = pam.parse_pam_config('session [success=1 default=ignore] pam_succeed_if.so service in crond quiet\n')

    assert rules[0].control == '[success=1 default=ignore]'
    assert rules[0].args == ('service', 'in', 'crond', 'quiet')


@pytest.mark.parametrize('text', ['bogus line', 'auth required', 'login required pam_unix.so'])
def test_malformed_rule(text):
    with pytest.raises(ValueError):
        pam.parse_pam_config(text)


def test_pam_files_paths():
    assert len(pam.PAM_FILES) == 17
    assert all(rel.startswith('etc/pam.d/') for rel in pam.PAM_FILES)
    assert all(rel.startswith('etc/security/') for rel in pam.SECURITY_CONF_FILES)


def test_serial_getty_override():
    assert '-L' in getty.SERIAL_GETTY_OVERRIDE
    assert "'-p -- \\u'" in getty.SERIAL_GETTY_OVERRIDE
    assert getty.SERIAL_BAUD_RATES in getty.SERIAL_GETTY_OVERRIDE
    assert getty.SERIAL_GETTY_OVERRIDE.startswith('# Override')


def test_sshd_config_text():
    text = ssh.sshd_config_text()

    assert text.startswith('Port 22\n')
    assert 'PermitEmptyPasswords no\n' in text
    assert text.count('\n') == len(ssh.SSHD_CONFIG_SETTINGS)


def test_keygen_commands():
    rsa, ecdsa, ed25519 = ssh.HOST_KEY_CONFIGS

    assert rsa.keygen_command('/etc/ssh/ssh_host_rsa_key') == \
        "ssh-keygen -q -t rsa -b 3072 -N '' -f /etc/ssh/ssh_host_rsa_key"
    assert ed25519.keygen_command('/k') == "ssh-keygen -q -t ed25519 -N '' -f /k"
    assert ssh.SSH_KEY_TYPES_PREFERRED[0] == 'ssh-ed25519'
    assert ecdsa.bits >= ecdsa.min_recommended_bits


def test_sshd_tmpfiles():
    assert 'd /run/sshd 0755 root root -' in ssh.SSHD_TMPFILES_CONFIG
