import pytest

from distro_spec import main as cli


@pytest.fixture
def run(tmp_path, capsys):
    def _run(*argv):
        code = cli.main(['--log', str(tmp_path / 'cli.log')] + list(argv))
        out, err = capsys.readouterr()
        return code, out, err
    return _run


def test_loader_conf(run):
    code, out, _ = run('loader-conf', '--timeout', '0', '--no-editor')
    assert code == 0
    assert out == 'default levitateos.conf\ntimeout 0\neditor no\n'


def test_boot_entry_acorn(run):
    code, out, _ = run('--distro', 'acorn', 'boot-entry', '--partuuid', 'abcd', '--path')
    assert code == 0
    assert out.splitlines()[0] == '/boot/loader/entries/acornos.conf'
    assert out.endswith('options root=PARTUUID=abcd rw quiet\n')


def test_sfdisk(run):
    assert run('sfdisk')[1] == 'label: gpt\n,512M,U,*\n,,L\n'


def test_useradd(run):
    code, out, _ = run('useradd', 'alice', '--full-name', 'Alice')
    assert code == 0
    assert out == 'useradd -m -s /bin/bash -G wheel,audio,video,input -c "Alice" alice\n'


def test_useradd_without_name(run):
    code, _, err = run('useradd')
    assert code == cli.ErrorCode.INVALID_CONFIG.exit_code()
    assert err.startswith('E001: ')


def test_services(run):
    code, out, _ = run('--distro', 'acorn', 'services', '--required')
    assert code == 0
    assert out.splitlines() == ['rc-update add networking boot', 'rc-update add chronyd default']


def test_pam_rules(run):
    code, out, _ = run('pam', 'other', '--rules')
    assert code == 0
    assert out.splitlines() == [
        'auth\trequired\tpam_deny.so',
        'account\trequired\tpam_deny.so',
        'password\trequired\tpam_deny.so',
        'session\trequired\tpam_deny.so',
    ]


def test_pam_unknown(run):
    code, _, err = run('pam', 'nonexistent')
    assert code == cli.ErrorCode.NOT_FOUND.exit_code()
    assert 'nonexistent' in err


def test_packages_needs_acorn(run):
    code, _, err = run('packages')
    assert code == cli.ErrorCode.UNSUPPORTED.exit_code()
    assert err.startswith('E003: ')


def test_packages_bootable(run):
    code, out, _ = run('--distro', 'acorn', 'packages', '--tier', 'bootable')
    assert code == 0
    assert out.splitlines()[0] == 'alpine-base'


def test_modules(run):
    code, out, _ = run('modules', '--flavour', 'install')
    assert code == 0
    assert 'kernel/drivers/md/dm-crypt' in out.splitlines()


def test_license(run):
    assert run('license', 'bash')[1] == 'bash\n'
    assert run('license', '--library', 'libc.so.6')[1] == 'glibc\n'
    assert run('license', 'no-such-binary')[0] == cli.ErrorCode.NOT_FOUND.exit_code()


def test_check_insufficient(run, tmp_path):
    code, out, err = run('check', '--target', str(tmp_path), '--ram', '1')
    assert code == cli.ErrorCode.REQUIREMENTS_NOT_MET.exit_code()
    assert 'ram: insufficient' in out
    assert 'mount point' in out


def test_check_missing_target(run, tmp_path):
    code, _, _ = run('check', '--target', str(tmp_path / 'missing'))
    assert code == cli.ErrorCode.NOT_FOUND.exit_code()


def test_stage(run, tmp_path):
    root = tmp_path / 'stage'
    code, out, _ = run('stage', '--root', str(root), '--hostname', 'box')

    assert code == 0
    assert (root / 'etc' / 'hostname').read_text() == 'box\n'
    assert (root / 'etc' / 'pam.d' / 'other').exists()
    assert str((root / 'etc' / 'hostname').resolve()) in out.splitlines()


def test_stage_dry_run_from_config(run, tmp_path):
    root = tmp_path / 'stage'
    config = tmp_path / 'spec.yaml'
    config.write_text('distro: acorn\nstaging:\n  root: {}\n  dry_run: true\n'.format(root))

    code, out, _ = run('--config', str(config), 'stage')

    assert code == 0
    assert not root.exists()
    assert 'acornos.conf' in out


def test_stage_without_root(run):
    assert run('stage')[0] == cli.ErrorCode.INVALID_CONFIG.exit_code()


def test_bad_config(run, tmp_path):
    code, _, err = run('--config', str(tmp_path / 'missing.yaml'), 'sfdisk')
    assert code == cli.ErrorCode.INVALID_CONFIG.exit_code()
    assert err.startswith('E001: ')


def test_malformed_config(run, tmp_path):
    config = tmp_path / 'spec.yaml'
    config.write_text('distro: [acorn\n')

    code, _, err = run('--config', str(config), 'sfdisk')

    assert code == cli.ErrorCode.INVALID_CONFIG.exit_code()
    assert err.startswith('E001: ')


def test_stage_root_device(run, tmp_path):
    root = tmp_path / 'stage'
    code, _, _ = run('stage', '--root', str(root), '--root-device', '/dev/vda2')

    assert code == 0
    entries = list((root / 'boot' / 'loader' / 'entries').glob('*.conf'))
    assert len(entries) == 1
    assert 'options root=/dev/vda2 rw quiet\n' in entries[0].read_text()
