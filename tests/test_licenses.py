import pytest

from distro_spec.shared import licenses


@pytest.mark.parametrize(('binary', 'package'), [
    ('bash', 'bash'),
    ('ls', 'coreutils-common'),
    ('systemctl', 'systemd'),
    ('sshd', 'openssh-server'),
    ('visudo', 'sudo'),
])
def test_package_for_binary(binary, package):
    assert licenses.package_for_binary(binary) == package


@pytest.mark.parametrize(('lib', 'package'), [
    ('libc.so.6', 'glibc'),
    ('libsystemd.so.0', 'systemd-libs'),
    ('libcrypto.so.3', 'openssl-libs'),
])
def test_package_for_library(lib, package):
    assert licenses.package_for_library(lib) == package


def test_unknown():
    assert licenses.package_for_binary('definitely-not-a-binary') is None
    assert licenses.package_for_library('libdefinitelynot.so.1') is None


def test_tables_loaded_from_manifest():
    assert len(licenses.BINARY_TO_PACKAGE) > 300
    assert len(licenses.LIB_TO_PACKAGE) > 100
    assert all(isinstance(pair, tuple) and len(pair) == 2 for pair in licenses.LIB_TO_PACKAGE)
