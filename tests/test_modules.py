import logging

from distro_spec.shared import boot_modules, modules


def test_every_listed_module_has_a_path():
    for name in modules.LIVE_MODULES + modules.INSTALL_MODULES:
        assert modules.module_path(name) is not None, name


def test_builtin_lists():
    assert 'erofs' in modules.LIVE_MODULES_BUILTIN
    assert modules.INSTALL_MODULES_BUILTIN == modules.INSTALL_MODULES


def test_module_paths_for_skips_unknown(caplog):
    with caplog.at_level(logging.WARNING, logger='distro_spec.shared.modules'):
        paths = modules.module_paths_for(['virtio', 'no-such-module', 'ext4'])

    assert paths == ['kernel/drivers/virtio/virtio', 'kernel/fs/ext4/ext4']
    assert 'no-such-module' in caplog.text


def test_boot_module_groups():
    assert boot_modules.INSTALL_BOOT_MODULES == boot_modules.CORE_BOOT_MODULES + boot_modules.USB_BOOT_MODULES
    assert 'kernel/fs/squashfs/squashfs' in boot_modules.CORE_BOOT_MODULES
    assert 'kernel/drivers/usb/storage/usb-storage' in boot_modules.USB_BOOT_MODULES
    assert not set(boot_modules.CORE_BOOT_MODULES) & set(boot_modules.USB_BOOT_MODULES)
