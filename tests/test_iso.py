from distro_spec import levitate
from distro_spec.shared import initramfs, iso, uki


def test_checksum_line():
    assert iso.checksum_filename('levitateos.iso') == 'levitateos.iso.sha512'
    assert iso.checksum_line('ab12', 'levitateos.iso') == 'ab12  levitateos.iso\n'


def test_console_fragments():
    assert iso.SERIAL_CONSOLE == 'console=ttyS0,115200n8'
    assert str(iso.SERIAL_BAUD_RATE) in iso.SERIAL_CONSOLE


def test_levitate_uki_entries():
    live = levitate.UKI_ENTRIES[0]
    emergency = levitate.UKI_ENTRIES[1]

    assert live.cmdline('quiet') == 'quiet'
    assert emergency.cmdline('quiet') == 'quiet emergency'
    assert emergency.esp_path() == 'EFI/Linux/levitateos-emergency.efi'
    assert [e.filename for e in levitate.UKI_INSTALLED_ENTRIES] == [
        uki.UKI_INSTALLED_FILENAME, uki.UKI_INSTALLED_RECOVERY_FILENAME,
    ]


def test_initramfs_mount_points_have_dirs():
    for mount in (initramfs.MOUNT_SQUASHFS, initramfs.MOUNT_OVERLAY,
                  initramfs.MOUNT_NEWROOT, initramfs.MOUNT_LIVE_OVERLAY):
        assert mount.lstrip('/') in initramfs.INITRAMFS_DIRS


def test_boot_media_search_order():
    from distro_spec.shared.devices import BOOT_DEVICE_SEARCH_ORDER

    assert BOOT_DEVICE_SEARCH_ORDER[0] == '/dev/sr0'
    assert '/dev/vda' in BOOT_DEVICE_SEARCH_ORDER


def test_legacy_squashfs_and_qemu_defaults():
    from distro_spec.shared import qemu, squashfs

    assert squashfs.SQUASHFS_COMPRESSION == 'gzip'
    assert squashfs.SQUASHFS_CDROM_PATH.endswith('/' + squashfs.SQUASHFS_NAME)
    assert qemu.QEMU_DISK_FILENAME.endswith('.qcow2')
    assert qemu.QEMU_MEMORY_GB > levitate.paths.QEMU_MEMORY_GB
