"""Legacy squashfs settings (superseded by EROFS, see rootfs.py)."""

SQUASHFS_COMPRESSION = "gzip"
SQUASHFS_BLOCK_SIZE = "1M"
SQUASHFS_NAME = "filesystem.squashfs"
SQUASHFS_CDROM_PATH = "/media/cdrom/live/filesystem.squashfs"
