"""agetty settings for console and serial logins."""

# serial-getty@ttyS0 override. QEMU's serial port never raises carrier
# detect, so agetty needs -L or it waits forever.
SERIAL_GETTY_OVERRIDE = """\
# Override for QEMU serial console compatibility
[Service]
ExecStart=
ExecStart=-/sbin/agetty -L -o '-p -- \\u' 115200,57600,38400,9600 ttyS0 $TERM
"""

SERIAL_GETTY_OVERRIDE_PATH = "/etc/systemd/system/serial-getty@ttyS0.service.d/override.conf"

# agetty negotiates the highest common rate.
SERIAL_BAUD_RATES = "115200,57600,38400,9600"

GETTY_TERM_TYPE = "vt102"

# Live ISO only; shipped in the live overlay.
LIVE_CONSOLE_AUTOLOGIN_SERVICE = "console-autologin.service"
LIVE_SERIAL_CONSOLE_SERVICE = "serial-console.service"
