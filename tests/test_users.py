from distro_spec import acorn, levitate
from distro_spec.shared.users import UserSpec, sudoers_wheel_file, sudoers_wheel_path


def test_useradd_levitate_default_user():
    user = levitate.default_user('alice')
    assert user.useradd_command() == 'useradd -m -s /bin/bash -G wheel,audio,video,input alice'


def test_useradd_with_full_name():
    user = acorn.default_user('bob').with_full_name('Bob Builder')
    assert user.useradd_command() == 'useradd -m -s /bin/ash -G wheel,audio,video,input -c "Bob Builder" bob'


def test_useradd_without_groups():
    assert UserSpec.new('svc', '/sbin/nologin').useradd_command() == 'useradd -m -s /sbin/nologin svc'


def test_sudoers_wheel():
    assert sudoers_wheel_path() == '/etc/sudoers.d/wheel'
    assert sudoers_wheel_file() == '%wheel ALL=(ALL:ALL) ALL\n'
