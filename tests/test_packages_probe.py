from __future__ import annotations

import pytest

from sysfetch.modules.base import NotFoundError
from sysfetch.modules.packages import PACKAGE_MANAGERS, PackagesProbe, count_packages

RPM_OUTPUT = "bash-5.2.26-3.fc40.x86_64\ncoreutils-9.4-6.fc40.x86_64\nkernel-6.9.7-200.fc40.x86_64\n"
FLATPAK_OUTPUT = "org.mozilla.firefox\norg.gnome.Platform\n"


@pytest.fixture
def installed(monkeypatch):
    available: set[str] = set()

    def which(name):  # type: ignore[no-untyped-def]
        return f"/usr/bin/{name}" if name in available else None

    monkeypatch.setattr("sysfetch.modules.packages.shutil.which", which)
    return available


def test_count_packages_ignores_blank_lines() -> None:
    assert count_packages("a\n\nb\n  \nc") == 3
    assert count_packages("") == 0


def test_packages_probe_counts_lines_not_bytes(fake_commands, installed) -> None:
    installed.update({"rpm", "flatpak"})
    fake_commands.set_output("rpm", RPM_OUTPUT)
    fake_commands.set_output("flatpak", FLATPAK_OUTPUT)

    assert PackagesProbe().run() == "3 (rpm), 2 (flatpak)"
    assert [call[0] for call in fake_commands.calls] == ["rpm", "flatpak"]


def test_packages_probe_follows_table_order(fake_commands, installed) -> None:
    installed.update({"dpkg-query", "flatpak"})
    fake_commands.set_output("dpkg-query", "bash\ncoreutils\n")
    fake_commands.set_output("flatpak", FLATPAK_OUTPUT)

    assert PackagesProbe().run() == "2 (dpkg), 2 (flatpak)"


def test_packages_probe_skips_failing_manager(fake_commands, installed) -> None:
    installed.update({"rpm", "flatpak"})
    fake_commands.set_output("rpm", RPM_OUTPUT)
    fake_commands.set_output("flatpak", "", returncode=1)

    assert PackagesProbe().run() == "3 (rpm)"


def test_packages_probe_without_managers(fake_commands, installed) -> None:
    with pytest.raises(NotFoundError):
        PackagesProbe().run()
    assert fake_commands.calls == []


def test_packages_probe_custom_table(fake_commands, installed) -> None:
    installed.add("apk")
    fake_commands.set_output("apk", "musl\nbusybox\nalpine-baselayout\n")

    probe = PackagesProbe(managers=[("apk", ["apk", "info"])])
    assert probe.run() == "3 (apk)"


def test_default_table_names() -> None:
    assert [name for name, _ in PACKAGE_MANAGERS] == ["rpm", "dpkg", "pacman", "flatpak"]
