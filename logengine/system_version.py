"""Description of the operating system the program runs on.

On Windows the description is built from the version information the
interpreter reports. Elsewhere it is the output of ``uname -a`` followed
by the shared-library listing ``ldd`` gives for a program file.
"""

from __future__ import annotations

import argparse
import subprocess
import sys
from typing import Any, Optional, Sequence

_PLATFORM_WIN32_WINDOWS = 1
_PLATFORM_WIN32_NT = 2

_NT_WORKSTATION = 1
_NT_SERVER = 3

_SUITE_SMALLBUSINESS = 0x0001
_SUITE_ENTERPRISE = 0x0002
_SUITE_TERMINAL = 0x0010
_SUITE_EMBEDDEDNT = 0x0040
_SUITE_DATACENTER = 0x0080
_SUITE_PERSONAL = 0x0200
_SUITE_BLADE = 0x0400

_WORKSTATION_NAMES = {
    (5, 1): "Microsoft Windows XP ",
    (6, 0): "Microsoft Windows Vista ",
    (6, 1): "Microsoft Windows 7 ",
    (6, 2): "Microsoft Windows 8 ",
    (6, 3): "Microsoft Windows 8.1 ",
    (10, 0): "Microsoft Windows 10 ",
}

_SERVER_NAMES = {
    (5, 1): "Microsoft Windows .NET ",
    (5, 2): "Microsoft Windows Home Server ",
    (6, 0): "Microsoft Windows Server 2008 ",
    (6, 1): "Microsoft Windows Server 2008 R2 ",
    (6, 2): "Microsoft Windows 2012 ",
    (6, 3): "Microsoft Windows Server 2012 R2 ",
    (10, 0): "Microsoft Windows Server 2016 ",
}

_WORKSTATION_SUITES = (
    (_SUITE_PERSONAL, "Home Edition "),
    (_SUITE_ENTERPRISE, "Enterprise "),
    (_SUITE_TERMINAL, "Terminal Services "),
    (_SUITE_SMALLBUSINESS, "Small Business Server "),
    (_SUITE_EMBEDDEDNT, "Embedded "),
)


def _describe_nt(info: Any) -> str:
    major, minor = info.major, info.minor
    parts: list[str] = []
    if major <= 4:
        parts.append("Microsoft Windows NT ")
    if (major, minor) == (5, 0):
        parts.append("Microsoft Windows 2000 ")

    suites = info.suite_mask
    if info.product_type == _NT_WORKSTATION:
        parts.append(_WORKSTATION_NAMES.get((major, minor), ""))
        parts.extend(text for flag, text in _WORKSTATION_SUITES if suites & flag)
    elif info.product_type == _NT_SERVER:
        parts.append(_SERVER_NAMES.get((major, minor), ""))
        if suites & _SUITE_DATACENTER:
            parts.append("DataCenter Server ")
        elif suites & _SUITE_ENTERPRISE:
            parts.append("Advanced Server " if major == 4 else "Enterprise Server ")
        elif suites == _SUITE_BLADE:
            parts.append("Web Server ")

    parts.append(
        f"version {major}.{minor} {info.service_pack} (Build {info.build & 0xFFFF})\n"
    )
    return "".join(parts)


def _describe_9x(info: Any) -> str:
    major, minor = info.major, info.minor
    service_pack = info.service_pack
    marker = service_pack[1] if len(service_pack) > 1 else ""
    parts: list[str] = []
    if (major, minor) == (4, 0):
        parts.append("Microsoft Windows 95 ")
        if marker in ("C", "B"):
            parts.append("OSR2 ")
    if (major, minor) == (4, 10):
        parts.append("Microsoft Windows 98 ")
        if marker == "A":
            parts.append("SE ")
    if (major, minor) == (4, 90):
        parts.append("Microsoft Windows Millennium Edition ")
    return "".join(parts)


def _describe_windows(info: Any) -> str:
    """Text for a Windows version record such as ``sys.getwindowsversion()``."""
    if info.platform == _PLATFORM_WIN32_NT:
        return _describe_nt(info)
    if info.platform == _PLATFORM_WIN32_WINDOWS:
        return _describe_9x(info)
    return ""


def _run(command: Sequence[str]) -> str:
    try:
        result = subprocess.run(
            list(command), capture_output=True, text=True, check=False
        )
    except OSError:
        return ""
    return result.stdout or ""


def system_version(filename: Optional[str] = None) -> str:
    """Describe the running system.

    Outside Windows, ``filename`` names the program whose libraries are
    listed; it defaults to the running interpreter. Commands that cannot
    be started contribute nothing.
    """
    if sys.platform == "win32":
        return _describe_windows(sys.getwindowsversion())
    target = filename if filename is not None else sys.executable
    return _run(["uname", "-a"]) + _run(["ldd", target])


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Describe the operating system.")
    parser.add_argument("filename", nargs="?", help="program whose libraries to list")
    args = parser.parse_args(argv)
    print(system_version(args.filename), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())