"""Build script for creating executable"""
import os
import sys


def build_with_pyinstaller():
    """Build executable using PyInstaller"""
    print("Building with PyInstaller...")

    cmd = [
        "pyinstaller",
        "--name=crashme",
        "--onefile",
        "--windowed",  # No console window
        "--hidden-import=PyQt6.QtCore",
        "--hidden-import=PyQt6.QtGui",
        "--hidden-import=PyQt6.QtWidgets",
        "--collect-submodules=core",
        "--collect-submodules=ui",
        "--collect-submodules=config",
        "main.py"
    ]

    os.system(" ".join(cmd))
    print("\nBuild complete! Executable is in dist/ directory")


def build_with_nuitka():
    """Build executable using Nuitka"""
    print("Building with Nuitka...")

    cmd = [
        "python", "-m", "nuitka",
        "--standalone",
        "--onefile",
        "--enable-plugin=pyqt6",
        "--include-package=core",
        "--include-package=ui",
        "--include-package=config",
        "--output-dir=dist",
        "--output-filename=crashme",
        "main.py"
    ]

    os.system(" ".join(cmd))
    print("\nBuild complete! Executable is in dist/ directory")


if __name__ == "__main__":
    method = sys.argv[1] if len(sys.argv) > 1 else "pyinstaller"

    if method == "nuitka":
        build_with_nuitka()
    else:
        build_with_pyinstaller()
