#!/usr/bin/env python3
"""
Build script for Lambda functions using the event wrapper.

Every directory under src/ holding a lambda_function.py becomes build/<name>.zip
with the event_wrapper package vendored next to the entry point. Test modules
are left out of the archive.
"""
import os
import shutil
import subprocess
import sys
import zipfile
from pathlib import Path

LIBRARY_PACKAGE = "event_wrapper"
ENTRY_POINT = "lambda_function.py"
IGNORED = shutil.ignore_patterns("test_*.py", "__pycache__", "*.pyc")


def package_function(function_dir: Path, library_dir: Path, build_dir: Path) -> Path:
    """Assemble and zip a single function, returning the archive path."""
    function_name = function_dir.name
    zip_path = build_dir / f"{function_name}.zip"

    # Create temporary directory for packaging
    temp_dir = build_dir / f"temp_{function_name}"
    if temp_dir.exists():
        shutil.rmtree(temp_dir)

    shutil.copytree(function_dir, temp_dir, ignore=IGNORED)
    shutil.copytree(library_dir, temp_dir / LIBRARY_PACKAGE, ignore=IGNORED)

    # Install dependencies if requirements.txt exists
    requirements_file = function_dir / "requirements.txt"
    if requirements_file.exists():
        print(f"Installing dependencies for {function_name}...")
        subprocess.run([
            sys.executable, "-m", "pip", "install",
            "-r", str(requirements_file),
            "-t", str(temp_dir),
        ], check=True)

    print(f"Creating {function_name}.zip...")
    with zipfile.ZipFile(zip_path, 'w', zipfile.ZIP_DEFLATED) as zipf:
        for root, _, files in os.walk(temp_dir):
            for file in files:
                file_path = Path(root) / file
                zipf.write(file_path, file_path.relative_to(temp_dir))

    shutil.rmtree(temp_dir)
    return zip_path


def main():
    """Main build function"""
    project_root = Path(__file__).parent.parent
    src_dir = project_root / "src"
    build_dir = project_root / "build"
    library_dir = src_dir / LIBRARY_PACKAGE

    build_dir.mkdir(exist_ok=True)

    functions = sorted(d for d in src_dir.iterdir() if d.is_dir() and (d / ENTRY_POINT).exists())
    print(f"Building Lambda functions: {[f.name for f in functions]}")

    for function_dir in functions:
        zip_path = package_function(function_dir, library_dir, build_dir)
        print(f"{function_dir.name}.zip created ({zip_path.stat().st_size} bytes)")

    print("Build complete!")


if __name__ == "__main__":
    main()
