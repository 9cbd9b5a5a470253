import re
import sys
from pathlib import Path


def main():
    """Read VERSION file and update all version references."""
    root = Path(__file__).parent.parent
    version_file = root / "VERSION"

    if not version_file.exists():
        print("ERROR: VERSION file not found")
        sys.exit(1)

    version = version_file.read_text().strip()

    if not version:
        print("ERROR: VERSION file is empty")
        sys.exit(1)

    print(f"Syncing to version: {version}")

    targets = [
        (root / "copeland" / "__init__.py", r'__version__ = "[^"]*"', f'__version__ = "{version}"'),
        (root / "pyproject.toml", r'(?m)^version = "[^"]*"', f'version = "{version}"'),
    ]
    for path, pattern, replacement in targets:
        if not path.exists():
            print(f"WARNING: {path.relative_to(root)} not found")
            continue
        content = path.read_text()
        path.write_text(re.sub(pattern, replacement, content, count=1))
        print(f"Updated {path.relative_to(root)}")

    print(f"\nAll versions synced to {version}")


if __name__ == "__main__":
    main()
