# assets/check_assets.py
"""
A utility script to check for the icons and bundled files the demo needs.
Run it from the project root before launching the GUI or building a bundle.
"""
from pathlib import Path
import sys

# Add the project root to the Python path to allow importing our modules
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root))

try:
    from gitcrypt_demo.core.config_manager import load_settings
    from gitcrypt_demo.core.decoding import looks_encrypted
    from gitcrypt_demo.gui.resources import ICONS_PATH, REQUIRED_ICONS
except ImportError as e:
    print("Error: Could not import project modules. Ensure you run this script from the project root "
          "or have the project installed.")
    print(f"Details: {e}")
    sys.exit(1)


def check_assets() -> int:
    """Prints a report and returns the number of problems found."""
    problems = 0

    print("--- Icons ---")
    for icon_name in REQUIRED_ICONS:
        icon_file = ICONS_PATH / f"{icon_name}.svg"
        if icon_file.exists():
            print(f"  [FOUND]   {icon_name}.svg")
        else:
            print(f"  [MISSING] {icon_name}.svg")
            problems += 1

    settings = load_settings()
    print(f"\n--- Bundled files in {settings.resources_dir} ---")
    for name in (settings.primary_file, settings.fallback_file):
        path = settings.resources_dir / name
        if not path.is_file():
            print(f"  [MISSING]   {name}")
            problems += 1
        elif looks_encrypted(path.read_bytes()):
            print(f"  [ENCRYPTED] {name}")
        else:
            print(f"  [PLAIN]     {name}")

    print("\n--- Summary ---")
    if problems:
        print(f"{problems} problem(s) found.")
    else:
        print("All required assets are present.")
    return problems


if __name__ == "__main__":
    sys.exit(1 if check_assets() else 0)
