"""CLI demo that runs a restricted script against the image bindings.

Run with the virtual environment activated::

    DIGITALOCEAN_TOKEN=... python examples/demo_images.py

The script below only reads; it never updates or deletes images.
"""

import logging
import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from oceanscript import DigitalOcean, ScriptEngine, ScriptError

logging.basicConfig(level=logging.INFO)

SCRIPT = """
distros = images.list_distribution()
print("distribution images:", len(distros))
for img in distros[:5]:
    print(" ", img.id, img.slug, "min disk", img.min_disk_size)

try:
    ubuntu = images.get("ubuntu-24-04-x64")
    print("ubuntu regions:", ", ".join(ubuntu.regions))
except ScriptError as err:
    print("lookup failed:", str(err))

mine = images.list_user()
print("private images:", len(mine))
"""


def main() -> None:
    engine = ScriptEngine.for_client(DigitalOcean())
    try:
        result = engine.run(SCRIPT, filename="demo")
    except ScriptError as exc:
        print(f"Script aborted: {exc}")
        return
    print(result.output, end="")


if __name__ == "__main__":
    main()
