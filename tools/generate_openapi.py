"""Write the OpenAPI schema of the relay application to disk."""
from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from offer_relay.main import app  # noqa: E402


OUTPUT_FILE = Path("openapi.json")


def main(output: Path = OUTPUT_FILE) -> Path:
    schema = app.openapi()
    output.write_text(json.dumps(schema, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return output


if __name__ == "__main__":
    main()
