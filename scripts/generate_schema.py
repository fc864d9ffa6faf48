import json
import sys
from pathlib import Path

# Add src to path
current_dir = Path(__file__).parent
src_dir = current_dir.parent / "src"
sys.path.insert(0, str(src_dir))

from pydantic import TypeAdapter
from tabular_editor.types import EditorConfig, Intent

SCHEMAS = {
    "editor-config.schema.json": EditorConfig,
    "intent.schema.json": Intent,
}


def main():
    # Written next to src/ so the UI build can pick them up
    schema_dir = current_dir.parent / "schemas"
    schema_dir.mkdir(exist_ok=True)

    for filename, type_ in SCHEMAS.items():
        schema = TypeAdapter(type_).json_schema()
        output_file = schema_dir / filename

        with open(output_file, "w") as f:
            json.dump(schema, f, indent=2)

        print(f"Schema generated at: {output_file}")


if __name__ == "__main__":
    main()
