import sys

import tabular_editor.api as api

EXPECTED_METHODS = [
    "add_column",
    "add_row",
    "apply_intent",
    "apply_sort_to_inputs",
    "can_apply",
    "can_apply_sort_to_inputs",
    "can_undo",
    "get_cell",
    "get_state",
    "import_csv",
    "import_markdown",
    "initialize_editor",
    "insert_column_before",
    "insert_row_before",
    "remove_column",
    "remove_row",
    "render",
    "set_alignment",
    "set_cell",
    "set_output_format",
    "set_sort_spec",
    "set_summary_spec",
    "undo",
]


def verify_api():
    missing = []
    print("Verifying API surface area...")
    for method in EXPECTED_METHODS:
        if not hasattr(api, method):
            missing.append(method)
            print(f"❌ Missing: {method}")
        else:
            print(f"✅ Found: {method}")

    if missing:
        print(f"\nERROR: {len(missing)} methods missing from api.py")
        sys.exit(1)

    print("\nAPI Surface Verification Passed!")
    sys.exit(0)


if __name__ == "__main__":
    verify_api()
