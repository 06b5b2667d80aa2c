"""Quickstart example for tanavalidation.

This example prints the contract validation errors every Tana host shows,
through each entry point a host can use. The output of each entry point is
the same text, byte for byte.
"""

import json

from tanavalidation import (
    DiagnosticRenderer,
    DiagnosticRequest,
    TanaValidationError,
    format_validation_error,
    format_validation_error_from_mapping,
)
from tanavalidation.diagnostics import ASCII_GLYPHS, OutputFormat

# Example 1: Invalid import (native eight-argument call)
print("=" * 50)
print("Example 1: Invalid Import")
print("=" * 50)

print(
    format_validation_error(
        "import { console } from 'tana/invalid';\n\nexport async function contract() {\n"
        "  return { success: true };\n}",
        "contract.ts",
        "Invalid Import",
        1,
        26,
        "Module 'tana/invalid' not found",
        "Available modules: tana/core, tana/kv, tana/block, tana/tx",
        12,
    )
)

# Example 2: Invalid export (JSON payload, as browser and CLI tooling send it)
print("\n" + "=" * 50)
print("Example 2: Invalid Export")
print("=" * 50)

payload = json.loads("""
{
    "source": "import { kv } from 'tana/kv';\\n\\nexport async function notAllowed() {\\n  await kv.put('key', 'value');\\n}",
    "filePath": "contract.ts",
    "errorKind": "Invalid Export",
    "line": 3,
    "column": 24,
    "message": "Function 'notAllowed' is not allowed",
    "help": "Allowed functions: init, contract, get, post",
    "underlineLength": 10
}
""")
print(format_validation_error_from_mapping(payload))

# Example 3: Context error raised as an exception
print("\n" + "=" * 50)
print("Example 3: Context Error")
print("=" * 50)

context_request = DiagnosticRequest(
    source=(
        "import { context } from 'tana/context';\n\nexport async function get() {\n"
        "  const caller = context.caller();\n  return { caller };\n}"
    ),
    file_path="contract.ts",
    error_kind="Context Error",
    line=4,
    column=16,
    message="context.caller() can only be used in init() or contract() functions",
    help="HTTP handlers (get/post) cannot access execution context",
    underline_length=15,
)

try:
    raise TanaValidationError(context_request)
except TanaValidationError as e:
    print(e)

# Example 4: Other presentations of the same request
print("\n" + "=" * 50)
print("Example 4: ASCII, Simple and JSON Output")
print("=" * 50)

print(DiagnosticRenderer(glyphs=ASCII_GLYPHS).render(context_request))
print()
print(DiagnosticRenderer(output_format=OutputFormat.SIMPLE).render(context_request))
print()
print(DiagnosticRenderer(output_format=OutputFormat.JSON).render(context_request))

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
