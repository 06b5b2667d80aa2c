"""Cross-embedding identity tests.

Runs every golden vector through each entry point a host can use and
requires byte-identical output, equal to the stored golden text.
"""

from __future__ import annotations

import json
from collections.abc import Callable

import pytest

from tanavalidation import (
    DiagnosticRenderer,
    DiagnosticRequest,
    TanaValidationError,
    format_validation_error,
    format_validation_error_from_mapping,
)
from tests.golden_vectors import ALL_GOLDEN_VECTORS, GoldenVector, vector_id


def _native(vector: GoldenVector) -> str:
    return format_validation_error(*vector.args())


def _portable(vector: GoldenVector) -> str:
    # Payload crosses a JSON boundary exactly as tooling would send it.
    payload = json.loads(json.dumps(vector.camel_case_payload(), ensure_ascii=True))
    return format_validation_error_from_mapping(payload)


def _renderer(vector: GoldenVector) -> str:
    return DiagnosticRenderer().render(DiagnosticRequest(*vector.args()))


def _exception(vector: GoldenVector) -> str:
    return str(TanaValidationError(DiagnosticRequest(*vector.args())))


ENTRY_POINTS: dict[str, Callable[[GoldenVector], str]] = {
    "native": _native,
    "portable": _portable,
    "renderer": _renderer,
    "exception": _exception,
}


@pytest.mark.parametrize("vector", ALL_GOLDEN_VECTORS, ids=vector_id)
@pytest.mark.parametrize("entry_point", list(ENTRY_POINTS))
def test_entry_point_matches_golden_output(entry_point: str, vector: GoldenVector) -> None:
    assert ENTRY_POINTS[entry_point](vector) == vector.expected


@pytest.mark.parametrize("vector", ALL_GOLDEN_VECTORS, ids=vector_id)
def test_all_entry_points_agree(vector: GoldenVector) -> None:
    outputs = {name: render(vector) for name, render in ENTRY_POINTS.items()}

    assert len(set(outputs.values())) == 1, outputs


@pytest.mark.parametrize("vector", ALL_GOLDEN_VECTORS, ids=vector_id)
def test_output_is_utf8_stable(vector: GoldenVector) -> None:
    """Hosts compare UTF-8 bytes, not Python strings."""
    rendered = _native(vector)

    assert rendered.encode("utf-8") == vector.expected.encode("utf-8")
