"""Tests for AdapterParams DTO and ProviderFactory parameter coercion.

Covers:
- Validation bounds of `AdapterParams`.
- `_coerce_params` merge precedence rules (kwargs override params; unset
    fields are dropped so adapter defaults apply).
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from gateway_providers.base.dto.adapter_params import AdapterParams
from gateway_providers.base.factory import ProviderFactory


def test_adapter_params_dump_excludes_unset():
    params = AdapterParams(api_key="k", timeout=12.5)
    assert params.model_dump(exclude_none=True) == {"api_key": "k", "timeout": 12.5}  # nosec B101 - test assertion


@pytest.mark.parametrize(
    "kwargs",
    [{"timeout": 0}, {"timeout": -1.0}, {"max_retries": -1}, {"model": ""}],
)
def test_adapter_params_rejects_out_of_range(kwargs):
    with pytest.raises(ValidationError):
        AdapterParams(**kwargs)


def test_coerce_params_without_params_copies_kwargs():
    kwargs = {"api_key": "x"}
    merged = ProviderFactory._coerce_params(None, kwargs)
    assert merged == kwargs and merged is not kwargs  # nosec B101 - test assertion


def test_coerce_params_kwargs_override():
    params = AdapterParams(api_key="from-params", model="m1", max_retries=0)
    merged = ProviderFactory._coerce_params(params, {"model": "m2"})
    assert merged == {"api_key": "from-params", "model": "m2", "max_retries": 0}  # nosec B101 - test assertion
