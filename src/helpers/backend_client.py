"""HTTP helpers for the model training backend.

Two endpoints are used:

- ``GET /hyperparameters?model_name=...`` returns the default hyperparameters
  for a model as ``{"default_hyperparameters": {...}}``.
- ``POST /train-model`` takes a multipart form (``session_id``, optional
  ``target``, ``model_choice``, ``params``) and returns the training result.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

import httpx


HYPERPARAMS_TIMEOUT = httpx.Timeout(30.0, connect=10.0)
# Training runs synchronously on the backend before it answers
TRAIN_TIMEOUT = httpx.Timeout(600.0, connect=10.0)


class BackendError(RuntimeError):
    """A backend call failed.

    ``detail`` holds the backend's own ``detail`` message when the error body
    carried one as a string; it is ``None`` for transport failures and
    bodies without a usable message.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


def _extract_detail(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    detail = body.get("detail")
    if isinstance(detail, str) and detail.strip():
        return detail
    return None


def _json_object(response: httpx.Response, url: str) -> Dict[str, Any]:
    try:
        data = response.json()
    except ValueError as e:
        raise BackendError(f"Invalid JSON response from {url}", status_code=response.status_code) from e
    if not isinstance(data, dict):
        raise BackendError(f"Unexpected response shape from {url}", status_code=response.status_code)
    return data


def _raise_for_status(response: httpx.Response, url: str) -> None:
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise BackendError(
            f"Backend HTTP {response.status_code} calling {url}",
            status_code=response.status_code,
            detail=_extract_detail(response),
        ) from e


def encode_params(hyperparams: Dict[str, Any]) -> str:
    """Serialize a hyperparameter map the way the backend's form field expects it."""
    return json.dumps(hyperparams or {}, separators=(",", ":"), ensure_ascii=False)


def build_train_form(
    session_id: str,
    model_choice: str,
    hyperparams: Dict[str, Any],
    target: Optional[str] = None,
) -> Dict[str, str]:
    """Return the multipart fields for ``/train-model`` in send order.

    ``target`` is included only when it is non-empty after trimming.
    """
    form: Dict[str, str] = {"session_id": session_id}
    target = (target or "").strip()
    if target:
        form["target"] = target
    form["model_choice"] = model_choice
    form["params"] = encode_params(hyperparams)
    return form


async def fetch_default_hyperparameters(base_url: str, model_name: str) -> Dict[str, Any]:
    """Fetch the default hyperparameters for ``model_name``.

    Raises :class:`BackendError` on transport errors, non-2xx responses and
    bodies without a ``default_hyperparameters`` object.
    """
    url = f"{(base_url or '').rstrip('/')}/hyperparameters"
    try:
        async with httpx.AsyncClient(timeout=HYPERPARAMS_TIMEOUT) as client:
            r = await client.get(url, params={"model_name": model_name})
    except httpx.HTTPError as e:
        raise BackendError(f"Request to {url} failed: {e}") from e
    _raise_for_status(r, url)
    data = _json_object(r, url)
    defaults = data.get("default_hyperparameters")
    if not isinstance(defaults, dict):
        raise BackendError(f"Missing default_hyperparameters in response from {url}", status_code=r.status_code)
    return defaults


async def train_model(
    base_url: str,
    *,
    session_id: str,
    model_choice: str,
    hyperparams: Dict[str, Any],
    target: Optional[str] = None,
) -> Dict[str, Any]:
    """Submit a training request and return the parsed response body.

    Raises :class:`BackendError` on failure; ``detail`` carries the backend's
    message when it sent one.
    """
    url = f"{(base_url or '').rstrip('/')}/train-model"
    form = build_train_form(session_id, model_choice, hyperparams, target)
    # (None, value) parts are sent as plain form fields, which forces multipart encoding
    files = {name: (None, value.encode("utf-8")) for name, value in form.items()}
    try:
        async with httpx.AsyncClient(timeout=TRAIN_TIMEOUT) as client:
            r = await client.post(url, files=files)
    except httpx.HTTPError as e:
        raise BackendError(f"Request to {url} failed: {e}") from e
    _raise_for_status(r, url)
    return _json_object(r, url)
