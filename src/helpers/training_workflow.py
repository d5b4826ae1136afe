"""Training request workflow shared by the full-page and compact training views.

The workflow owns the form state (selected model, target column, editable
hyperparameters), the loading flag and the last successful training result.
Views subscribe to change events and render; they never talk to the backend
themselves.

Submit lifecycle::

    idle -> validating -> idle (alert)          precondition failed
                       -> submitting -> idle    result stored, or alert on failure
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from helpers.backend_client import (
    BackendError,
    fetch_default_hyperparameters as fetch_default_hyperparameters_helper,
    train_model as train_model_helper,
)
from helpers.logging_config import get_logger


logger = get_logger(__name__)


MODEL_CHOICES = (
    "RandomForestClassifier",
    "LogisticRegression",
    "RandomForestRegressor",
    "LinearRegression",
    "KMeans",
)

NO_SESSION_MESSAGE = "No active session. Please clean and save your dataset first!"
NO_MODEL_MESSAGE = "Please select a model first!"
TRAINING_FAILED_MESSAGE = "Training failed"

HyperparamValue = Union[str, int, float, bool]

# Change events passed to subscribers
EVENT_MODEL = "model"
EVENT_HYPERPARAMETERS = "hyperparameters"
EVENT_LOADING = "loading"
EVENT_RESULT = "result"


@dataclass(frozen=True)
class TrainingResult:
    status: Optional[str]
    model_name: Optional[str]
    problem_type: Optional[str] = None
    target_column: Optional[str] = None
    hyperparameters_used: Dict[str, Any] = field(default_factory=dict)
    metrics: Dict[str, Any] = field(default_factory=dict)
    model_path: Optional[str] = None
    hf_status: Optional[str] = None
    hf_filename: Optional[str] = None
    huggingface_download_url: Optional[str] = None

    @classmethod
    def from_response(cls, body: Mapping[str, Any]) -> "TrainingResult":
        """Build a result from a ``/train-model`` response body."""
        if not isinstance(body, Mapping):
            raise BackendError("Training response is not a JSON object")
        metrics = body.get("metrics")
        hp_used = body.get("hyperparameters_used")
        return cls(
            status=body.get("status"),
            model_name=body.get("model_name"),
            problem_type=body.get("problem_type"),
            target_column=body.get("target_column"),
            hyperparameters_used=dict(hp_used) if isinstance(hp_used, Mapping) else {},
            metrics=dict(metrics) if isinstance(metrics, Mapping) else {},
            model_path=body.get("model_path"),
            hf_status=body.get("hf_status"),
            hf_filename=body.get("hf_filename"),
            huggingface_download_url=body.get("huggingface_download_url") or None,
        )


class TrainingWorkflow:
    """Form state and backend calls for one training view.

    Args:
        get_session_id: accessor for the active dataset session ("" when none)
        get_base_url: accessor for the backend base URL
        alert: blocking user notification, called with a message
    """

    def __init__(
        self,
        *,
        get_session_id: Callable[[], Optional[str]],
        get_base_url: Callable[[], str],
        alert: Optional[Callable[[str], Any]] = None,
    ):
        self._get_session_id = get_session_id
        self._get_base_url = get_base_url
        self._alert = alert or (lambda _msg: None)
        self._listeners: List[Callable[[str], None]] = []
        self._fetch_token = 0

        self.model: str = ""
        self.target: str = ""
        self.hyperparameters: Dict[str, HyperparamValue] = {}
        self.result: Optional[TrainingResult] = None
        self.loading: bool = False

    @property
    def phase(self) -> str:
        return "submitting" if self.loading else "idle"

    @property
    def session_id(self) -> str:
        return self._get_session_id() or ""

    def subscribe(self, callback: Callable[[str], None]) -> None:
        self._listeners.append(callback)

    def _emit(self, event: str) -> None:
        for cb in list(self._listeners):
            try:
                cb(event)
            except Exception:
                logger.exception("Training workflow listener failed on %s", event)

    def _set_loading(self, value: bool) -> None:
        self.loading = value
        self._emit(EVENT_LOADING)

    def set_target(self, value: Optional[str]) -> None:
        self.target = value or ""

    def set_param(self, key: str, value: Any) -> None:
        """Record a user edit; edited values are always kept as strings."""
        self.hyperparameters[key] = "" if value is None else str(value)

    async def select_model(self, model_name: Optional[str]) -> None:
        """Switch model and load its default hyperparameters.

        Only a change to a non-empty name fetches; clearing the selection
        empties the map. Fetch failures leave an empty map. Any change of
        selection invalidates fetches still in flight.
        """
        name = (model_name or "").strip()
        if name == self.model:
            return
        self.model = name
        self._fetch_token += 1
        token = self._fetch_token
        self._emit(EVENT_MODEL)
        if not name:
            self.hyperparameters = {}
            self._emit(EVENT_HYPERPARAMETERS)
            return

        try:
            defaults: Dict[str, HyperparamValue] = await fetch_default_hyperparameters_helper(
                self._get_base_url(), name
            )
        except Exception as e:
            logger.warning("Could not load default hyperparameters for %s: %s", name, e)
            defaults = {}

        if token != self._fetch_token:
            logger.debug("Discarding stale hyperparameters for %s", name)
            return
        self.hyperparameters = dict(defaults)
        self._emit(EVENT_HYPERPARAMETERS)

    async def submit(self) -> bool:
        """Validate the form and submit a training request.

        Returns True when a new result was stored. Never raises; failures are
        reported through ``alert``.
        """
        if self.loading:
            return False

        session_id = self._get_session_id()
        if not session_id:
            self._alert(NO_SESSION_MESSAGE)
            return False
        if not self.model:
            self._alert(NO_MODEL_MESSAGE)
            return False

        self._set_loading(True)
        try:
            body = await train_model_helper(
                self._get_base_url(),
                session_id=session_id,
                model_choice=self.model,
                hyperparams=dict(self.hyperparameters),
                target=self.target,
            )
            result = TrainingResult.from_response(body)
            self.result = result
            logger.info("Training finished for %s (status=%s)", self.model, result.status)
        except BackendError as e:
            logger.warning("Training request failed: %s", e)
            self._alert(e.detail or TRAINING_FAILED_MESSAGE)
            return False
        except Exception:
            logger.exception("Unexpected error while submitting training")
            self._alert(TRAINING_FAILED_MESSAGE)
            return False
        finally:
            self._set_loading(False)

        self._emit(EVENT_RESULT)
        return True
