"""
Data Loading Contract
Flow: Data definition → Loader query → DataState → Embedded in component props

The registrar never fetches data itself. A loader collaborator is asked for the
current state of a component's data before the render chain runs, and the
resulting DataState travels to the render function inside the props.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Hashable, Optional, Protocol, Tuple, Type, Union

import structlog
from pydantic import BaseModel

logger = structlog.get_logger(__name__)

# Keys under which data travels inside component props
DATA_PROP = "data"
DATA_ARGS_PROP = "data_definition_args"


class DataStatus(str, Enum):
    """Loading status of a component's external data."""
    NOT_REQUESTED = "not_requested"
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


@dataclass(frozen=True)
class DataState:
    """Resolved state of a component's data at render time."""
    status: DataStatus
    result: Any = None
    error: Optional[BaseException] = None

    @classmethod
    def not_requested(cls) -> "DataState":
        return cls(status=DataStatus.NOT_REQUESTED)

    @classmethod
    def loading(cls) -> "DataState":
        return cls(status=DataStatus.LOADING)

    @classmethod
    def loaded(cls, result: Any) -> "DataState":
        return cls(status=DataStatus.LOADED, result=result)

    @classmethod
    def errored(cls, error: BaseException) -> "DataState":
        return cls(status=DataStatus.ERRORED, error=error)

    @property
    def is_loaded(self) -> bool:
        return self.status is DataStatus.LOADED


LoadDataFunction = Callable[[Dict[str, Any], Any, Dict[str, Any]], Union[Any, Awaitable[Any]]]


@dataclass(frozen=True)
class DataDefinition:
    """
    Declares how a component's data is derived from its configuration.

    Attributes:
        load_data: ``(config, load_data_services, context) -> data``, sync or async.
            Called by the loader collaborator, never by the registrar.
        config_model: Optional pydantic model describing the config shape.
        data_model: Optional pydantic model describing the data shape.
    """
    load_data: LoadDataFunction
    config_model: Optional[Type[BaseModel]] = None
    data_model: Optional[Type[BaseModel]] = None

    def validate_config(self, config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Validate config against ``config_model`` when one is declared."""
        config = dict(config or {})
        if self.config_model is None:
            return config
        return self.config_model.model_validate(config).model_dump()


@dataclass(frozen=True)
class DataProps:
    """Decomposed data view handed to a data-aware render function."""
    state: DataState
    data_definition_args: Dict[str, Any] = field(default_factory=dict)

    @property
    def loaded(self) -> bool:
        return self.state.is_loaded

    @property
    def result(self) -> Any:
        return self.state.result


class DataLoader(Protocol):
    """
    External loader collaborator.

    Returns the current DataState for a component, or an awaitable of one when
    used with the async render path.
    """

    def load(
        self,
        component_type: str,
        data_definition: DataDefinition,
        config: Dict[str, Any],
    ) -> Union[DataState, Awaitable[DataState]]:
        ...


def config_key(component_type: str, config: Dict[str, Any]) -> Tuple[str, Hashable]:
    """Identity of a ``(type, config)`` pair used to query the loader once per pass."""
    return component_type, json.dumps(config, sort_keys=True, default=repr)


class StaticDataLoader:
    """
    In-memory loader returning preset states.

    Useful for previews and tests. Unknown ``(type, config)`` pairs report
    ``DataState.not_requested()``.
    """

    def __init__(self):
        self._states: Dict[Tuple[str, Hashable], DataState] = {}
        self.calls: list[Tuple[str, Dict[str, Any]]] = []

    def set_state(
        self,
        component_type: str,
        state: DataState,
        config: Optional[Dict[str, Any]] = None,
    ) -> "StaticDataLoader":
        """Preset the state returned for a component type and config."""
        self._states[config_key(component_type, config or {})] = state
        return self

    def load(
        self,
        component_type: str,
        data_definition: DataDefinition,
        config: Dict[str, Any],
    ) -> DataState:
        self.calls.append((component_type, config))
        state = self._states.get(config_key(component_type, config))
        if state is None:
            logger.debug("No preset data state", component_type=component_type)
            return DataState.not_requested()
        return state
