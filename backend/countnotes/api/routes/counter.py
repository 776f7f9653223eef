"""Counter Routes — read and mutate the persisted counter.

Invariants:
    - GET never fails: an unreadable store yields 0 (load_or_default)
    - Mutations surface StorageFailure as 503 via the global handler
"""

from fastapi import APIRouter, Depends

from countnotes.api.deps import get_counter
from countnotes.core.domain_types import ContainerState
from countnotes.core.result import unwrap
from countnotes.schemas.counter import CounterResponse
from countnotes.services.persisted_counter import PersistedCounter

router = APIRouter(prefix="/api/v1/counter", tags=["counter"])


@router.get("", response_model=CounterResponse)
async def read_counter(counter: PersistedCounter = Depends(get_counter)):
    if counter.state == ContainerState.READY:
        return CounterResponse.from_counter(counter.value)
    return CounterResponse.from_counter(await counter.load_or_default())


@router.post("/increment", response_model=CounterResponse)
async def increment_counter(counter: PersistedCounter = Depends(get_counter)):
    return CounterResponse.from_counter(unwrap(await counter.increment()))


@router.post("/decrement", response_model=CounterResponse)
async def decrement_counter(counter: PersistedCounter = Depends(get_counter)):
    return CounterResponse.from_counter(unwrap(await counter.decrement()))


@router.post("/reset", response_model=CounterResponse)
async def reset_counter(counter: PersistedCounter = Depends(get_counter)):
    return CounterResponse.from_counter(unwrap(await counter.reset()))
